"""Display helpers and form parsing for the HTML views.

Everything here works on the API's JSON shape (camelCase dicts), so the views
render exactly what the Resource API returned.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from datetime import datetime

EMPTY = "—"
MAX_RATING = 5
STATUSES = ("PENDING", "APPROVED", "REJECTED")

# Directory table pill: status -> (label, css class)
STATUS_PILLS: dict[str, tuple[str, str]] = {
    "PENDING": ("Pending", "pill-pending"),
    "APPROVED": ("Approved", "pill-approved"),
    "REJECTED": ("Rejected", "pill-rejected"),
}

# Detail page badge
STATUS_BADGES: dict[str, tuple[str, str]] = {
    "PENDING": ("Pending Evaluation", "pill-pending"),
    "APPROVED": ("Approved Vendor", "pill-approved"),
    "REJECTED": ("Rejected", "pill-rejected"),
}

MANDATORY_FIELDS_MESSAGE = "Name, Domain and Email are mandatory."

_OPTIONAL_TEXT_FIELDS = (
    "subDomain",
    "phone",
    "website",
    "city",
    "country",
    "techStack",
    "certifications",
    "partnerStatus",
)
_NUMERIC_FIELDS = {
    "experienceYears": "Experience (Years)",
    "employeeStrength": "Employee Strength",
}


class FormError(ValueError):
    """Submitted form data is rejected before any API call is made."""


@dataclass(frozen=True)
class DirectorySummary:
    total: int
    approved: int
    pending: int


def summarize(vendors: Iterable[Mapping]) -> DirectorySummary:
    vendors = list(vendors)
    return DirectorySummary(
        total=len(vendors),
        approved=sum(1 for v in vendors if v.get("status") == "APPROVED"),
        pending=sum(1 for v in vendors if v.get("status") == "PENDING"),
    )


def star_rating(rating: int | None) -> str | None:
    """`3` -> `★★★☆☆`; None when the vendor is not rated."""
    if not isinstance(rating, int) or isinstance(rating, bool):
        return None
    return ("★" * rating).ljust(MAX_RATING, "☆")


def location(city: str | None, country: str | None) -> str:
    parts = [p for p in (city, country) if p]
    return ", ".join(parts) if parts else EMPTY


def or_dash(value) -> str:
    if value is None or value == "":
        return EMPTY
    return str(value)


def status_pill(status: str) -> tuple[str, str]:
    return STATUS_PILLS.get(status, (status, ""))


def status_badge(status: str) -> tuple[str, str]:
    return STATUS_BADGES.get(status, (status, ""))


def format_timestamp(value: str | None) -> str:
    if not value:
        return EMPTY
    # fromisoformat only accepts a trailing Z from Python 3.11
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(value).strftime("%d %b %Y, %H:%M")
    except ValueError:
        return value


# ---------------------------------------------------------------------------
# Form parsing
# ---------------------------------------------------------------------------

def _text(form: Mapping[str, str], key: str) -> str:
    return str(form.get(key) or "").strip()


def _parse_int(raw: str, label: str) -> int | None:
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError:
        raise FormError(f"{label} must be a whole number.") from None


def parse_rating(raw: str | None) -> int | None:
    """Blank clears the rating; anything else must be 1-5."""
    rating = _parse_int(str(raw or ""), "Rating")
    if rating is not None and not 1 <= rating <= MAX_RATING:
        raise FormError(f"Rating must be between 1 and {MAX_RATING}.")
    return rating


def parse_status(raw: str | None) -> str:
    status = str(raw or "").strip() or "PENDING"
    if status not in STATUSES:
        raise FormError(f"Unknown status '{status}'.")
    return status


def parse_vendor_form(form: Mapping[str, str]) -> dict:
    """Turn the creation form into a Create payload.

    Strings are trimmed, blank optional fields are left out, numbers are
    parsed, status defaults to PENDING. Raises FormError when a mandatory
    field is empty or a number does not parse.
    """
    payload: dict = {
        "name": _text(form, "name"),
        "domain": _text(form, "domain"),
        "email": _text(form, "email"),
    }
    if not (payload["name"] and payload["domain"] and payload["email"]):
        raise FormError(MANDATORY_FIELDS_MESSAGE)

    for key in _OPTIONAL_TEXT_FIELDS:
        value = _text(form, key)
        if value:
            payload[key] = value

    for key, label in _NUMERIC_FIELDS.items():
        number = _parse_int(_text(form, key), label)
        if number is not None:
            payload[key] = number

    rating = parse_rating(_text(form, "rating"))
    if rating is not None:
        payload["rating"] = rating

    payload["status"] = parse_status(form.get("status"))
    return payload
