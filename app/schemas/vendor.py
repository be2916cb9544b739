"""Vendor Pydantic schemas (request DTOs and response models)."""


from datetime import datetime

from pydantic import Field, StrictInt, field_validator

from app.domain.vendor import VendorStatus
from app.schemas.common import CamelModel

_REQUIRED_TEXT = ("name", "domain", "email")


def _require_text(value: str | None) -> str:
    if value is None:
        raise ValueError("may not be null")
    value = value.strip()
    if not value:
        raise ValueError("may not be blank")
    return value


class VendorCreate(CamelModel):
    name: str
    domain: str
    sub_domain: str | None = None
    email: str
    phone: str | None = None
    website: str | None = None
    city: str | None = None
    country: str | None = None
    tech_stack: str | None = None
    certifications: str | None = None
    partner_status: str | None = None
    experience_years: StrictInt | None = None
    employee_strength: StrictInt | None = None
    status: VendorStatus = VendorStatus.PENDING
    rating: StrictInt | None = Field(default=None, ge=1, le=5)

    @field_validator(*_REQUIRED_TEXT)
    @classmethod
    def strip_required_text(cls, v: str) -> str:
        return _require_text(v)


class VendorUpdate(CamelModel):
    """Partial update. Unknown keys (id, createdAt, ...) are ignored."""

    name: str | None = None
    domain: str | None = None
    sub_domain: str | None = None
    email: str | None = None
    phone: str | None = None
    website: str | None = None
    city: str | None = None
    country: str | None = None
    tech_stack: str | None = None
    certifications: str | None = None
    partner_status: str | None = None
    experience_years: StrictInt | None = None
    employee_strength: StrictInt | None = None
    status: VendorStatus | None = None
    rating: StrictInt | None = Field(default=None, ge=1, le=5)

    # Only runs for keys the client actually sent
    @field_validator(*_REQUIRED_TEXT)
    @classmethod
    def strip_required_text(cls, v: str | None) -> str:
        return _require_text(v)

    @field_validator("status")
    @classmethod
    def status_not_null(cls, v: VendorStatus | None) -> VendorStatus:
        if v is None:
            raise ValueError("may not be null")
        return v


class VendorOut(CamelModel):
    id: str
    name: str
    domain: str
    sub_domain: str | None = None
    email: str
    phone: str | None = None
    website: str | None = None
    city: str | None = None
    country: str | None = None
    tech_stack: str | None = None
    certifications: str | None = None
    partner_status: str | None = None
    experience_years: int | None = None
    employee_strength: int | None = None
    status: VendorStatus
    rating: int | None = None
    created_at: datetime
    updated_at: datetime
