"""HTML views: vendor directory, creation form, and detail/edit page.

These routes only render templates and handle form posts. All data access
goes through the Vendor Resource API via :class:`VendorApiClient`; nothing
here imports the service or repository layers.
"""


import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from app.core.config import settings
from app.web import presenters
from app.web.api_client import ApiError, VendorApiClient, get_api_client
from app.web.presenters import FormError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"], include_in_schema=False)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))
templates.env.globals["app_name"] = settings.app_name
templates.env.globals["statuses"] = presenters.STATUSES
templates.env.filters["stars"] = presenters.star_rating
templates.env.filters["dash"] = presenters.or_dash
templates.env.filters["timestamp"] = presenters.format_timestamp


async def _form_fields(request: Request) -> dict[str, str]:
    form = await request.form()
    return {k: v for k, v in form.items() if isinstance(v, str)}


# ---------------------------------------------------------------------------
# Directory
# ---------------------------------------------------------------------------

@router.get("/", response_class=HTMLResponse)
async def vendor_directory(request: Request, api: VendorApiClient = Depends(get_api_client)):
    error = None
    try:
        vendors = await api.list_vendors()
    except ApiError as exc:
        logger.warning("Directory load failed: %s", exc.message)
        vendors, error = [], exc.message

    rows = [
        {
            **v,
            "location": presenters.location(v.get("city"), v.get("country")),
            "pill": presenters.status_pill(v.get("status", "")),
        }
        for v in vendors
    ]
    return templates.TemplateResponse(
        request,
        "directory.html",
        {"vendors": rows, "summary": presenters.summarize(vendors), "error": error},
    )


@router.get("/vendors")
async def vendors_index():
    return RedirectResponse("/", status_code=status.HTTP_307_TEMPORARY_REDIRECT)


# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------

def _render_new(request: Request, values: dict | None = None, error: str | None = None):
    return templates.TemplateResponse(
        request,
        "vendor_new.html",
        {"values": values or {"status": "PENDING"}, "error": error},
    )


@router.get("/vendors/new", response_class=HTMLResponse)
async def new_vendor_form(request: Request):
    return _render_new(request)


@router.post("/vendors/new", response_class=HTMLResponse)
async def submit_new_vendor(request: Request, api: VendorApiClient = Depends(get_api_client)):
    values = await _form_fields(request)
    try:
        payload = presenters.parse_vendor_form(values)
    except FormError as exc:
        return _render_new(request, values, str(exc))

    try:
        await api.create_vendor(payload)
    except ApiError as exc:
        logger.warning("Vendor creation failed: %s", exc.message)
        return _render_new(request, values, exc.message or "Something went wrong")

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)


# ---------------------------------------------------------------------------
# Detail / edit
# ---------------------------------------------------------------------------

def _render_detail(
    request: Request,
    vendor: dict | None,
    *,
    edit: dict | None = None,
    error: str | None = None,
    message: str | None = None,
    confirm_delete: bool = False,
):
    """Render the detail page.

    `edit` holds the page-local form state: status, rating and notes. Notes
    are only ever echoed back into the page, never sent to the API.
    """
    if edit is None:
        rating = vendor.get("rating") if vendor else None
        edit = {
            "status": vendor.get("status", "PENDING") if vendor else "PENDING",
            "rating": "" if rating is None else str(rating),
            "notes": "",
        }
    context = {
        "vendor": vendor,
        "edit": edit,
        "edit_stars": _stars_for(edit.get("rating", "")),
        "error": error,
        "message": message,
        "confirm_delete": confirm_delete,
    }
    if vendor:
        context["badge"] = presenters.status_badge(vendor.get("status", ""))
        context["location"] = presenters.location(vendor.get("city"), vendor.get("country"))
    return templates.TemplateResponse(request, "vendor_detail.html", context)


def _stars_for(raw_rating: str) -> str | None:
    try:
        return presenters.star_rating(presenters.parse_rating(raw_rating))
    except FormError:
        return None


def _edit_state(fields: dict[str, str]) -> dict:
    return {
        "status": fields.get("status", "PENDING"),
        "rating": fields.get("rating", "").strip(),
        "notes": fields.get("notes", ""),
    }


@router.get("/vendors/{vendor_id}", response_class=HTMLResponse)
async def vendor_detail(
    request: Request, vendor_id: str, api: VendorApiClient = Depends(get_api_client)
):
    try:
        vendor = await api.get_vendor(vendor_id)
    except ApiError as exc:
        return _render_detail(request, None, error=exc.message)
    return _render_detail(request, vendor)


@router.post("/vendors/{vendor_id}", response_class=HTMLResponse)
async def save_vendor_evaluation(
    request: Request, vendor_id: str, api: VendorApiClient = Depends(get_api_client)
):
    """Send the previous record merged with the edited status and rating."""
    edit = _edit_state(await _form_fields(request))
    try:
        previous = await api.get_vendor(vendor_id)
    except ApiError as exc:
        return _render_detail(request, None, edit=edit, error=exc.message)

    try:
        new_status = presenters.parse_status(edit["status"])
        new_rating = presenters.parse_rating(edit["rating"])
    except FormError as exc:
        return _render_detail(request, previous, edit=edit, error=str(exc))

    try:
        updated = await api.update_vendor(
            vendor_id, {**previous, "status": new_status, "rating": new_rating}
        )
    except ApiError as exc:
        logger.warning("Vendor %s update failed: %s", vendor_id, exc.message)
        return _render_detail(request, previous, edit=edit, error=exc.message)

    edit["status"] = updated.get("status", new_status)
    rating = updated.get("rating")
    edit["rating"] = "" if rating is None else str(rating)
    return _render_detail(request, updated, edit=edit, message="Changes saved.")


@router.post("/vendors/{vendor_id}/delete", response_class=HTMLResponse)
async def delete_vendor(
    request: Request, vendor_id: str, api: VendorApiClient = Depends(get_api_client)
):
    """Two-step delete: the first post asks for confirmation, `confirm=yes` deletes."""
    fields = await _form_fields(request)
    edit = _edit_state(fields)

    if fields.get("confirm") != "yes":
        try:
            vendor = await api.get_vendor(vendor_id)
        except ApiError as exc:
            return _render_detail(request, None, edit=edit, error=exc.message)
        return _render_detail(request, vendor, edit=edit, confirm_delete=True)

    try:
        await api.delete_vendor(vendor_id)
    except ApiError as exc:
        logger.warning("Vendor %s delete failed: %s", vendor_id, exc.message)
        try:
            vendor = await api.get_vendor(vendor_id)
        except ApiError:
            vendor = None
        return _render_detail(request, vendor, edit=edit, error=exc.message)

    return RedirectResponse("/", status_code=status.HTTP_303_SEE_OTHER)
