"""Vendor Resource API: JSON CRUD over /api/vendors.

Pattern:
  1. Inject the VendorService via Depends(get_vendor_service)
  2. Call one service method per endpoint
  3. Shape the ORM result with VendorOut

Swap the store in tests with app.dependency_overrides[get_vendor_service].
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import get_db
from app.repositories.vendor import VendorRepository
from app.schemas.common import SuccessResponse
from app.schemas.vendor import VendorCreate, VendorOut, VendorUpdate
from app.services.vendor import VendorService

router = APIRouter(prefix="/vendors", tags=["Vendors"])


# ------------------------------------------------------------------
# Dependency: service bound to the request's session
# ------------------------------------------------------------------

def get_vendor_service(session: AsyncSession = Depends(get_db)) -> VendorService:
    return VendorService(VendorRepository(session))


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=list[VendorOut])
async def list_vendors(svc: VendorService = Depends(get_vendor_service)):
    """List every vendor, newest first."""
    return [VendorOut.model_validate(v) for v in await svc.list_vendors()]


@router.post("", response_model=VendorOut, status_code=status.HTTP_201_CREATED)
async def create_vendor(
    body: VendorCreate,
    svc: VendorService = Depends(get_vendor_service),
):
    """Create a new vendor."""
    vendor = await svc.create_vendor(body)
    return VendorOut.model_validate(vendor)


@router.get("/{vendor_id}", response_model=VendorOut)
async def get_vendor(
    vendor_id: str,
    svc: VendorService = Depends(get_vendor_service),
):
    vendor = await svc.get_vendor(vendor_id)
    return VendorOut.model_validate(vendor)


@router.put("/{vendor_id}", response_model=VendorOut)
async def update_vendor(
    vendor_id: str,
    body: VendorUpdate,
    svc: VendorService = Depends(get_vendor_service),
):
    vendor = await svc.update_vendor(vendor_id, body)
    return VendorOut.model_validate(vendor)


@router.delete("/{vendor_id}", response_model=SuccessResponse)
async def delete_vendor(
    vendor_id: str,
    svc: VendorService = Depends(get_vendor_service),
):
    await svc.delete_vendor(vendor_id)
    return SuccessResponse()
