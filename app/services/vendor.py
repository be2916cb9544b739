"""Vendor service: business rules between the router and the Vendor Store.

The service receives its repository from the caller, so the HTTP layer can be
run against any object exposing the VendorRepository methods.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic.
"""


import logging

from app.core.exceptions import NotFoundError
from app.domain.vendor import Vendor
from app.repositories.vendor import VendorRepository
from app.schemas.vendor import VendorCreate, VendorUpdate

logger = logging.getLogger(__name__)

class VendorService:
    def __init__(self, repo: VendorRepository):
        self._repo = repo

    async def list_vendors(self) -> list[Vendor]:
        return await self._repo.list_newest_first()

    async def get_vendor(self, vendor_id: str) -> Vendor:
        vendor = await self._repo.get_by_id(vendor_id)
        if not vendor:
            raise NotFoundError("Vendor", vendor_id)
        return vendor

    async def create_vendor(self, data: VendorCreate) -> Vendor:
        vendor = await self._repo.create(**data.model_dump())
        logger.info("Created vendor %s (%s)", vendor.id, vendor.name)
        return vendor

    async def update_vendor(self, vendor_id: str, data: VendorUpdate) -> Vendor:
        # An explicit null clears an optional field, so only drop unsent keys
        updated = await self._repo.update(vendor_id, **data.model_dump(exclude_unset=True))
        if updated is None:
            raise NotFoundError("Vendor", vendor_id)
        logger.info("Updated vendor %s (status=%s, rating=%s)", vendor_id, updated.status.value, updated.rating)
        return updated

    async def delete_vendor(self, vendor_id: str) -> None:
        deleted = await self._repo.delete(vendor_id)
        if not deleted:
            raise NotFoundError("Vendor", vendor_id)
        logger.info("Deleted vendor %s", vendor_id)
