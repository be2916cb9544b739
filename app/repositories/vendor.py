"""Vendor repository: the Vendor Store used by VendorService."""


from app.domain.vendor import Vendor
from app.repositories.base import BaseRepository


class VendorRepository(BaseRepository[Vendor]):
    model = Vendor

    async def list_newest_first(self) -> list[Vendor]:
        return await self.list(order_by="created_at", order="desc")
