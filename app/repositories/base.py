"""Generic async repository: keyed reads, ordered listing, create/update/delete."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.base import Base
from app.domain.mixins import utcnow

ModelT = TypeVar("ModelT", bound=Base)

# Columns the caller may never overwrite
_IMMUTABLE_COLUMNS = ("id", "created_at")


class BaseRepository(Generic[ModelT]):
    """Generic CRUD repository over one ORM model.

    Deletes are hard deletes. Updates carry no version check, so concurrent
    writers to the same row simply overwrite each other (last write wins).
    """

    model: type[ModelT]

    def __init__(self, session: AsyncSession):
        self._session = session

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_by_id(self, entity_id: str) -> ModelT | None:
        result = await self._session.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalars().first()

    async def list(
        self,
        *,
        order_by: str = "created_at",
        order: str = "desc",
    ) -> list[ModelT]:
        """Return every row, sorted on a single column."""
        q = select(self.model)
        col = getattr(self.model, order_by, None)
        if col is not None:
            q = q.order_by(col.desc() if order == "desc" else col.asc())

        items = (await self._session.execute(q)).scalars().all()
        return list(items)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def create(self, **kwargs: Any) -> ModelT:
        if hasattr(self.model, "created_at"):
            # One clock reading so a fresh row has created_at == updated_at
            now = utcnow()
            kwargs.setdefault("created_at", now)
            kwargs.setdefault("updated_at", now)

        instance = self.model(**kwargs)
        self._session.add(instance)
        await self._session.flush()  # populate id
        await self._session.refresh(instance)
        return instance

    async def update(self, entity_id: str, **kwargs: Any) -> ModelT | None:
        for col in _IMMUTABLE_COLUMNS:
            kwargs.pop(col, None)
        if hasattr(self.model, "updated_at"):
            kwargs["updated_at"] = utcnow()

        result = await self._session.execute(
            update(self.model)
            .where(self.model.id == entity_id)
            .values(**kwargs)
        )
        await self._session.flush()
        if result.rowcount == 0:
            return None

        instance = await self.get_by_id(entity_id)
        if instance is not None:
            # Reload so the returned row matches what a later read would see
            await self._session.refresh(instance)
        return instance

    async def delete(self, entity_id: str) -> bool:
        result = await self._session.execute(
            delete(self.model).where(self.model.id == entity_id)
        )
        await self._session.flush()
        return result.rowcount > 0
