"""Shared repository plumbing for one ORM model per repository."""

from typing import Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import object_session

from poms.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Primary-key lookup, counting and flush-and-refresh writes.

    Scoped lookups (by owner, by company) live on the subclasses, which also
    turn IntegrityError into the matching domain conflict.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        return await self.db.get(self.model, entity_id)

    async def count(self) -> int:
        total = await self.db.scalar(select(func.count()).select_from(self.model))
        return int(total or 0)

    async def _flush_and_refresh(self, obj: ModelType) -> ModelType:
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def create(self, obj: ModelType) -> ModelType:
        """Insert obj and reload it so defaults set by the database are visible."""
        self.db.add(obj)
        return await self._flush_and_refresh(obj)

    async def update(self, obj: ModelType) -> ModelType:
        # Rows loaded through another session are merged into this one first.
        if object_session(obj) is not self.db.sync_session:
            obj = await self.db.merge(obj)
        return await self._flush_and_refresh(obj)
