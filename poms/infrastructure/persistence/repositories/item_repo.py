"""Item repository, scoped by company."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from poms.infrastructure.persistence.models.item import Item
from poms.infrastructure.persistence.repositories.base import BaseRepository


class ItemRepository(BaseRepository[Item]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Item)

    async def get_in_company(self, item_id: str, company_id: str) -> Item | None:
        """Return the item only if it belongs to company_id."""
        result = await self.db.execute(
            select(Item).where(Item.id == item_id, Item.company_id == company_id)
        )
        return result.scalar_one_or_none()

    async def list_for_company(self, company_id: str) -> list[Item]:
        result = await self.db.execute(
            select(Item)
            .where(Item.company_id == company_id)
            .order_by(Item.created_at.desc(), Item.id.desc())
        )
        return list(result.scalars().all())
