"""Party (supplier) repository, scoped by company."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from poms.infrastructure.persistence.models.party import Party
from poms.infrastructure.persistence.repositories.base import BaseRepository


class PartyRepository(BaseRepository[Party]):
    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Party)

    async def get_in_company(self, party_id: str, company_id: str) -> Party | None:
        """Return the party only if it belongs to company_id."""
        result = await self.db.execute(
            select(Party).where(Party.id == party_id, Party.company_id == company_id)
        )
        return result.scalar_one_or_none()

    async def list_for_company(self, company_id: str) -> list[Party]:
        result = await self.db.execute(
            select(Party)
            .where(Party.company_id == company_id)
            .order_by(Party.created_at.desc(), Party.id.desc())
        )
        return list(result.scalars().all())
