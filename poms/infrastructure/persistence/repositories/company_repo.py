"""Company repository. Every lookup by id is scoped to the owning identity."""

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from poms.domain.exceptions import DuplicateGstinException
from poms.infrastructure.persistence.models.company import Company
from poms.infrastructure.persistence.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    """Company repository; GSTIN uniqueness violations become DuplicateGstinException."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Company)

    async def get_owned(
        self, company_id: str, user_id: str, *, with_parties: bool = False
    ) -> Company | None:
        """Return the company only if user_id owns it."""
        stmt = select(Company).where(Company.id == company_id, Company.user_id == user_id)
        if with_parties:
            stmt = stmt.options(selectinload(Company.parties))
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_owner(self, user_id: str) -> list[Company]:
        result = await self.db.execute(
            select(Company)
            .where(Company.user_id == user_id)
            .order_by(Company.created_at.desc(), Company.id.desc())
        )
        return list(result.scalars().all())

    async def create(self, obj: Company) -> Company:
        try:
            return await super().create(obj)
        except IntegrityError:
            raise DuplicateGstinException() from None

    async def update(self, obj: Company) -> Company:
        try:
            return await super().update(obj)
        except IntegrityError:
            raise DuplicateGstinException() from None
