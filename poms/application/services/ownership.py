"""Resource ownership checks: company -> owner, party/item -> company -> owner."""

from __future__ import annotations

from poms.domain.exceptions import ResourceNotFoundException
from poms.infrastructure.persistence.models import Company, Item, Party
from poms.infrastructure.persistence.repositories import (
    CompanyRepository,
    ItemRepository,
    PartyRepository,
)


class ResourceOwnershipChecker:
    """Resolve a resource only if the identity owns its root company.

    A missing id and an id owned by someone else both raise
    ResourceNotFoundException. Nothing is cached between calls.
    """

    def __init__(
        self,
        company_repo: CompanyRepository,
        party_repo: PartyRepository,
        item_repo: ItemRepository,
    ) -> None:
        self.company_repo = company_repo
        self.party_repo = party_repo
        self.item_repo = item_repo

    async def require_company(
        self, company_id: str, identity_id: str, *, with_parties: bool = False
    ) -> Company:
        company = await self.company_repo.get_owned(
            company_id, identity_id, with_parties=with_parties
        )
        if company is None:
            raise ResourceNotFoundException("company", company_id)
        return company

    async def require_supplier(
        self, company_id: str, supplier_id: str, identity_id: str
    ) -> Party:
        await self.require_company(company_id, identity_id)
        party = await self.party_repo.get_in_company(supplier_id, company_id)
        if party is None:
            raise ResourceNotFoundException("supplier", supplier_id)
        return party

    async def require_item(self, company_id: str, item_id: str, identity_id: str) -> Item:
        await self.require_company(company_id, identity_id)
        item = await self.item_repo.get_in_company(item_id, company_id)
        if item is None:
            raise ResourceNotFoundException("item", item_id)
        return item
