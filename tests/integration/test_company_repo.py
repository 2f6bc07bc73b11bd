"""Integration tests for owner-scoped company, supplier and item lookups."""

from decimal import Decimal

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from poms.domain.enums import Role
from poms.domain.exceptions import DuplicateGstinException
from poms.infrastructure.persistence.models import Company, Item, Party
from poms.infrastructure.persistence.repositories import (
    CompanyRepository,
    IdentityRepository,
    ItemRepository,
    PartyRepository,
)


async def _owner(db_session: AsyncSession, email: str) -> str:
    identity = await IdentityRepository(db_session).create_identity(
        "Owner", email, "Password123", Role.USER
    )
    return identity.id


async def test_get_owned_is_scoped_to_owner(db_session: AsyncSession) -> None:
    owner = await _owner(db_session, "owner@example.com")
    other = await _owner(db_session, "other@example.com")
    repo = CompanyRepository(db_session)
    company = await repo.create(Company(user_id=owner, name="Acme"))
    await db_session.commit()

    assert (await repo.get_owned(company.id, owner)) is not None
    assert await repo.get_owned(company.id, other) is None
    assert await repo.get_owned("missing", owner) is None


async def test_list_for_owner_newest_first(db_session: AsyncSession) -> None:
    owner = await _owner(db_session, "owner@example.com")
    other = await _owner(db_session, "other@example.com")
    repo = CompanyRepository(db_session)
    await repo.create(Company(user_id=owner, name="First"))
    await repo.create(Company(user_id=other, name="Not mine"))
    await repo.create(Company(user_id=owner, name="Second"))
    await db_session.commit()

    names = [company.name for company in await repo.list_for_owner(owner)]
    assert names == ["Second", "First"]


async def test_duplicate_gstin_raises(db_session: AsyncSession) -> None:
    owner = await _owner(db_session, "owner@example.com")
    repo = CompanyRepository(db_session)
    await repo.create(Company(user_id=owner, name="Acme", gstin="27ABCDE1234F1Z5"))
    await db_session.commit()
    with pytest.raises(DuplicateGstinException):
        await repo.create(Company(user_id=owner, name="Acme 2", gstin="27ABCDE1234F1Z5"))


async def test_multiple_companies_without_gstin(db_session: AsyncSession) -> None:
    owner = await _owner(db_session, "owner@example.com")
    repo = CompanyRepository(db_session)
    await repo.create(Company(user_id=owner, name="A"))
    await repo.create(Company(user_id=owner, name="B"))
    await db_session.commit()
    assert len(await repo.list_for_owner(owner)) == 2


async def test_parties_and_items_are_scoped_to_company(db_session: AsyncSession) -> None:
    owner = await _owner(db_session, "owner@example.com")
    companies = CompanyRepository(db_session)
    acme = await companies.create(Company(user_id=owner, name="Acme"))
    globex = await companies.create(Company(user_id=owner, name="Globex"))
    parties = PartyRepository(db_session)
    supplier = await parties.create(Party(company_id=acme.id, name="Steel Co"))
    items = ItemRepository(db_session)
    item = await items.create(
        Item(
            company_id=acme.id,
            party_id=supplier.id,
            name="Bolt",
            base_price=Decimal("12.50"),
            gst_rate=Decimal("18.00"),
        )
    )
    await db_session.commit()

    assert (await parties.get_in_company(supplier.id, acme.id)) is not None
    assert await parties.get_in_company(supplier.id, globex.id) is None
    assert (await items.get_in_company(item.id, acme.id)) is not None
    assert await items.get_in_company(item.id, globex.id) is None
    assert [p.name for p in await parties.list_for_company(acme.id)] == ["Steel Co"]
    assert await items.list_for_company(globex.id) == []

    db_session.expunge_all()

    loaded = await companies.get_owned(acme.id, owner, with_parties=True)
    assert loaded is not None
    assert [p.name for p in loaded.parties] == ["Steel Co"]
