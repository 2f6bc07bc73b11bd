"""Integration tests for IdentityRepository against SQLite."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from poms.domain.enums import Role
from poms.domain.exceptions import DuplicateEmailException
from poms.infrastructure.persistence.repositories import IdentityRepository
from poms.infrastructure.security.password import verify_password


async def test_create_and_get_by_email(db_session: AsyncSession) -> None:
    repo = IdentityRepository(db_session)
    created = await repo.create_identity("Ravi", "ravi@example.com", "Password123", Role.USER)
    assert created.id
    assert created.is_active is True
    assert created.hashed_password != "Password123"

    found = await repo.get_by_email("ravi@example.com")
    assert found is not None
    assert found.id == created.id
    assert await repo.get_by_email("RAVI@example.com") is None


async def test_duplicate_email_raises(db_session: AsyncSession) -> None:
    repo = IdentityRepository(db_session)
    await repo.create_identity("Ravi", "ravi@example.com", "Password123", Role.USER)
    await db_session.commit()
    with pytest.raises(DuplicateEmailException):
        await repo.create_identity("Other", "ravi@example.com", "Password123", Role.USER)


async def test_list_newest_first_and_count(db_session: AsyncSession) -> None:
    repo = IdentityRepository(db_session)
    for index in range(3):
        await repo.create_identity(f"User {index}", f"u{index}@example.com", "Password123", Role.USER)
    await db_session.commit()

    assert await repo.count() == 3
    page = await repo.list_newest_first(skip=0, limit=2)
    assert [identity.email for identity in page] == ["u2@example.com", "u1@example.com"]
    rest = await repo.list_newest_first(skip=2, limit=2)
    assert [identity.email for identity in rest] == ["u0@example.com"]


async def test_upsert_creates_then_resets(db_session: AsyncSession) -> None:
    repo = IdentityRepository(db_session)
    first, created = await repo.upsert_identity(
        "Admin", "admin@example.com", "FirstPass1", Role.SUPER_ADMIN
    )
    assert created is True
    await db_session.commit()

    first.is_active = False
    await repo.update(first)
    await db_session.commit()

    second, created = await repo.upsert_identity(
        "Root Admin", "admin@example.com", "SecondPass2", Role.SUPER_ADMIN
    )
    await db_session.commit()
    assert created is False
    assert second.id == first.id
    assert second.name == "Root Admin"
    assert second.is_active is True
    assert verify_password("SecondPass2", second.hashed_password)
    assert not verify_password("FirstPass1", second.hashed_password)
