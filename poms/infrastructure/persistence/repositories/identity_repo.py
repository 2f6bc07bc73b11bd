"""Identity repository: lookups by email, admin creation and listing."""

from __future__ import annotations

import asyncio

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from poms.domain.enums import Role
from poms.domain.exceptions import DuplicateEmailException
from poms.infrastructure.persistence.models.identity import Identity
from poms.infrastructure.persistence.repositories.base import BaseRepository
from poms.infrastructure.security.password import get_password_hash


class IdentityRepository(BaseRepository[Identity]):
    """Identity repository. Email matching is exact (case-sensitive)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Identity)

    async def get_by_email(self, email: str) -> Identity | None:
        result = await self.db.execute(select(Identity).where(Identity.email == email))
        return result.scalar_one_or_none()

    async def create_identity(
        self,
        name: str,
        email: str,
        password: str,
        role: Role,
        is_active: bool = True,
    ) -> Identity:
        """Create an identity; raise DuplicateEmailException on unique constraint violation."""
        hashed = await asyncio.to_thread(get_password_hash, password)
        identity = Identity(
            name=name,
            email=email,
            hashed_password=hashed,
            role=role.value,
            is_active=is_active,
        )
        try:
            return await self.create(identity)
        except IntegrityError:
            raise DuplicateEmailException() from None

    async def update(self, obj: Identity) -> Identity:
        """Update identity; raise DuplicateEmailException on unique constraint."""
        try:
            return await super().update(obj)
        except IntegrityError:
            raise DuplicateEmailException() from None

    async def set_password(self, identity: Identity, new_password: str) -> None:
        """Replace the stored hash (caller flushes via update)."""
        identity.hashed_password = await asyncio.to_thread(get_password_hash, new_password)

    async def list_newest_first(self, skip: int = 0, limit: int = 10) -> list[Identity]:
        result = await self.db.execute(
            select(Identity)
            .order_by(Identity.created_at.desc(), Identity.id.desc())
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def upsert_identity(
        self,
        name: str,
        email: str,
        password: str,
        role: Role,
        is_active: bool = True,
    ) -> tuple[Identity, bool]:
        """Create the identity, or reset name/password/role/active on the existing one.

        Returns (identity, created).
        """
        existing = await self.get_by_email(email)
        if existing is None:
            created = await self.create_identity(name, email, password, role, is_active)
            return created, True
        existing.name = name
        existing.role = role.value
        existing.is_active = is_active
        await self.set_password(existing, password)
        return await self.update(existing), False
