"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories, the session and
application services. Routes depend only on these, not on infra directly.
Read dependencies use get_db; *_for_write variants share one transactional
session per request (FastAPI caches get_db_transactional per request).
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from poms.application.services.credential_authenticator import CredentialAuthenticator
from poms.application.services.ownership import ResourceOwnershipChecker
from poms.domain.enums import Role
from poms.domain.exceptions import AuthenticationException, AuthorizationException
from poms.domain.session import SessionIdentity
from poms.infrastructure.persistence.database import get_db, get_db_transactional
from poms.infrastructure.persistence.repositories import (
    CompanyRepository,
    IdentityRepository,
    ItemRepository,
    PartyRepository,
)


# ---------- Repositories ----------


async def get_identity_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> IdentityRepository:
    return IdentityRepository(db)


async def get_identity_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> IdentityRepository:
    return IdentityRepository(db)


async def get_company_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CompanyRepository:
    return CompanyRepository(db)


async def get_company_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> CompanyRepository:
    return CompanyRepository(db)


async def get_party_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> PartyRepository:
    return PartyRepository(db)


async def get_party_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> PartyRepository:
    return PartyRepository(db)


async def get_item_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ItemRepository:
    return ItemRepository(db)


async def get_item_repo_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ItemRepository:
    return ItemRepository(db)


# ---------- Services ----------


async def get_credential_authenticator(
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repo)],
) -> CredentialAuthenticator:
    return CredentialAuthenticator(identity_repo)


async def get_ownership_checker(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> ResourceOwnershipChecker:
    """Ownership checker for read endpoints."""
    return ResourceOwnershipChecker(
        CompanyRepository(db), PartyRepository(db), ItemRepository(db)
    )


async def get_ownership_checker_for_write(
    db: Annotated[AsyncSession, Depends(get_db_transactional)],
) -> ResourceOwnershipChecker:
    """Ownership checker sharing the write transaction, so the checked row is the one updated."""
    return ResourceOwnershipChecker(
        CompanyRepository(db), PartyRepository(db), ItemRepository(db)
    )


# ---------- Session ----------


def get_current_session_optional(request: Request) -> SessionIdentity | None:
    """Return the session resolved by SessionResolverMiddleware, or None."""
    return getattr(request.state, "session", None)


def get_current_session(
    session: Annotated[SessionIdentity | None, Depends(get_current_session_optional)],
) -> SessionIdentity:
    """Return the session; raise 401 when the request has none."""
    if session is None:
        raise AuthenticationException()
    return session


def require_role(*roles: Role):
    """Dependency factory: require a session whose role is one of roles (else 403)."""
    allowed = frozenset(roles)

    def _require(
        session: Annotated[SessionIdentity, Depends(get_current_session)],
    ) -> SessionIdentity:
        if session.role not in allowed:
            raise AuthorizationException(
                role=session.role.value,
                required=sorted(r.value for r in allowed),
            )
        return session

    return _require


CurrentSession = Annotated[SessionIdentity, Depends(get_current_session)]
SuperAdminSession = Annotated[SessionIdentity, Depends(require_role(Role.SUPER_ADMIN))]
