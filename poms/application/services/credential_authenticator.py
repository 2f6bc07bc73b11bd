"""Credential authenticator: email + password -> IdentityResult.

Bcrypt work runs in a worker thread so the event loop is not blocked. When
the email is unknown a dummy hash is still compared, so a missing account and
a wrong password take about the same time.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Protocol

from poms.application.dtos.identity import IdentityResult
from poms.domain.enums import Role
from poms.domain.exceptions import (
    AccountInactiveException,
    AccountNotFoundException,
    CredentialsRejectedException,
    InvalidCredentialsException,
)
from poms.infrastructure.security.password import get_password_hash, verify_password

logger = logging.getLogger(__name__)

# Computed on first use in a thread to avoid blocking the event loop at import.
_dummy_hash_cache: str | None = None


async def _get_dummy_hash() -> str:
    """Return a valid bcrypt hash for dummy comparison; computed once in thread pool."""
    global _dummy_hash_cache
    if _dummy_hash_cache is None:
        _dummy_hash_cache = await asyncio.to_thread(
            get_password_hash, "not-a-real-password"
        )
    return _dummy_hash_cache


class IdentityLookup(Protocol):
    async def get_by_email(self, email: str) -> Any: ...


def identity_to_result(identity: Any) -> IdentityResult:
    """Map an ORM Identity to IdentityResult (drops the password hash)."""
    return IdentityResult(
        id=identity.id,
        name=identity.name,
        email=identity.email,
        role=Role(identity.role),
        is_active=identity.is_active,
        created_at=getattr(identity, "created_at", None),
        updated_at=getattr(identity, "updated_at", None),
    )


class CredentialAuthenticator:
    """Validate email/password against stored bcrypt hashes."""

    def __init__(self, identity_repo: IdentityLookup) -> None:
        self._identity_repo = identity_repo

    async def authenticate(self, email: str, password: str) -> IdentityResult:
        """Return the identity for valid credentials.

        Raises:
            AccountNotFoundException: No identity with this email.
            InvalidCredentialsException: Password does not match.
            AccountInactiveException: Credentials match a deactivated identity.
        """
        try:
            return await self._authenticate(email, password)
        except CredentialsRejectedException as exc:
            logger.info("Credential check rejected (%s)", exc.reason)
            raise

    async def _authenticate(self, email: str, password: str) -> IdentityResult:
        identity = await self._identity_repo.get_by_email(email)
        if identity is None:
            dummy_hash = await _get_dummy_hash()
            await asyncio.to_thread(verify_password, password, dummy_hash)
            raise AccountNotFoundException(email)
        if not await asyncio.to_thread(verify_password, password, identity.hashed_password):
            raise InvalidCredentialsException(email)
        if not identity.is_active:
            raise AccountInactiveException(email)
        return identity_to_result(identity)

    async def check(self, email: str, password: str) -> IdentityResult | None:
        """Like authenticate() but returns None instead of raising on rejection."""
        try:
            return await self.authenticate(email, password)
        except CredentialsRejectedException:
            return None
