"""Session token codec: identity -> signed JWT -> SessionIdentity.

Decoding never raises. A token that fails signature or expiry checks, or
whose role claim is not a known Role, decodes to None and the request is
treated as having no session.
"""

import logging
from datetime import timedelta

from poms.domain.enums import Role
from poms.domain.session import SessionIdentity
from poms.infrastructure.security.jwt import TokenError, read_claims, sign_claims
from poms.shared.utils.datetime import from_timestamp_utc

logger = logging.getLogger(__name__)


def encode_session_token(
    user_id: str,
    role: Role,
    name: str | None = None,
    email: str | None = None,
    expires_delta: timedelta | None = None,
) -> str:
    """Issue a session token for an authenticated identity."""
    claims: dict[str, str] = {"sub": user_id, "role": role.value}
    if name is not None:
        claims["name"] = name
    if email is not None:
        claims["email"] = email
    return sign_claims(claims, ttl=expires_delta)


def decode_session_token(token: str) -> SessionIdentity | None:
    """Return the SessionIdentity for a valid token, else None."""
    try:
        payload = read_claims(token)
    except TokenError as exc:
        logger.debug("Rejected session token: %s", exc)
        return None
    try:
        role = Role(payload.get("role"))
    except ValueError:
        logger.warning("Session token carries unknown role %r", payload.get("role"))
        return None
    exp = payload.get("exp")
    return SessionIdentity(
        user_id=str(payload["sub"]),
        role=role,
        name=payload.get("name"),
        email=payload.get("email"),
        expires_at=from_timestamp_utc(exp) if isinstance(exp, (int, float)) else None,
    )
