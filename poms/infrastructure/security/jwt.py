"""Signed claim sets (HS256 via python-jose).

Every token carries ``iat`` and ``exp`` and must name a subject. Secret,
algorithm and default lifetime come from settings.
"""

from datetime import timedelta
from typing import Any, cast

from jose import JWTError, jwt

from poms.core.config import get_settings
from poms.shared.utils.datetime import utc_now

_REQUIRED = {"require_exp": True, "require_iat": True, "require_sub": True}


class TokenError(ValueError):
    """The token failed verification: bad signature, expired, or a required claim is missing."""


def sign_claims(claims: dict[str, Any], ttl: timedelta | None = None) -> str:
    """Return a signed token for claims, valid for ttl (default from settings)."""
    settings = get_settings()
    issued_at = utc_now()
    lifetime = ttl if ttl is not None else timedelta(minutes=settings.access_token_expire_minutes)
    payload = {**claims, "iat": issued_at, "exp": issued_at + lifetime}
    token = jwt.encode(
        payload, settings.secret_key.get_secret_value(), algorithm=settings.algorithm
    )
    return cast(str, token)


def read_claims(token: str) -> dict[str, Any]:
    """Verify token and return its claims; raise TokenError otherwise."""
    settings = get_settings()
    try:
        return jwt.decode(
            token,
            settings.secret_key.get_secret_value(),
            algorithms=[settings.algorithm],
            options=_REQUIRED,
        )
    except JWTError as exc:
        raise TokenError(str(exc)) from exc
