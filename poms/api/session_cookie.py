"""Issue and clear the session cookie (shared by the auth API and the login page)."""

from starlette.responses import Response

from poms.application.dtos.identity import IdentityResult
from poms.core.config import get_settings
from poms.infrastructure.security.session_token import encode_session_token


def issue_session(response: Response, identity: IdentityResult) -> str:
    """Sign a session token for identity, set it as an HttpOnly cookie and return it."""
    settings = get_settings()
    token = encode_session_token(
        identity.id, identity.role, name=identity.name, email=identity.email
    )
    response.set_cookie(
        key=settings.session_cookie_name,
        value=token,
        max_age=settings.access_token_expire_minutes * 60,
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
        path="/",
    )
    return token


def clear_session(response: Response) -> None:
    settings = get_settings()
    response.delete_cookie(
        key=settings.session_cookie_name,
        path="/",
        httponly=True,
        secure=settings.session_cookie_secure,
        samesite="lax",
    )
