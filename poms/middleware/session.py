"""Session resolver middleware.

Decodes the session token (Bearer header first, then the session cookie) on
every HTTP request and attaches the resulting SessionIdentity, or None, to
request.state.session and the request context. No database access: the
token alone carries the identity id, role, name and email.
"""

from __future__ import annotations

from typing import Callable

from starlette.requests import HTTPConnection

from poms.core.config import get_settings
from poms.domain.session import SessionIdentity
from poms.infrastructure.security.session_token import decode_session_token
from poms.shared.context import clear_current_session, set_current_session


def token_from_connection(conn: HTTPConnection, cookie_name: str) -> str | None:
    """Return the raw session token from the Authorization header or cookie."""
    auth = conn.headers.get("Authorization")
    if auth and auth.startswith("Bearer "):
        token = auth[7:].strip()
        if token:
            return token
    return conn.cookies.get(cookie_name) or None


def resolve_session(conn: HTTPConnection, cookie_name: str) -> SessionIdentity | None:
    token = token_from_connection(conn, cookie_name)
    if token is None:
        return None
    return decode_session_token(token)


def SessionResolverMiddleware(app: Callable) -> Callable:
    """Resolve the session before routing. Raw ASGI."""
    cookie_name = get_settings().session_cookie_name

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        session = resolve_session(HTTPConnection(scope), cookie_name)
        scope.setdefault("state", {})["session"] = session
        set_current_session(session)
        try:
            await app(scope, receive, send)
        finally:
            clear_current_session()

    return asgi_app
