"""Route authorization middleware.

Applies the route policy at the edge, after the session resolver: a request
without a session on a protected path, or with a role the path does not
allow, gets a 307 redirect and never reaches a page handler.
"""

from __future__ import annotations

import logging
from typing import Callable

from starlette.responses import RedirectResponse

from poms.domain.route_policy import authorize

logger = logging.getLogger(__name__)

# Paths the edge policy never sees (assets, API docs).
EXCLUDED_PREFIXES = ("/static/", "/favicon.ico", "/docs", "/redoc", "/openapi.json")


def is_excluded(path: str) -> bool:
    return path.startswith(EXCLUDED_PREFIXES)


def RouteAuthorizationMiddleware(app: Callable) -> Callable:
    """Redirect unauthenticated or role-mismatched requests. Raw ASGI."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http" or is_excluded(scope["path"]):
            await app(scope, receive, send)
            return
        path = scope["path"]
        session = scope.get("state", {}).get("session")
        decision = authorize(session.role if session is not None else None, path)
        if decision.allowed:
            await app(scope, receive, send)
            return
        logger.debug(
            "Edge redirect %s -> %s (%s)", path, decision.redirect_to, decision.state.value
        )
        response = RedirectResponse(decision.redirect_to or "/login", status_code=307)
        await response(scope, receive, send)

    return asgi_app
