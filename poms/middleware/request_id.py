"""Request ID middleware.

Forwards a caller's X-Request-ID when it is safe to log, otherwise mints a
new one. The id is echoed on the response, exposed to log records through
the request context, and used to tag one access-log line per request.
Raw ASGI (no BaseHTTPMiddleware).
"""

import logging
import re
import time
from typing import Callable

from starlette.datastructures import Headers, MutableHeaders

from poms.shared.context import set_request_id
from poms.shared.utils.generators import generate_cuid

logger = logging.getLogger("poms.access")

REQUEST_ID_MAX_LENGTH = 64
_SAFE_REQUEST_ID = re.compile(rf"[A-Za-z0-9_-]{{1,{REQUEST_ID_MAX_LENGTH}}}")


def sanitize_request_id(raw: str | None) -> str:
    """Return the trimmed client id if it is short and log-safe, else a fresh cuid."""
    candidate = (raw or "").strip()
    if _SAFE_REQUEST_ID.fullmatch(candidate):
        return candidate
    return generate_cuid()


def RequestIDMiddleware(app: Callable, header_name: str = "X-Request-ID") -> Callable:
    """Attach a request id to the context and response; log method, path, status and latency."""

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        request_id = sanitize_request_id(Headers(scope=scope).get(header_name))
        scope.setdefault("state", {})["request_id"] = request_id
        set_request_id(request_id)
        started = time.perf_counter()
        status_code = 500

        async def send_with_id(message: dict) -> None:
            nonlocal status_code
            if message["type"] == "http.response.start":
                status_code = message["status"]
                MutableHeaders(scope=message)[header_name] = request_id
            await send(message)

        try:
            await app(scope, receive, send_with_id)
        finally:
            logger.info(
                "%s %s -> %d (%.1f ms)",
                scope["method"],
                scope["path"],
                status_code,
                (time.perf_counter() - started) * 1000,
            )
            set_request_id(None)

    return asgi_app
