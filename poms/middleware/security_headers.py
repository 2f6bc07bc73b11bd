"""Security headers middleware.

Sets CSP, HSTS, framing, sniffing, referrer and permissions headers on every
response unless the handler already set them. The CSP admits same-origin
assets and inline styles for the server-rendered pages, never inline
scripts. Responses to requests that carry a session are marked no-store so
shared caches never keep another user's page. Raw ASGI.
"""

from typing import Callable

from starlette.datastructures import MutableHeaders

CONTENT_SECURITY_POLICY = (
    "default-src 'self'; style-src 'self' 'unsafe-inline'; "
    "img-src 'self' https: data:; frame-ancestors 'none'; form-action 'self'"
)

DEFAULT_HEADERS: dict[str, str] = {
    "Content-Security-Policy": CONTENT_SECURITY_POLICY,
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "strict-origin-when-cross-origin",
    "Permissions-Policy": "geolocation=(), microphone=(), camera=()",
}

# Swagger/ReDoc pull assets from a CDN.
_DOCS_PREFIXES = ("/docs", "/redoc")


def SecurityHeadersMiddleware(app: Callable, headers: dict[str, str] | None = None) -> Callable:
    """Add security headers to all HTTP responses. Raw ASGI."""
    defaults = dict(headers if headers is not None else DEFAULT_HEADERS)
    docs_defaults = {k: v for k, v in defaults.items() if k != "Content-Security-Policy"}

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return
        to_apply = docs_defaults if scope["path"].startswith(_DOCS_PREFIXES) else defaults

        async def send_with_headers(message: dict) -> None:
            if message["type"] == "http.response.start":
                response_headers = MutableHeaders(scope=message)
                for name, value in to_apply.items():
                    response_headers.setdefault(name, value)
                if scope.get("state", {}).get("session") is not None:
                    response_headers.setdefault("Cache-Control", "no-store")
            await send(message)

        await app(scope, receive, send_with_headers)

    return asgi_app
