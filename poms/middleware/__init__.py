"""HTTP middleware: request ID, security headers, session resolver, route authorization.

Applied in main app; Starlette wraps the last added middleware outermost.
Import and use from poms.main.
"""

from poms.middleware.request_id import RequestIDMiddleware
from poms.middleware.route_authorization import RouteAuthorizationMiddleware
from poms.middleware.security_headers import SecurityHeadersMiddleware
from poms.middleware.session import SessionResolverMiddleware

__all__ = [
    "RequestIDMiddleware",
    "RouteAuthorizationMiddleware",
    "SecurityHeadersMiddleware",
    "SessionResolverMiddleware",
]
