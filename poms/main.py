"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See poms.core.lifespan and poms.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from poms.api.router import api_router
from poms.core.config import get_settings
from poms.core.exception_handlers import register_exception_handlers
from poms.core.lifespan import create_lifespan
from poms.core.limiter import limiter
from poms.middleware import (
    RequestIDMiddleware,
    RouteAuthorizationMiddleware,
    SecurityHeadersMiddleware,
    SessionResolverMiddleware,
)
from poms.pages import router as pages_router
from poms.shared.telemetry import setup_logging


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter

    register_exception_handlers(app)

    # Last added = outermost. Request order:
    # request ID -> security headers -> CORS -> session resolver -> route authorization.
    app.add_middleware(RouteAuthorizationMiddleware)
    app.add_middleware(SessionResolverMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    app.include_router(api_router, prefix="/api")
    app.include_router(pages_router)

    return app


app = create_app()
