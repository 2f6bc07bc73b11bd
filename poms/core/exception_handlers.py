"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). API errors are JSON bodies
``{"error": CODE, "message": text, ...}``; an unknown page path renders the
HTML not-found page instead.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import HTMLResponse, JSONResponse, Response
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from poms.core.config import get_settings
from poms.domain.exceptions import PomsException
from poms.pages.layout import render_not_found_page

logger = logging.getLogger(__name__)

API_PREFIX = "/api/"

_STATUS_BY_CODE: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "INVALID_CREDENTIALS": 401,
    "PERMISSION_DENIED": 403,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 409,
    "SERVICE_UNAVAILABLE": 503,
}


def status_for(exc: PomsException) -> int:
    """HTTP status for a domain exception; unmapped codes (validation) are 400."""
    return _STATUS_BY_CODE.get(exc.error_code, 400)


def _error(status_code: int, code: str, message: Any, **extra: Any) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content={"error": code, "message": message, **extra}
    )


def _on_domain_error(request: Request, exc: PomsException) -> JSONResponse:
    return JSONResponse(status_code=status_for(exc), content=exc.to_dict())


def _on_request_validation(request: Request, exc: RequestValidationError) -> JSONResponse:
    """422 whose message is the first error's text, so forms can show it as-is."""
    errors = exc.errors()
    details = [
        {"type": err.get("type"), "loc": list(err.get("loc", ())), "msg": err.get("msg")}
        for err in errors
    ]
    message = details[0]["msg"] if details else "Invalid payload"
    return _error(422, "VALIDATION_ERROR", message, details=details)


def _on_rate_limited(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    logger.warning("Rate limit hit on %s (%s)", request.url.path, exc.detail)
    return _error(429, "RATE_LIMITED", f"Too many requests: {exc.detail}")


def _on_http_error(request: Request, exc: StarletteHTTPException) -> Response:
    if exc.status_code == 404 and not request.url.path.startswith(API_PREFIX):
        session = getattr(request.state, "session", None)
        return HTMLResponse(render_not_found_page(session), status_code=404)
    response = _error(exc.status_code, "HTTP_ERROR", exc.detail)
    if exc.headers:
        response.headers.update(exc.headers)
    return response


def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    """500; the exception text is only exposed when debug is on."""
    logger.exception("Unhandled exception on %s %s", request.method, request.url.path)
    message = str(exc) if get_settings().debug else "Internal server error"
    return _error(500, "INTERNAL_ERROR", message)


_HANDLERS: tuple[tuple[type[Exception], Any], ...] = (
    (PomsException, _on_domain_error),
    (RequestValidationError, _on_request_validation),
    (RateLimitExceeded, _on_rate_limited),
    (StarletteHTTPException, _on_http_error),
    (Exception, _on_unhandled),
)


def register_exception_handlers(app: FastAPI) -> None:
    """Install every handler above on app. Call once, after creating the app."""
    for exc_class, handler in _HANDLERS:
        app.add_exception_handler(exc_class, handler)
