"""Request context management using contextvars.

Provides async-safe storage for request-scoped data: the request id (set by
RequestIDMiddleware, read by the logging filter) and the resolved session
(set by SessionResolverMiddleware).

Usage:
    set_current_session(session)
    session = get_current_session()
"""

from contextvars import ContextVar

from poms.domain.session import SessionIdentity

_current_request_id: ContextVar[str | None] = ContextVar(
    "current_request_id", default=None
)
_current_session: ContextVar[SessionIdentity | None] = ContextVar(
    "current_session", default=None
)


def set_request_id(request_id: str | None) -> None:
    """Set the request id for the current context."""
    _current_request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _current_request_id.get()


def set_current_session(session: SessionIdentity | None) -> None:
    """Set the resolved session for this request (None when unauthenticated)."""
    _current_session.set(session)


def get_current_session() -> SessionIdentity | None:
    """Return the resolved session, or None if the request is unauthenticated."""
    return _current_session.get()


def clear_current_session() -> None:
    """Clear the session context at the end of a request."""
    _current_session.set(None)
