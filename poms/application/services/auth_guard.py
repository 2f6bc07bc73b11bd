"""Page-level auth guard.

Mirrors the edge route policy while a page is being rendered: it decides
whether to show the page, a "verifying" placeholder, or a redirect. The
edge middleware remains the enforcement point; this guard only covers the
window where the page is reached with a stale or still-loading session.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from poms.domain.enums import Role
from poms.domain.route_policy import ADMIN_LANDING_PATH, LOGIN_PATH, USER_LANDING_PATH
from poms.domain.session import SessionIdentity

LOADING_MESSAGE = "Verifying authentication..."
REDIRECTING_MESSAGE = "Redirecting to login..."
ROLE_REDIRECT_MESSAGE = "Redirecting..."


class SessionStatus(str, Enum):
    LOADING = "loading"
    AUTHENTICATED = "authenticated"
    UNAUTHENTICATED = "unauthenticated"


@dataclass(frozen=True)
class SessionState:
    """What the page knows about the session at render time."""

    status: SessionStatus
    session: SessionIdentity | None = None

    @classmethod
    def from_session(cls, session: SessionIdentity | None) -> SessionState:
        if session is None:
            return cls(SessionStatus.UNAUTHENTICATED)
        return cls(SessionStatus.AUTHENTICATED, session)


class GuardState(str, Enum):
    RENDER = "render"
    LOADING = "loading"
    REDIRECTING = "redirecting"


@dataclass(frozen=True)
class GuardOutcome:
    state: GuardState
    redirect_to: str | None = None
    message: str | None = None

    @property
    def should_render(self) -> bool:
        return self.state is GuardState.RENDER


_RENDER = GuardOutcome(GuardState.RENDER)


def role_redirect(role: Role) -> str:
    """Where a signed-in user goes when their role may not view the page."""
    match role:
        case Role.USER:
            return USER_LANDING_PATH
        case Role.SUPER_ADMIN:
            return ADMIN_LANDING_PATH
        case Role.EMPLOYEE:
            return LOGIN_PATH
        case _:
            assert_never(role)


class AuthGuard:
    """Evaluate a SessionState against the roles a page layout accepts."""

    def __init__(self, allowed_roles: Iterable[Role], require_auth: bool = True) -> None:
        self.allowed_roles = frozenset(allowed_roles)
        self.require_auth = require_auth
        self.last_outcome: GuardOutcome | None = None

    def evaluate(self, state: SessionState, pathname: str) -> GuardOutcome:
        """Return the outcome for the current session state and path.

        Rules are applied in order:
        1. The login page always renders.
        2. A loading session shows the verifying placeholder.
        3. With require_auth, no session redirects to login.
        4. A session whose role is not allowed redirects to its role's home.
        5. Otherwise the page renders.
        """
        if pathname == LOGIN_PATH:
            return _RENDER
        if state.status is SessionStatus.LOADING:
            return GuardOutcome(GuardState.LOADING, message=LOADING_MESSAGE)
        session = state.session if state.status is SessionStatus.AUTHENTICATED else None
        if session is None:
            if self.require_auth:
                return GuardOutcome(
                    GuardState.REDIRECTING, LOGIN_PATH, REDIRECTING_MESSAGE
                )
            return _RENDER
        if self.allowed_roles and session.role not in self.allowed_roles:
            return GuardOutcome(
                GuardState.REDIRECTING, role_redirect(session.role), ROLE_REDIRECT_MESSAGE
            )
        return _RENDER

    def on_session_change(self, state: SessionState, pathname: str) -> GuardOutcome:
        """Re-evaluate after the session changed (sign-in, sign-out, expiry)."""
        self.last_outcome = self.evaluate(state, pathname)
        return self.last_outcome


def admin_guard() -> AuthGuard:
    return AuthGuard({Role.SUPER_ADMIN})


def frontend_guard() -> AuthGuard:
    return AuthGuard({Role.USER, Role.SUPER_ADMIN})
