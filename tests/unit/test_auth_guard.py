"""Tests for the page-level AuthGuard."""

from poms.application.services.auth_guard import (
    AuthGuard,
    GuardState,
    SessionState,
    SessionStatus,
    admin_guard,
    frontend_guard,
)
from poms.domain.enums import Role
from poms.domain.session import SessionIdentity


def _state(role: Role) -> SessionState:
    return SessionState.from_session(SessionIdentity(user_id="u1", role=role))


def test_login_page_always_renders() -> None:
    outcome = admin_guard().evaluate(SessionState(SessionStatus.UNAUTHENTICATED), "/login")
    assert outcome.state is GuardState.RENDER


def test_loading_shows_verifying_message() -> None:
    outcome = frontend_guard().evaluate(SessionState(SessionStatus.LOADING), "/dashboard")
    assert outcome.state is GuardState.LOADING
    assert outcome.message == "Verifying authentication..."
    assert outcome.redirect_to is None


def test_unauthenticated_redirects_to_login() -> None:
    outcome = frontend_guard().evaluate(SessionState.from_session(None), "/dashboard")
    assert outcome.state is GuardState.REDIRECTING
    assert outcome.redirect_to == "/login"
    assert outcome.message == "Redirecting to login..."


def test_unauthenticated_renders_when_auth_not_required() -> None:
    guard = AuthGuard({Role.USER}, require_auth=False)
    outcome = guard.evaluate(SessionState.from_session(None), "/orders")
    assert outcome.should_render


def test_user_on_admin_layout_redirects_to_dashboard() -> None:
    outcome = admin_guard().evaluate(_state(Role.USER), "/admin")
    assert outcome.state is GuardState.REDIRECTING
    assert outcome.redirect_to == "/dashboard"


def test_super_admin_outside_allowed_roles_redirects_to_admin() -> None:
    guard = AuthGuard({Role.USER})
    assert guard.evaluate(_state(Role.SUPER_ADMIN), "/dashboard").redirect_to == "/admin"


def test_employee_is_sent_to_login() -> None:
    assert frontend_guard().evaluate(_state(Role.EMPLOYEE), "/dashboard").redirect_to == "/login"


def test_allowed_role_renders() -> None:
    assert frontend_guard().evaluate(_state(Role.USER), "/companies").should_render
    assert frontend_guard().evaluate(_state(Role.SUPER_ADMIN), "/companies").should_render
    assert admin_guard().evaluate(_state(Role.SUPER_ADMIN), "/admin").should_render


def test_on_session_change_reevaluates() -> None:
    """A session that expires mid-visit flips the outcome to a login redirect."""
    guard = frontend_guard()
    first = guard.on_session_change(_state(Role.USER), "/dashboard")
    assert first.should_render
    second = guard.on_session_change(SessionState.from_session(None), "/dashboard")
    assert second.redirect_to == "/login"
    assert guard.last_outcome == second
