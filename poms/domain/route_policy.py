"""Route authorization policy: which roles may reach which page paths.

The policy table is static and immutable for the process lifetime. Prefixes
use plain ``str.startswith`` matching, so ``/admin`` also covers
``/admin/reports`` (and ``/administrator``); ``/company/`` requires the
trailing slash while ``/companies`` does not.

Evaluation order is fixed: public exemption first, then session presence,
then role. Checking role before the public exemption would lock everyone
out of ``/login``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import assert_never

from poms.domain.enums import Role

LOGIN_PATH = "/login"
USER_LANDING_PATH = "/dashboard"
ADMIN_LANDING_PATH = "/admin"
DEFAULT_LANDING_PATH = "/"


class RouteGroup(str, Enum):
    """Classification of a request path for authorization."""

    PUBLIC = "public"
    ADMIN = "admin"
    USER = "user"
    UNCLASSIFIED = "unclassified"


class AccessState(str, Enum):
    """Outcome state of a policy evaluation."""

    UNAUTHENTICATED = "unauthenticated"
    ROLE_MISMATCH = "role_mismatch"
    AUTHORIZED = "authorized"


@dataclass(frozen=True)
class AccessDecision:
    """Result of authorize(): allowed, or a redirect target with the reason."""

    state: AccessState
    group: RouteGroup
    redirect_to: str | None = None

    @property
    def allowed(self) -> bool:
        return self.state is AccessState.AUTHORIZED


# Order only matters for readability: no prefix in one group is a prefix of another group's entry.
ROUTE_POLICY_TABLE: tuple[tuple[str, RouteGroup], ...] = (
    (LOGIN_PATH, RouteGroup.PUBLIC),
    ("/api/", RouteGroup.PUBLIC),
    ("/admin", RouteGroup.ADMIN),
    ("/user-management", RouteGroup.ADMIN),
    ("/dashboard", RouteGroup.USER),
    ("/companies", RouteGroup.USER),
    ("/company/", RouteGroup.USER),
    ("/orders", RouteGroup.USER),
    ("/profile", RouteGroup.USER),
    ("/settings", RouteGroup.USER),
)

_ADMIN_ROLES = frozenset({Role.SUPER_ADMIN})
_USER_ROLES = frozenset({Role.USER, Role.SUPER_ADMIN})


def classify_path(path: str) -> RouteGroup:
    """Return the route group for a request path (UNCLASSIFIED when no prefix matches)."""
    for prefix, group in ROUTE_POLICY_TABLE:
        if path.startswith(prefix):
            return group
    return RouteGroup.UNCLASSIFIED


def allowed_roles(group: RouteGroup) -> frozenset[Role] | None:
    """Return the roles permitted on a route group; None means any authenticated role.

    PUBLIC also returns None: it is exempt before roles are considered.
    """
    match group:
        case RouteGroup.ADMIN:
            return _ADMIN_ROLES
        case RouteGroup.USER:
            return _USER_ROLES
        case RouteGroup.PUBLIC | RouteGroup.UNCLASSIFIED:
            return None
        case _:
            assert_never(group)


def landing_page(role: Role) -> str:
    """Return the home page for a role (used after login and on role mismatch)."""
    match role:
        case Role.SUPER_ADMIN:
            return ADMIN_LANDING_PATH
        case Role.USER:
            return USER_LANDING_PATH
        case Role.EMPLOYEE:
            return DEFAULT_LANDING_PATH
        case _:
            assert_never(role)


def _mismatch_redirect(role: Role, group: RouteGroup) -> str:
    """Redirect target when role is not allowed on group.

    A USER who wanders onto an admin page goes back to their dashboard;
    every other mismatch is sent to login.
    """
    match role:
        case Role.USER if group is RouteGroup.ADMIN:
            return USER_LANDING_PATH
        case Role.USER | Role.SUPER_ADMIN | Role.EMPLOYEE:
            return LOGIN_PATH
        case _:
            assert_never(role)


def authorize(role: Role | None, path: str) -> AccessDecision:
    """Evaluate the route policy for a (role, path) pair.

    Args:
        role: Role from the resolved session, or None when there is no session.
        path: Request path (no query string).

    Returns:
        AccessDecision; when not allowed, redirect_to holds the target path.
    """
    group = classify_path(path)
    if group is RouteGroup.PUBLIC:
        return AccessDecision(AccessState.AUTHORIZED, group)
    if role is None:
        return AccessDecision(AccessState.UNAUTHENTICATED, group, LOGIN_PATH)
    permitted = allowed_roles(group)
    if permitted is not None and role not in permitted:
        return AccessDecision(
            AccessState.ROLE_MISMATCH, group, _mismatch_redirect(role, group)
        )
    return AccessDecision(AccessState.AUTHORIZED, group)
