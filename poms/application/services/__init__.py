"""Application services: authentication, ownership, page guard, pagination."""

from poms.application.services.auth_guard import (
    AuthGuard,
    GuardOutcome,
    GuardState,
    SessionState,
    SessionStatus,
    admin_guard,
    frontend_guard,
)
from poms.application.services.credential_authenticator import CredentialAuthenticator
from poms.application.services.ownership import ResourceOwnershipChecker
from poms.application.services.pagination import (
    PaginationError,
    build_page_info,
    parse_pagination,
)

__all__ = [
    "AuthGuard",
    "CredentialAuthenticator",
    "GuardOutcome",
    "GuardState",
    "PaginationError",
    "ResourceOwnershipChecker",
    "SessionState",
    "SessionStatus",
    "admin_guard",
    "build_page_info",
    "frontend_guard",
    "parse_pagination",
]
