"""Domain layer: enums, exceptions, session identity and the route policy."""

from poms.domain.enums import GstType, Role
from poms.domain.exceptions import (
    AccountInactiveException,
    AccountNotFoundException,
    AuthenticationException,
    AuthorizationException,
    ConflictException,
    CredentialsRejectedException,
    DuplicateEmailException,
    DuplicateGstinException,
    InvalidCredentialsException,
    PomsException,
    ResourceNotFoundException,
    SqlNotConfiguredException,
    ValidationException,
)
from poms.domain.session import SessionIdentity

__all__ = [
    "AccountInactiveException",
    "AccountNotFoundException",
    "AuthenticationException",
    "AuthorizationException",
    "ConflictException",
    "CredentialsRejectedException",
    "DuplicateEmailException",
    "DuplicateGstinException",
    "GstType",
    "InvalidCredentialsException",
    "PomsException",
    "ResourceNotFoundException",
    "Role",
    "SessionIdentity",
    "SqlNotConfiguredException",
    "ValidationException",
]
