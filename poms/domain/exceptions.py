"""Domain exceptions for POMS.

Defines domain-level exceptions that represent business rule and access
violations. These exceptions are independent of infrastructure concerns.
Presentation layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class PomsException(Exception):
    """Base exception for all POMS application errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Serialize for an error response body."""
        body: dict[str, Any] = {"error": self.error_code, "message": self.message}
        if self.details:
            body["details"] = self.details
        return body


class ValidationException(PomsException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(PomsException):
    """Raised when a request has no valid session (missing, expired or tampered token)."""

    def __init__(self, message: str = "Unauthorized") -> None:
        super().__init__(message, "AUTHENTICATION_ERROR")


class CredentialsRejectedException(PomsException):
    """Raised when an email/password pair does not authenticate.

    Subclasses record why, for logs and tests. The public message and code
    are identical for all of them so callers cannot probe which emails exist.
    """

    reason = "rejected"

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS")


class AccountNotFoundException(CredentialsRejectedException):
    """No identity is registered under the given email."""

    reason = "account_not_found"


class InvalidCredentialsException(CredentialsRejectedException):
    """The identity exists but the password does not match."""

    reason = "password_mismatch"


class AccountInactiveException(CredentialsRejectedException):
    """The identity exists and the password matches, but the account is deactivated."""

    reason = "account_inactive"


class AuthorizationException(PomsException):
    """Raised when the session's role is not allowed to perform the operation."""

    def __init__(
        self,
        role: str | None = None,
        required: list[str] | None = None,
        message: str = "Permission denied",
    ) -> None:
        details: dict[str, Any] = {}
        if required:
            details["required_roles"] = required
        if role:
            details["role"] = role
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(PomsException):
    """Raised when a resource does not exist or is not owned by the caller.

    Both cases produce the same exception so that ids owned by other
    identities are indistinguishable from ids that do not exist.
    """

    def __init__(self, resource_type: str, resource_id: str) -> None:
        super().__init__(
            f"{resource_type.capitalize()} not found",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class ConflictException(PomsException):
    """Raised when a write violates a unique constraint."""

    def __init__(self, message: str, field: str) -> None:
        super().__init__(message, "CONFLICT", {"field": field})


class DuplicateEmailException(ConflictException):
    """Raised when creating or updating an identity with an email already in use."""

    def __init__(self) -> None:
        super().__init__("Email already exists", "email")


class DuplicateGstinException(ConflictException):
    """Raised when creating or updating a company with a GSTIN already in use."""

    def __init__(self) -> None:
        super().__init__("GSTIN already exists", "gstin")


class SqlNotConfiguredException(PomsException):
    """Raised when the persistent store has not been configured."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
