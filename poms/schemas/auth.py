"""Auth API schemas."""

from datetime import datetime

from pydantic import Field

from poms.domain.enums import Role
from poms.schemas.base import CamelModel


class LoginRequest(CamelModel):
    """Request body for POST /api/auth/login."""

    email: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class ValidateCredentialsRequest(CamelModel):
    """Request body for POST /api/auth/validate.

    Missing or null fields yield valid=false instead of 422.
    """

    email: str | None = None
    password: str | None = None


class SessionUser(CamelModel):
    """The session as exposed to clients."""

    id: str
    name: str | None = None
    email: str | None = None
    role: Role


class TokenResponse(CamelModel):
    """JWT token response, plus the landing page for the user's role."""

    access_token: str
    token_type: str = "bearer"
    user: SessionUser
    redirect_to: str


class SessionResponse(CamelModel):
    """Current session; expires is when its token stops being accepted."""

    user: SessionUser | None = None
    expires: datetime | None = None


class ValidateResponse(CamelModel):
    valid: bool
    user: SessionUser | None = None
    error: str | None = None
