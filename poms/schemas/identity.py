"""Admin user-management API schemas."""

from datetime import datetime
from typing import Any

from pydantic import EmailStr, Field, field_validator
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError

from poms.core.config import MIN_PASSWORD_LENGTH
from poms.domain.enums import Role
from poms.schemas.base import CamelModel

ASSIGNABLE_ROLES = (Role.SUPER_ADMIN, Role.USER)


def _check_name(value: Any) -> str:
    if not isinstance(value, str) or not value.strip():
        raise PydanticCustomError("name_required", "Name is required")
    return value.strip()


def _check_password(value: Any) -> str:
    if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
        raise PydanticCustomError(
            "password_too_short",
            "Password must be at least {min_length} characters long",
            {"min_length": MIN_PASSWORD_LENGTH},
        )
    return value


def _check_role(value: Any) -> Role:
    if value not in {role.value for role in ASSIGNABLE_ROLES}:
        raise PydanticCustomError("invalid_role", "Role must be SUPER_ADMIN or USER")
    return Role(value)


def _check_is_active(value: Any) -> bool:
    if not isinstance(value, bool):
        raise PydanticCustomError("invalid_status", "isActive must be a boolean")
    return value


class UserCreateRequest(CamelModel):
    """Request body for POST /api/admin/users.

    Defaults are validated so a missing field reports the same message as an
    invalid one.
    """

    name: str = Field(default=None, validate_default=True)
    email: EmailStr = Field(default=None, validate_default=True)
    password: str = Field(default=None, validate_default=True)
    role: Role = Field(default=None, validate_default=True)
    is_active: bool = Field(default=None, validate_default=True)

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_present(cls, v: Any) -> Any:
        if not isinstance(v, str) or not v.strip():
            raise PydanticCustomError("email_required", "Valid email is required")
        try:
            validate_email(v.strip())
        except PydanticCustomError:
            raise PydanticCustomError("email_required", "Valid email is required") from None
        return v.strip()

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str:
        return _check_name(v)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str:
        return _check_password(v)

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v: Any) -> Role:
        return _check_role(v)

    @field_validator("is_active", mode="before")
    @classmethod
    def validate_is_active(cls, v: Any) -> bool:
        return _check_is_active(v)


class UserUpdateRequest(CamelModel):
    """Request body for PATCH /api/admin/users/{id} (partial)."""

    name: str | None = None
    role: Role | None = None
    is_active: bool | None = None
    password: str | None = None

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, v: Any) -> str | None:
        return None if v is None else _check_name(v)

    @field_validator("password", mode="before")
    @classmethod
    def validate_password(cls, v: Any) -> str | None:
        return None if v is None else _check_password(v)

    @field_validator("role", mode="before")
    @classmethod
    def validate_role(cls, v: Any) -> Role | None:
        return None if v is None else _check_role(v)

    @field_validator("is_active", mode="before")
    @classmethod
    def validate_is_active(cls, v: Any) -> bool | None:
        return None if v is None else _check_is_active(v)


class UserResponse(CamelModel):
    """User response (no password)."""

    id: str
    name: str
    email: str
    role: Role
    is_active: bool
    created_at: datetime | None = None


class PaginationResponse(CamelModel):
    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool


class UserListResponse(CamelModel):
    data: list[UserResponse]
    pagination: PaginationResponse
