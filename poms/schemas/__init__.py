"""API request/response schemas (camelCase on the wire)."""

from poms.schemas.auth import (
    LoginRequest,
    SessionResponse,
    SessionUser,
    TokenResponse,
    ValidateCredentialsRequest,
    ValidateResponse,
)
from poms.schemas.base import CamelModel, DataResponse
from poms.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailResponse,
    CompanyResponse,
    CompanyUpdateRequest,
)
from poms.schemas.health import HealthResponse
from poms.schemas.identity import (
    PaginationResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from poms.schemas.item import ItemRequest, ItemResponse
from poms.schemas.party import PartyRequest, PartyResponse

__all__ = [
    "CamelModel",
    "CompanyCreateRequest",
    "CompanyDetailResponse",
    "CompanyResponse",
    "CompanyUpdateRequest",
    "DataResponse",
    "HealthResponse",
    "ItemRequest",
    "ItemResponse",
    "LoginRequest",
    "PaginationResponse",
    "PartyRequest",
    "PartyResponse",
    "SessionResponse",
    "SessionUser",
    "TokenResponse",
    "UserCreateRequest",
    "UserListResponse",
    "UserResponse",
    "UserUpdateRequest",
    "ValidateCredentialsRequest",
    "ValidateResponse",
]
