"""Admin user management API. SUPER_ADMIN only, checked here as well as at the edge."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from poms.api.dependencies import (
    SuperAdminSession,
    get_identity_repo,
    get_identity_repo_for_write,
)
from poms.application.services.pagination import build_page_info, parse_pagination
from poms.core.limiter import limit_writes
from poms.domain.exceptions import ResourceNotFoundException
from poms.infrastructure.persistence.repositories.identity_repo import IdentityRepository
from poms.schemas.base import DataResponse
from poms.schemas.identity import (
    PaginationResponse,
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)

router = APIRouter()


@router.get("", response_model=UserListResponse)
async def list_users(
    _: SuperAdminSession,
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repo)],
    page: Annotated[str | None, Query()] = None,
    page_size: Annotated[str | None, Query(alias="pageSize")] = None,
):
    """List identities newest first. Invalid page or pageSize is a 400."""
    page_request = parse_pagination(page, page_size)
    total = await identity_repo.count()
    identities = await identity_repo.list_newest_first(
        skip=page_request.offset, limit=page_request.page_size
    )
    info = build_page_info(page_request, total)
    return UserListResponse(
        data=[UserResponse.model_validate(i) for i in identities],
        pagination=PaginationResponse.model_validate(info),
    )


@router.post("", response_model=DataResponse[UserResponse], status_code=201)
@limit_writes
async def create_user(
    request: Request,
    body: UserCreateRequest,
    _: SuperAdminSession,
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repo_for_write)],
):
    """Create an identity. Duplicate email is a 409."""
    identity = await identity_repo.create_identity(
        name=body.name,
        email=str(body.email),
        password=body.password,
        role=body.role,
        is_active=body.is_active,
    )
    return DataResponse(data=UserResponse.model_validate(identity))


@router.patch("/{user_id}", response_model=DataResponse[UserResponse])
@limit_writes
async def update_user(
    request: Request,
    user_id: str,
    body: UserUpdateRequest,
    _: SuperAdminSession,
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repo_for_write)],
):
    """Partially update name, role, active flag or password."""
    identity = await identity_repo.get_by_id(user_id)
    if identity is None:
        raise ResourceNotFoundException("user", user_id)
    if body.name is not None:
        identity.name = body.name
    if body.role is not None:
        identity.role = body.role.value
    if body.is_active is not None:
        identity.is_active = body.is_active
    if body.password is not None:
        await identity_repo.set_password(identity, body.password)
    updated = await identity_repo.update(identity)
    return DataResponse(data=UserResponse.model_validate(updated))
