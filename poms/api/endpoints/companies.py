"""Companies API: list, create and update the caller's companies.

Every query filters by the session's identity; a company owned by someone
else behaves exactly like one that does not exist.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request

from poms.api.dependencies import (
    CurrentSession,
    get_company_repo,
    get_company_repo_for_write,
    get_ownership_checker_for_write,
)
from poms.application.services.ownership import ResourceOwnershipChecker
from poms.core.limiter import limit_writes
from poms.domain.exceptions import ValidationException
from poms.infrastructure.persistence.models.company import Company
from poms.infrastructure.persistence.repositories.company_repo import CompanyRepository
from poms.schemas.base import DataResponse
from poms.schemas.company import (
    CompanyCreateRequest,
    CompanyResponse,
    CompanyUpdateRequest,
)

router = APIRouter()


@router.get("", response_model=DataResponse[list[CompanyResponse]])
async def list_companies(
    session: CurrentSession,
    company_repo: Annotated[CompanyRepository, Depends(get_company_repo)],
):
    """Return the caller's companies, newest first."""
    companies = await company_repo.list_for_owner(session.user_id)
    return DataResponse(data=[CompanyResponse.model_validate(c) for c in companies])


@router.post("", response_model=DataResponse[CompanyResponse], status_code=201)
@limit_writes
async def create_company(
    request: Request,
    body: CompanyCreateRequest,
    session: CurrentSession,
    company_repo: Annotated[CompanyRepository, Depends(get_company_repo_for_write)],
):
    """Create a company owned by the caller. Duplicate GSTIN is a 409."""
    company = Company(
        user_id=session.user_id,
        name=body.name,
        gstin=body.gstin,
        pan=body.pan,
        address=body.address,
        state_code=body.state_code,
        email=body.email,
        phone=body.phone,
        logo_url=body.logo_url,
        gst_type=body.gst_type.value,
    )
    created = await company_repo.create(company)
    return DataResponse(data=CompanyResponse.model_validate(created))


@router.put("", response_model=DataResponse[CompanyResponse])
@limit_writes
async def update_company(
    request: Request,
    body: CompanyUpdateRequest,
    session: CurrentSession,
    checker: Annotated[ResourceOwnershipChecker, Depends(get_ownership_checker_for_write)],
    company_repo: Annotated[CompanyRepository, Depends(get_company_repo_for_write)],
    company_id: Annotated[str | None, Query(alias="id")] = None,
):
    """Replace every editable field; blank optional fields are cleared."""
    if not company_id:
        raise ValidationException("Company ID required", field="id")
    company = await checker.require_company(company_id, session.user_id)
    company.name = body.name
    company.gstin = body.gstin
    company.pan = body.pan
    company.address = body.address
    company.state_code = body.state_code
    company.email = body.email
    company.phone = body.phone
    company.logo_url = body.logo_url
    company.gst_type = body.gst_type.value
    updated = await company_repo.update(company)
    return DataResponse(data=CompanyResponse.model_validate(updated))
