"""Single-company API: detail, suppliers and items under /api/company/{company_id}.

Each handler runs the ownership check itself before touching the resource.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from poms.api.dependencies import (
    CurrentSession,
    get_item_repo,
    get_item_repo_for_write,
    get_ownership_checker,
    get_ownership_checker_for_write,
    get_party_repo,
    get_party_repo_for_write,
)
from poms.application.services.ownership import ResourceOwnershipChecker
from poms.core.limiter import limit_writes
from poms.domain.exceptions import ValidationException
from poms.infrastructure.persistence.models.item import Item
from poms.infrastructure.persistence.models.party import Party
from poms.infrastructure.persistence.repositories.item_repo import ItemRepository
from poms.infrastructure.persistence.repositories.party_repo import PartyRepository
from poms.schemas.base import DataResponse
from poms.schemas.company import CompanyDetailResponse
from poms.schemas.item import ItemRequest, ItemResponse
from poms.schemas.party import PartyRequest, PartyResponse

router = APIRouter()

ReadChecker = Annotated[ResourceOwnershipChecker, Depends(get_ownership_checker)]
WriteChecker = Annotated[ResourceOwnershipChecker, Depends(get_ownership_checker_for_write)]


@router.get("/{company_id}", response_model=DataResponse[CompanyDetailResponse])
async def get_company(company_id: str, session: CurrentSession, checker: ReadChecker):
    """Return the company with its suppliers."""
    company = await checker.require_company(company_id, session.user_id, with_parties=True)
    return DataResponse(data=CompanyDetailResponse.model_validate(company))


# ---------- Suppliers ----------


def _apply_party(party: Party, body: PartyRequest) -> None:
    party.name = body.name
    party.gstin = body.gstin
    party.phone = body.phone
    party.email = body.email
    party.address = body.address
    party.state_code = body.state_code
    party.is_registered_gst = body.is_registered_gst


@router.get("/{company_id}/suppliers", response_model=DataResponse[list[PartyResponse]])
async def list_suppliers(
    company_id: str,
    session: CurrentSession,
    checker: ReadChecker,
    party_repo: Annotated[PartyRepository, Depends(get_party_repo)],
):
    await checker.require_company(company_id, session.user_id)
    parties = await party_repo.list_for_company(company_id)
    return DataResponse(data=[PartyResponse.model_validate(p) for p in parties])


@router.post(
    "/{company_id}/suppliers",
    response_model=DataResponse[PartyResponse],
    status_code=201,
)
@limit_writes
async def create_supplier(
    request: Request,
    company_id: str,
    body: PartyRequest,
    session: CurrentSession,
    checker: WriteChecker,
    party_repo: Annotated[PartyRepository, Depends(get_party_repo_for_write)],
):
    await checker.require_company(company_id, session.user_id)
    party = Party(company_id=company_id)
    _apply_party(party, body)
    created = await party_repo.create(party)
    return DataResponse(data=PartyResponse.model_validate(created))


@router.get(
    "/{company_id}/suppliers/{supplier_id}",
    response_model=DataResponse[PartyResponse],
)
async def get_supplier(
    company_id: str, supplier_id: str, session: CurrentSession, checker: ReadChecker
):
    party = await checker.require_supplier(company_id, supplier_id, session.user_id)
    return DataResponse(data=PartyResponse.model_validate(party))


@router.put(
    "/{company_id}/suppliers/{supplier_id}",
    response_model=DataResponse[PartyResponse],
)
@limit_writes
async def update_supplier(
    request: Request,
    company_id: str,
    supplier_id: str,
    body: PartyRequest,
    session: CurrentSession,
    checker: WriteChecker,
    party_repo: Annotated[PartyRepository, Depends(get_party_repo_for_write)],
):
    party = await checker.require_supplier(company_id, supplier_id, session.user_id)
    _apply_party(party, body)
    updated = await party_repo.update(party)
    return DataResponse(data=PartyResponse.model_validate(updated))


# ---------- Items ----------


async def _require_party_in_company(
    party_repo: PartyRepository, party_id: str, company_id: str
) -> None:
    if await party_repo.get_in_company(party_id, company_id) is None:
        raise ValidationException("Supplier not found for this company", field="partyId")


def _apply_item(item: Item, body: ItemRequest) -> None:
    item.party_id = body.party_id
    item.name = body.name
    item.description = body.description
    item.sku = body.sku
    item.unit = body.unit
    item.hsn_code = body.hsn_code
    item.base_price = body.base_price
    item.gst_rate = body.gst_rate


@router.get("/{company_id}/items", response_model=DataResponse[list[ItemResponse]])
async def list_items(
    company_id: str,
    session: CurrentSession,
    checker: ReadChecker,
    item_repo: Annotated[ItemRepository, Depends(get_item_repo)],
):
    await checker.require_company(company_id, session.user_id)
    items = await item_repo.list_for_company(company_id)
    return DataResponse(data=[ItemResponse.model_validate(i) for i in items])


@router.post(
    "/{company_id}/items",
    response_model=DataResponse[ItemResponse],
    status_code=201,
)
@limit_writes
async def create_item(
    request: Request,
    company_id: str,
    body: ItemRequest,
    session: CurrentSession,
    checker: WriteChecker,
    party_repo: Annotated[PartyRepository, Depends(get_party_repo_for_write)],
    item_repo: Annotated[ItemRepository, Depends(get_item_repo_for_write)],
):
    """Create an item; partyId must be a supplier of this company (else 400)."""
    await checker.require_company(company_id, session.user_id)
    await _require_party_in_company(party_repo, body.party_id, company_id)
    item = Item(company_id=company_id)
    _apply_item(item, body)
    created = await item_repo.create(item)
    return DataResponse(data=ItemResponse.model_validate(created))


@router.get(
    "/{company_id}/items/{item_id}",
    response_model=DataResponse[ItemResponse],
)
async def get_item(company_id: str, item_id: str, session: CurrentSession, checker: ReadChecker):
    item = await checker.require_item(company_id, item_id, session.user_id)
    return DataResponse(data=ItemResponse.model_validate(item))


@router.patch(
    "/{company_id}/items/{item_id}",
    response_model=DataResponse[ItemResponse],
)
@limit_writes
async def update_item(
    request: Request,
    company_id: str,
    item_id: str,
    body: ItemRequest,
    session: CurrentSession,
    checker: WriteChecker,
    party_repo: Annotated[PartyRepository, Depends(get_party_repo_for_write)],
    item_repo: Annotated[ItemRepository, Depends(get_item_repo_for_write)],
):
    """Update an item; the same supplier rule as create applies."""
    item = await checker.require_item(company_id, item_id, session.user_id)
    await _require_party_in_company(party_repo, body.party_id, company_id)
    _apply_item(item, body)
    updated = await item_repo.update(item)
    return DataResponse(data=ItemResponse.model_validate(updated))
