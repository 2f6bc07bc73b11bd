"""Server-rendered pages.

The edge middleware has already applied the route policy by the time these
handlers run. Each page still evaluates its layout's AuthGuard and renders
the spinner page instead of content when the guard does not let it through.
Company pages resolve the company through the ownership checker and render
a 404 page when the caller does not own it.
"""

from __future__ import annotations

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from poms.api.dependencies import (
    get_company_repo,
    get_credential_authenticator,
    get_current_session_optional,
    get_identity_repo,
    get_item_repo,
    get_ownership_checker,
    get_party_repo,
)
from poms.api.session_cookie import clear_session, issue_session
from poms.application.services.auth_guard import (
    AuthGuard,
    SessionState,
    admin_guard,
    frontend_guard,
)
from poms.application.services.credential_authenticator import CredentialAuthenticator
from poms.application.services.ownership import ResourceOwnershipChecker
from poms.core.limiter import limit_auth
from poms.domain.enums import GstType, Role
from poms.domain.exceptions import (
    CredentialsRejectedException,
    DuplicateGstinException,
    ResourceNotFoundException,
)
from poms.domain.route_policy import DEFAULT_LANDING_PATH, LOGIN_PATH, landing_page
from poms.domain.session import SessionIdentity
from poms.infrastructure.persistence.database import get_db
from poms.infrastructure.persistence.models.company import Company
from poms.infrastructure.persistence.repositories import (
    CompanyRepository,
    IdentityRepository,
    ItemRepository,
    PartyRepository,
)
from poms.pages.layout import (
    esc,
    render_error,
    render_guard_page,
    render_login_page,
    render_not_found_page,
    render_page,
    render_table,
)
from poms.schemas.company import CompanyPayload

logger = logging.getLogger(__name__)

router = APIRouter(include_in_schema=False)

OptionalSession = Annotated[SessionIdentity | None, Depends(get_current_session_optional)]
ReadChecker = Annotated[ResourceOwnershipChecker, Depends(get_ownership_checker)]

_COMPANY_FORM_FIELDS = (
    ("name", "Company name", "text"),
    ("gstin", "GSTIN", "text"),
    ("pan", "PAN", "text"),
    ("address", "Address", "text"),
    ("stateCode", "State code", "text"),
    ("email", "Email", "email"),
    ("phone", "Phone", "tel"),
    ("logoUrl", "Logo URL", "url"),
)


def _guard(guard: AuthGuard, request: Request, session: SessionIdentity | None) -> HTMLResponse | None:
    """Return the spinner response when the guard blocks rendering, else None."""
    outcome = guard.on_session_change(SessionState.from_session(session), request.url.path)
    if outcome.should_render:
        return None
    return HTMLResponse(render_guard_page(outcome))


def _not_found(session: SessionIdentity | None, what: str) -> HTMLResponse:
    return HTMLResponse(render_not_found_page(session, what), status_code=404)


# ---------- Entry, login, logout ----------


@router.get("/", response_class=HTMLResponse)
async def root(session: OptionalSession):
    """Send a signed-in user to their role's home page."""
    if session is None:
        return RedirectResponse(LOGIN_PATH, status_code=303)
    target = landing_page(session.role)
    if target == DEFAULT_LANDING_PATH:
        return HTMLResponse(
            render_page("Welcome", '<p class="muted">No pages are available for your role.</p>', session)
        )
    return RedirectResponse(target, status_code=303)


@router.get("/login", response_class=HTMLResponse)
async def login_form(session: OptionalSession):
    if session is not None:
        return RedirectResponse(landing_page(session.role), status_code=303)
    return HTMLResponse(render_login_page())


@router.post("/login", response_class=HTMLResponse)
@limit_auth
async def login_submit(
    request: Request,
    authenticator: Annotated[CredentialAuthenticator, Depends(get_credential_authenticator)],
    email: Annotated[str, Form()] = "",
    password: Annotated[str, Form()] = "",
):
    """Form login: on success set the cookie and 303 to the landing page."""
    if not email or not password:
        return HTMLResponse(
            render_login_page("Email and password are required", email), status_code=400
        )
    try:
        identity = await authenticator.authenticate(email, password)
    except CredentialsRejectedException as exc:
        return HTMLResponse(render_login_page(exc.message, email), status_code=401)
    response = RedirectResponse(landing_page(identity.role), status_code=303)
    issue_session(response, identity)
    return response


@router.get("/logout")
async def logout():
    response = RedirectResponse(LOGIN_PATH, status_code=303)
    clear_session(response)
    return response


# ---------- Admin pages ----------


@router.get("/admin", response_class=HTMLResponse)
async def admin_dashboard(
    request: Request,
    session: OptionalSession,
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repo)],
):
    if (blocked := _guard(admin_guard(), request, session)) is not None:
        return blocked
    total = await identity_repo.count()
    content = f"""
<p>Signed in as {esc(session.name or session.email)}.</p>
<p>Registered users: <strong>{total}</strong></p>
<p><a href="/user-management">Manage users</a></p>"""
    return HTMLResponse(render_page("Admin dashboard", content, session, admin=True))


@router.get("/user-management", response_class=HTMLResponse)
async def user_management(
    request: Request,
    session: OptionalSession,
    identity_repo: Annotated[IdentityRepository, Depends(get_identity_repo)],
):
    if (blocked := _guard(admin_guard(), request, session)) is not None:
        return blocked
    identities = await identity_repo.list_newest_first(skip=0, limit=50)
    rows = [
        [esc(i.name), esc(i.email), esc(i.role), "Active" if i.is_active else "Inactive"]
        for i in identities
    ]
    content = render_table(["Name", "Email", "Role", "Status"], rows, "No users yet.")
    return HTMLResponse(render_page("User management", content, session, admin=True))


# ---------- Frontend pages ----------


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    session: OptionalSession,
    company_repo: Annotated[CompanyRepository, Depends(get_company_repo)],
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    companies = await company_repo.list_for_owner(session.user_id)
    content = f"""
<p>Welcome back, {esc(session.name or session.email)}.</p>
<p>You manage <strong>{len(companies)}</strong> compan{"y" if len(companies) == 1 else "ies"}.</p>
<p><a href="/companies">View companies</a></p>"""
    return HTMLResponse(render_page("Dashboard", content, session))


@router.get("/companies", response_class=HTMLResponse)
async def companies_page(
    request: Request,
    session: OptionalSession,
    company_repo: Annotated[CompanyRepository, Depends(get_company_repo)],
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    companies = await company_repo.list_for_owner(session.user_id)
    rows = [
        [
            f'<a href="/company/{esc(c.id)}">{esc(c.name)}</a>',
            esc(c.gstin),
            esc(c.gst_type),
            f'<a href="/companies/edit-company/{esc(c.id)}">Edit</a>',
        ]
        for c in companies
    ]
    content = (
        '<p><a href="/companies/create-company">Create company</a></p>'
        + render_table(["Name", "GSTIN", "GST type", ""], rows, "No companies yet.")
    )
    return HTMLResponse(render_page("Companies", content, session))


def _company_form(action: str, values: dict[str, Any], error: str | None, submit: str) -> str:
    fields = "".join(
        f'<label for="{key}">{esc(label)}</label>'
        f'<input id="{key}" name="{key}" type="{kind}" value="{esc(values.get(key))}">'
        for key, label, kind in _COMPANY_FORM_FIELDS
    )
    selected = values.get("gstType") or GstType.INTRA_STATE.value
    options = "".join(
        f'<option value="{g}"{" selected" if g == selected else ""}>{g}</option>'
        for g in GstType.values()
    )
    return f"""
<form class="card" method="post" action="{esc(action)}">
    {render_error(error)}
    {fields}
    <label for="gstType">GST type</label>
    <select id="gstType" name="gstType">{options}</select>
    <button type="submit">{esc(submit)}</button>
</form>"""


def _company_values(company: Company) -> dict[str, Any]:
    return {
        "name": company.name,
        "gstin": company.gstin,
        "pan": company.pan,
        "address": company.address,
        "stateCode": company.state_code,
        "email": company.email,
        "phone": company.phone,
        "logoUrl": company.logo_url,
        "gstType": company.gst_type,
    }


async def _read_company_form(request: Request) -> tuple[dict[str, Any], CompanyPayload | None, str | None]:
    """Parse the submitted form; returns (raw values, payload or None, first error)."""
    form = await request.form()
    values = {key: form.get(key, "") for key, _, _ in _COMPANY_FORM_FIELDS}
    values["gstType"] = form.get("gstType") or GstType.INTRA_STATE.value
    try:
        return values, CompanyPayload.model_validate(values), None
    except ValidationError as exc:
        return values, None, exc.errors()[0]["msg"]


def _apply_company(company: Company, payload: CompanyPayload) -> None:
    company.name = payload.name
    company.gstin = payload.gstin
    company.pan = payload.pan
    company.address = payload.address
    company.state_code = payload.state_code
    company.email = payload.email
    company.phone = payload.phone
    company.logo_url = payload.logo_url
    company.gst_type = payload.gst_type.value


@router.get("/companies/create-company", response_class=HTMLResponse)
async def create_company_form(request: Request, session: OptionalSession):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    form = _company_form("/companies/create-company", {}, None, "Create company")
    return HTMLResponse(render_page("Create company", form, session))


@router.post("/companies/create-company", response_class=HTMLResponse)
async def create_company_submit(
    request: Request,
    session: OptionalSession,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    values, payload, error = await _read_company_form(request)
    if payload is not None:
        company = Company(user_id=session.user_id)
        _apply_company(company, payload)
        try:
            await CompanyRepository(db).create(company)
            await db.commit()
        except DuplicateGstinException as exc:
            await db.rollback()
            error = exc.message
        else:
            return RedirectResponse(f"/company/{company.id}", status_code=303)
    form = _company_form("/companies/create-company", values, error, "Create company")
    return HTMLResponse(render_page("Create company", form, session), status_code=422)


@router.get("/companies/edit-company/{company_id}", response_class=HTMLResponse)
async def edit_company_form(
    request: Request, company_id: str, session: OptionalSession, checker: ReadChecker
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    try:
        company = await checker.require_company(company_id, session.user_id)
    except ResourceNotFoundException:
        return _not_found(session, "Company")
    action = f"/companies/edit-company/{company.id}"
    form = _company_form(action, _company_values(company), None, "Save changes")
    return HTMLResponse(render_page(f"Edit {company.name}", form, session))


@router.post("/companies/edit-company/{company_id}", response_class=HTMLResponse)
async def edit_company_submit(
    request: Request,
    company_id: str,
    session: OptionalSession,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    company_repo = CompanyRepository(db)
    checker = ResourceOwnershipChecker(company_repo, PartyRepository(db), ItemRepository(db))
    try:
        company = await checker.require_company(company_id, session.user_id)
    except ResourceNotFoundException:
        return _not_found(session, "Company")
    values, payload, error = await _read_company_form(request)
    if payload is not None:
        _apply_company(company, payload)
        try:
            await company_repo.update(company)
            await db.commit()
        except DuplicateGstinException as exc:
            await db.rollback()
            error = exc.message
        else:
            return RedirectResponse(f"/company/{company_id}", status_code=303)
    action = f"/companies/edit-company/{company_id}"
    form = _company_form(action, values, error, "Save changes")
    return HTMLResponse(render_page("Edit company", form, session), status_code=422)


@router.get("/company/{company_id}", response_class=HTMLResponse)
async def company_page(
    request: Request, company_id: str, session: OptionalSession, checker: ReadChecker
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    try:
        company = await checker.require_company(company_id, session.user_id, with_parties=True)
    except ResourceNotFoundException:
        return _not_found(session, "Company")
    base = f"/company/{esc(company.id)}"
    content = f"""
<p>GSTIN: {esc(company.gstin) or "-"} &middot; PAN: {esc(company.pan) or "-"} &middot; {esc(company.gst_type)}</p>
<p>{esc(company.address)}</p>
<p>Suppliers: <strong>{len(company.parties)}</strong></p>
<p><a href="{base}/suppliers">Suppliers</a> &middot; <a href="{base}/items">Items</a>
 &middot; <a href="/companies/edit-company/{esc(company.id)}">Edit</a></p>"""
    return HTMLResponse(render_page(company.name, content, session))


@router.get("/company/{company_id}/suppliers", response_class=HTMLResponse)
async def suppliers_page(
    request: Request,
    company_id: str,
    session: OptionalSession,
    checker: ReadChecker,
    party_repo: Annotated[PartyRepository, Depends(get_party_repo)],
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    try:
        company = await checker.require_company(company_id, session.user_id)
    except ResourceNotFoundException:
        return _not_found(session, "Company")
    parties = await party_repo.list_for_company(company.id)
    rows = [
        [esc(p.name), esc(p.gstin), esc(p.phone), "Yes" if p.is_registered_gst else "No"]
        for p in parties
    ]
    content = render_table(["Name", "GSTIN", "Phone", "GST registered"], rows, "No suppliers yet.")
    return HTMLResponse(render_page(f"{company.name}: suppliers", content, session))


@router.get("/company/{company_id}/items", response_class=HTMLResponse)
async def items_page(
    request: Request,
    company_id: str,
    session: OptionalSession,
    checker: ReadChecker,
    item_repo: Annotated[ItemRepository, Depends(get_item_repo)],
):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    try:
        company = await checker.require_company(company_id, session.user_id)
    except ResourceNotFoundException:
        return _not_found(session, "Company")
    items = await item_repo.list_for_company(company.id)
    rows = [
        [esc(i.name), esc(i.sku), esc(i.hsn_code), esc(i.base_price), f"{esc(i.gst_rate)}%"]
        for i in items
    ]
    content = render_table(["Name", "SKU", "HSN", "Base price", "GST"], rows, "No items yet.")
    return HTMLResponse(render_page(f"{company.name}: items", content, session))


@router.get("/orders", response_class=HTMLResponse)
async def orders_page(request: Request, session: OptionalSession):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    content = '<p class="muted">Purchase orders are not available yet.</p>'
    return HTMLResponse(render_page("Orders", content, session))


@router.get("/profile", response_class=HTMLResponse)
async def profile_page(request: Request, session: OptionalSession):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    content = f"""
<table>
    <tr><th>Name</th><td>{esc(session.name)}</td></tr>
    <tr><th>Email</th><td>{esc(session.email)}</td></tr>
    <tr><th>Role</th><td>{esc(session.role.value)}</td></tr>
</table>"""
    return HTMLResponse(render_page("Profile", content, session))


@router.get("/settings", response_class=HTMLResponse)
async def settings_page(request: Request, session: OptionalSession):
    if (blocked := _guard(frontend_guard(), request, session)) is not None:
        return blocked
    admin_link = '<p><a href="/admin">Open admin console</a></p>' if session.role is Role.SUPER_ADMIN else ""
    content = f'<p class="muted">No configurable settings yet.</p>{admin_link}'
    return HTMLResponse(render_page("Settings", content, session))
