"""Edge route policy: redirects happen before any page handler runs."""

import pytest
from httpx import AsyncClient

from poms.domain.enums import Role


@pytest.mark.parametrize("path", ["/dashboard", "/admin", "/companies", "/company/abc", "/orders", "/"])
async def test_no_session_redirects_to_login(client: AsyncClient, path: str) -> None:
    r = await client.get(path)
    assert r.status_code == 307
    assert r.headers["location"] == "/login"


async def test_login_page_is_public(client: AsyncClient) -> None:
    r = await client.get("/login")
    assert r.status_code == 200
    assert "Sign in" in r.text


@pytest.mark.parametrize("path", ["/admin", "/admin/reports", "/user-management"])
async def test_user_on_admin_page_goes_to_dashboard(
    client: AsyncClient, user_headers: dict, path: str
) -> None:
    r = await client.get(path, headers=user_headers)
    assert r.status_code == 307
    assert r.headers["location"] == "/dashboard"


async def test_super_admin_reaches_admin_pages(client: AsyncClient, admin_headers: dict) -> None:
    r = await client.get("/admin", headers=admin_headers)
    assert r.status_code == 200
    assert "Admin dashboard" in r.text

    r = await client.get("/user-management", headers=admin_headers)
    assert r.status_code == 200
    assert "admin@example.com" in r.text


async def test_super_admin_reaches_user_pages(client: AsyncClient, admin_headers: dict) -> None:
    r = await client.get("/dashboard", headers=admin_headers)
    assert r.status_code == 200


@pytest.mark.parametrize("path", ["/dashboard", "/admin", "/companies"])
async def test_employee_is_sent_to_login(
    client: AsyncClient, create_identity, headers_for, path: str
) -> None:
    employee = await create_identity("emp@example.com", Role.EMPLOYEE)
    r = await client.get(path, headers=headers_for(employee))
    assert r.status_code == 307
    assert r.headers["location"] == "/login"


async def test_employee_landing_page_does_not_loop(
    client: AsyncClient, create_identity, headers_for
) -> None:
    employee = await create_identity("emp@example.com", Role.EMPLOYEE)
    headers = headers_for(employee)
    login = await client.get("/login", headers=headers)
    assert login.status_code == 303
    assert login.headers["location"] == "/"
    home = await client.get("/", headers=headers)
    assert home.status_code == 200
    assert "No pages are available for your role." in home.text


async def test_root_sends_user_to_dashboard(client: AsyncClient, user_headers: dict) -> None:
    r = await client.get("/", headers=user_headers)
    assert r.status_code == 303
    assert r.headers["location"] == "/dashboard"


async def test_api_paths_are_not_redirected(client: AsyncClient) -> None:
    r = await client.get("/api/companies")
    assert r.status_code == 401
    assert r.json()["error"] == "AUTHENTICATION_ERROR"


async def test_expired_or_tampered_cookie_is_treated_as_signed_out(client: AsyncClient) -> None:
    client.cookies.set("poms_session", "garbage")
    r = await client.get("/dashboard")
    assert r.status_code == 307
    assert r.headers["location"] == "/login"
