"""Server-rendered pages: form login, guarded layouts and owned company pages."""

from httpx import AsyncClient

from poms.domain.enums import Role

PASSWORD = "Password123"


async def test_form_login_redirects_to_landing_page(client: AsyncClient, create_identity) -> None:
    await create_identity("ravi@example.com", Role.USER)
    r = await client.post("/login", data={"email": "ravi@example.com", "password": PASSWORD})
    assert r.status_code == 303
    assert r.headers["location"] == "/dashboard"
    assert "poms_session=" in r.headers["set-cookie"]

    dashboard = await client.get("/dashboard")
    assert dashboard.status_code == 200
    assert "Dashboard" in dashboard.text


async def test_form_login_failure_rerenders_form(client: AsyncClient, create_identity) -> None:
    await create_identity("ravi@example.com", Role.USER)
    r = await client.post("/login", data={"email": "ravi@example.com", "password": "wrong-pass"})
    assert r.status_code == 401
    assert "Invalid email or password" in r.text
    assert 'value="ravi@example.com"' in r.text

    r = await client.post("/login", data={"email": "", "password": ""})
    assert r.status_code == 400
    assert "Email and password are required" in r.text


async def test_signed_in_user_skips_login_page(client: AsyncClient, admin_headers: dict) -> None:
    r = await client.get("/login", headers=admin_headers)
    assert r.status_code == 303
    assert r.headers["location"] == "/admin"


async def test_logout_page_clears_cookie(client: AsyncClient) -> None:
    r = await client.get("/logout")
    assert r.status_code == 303
    assert r.headers["location"] == "/login"
    assert "max-age=0" in r.headers["set-cookie"].lower()


async def test_company_pages_for_owner(client: AsyncClient, user_headers: dict) -> None:
    r = await client.post("/api/companies", json={"name": "Acme & Sons"}, headers=user_headers)
    company_id = r.json()["data"]["id"]

    page = await client.get(f"/company/{company_id}", headers=user_headers)
    assert page.status_code == 200
    assert "Acme &amp; Sons" in page.text

    for suffix in ("suppliers", "items"):
        sub = await client.get(f"/company/{company_id}/{suffix}", headers=user_headers)
        assert sub.status_code == 200

    listing = await client.get("/companies", headers=user_headers)
    assert f"/company/{company_id}" in listing.text


async def test_company_page_for_non_owner_is_404(
    client: AsyncClient, user_headers: dict, create_identity, headers_for
) -> None:
    r = await client.post("/api/companies", json={"name": "Acme"}, headers=user_headers)
    company_id = r.json()["data"]["id"]
    other = headers_for(await create_identity("other@example.com", Role.USER))

    for path in (
        f"/company/{company_id}",
        f"/company/{company_id}/suppliers",
        f"/company/{company_id}/items",
        f"/companies/edit-company/{company_id}",
    ):
        page = await client.get(path, headers=other)
        assert page.status_code == 404, path
        assert "Acme" not in page.text


async def test_create_company_form(client: AsyncClient, user_headers: dict) -> None:
    form = await client.get("/companies/create-company", headers=user_headers)
    assert form.status_code == 200
    assert 'name="gstin"' in form.text

    r = await client.post(
        "/companies/create-company",
        data={"name": "Acme", "gstin": "27ABCDE1234F1Z5", "gstType": "INTER_STATE"},
        headers=user_headers,
    )
    assert r.status_code == 303
    assert r.headers["location"].startswith("/company/")

    dup = await client.post(
        "/companies/create-company",
        data={"name": "Copy", "gstin": "27ABCDE1234F1Z5"},
        headers=user_headers,
    )
    assert dup.status_code == 422
    assert "GSTIN already exists" in dup.text

    bad = await client.post("/companies/create-company", data={"name": ""}, headers=user_headers)
    assert bad.status_code == 422
    assert "Company name is required" in bad.text


async def test_edit_company_form(client: AsyncClient, user_headers: dict) -> None:
    r = await client.post(
        "/api/companies", json={"name": "Acme", "phone": "0221234567"}, headers=user_headers
    )
    company_id = r.json()["data"]["id"]
    r = await client.post(
        f"/companies/edit-company/{company_id}",
        data={"name": "Acme Ltd", "phone": ""},
        headers=user_headers,
    )
    assert r.status_code == 303

    detail = await client.get(f"/api/company/{company_id}", headers=user_headers)
    assert detail.json()["data"]["name"] == "Acme Ltd"
    assert detail.json()["data"]["phone"] is None


async def test_unknown_page_renders_html_not_found(client: AsyncClient, user_headers: dict) -> None:
    r = await client.get("/no-such-page", headers=user_headers)
    assert r.status_code == 404
    assert r.headers["content-type"].startswith("text/html")
    assert "Page not found" in r.text

    api = await client.get("/api/no-such-endpoint", headers=user_headers)
    assert api.status_code == 404
    assert api.json()["error"] == "HTTP_ERROR"
