"""API tests for /api/auth: login, session, validate and logout."""

import pytest
from httpx import AsyncClient

from poms.domain.enums import Role
from poms.infrastructure.security.session_token import decode_session_token

PASSWORD = "Password123"


async def test_login_sets_cookie_and_returns_landing_page(client: AsyncClient, create_identity) -> None:
    await create_identity("ravi@example.com", Role.USER, name="Ravi")
    r = await client.post(
        "/api/auth/login", json={"email": "ravi@example.com", "password": PASSWORD}
    )
    assert r.status_code == 200
    body = r.json()
    assert body["tokenType"] == "bearer"
    assert body["redirectTo"] == "/dashboard"
    assert body["user"] == {
        "id": body["user"]["id"],
        "name": "Ravi",
        "email": "ravi@example.com",
        "role": "USER",
    }
    session = decode_session_token(body["accessToken"])
    assert session is not None
    assert session.role is Role.USER

    set_cookie = r.headers["set-cookie"]
    assert "poms_session=" in set_cookie
    assert "httponly" in set_cookie.lower()
    assert "samesite=lax" in set_cookie.lower()


async def test_admin_login_lands_on_admin(client: AsyncClient, create_identity) -> None:
    await create_identity("root@example.com", Role.SUPER_ADMIN)
    r = await client.post(
        "/api/auth/login", json={"email": "root@example.com", "password": PASSWORD}
    )
    assert r.status_code == 200
    assert r.json()["redirectTo"] == "/admin"


@pytest.mark.parametrize(
    ("email", "password"),
    [
        ("ravi@example.com", "wrong-password"),
        ("nobody@example.com", PASSWORD),
        ("sleeping@example.com", PASSWORD),
    ],
)
async def test_login_failures_are_indistinguishable(
    client: AsyncClient, create_identity, email: str, password: str
) -> None:
    await create_identity("ravi@example.com", Role.USER)
    await create_identity("sleeping@example.com", Role.USER, is_active=False)
    r = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert r.status_code == 401
    assert r.json() == {"error": "INVALID_CREDENTIALS", "message": "Invalid email or password"}
    assert "set-cookie" not in r.headers


async def test_login_missing_fields_is_422(client: AsyncClient) -> None:
    r = await client.post("/api/auth/login", json={"email": "ravi@example.com"})
    assert r.status_code == 422
    assert r.json()["error"] == "VALIDATION_ERROR"


async def test_session_without_credentials_is_null(client: AsyncClient) -> None:
    r = await client.get("/api/auth/session")
    assert r.status_code == 200
    assert r.json() == {"user": None, "expires": None}


async def test_session_reflects_bearer_token(client: AsyncClient, user_headers: dict) -> None:
    r = await client.get("/api/auth/session", headers=user_headers)
    assert r.status_code == 200
    user = r.json()["user"]
    assert user["email"] == "user@example.com"
    assert user["role"] == "USER"
    assert r.json()["expires"] is not None


async def test_session_reflects_cookie_after_login(client: AsyncClient, create_identity) -> None:
    await create_identity("ravi@example.com", Role.USER)
    await client.post("/api/auth/login", json={"email": "ravi@example.com", "password": PASSWORD})
    r = await client.get("/api/auth/session")
    assert r.json()["user"]["email"] == "ravi@example.com"


async def test_tampered_token_has_no_session(client: AsyncClient) -> None:
    r = await client.get("/api/auth/session", headers={"Authorization": "Bearer not.a.token"})
    assert r.status_code == 200
    assert r.json() == {"user": None, "expires": None}


async def test_validate_credentials(client: AsyncClient, create_identity) -> None:
    await create_identity("ravi@example.com", Role.USER, name="Ravi")

    ok = await client.post(
        "/api/auth/validate", json={"email": "ravi@example.com", "password": PASSWORD}
    )
    assert ok.status_code == 200
    assert ok.json()["valid"] is True
    assert ok.json()["user"]["name"] == "Ravi"
    assert "set-cookie" not in ok.headers

    bad = await client.post(
        "/api/auth/validate", json={"email": "ravi@example.com", "password": "nope-nope"}
    )
    assert bad.status_code == 200
    assert bad.json() == {"valid": False, "error": "Invalid email or password"}

    missing = await client.post("/api/auth/validate", json={"email": "ravi@example.com"})
    assert missing.status_code == 200
    assert missing.json() == {"valid": False, "error": "Email and password are required"}

    null_email = await client.post(
        "/api/auth/validate", json={"email": None, "password": PASSWORD}
    )
    assert null_email.status_code == 200
    assert null_email.json() == {"valid": False, "error": "Email and password are required"}


async def test_logout_clears_cookie(client: AsyncClient) -> None:
    r = await client.post("/api/auth/logout")
    assert r.status_code == 204
    set_cookie = r.headers["set-cookie"]
    assert "poms_session=" in set_cookie
    assert "max-age=0" in set_cookie.lower()


async def test_responses_carry_request_id_and_security_headers(client: AsyncClient) -> None:
    r = await client.get("/api/auth/session", headers={"X-Request-ID": "trace-42"})
    assert r.headers["x-request-id"] == "trace-42"
    assert r.headers["x-content-type-options"] == "nosniff"
    assert "frame-ancestors 'none'" in r.headers["content-security-policy"]


async def test_signed_in_responses_are_not_cached(client: AsyncClient, user_headers: dict) -> None:
    signed_in = await client.get("/api/auth/session", headers=user_headers)
    assert signed_in.headers["cache-control"] == "no-store"
    anonymous = await client.get("/api/auth/session")
    assert "cache-control" not in anonymous.headers
