"""Pytest configuration and fixtures for POMS.

The environment is set before poms.main is imported: the app reads settings
when it is created. API and repository tests run against a throwaway SQLite
file (aiosqlite); the schema is recreated for every test that asks for it.
"""

import os
import tempfile
from collections.abc import AsyncIterator, Awaitable, Callable

_TEST_DB = os.path.join(tempfile.gettempdir(), f"poms-test-{os.getpid()}.sqlite3")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_TEST_DB}"
os.environ["SECRET_KEY"] = "test-secret-key-not-for-production"
os.environ["BCRYPT_ROUNDS"] = "10"
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["SESSION_COOKIE_SECURE"] = "false"

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession  # noqa: E402

from poms.core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from poms.domain.enums import Role  # noqa: E402
from poms.infrastructure.persistence import database, models  # noqa: E402,F401
from poms.infrastructure.persistence.database import Base  # noqa: E402
from poms.infrastructure.persistence.models import Identity  # noqa: E402
from poms.infrastructure.persistence.repositories import IdentityRepository  # noqa: E402
from poms.infrastructure.security.session_token import encode_session_token  # noqa: E402
from poms.main import app  # noqa: E402

DEFAULT_PASSWORD = "Password123"

CreateIdentity = Callable[..., Awaitable[Identity]]


@pytest.fixture
async def db_schema() -> AsyncIterator[None]:
    """Fresh schema for one test; the engine is disposed afterwards."""
    database.init_engine()
    assert database.engine is not None
    async with database.engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    yield
    await database.dispose_engine()


@pytest.fixture
async def db_session(db_schema: None) -> AsyncIterator[AsyncSession]:
    """Session for repository tests. Tests commit or flush as they need."""
    assert database.AsyncSessionLocal is not None
    async with database.AsyncSessionLocal() as session:
        yield session


@pytest.fixture
async def client(db_schema: None) -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI)."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def create_identity(db_schema: None) -> CreateIdentity:
    """Factory that stores an identity in its own committed transaction."""

    async def _create(
        email: str,
        role: Role = Role.USER,
        *,
        name: str = "Test User",
        password: str = DEFAULT_PASSWORD,
        is_active: bool = True,
    ) -> Identity:
        assert database.AsyncSessionLocal is not None
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                return await IdentityRepository(session).create_identity(
                    name=name, email=email, password=password, role=role, is_active=is_active
                )

    return _create


def bearer(identity: Identity) -> dict[str, str]:
    """Authorization header carrying a session token for identity."""
    token = encode_session_token(
        identity.id, Role(identity.role), name=identity.name, email=identity.email
    )
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def headers_for() -> Callable[[Identity], dict[str, str]]:
    """Build a Bearer header for an identity created in the test."""
    return bearer


@pytest.fixture
async def user_headers(create_identity: CreateIdentity) -> dict[str, str]:
    return bearer(await create_identity("user@example.com", Role.USER, name="Uma User"))


@pytest.fixture
async def admin_headers(create_identity: CreateIdentity) -> dict[str, str]:
    return bearer(await create_identity("admin@example.com", Role.SUPER_ADMIN, name="Ada Admin"))
