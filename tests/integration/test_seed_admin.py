"""The seed script creates the SUPER_ADMIN once and resets it on re-run."""

from poms.core.config import get_settings
from poms.infrastructure.persistence import database
from poms.infrastructure.persistence.repositories import IdentityRepository
from poms.infrastructure.security.password import verify_password
from scripts.seed_admin import seed_admin


async def _admin():
    database.init_engine()
    async with database.AsyncSessionLocal() as session:
        return await IdentityRepository(session).get_by_email(get_settings().seed_admin_email)


async def test_seed_admin_is_idempotent(db_schema: None) -> None:
    await seed_admin()
    first = await _admin()
    assert first is not None
    assert first.role == "SUPER_ADMIN"
    assert first.is_active is True
    assert verify_password(get_settings().seed_admin_password.get_secret_value(), first.hashed_password)

    await seed_admin()
    second = await _admin()
    assert second is not None
    assert second.id == first.id
    async with database.AsyncSessionLocal() as session:
        assert await IdentityRepository(session).count() == 1
