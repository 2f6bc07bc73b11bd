"""Create or reset the SUPER_ADMIN account from SEED_ADMIN_* settings.

Usage:
    python -m scripts.seed_admin

Reads SEED_ADMIN_EMAIL, SEED_ADMIN_PASSWORD (min 8 chars) and SEED_ADMIN_NAME
from the environment or .env. Running it again resets that account's password,
role and active flag.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from poms.core.config import get_settings
from poms.domain.enums import Role
from poms.infrastructure.persistence import database
from poms.infrastructure.persistence.repositories import IdentityRepository

logger = logging.getLogger("scripts.seed_admin")


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(Path(__file__).resolve().parent.parent / ".env")


async def seed_admin() -> None:
    settings = get_settings()
    database.init_engine()
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                identity, created = await IdentityRepository(session).upsert_identity(
                    name=settings.seed_admin_name,
                    email=settings.seed_admin_email,
                    password=settings.seed_admin_password.get_secret_value(),
                    role=Role.SUPER_ADMIN,
                )
        action = "Created" if created else "Updated"
        print(f"{action} admin user: {identity.id} ({identity.email}, {identity.role})")
    finally:
        await database.dispose_engine()


def main() -> None:
    _load_env()
    logging.basicConfig(level=logging.INFO)
    try:
        asyncio.run(seed_admin())
    except Exception:
        logger.exception("Failed to seed admin user")
        sys.exit(1)


if __name__ == "__main__":
    main()
