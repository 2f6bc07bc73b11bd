"""Create a USER or SUPER_ADMIN account.

Usage:
    python -m scripts.create_user <email> <name> [role] [password]

role defaults to USER. If password is omitted, a random one is printed.
"""

import asyncio
import secrets
import sys
from pathlib import Path

from dotenv import load_dotenv

from poms.core.config import MIN_PASSWORD_LENGTH
from poms.domain.enums import Role
from poms.domain.exceptions import DuplicateEmailException
from poms.infrastructure.persistence import database
from poms.infrastructure.persistence.repositories import IdentityRepository

_ASSIGNABLE = (Role.USER.value, Role.SUPER_ADMIN.value)


async def main() -> None:
    if len(sys.argv) < 3:
        print(
            "Usage: python -m scripts.create_user <email> <name> [role] [password]",
            file=sys.stderr,
        )
        sys.exit(1)
    email = sys.argv[1]
    name = sys.argv[2]
    role = sys.argv[3] if len(sys.argv) > 3 else Role.USER.value
    password = sys.argv[4] if len(sys.argv) > 4 else secrets.token_urlsafe(12)
    if role not in _ASSIGNABLE:
        print(f"Role must be one of {', '.join(_ASSIGNABLE)}", file=sys.stderr)
        sys.exit(1)
    if len(password) < MIN_PASSWORD_LENGTH:
        print(
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            file=sys.stderr,
        )
        sys.exit(1)

    load_dotenv(Path(__file__).resolve().parent.parent / ".env")
    database.init_engine()
    try:
        async with database.AsyncSessionLocal() as session:
            async with session.begin():
                identity = await IdentityRepository(session).create_identity(
                    name=name, email=email, password=password, role=Role(role)
                )
    except DuplicateEmailException as exc:
        print(exc.message, file=sys.stderr)
        sys.exit(1)
    finally:
        await database.dispose_engine()
    print(f"Created user: {identity.id} ({identity.email}, {identity.role})")
    if len(sys.argv) <= 4:
        print(f"Password: {password}")


if __name__ == "__main__":
    asyncio.run(main())
