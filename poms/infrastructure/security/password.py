"""Password hashing: bcrypt over a base64 SHA-256 digest of the password.

The digest keeps bcrypt's 72-byte input limit from silently ignoring the
tail of long passwords. The cost factor defaults to settings.bcrypt_rounds.
"""

import base64
import hashlib

import bcrypt

from poms.core.config import get_settings


def _digest(password: str) -> bytes:
    return base64.b64encode(hashlib.sha256(password.encode("utf-8")).digest())


def get_password_hash(password: str, rounds: int | None = None) -> str:
    """Hash password with a fresh salt; rounds overrides the configured cost."""
    salt = bcrypt.gensalt(rounds=rounds if rounds is not None else get_settings().bcrypt_rounds)
    return bcrypt.hashpw(_digest(password), salt).decode("ascii")


def verify_password(password: str, hashed: str) -> bool:
    """True when password matches hashed. A malformed hash never matches."""
    try:
        return bcrypt.checkpw(_digest(password), hashed.encode("ascii"))
    except (ValueError, TypeError):
        return False


def hash_cost(hashed: str) -> int:
    """Cost factor recorded in a bcrypt hash (``$2b$<cost>$...``)."""
    return int(hashed.split("$")[2])
