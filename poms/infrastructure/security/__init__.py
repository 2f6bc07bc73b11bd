"""Security: JWT, session tokens and password hashing."""

from poms.infrastructure.security.jwt import TokenError, read_claims, sign_claims
from poms.infrastructure.security.password import get_password_hash, hash_cost, verify_password
from poms.infrastructure.security.session_token import (
    decode_session_token,
    encode_session_token,
)

__all__ = [
    "TokenError",
    "decode_session_token",
    "encode_session_token",
    "get_password_hash",
    "hash_cost",
    "read_claims",
    "sign_claims",
    "verify_password",
]
