"""Session identity: the claims a signed session token carries."""

from dataclasses import dataclass
from datetime import datetime

from poms.domain.enums import Role


@dataclass(frozen=True)
class SessionIdentity:
    """Identity attached to a request after its session token is verified.

    Reconstructed from the token on every request; never stored server-side.
    """

    user_id: str
    role: Role
    name: str | None = None
    email: str | None = None
    expires_at: datetime | None = None
