"""DTOs for identity use cases (no dependency on ORM)."""

from dataclasses import dataclass
from datetime import datetime

from poms.domain.enums import Role


@dataclass(frozen=True)
class IdentityResult:
    """Identity read-model returned by authentication. Never carries the password hash."""

    id: str
    name: str
    email: str
    role: Role
    is_active: bool
    created_at: datetime | None = None
    updated_at: datetime | None = None
