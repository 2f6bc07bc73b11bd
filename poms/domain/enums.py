"""Domain enumerations for POMS.

Enums represent fixed sets of domain values (roles, GST type).
"""

from enum import Enum


class _ValuesMixin:
    """Mixin that adds a values() classmethod to str Enums."""

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid values as strings."""
        return [member.value for member in cls]


class Role(_ValuesMixin, str, Enum):
    """Identity role. Closed set: every dispatch on Role must be exhaustive."""

    SUPER_ADMIN = "SUPER_ADMIN"
    USER = "USER"
    EMPLOYEE = "EMPLOYEE"


class GstType(_ValuesMixin, str, Enum):
    """Whether a company's supplies are taxed as intra-state or inter-state."""

    INTRA_STATE = "INTRA_STATE"
    INTER_STATE = "INTER_STATE"
