"""Persistence models: ORM entities and mixins."""

from poms.infrastructure.persistence.models.company import Company
from poms.infrastructure.persistence.models.identity import Identity
from poms.infrastructure.persistence.models.item import Item
from poms.infrastructure.persistence.models.mixins import (
    CompanyScopedMixin,
    CompanyScopedModel,
    CuidMixin,
    TimestampMixin,
)
from poms.infrastructure.persistence.models.party import Party

__all__ = [
    "Company",
    "Identity",
    "Item",
    "Party",
    "CuidMixin",
    "TimestampMixin",
    "CompanyScopedMixin",
    "CompanyScopedModel",
]
