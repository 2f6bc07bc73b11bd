"""Repositories over the persistent store."""

from poms.infrastructure.persistence.repositories.base import BaseRepository
from poms.infrastructure.persistence.repositories.company_repo import CompanyRepository
from poms.infrastructure.persistence.repositories.identity_repo import IdentityRepository
from poms.infrastructure.persistence.repositories.item_repo import ItemRepository
from poms.infrastructure.persistence.repositories.party_repo import PartyRepository

__all__ = [
    "BaseRepository",
    "CompanyRepository",
    "IdentityRepository",
    "ItemRepository",
    "PartyRepository",
]
