"""Application DTOs."""

from poms.application.dtos.identity import IdentityResult
from poms.application.dtos.pagination import PageInfo, PageRequest, PaginationErrorKind

__all__ = [
    "IdentityResult",
    "PageInfo",
    "PageRequest",
    "PaginationErrorKind",
]
