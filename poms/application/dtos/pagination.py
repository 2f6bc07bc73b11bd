"""Pagination request/result DTOs."""

from dataclasses import dataclass
from enum import Enum


class PaginationErrorKind(str, Enum):
    """Why a page request was rejected."""

    INVALID_PAGE = "invalid_page"
    INVALID_PAGE_SIZE = "invalid_page_size"


@dataclass(frozen=True)
class PageRequest:
    page: int
    page_size: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.page_size


@dataclass(frozen=True)
class PageInfo:
    """Pagination metadata for a list response."""

    page: int
    page_size: int
    total_count: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool
