"""Page/pageSize query parsing for paginated admin listings.

Missing, zero or non-numeric values fall back to the defaults; anything else
must be a positive integer (pageSize at most MAX_PAGE_SIZE).
"""

import math

from poms.application.dtos.pagination import PageInfo, PageRequest, PaginationErrorKind
from poms.domain.exceptions import ValidationException

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 50
# OFFSET is a signed 64-bit integer in the database.
MAX_OFFSET = 2**63 - 1

_ERROR_MESSAGES: dict[PaginationErrorKind, tuple[str, str]] = {
    PaginationErrorKind.INVALID_PAGE: ("Invalid page number", "page"),
    PaginationErrorKind.INVALID_PAGE_SIZE: (
        f"pageSize must be between 1 and {MAX_PAGE_SIZE}",
        "pageSize",
    ),
}


class PaginationError(ValidationException):
    """Invalid page or pageSize; kind says which."""

    def __init__(self, kind: PaginationErrorKind) -> None:
        self.kind = kind
        message, field = _ERROR_MESSAGES[kind]
        super().__init__(message, field=field)


def _coerce(raw: str | None, default: int) -> float:
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw.strip())
    except ValueError:
        return default
    if math.isnan(value) or value == 0:
        return default
    return value


def _is_positive_int(value: float) -> bool:
    return math.isfinite(value) and value.is_integer() and value >= 1


def parse_pagination(page: str | None, page_size: str | None) -> PageRequest:
    """Parse raw query values into a PageRequest; raise PaginationError when out of range."""
    page_value = _coerce(page, DEFAULT_PAGE)
    size_value = _coerce(page_size, DEFAULT_PAGE_SIZE)
    if not _is_positive_int(float(page_value)):
        raise PaginationError(PaginationErrorKind.INVALID_PAGE)
    if not _is_positive_int(float(size_value)) or size_value > MAX_PAGE_SIZE:
        raise PaginationError(PaginationErrorKind.INVALID_PAGE_SIZE)
    page_number, size = int(page_value), int(size_value)
    if (page_number - 1) * size > MAX_OFFSET:
        raise PaginationError(PaginationErrorKind.INVALID_PAGE)
    return PageRequest(page=page_number, page_size=size)


def build_page_info(request: PageRequest, total_count: int) -> PageInfo:
    """Derive totals and navigation flags; an empty listing still has one page."""
    total_pages = math.ceil(total_count / request.page_size) or 1
    return PageInfo(
        page=request.page,
        page_size=request.page_size,
        total_count=total_count,
        total_pages=total_pages,
        has_next_page=request.page < total_pages,
        has_previous_page=request.page > 1,
    )
