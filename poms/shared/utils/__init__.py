"""Shared utilities: datetime, generators."""

from poms.shared.utils.datetime import from_timestamp_utc, utc_now
from poms.shared.utils.generators import generate_cuid

__all__ = [
    "generate_cuid",
    "utc_now",
    "from_timestamp_utc",
]
