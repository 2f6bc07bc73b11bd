"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, TimestampMixin, CompanyScopedMixin and the combined
CompanyScopedModel used by parties and items.
"""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from poms.shared.utils.datetime import utc_now
from poms.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (timezone-aware; set in Python, server default as fallback)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            nullable=False,
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            default=utc_now,
            server_default=func.now(),
            onupdate=utc_now,
            nullable=False,
        )


class CompanyScopedMixin:
    """Mixin for rows owned transitively through a company (company_id FK, CASCADE)."""

    @declared_attr
    def company_id(cls) -> Mapped[str]:
        return mapped_column(
            String,
            ForeignKey("company.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )


class CompanyScopedModel(CuidMixin, CompanyScopedMixin, TimestampMixin):
    """Combined mixin: CUID + company_id + created_at/updated_at."""

    __abstract__ = True
