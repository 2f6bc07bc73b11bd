"""Company ORM model. Root of ownership: every party and item hangs off a company."""

from sqlalchemy import ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from poms.domain.enums import GstType
from poms.infrastructure.persistence.database import Base
from poms.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Company(CuidMixin, TimestampMixin, Base):
    """Company owned by one identity (user_id). GSTIN is unique when present."""

    __tablename__ = "company"

    user_id: Mapped[str] = mapped_column(
        String, ForeignKey("app_user.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    gstin: Mapped[str | None] = mapped_column(String(15), unique=True, nullable=True)
    pan: Mapped[str | None] = mapped_column(String(10), nullable=True)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    state_code: Mapped[str | None] = mapped_column(String(5), nullable=True)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    logo_url: Mapped[str | None] = mapped_column(String, nullable=True)
    gst_type: Mapped[str] = mapped_column(
        String, nullable=False, default=GstType.INTRA_STATE.value
    )

    parties: Mapped[list["Party"]] = relationship(  # noqa: F821
        back_populates="company",
        order_by="Party.created_at.desc()",
        lazy="raise",
    )
