"""Party ORM model: a supplier registered under a company."""

from sqlalchemy import Boolean, String, text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from poms.infrastructure.persistence.database import Base
from poms.infrastructure.persistence.models.mixins import CompanyScopedModel


class Party(CompanyScopedModel, Base):
    """Supplier (party) of a company. Owned transitively via company.user_id."""

    __tablename__ = "party"

    name: Mapped[str] = mapped_column(String, nullable=False)
    gstin: Mapped[str | None] = mapped_column(String(15), nullable=True)
    phone: Mapped[str | None] = mapped_column(String(20), nullable=True)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
    address: Mapped[str | None] = mapped_column(String, nullable=True)
    state_code: Mapped[str | None] = mapped_column(String(5), nullable=True)
    is_registered_gst: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )

    company: Mapped["Company"] = relationship(  # noqa: F821
        back_populates="parties", lazy="raise"
    )
