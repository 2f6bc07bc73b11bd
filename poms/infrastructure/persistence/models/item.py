"""Item ORM model: a catalogue item of a company, bought from one of its parties."""

from decimal import Decimal

from sqlalchemy import ForeignKey, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from poms.infrastructure.persistence.database import Base
from poms.infrastructure.persistence.models.mixins import CompanyScopedModel


class Item(CompanyScopedModel, Base):
    """Item of a company. party_id must reference a party of the same company."""

    __tablename__ = "item"

    party_id: Mapped[str | None] = mapped_column(
        String, ForeignKey("party.id", ondelete="SET NULL"), nullable=True, index=True
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    sku: Mapped[str | None] = mapped_column(String, nullable=True)
    unit: Mapped[str | None] = mapped_column(String, nullable=True)
    hsn_code: Mapped[str | None] = mapped_column(String, nullable=True)
    base_price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    gst_rate: Mapped[Decimal] = mapped_column(Numeric(5, 2), nullable=False)
