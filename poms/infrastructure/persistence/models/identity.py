"""Identity ORM model: an account that can sign in, with a single role."""

from sqlalchemy import Boolean, CheckConstraint, String, text
from sqlalchemy.orm import Mapped, mapped_column

from poms.domain.enums import Role
from poms.infrastructure.persistence.database import Base
from poms.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class Identity(CuidMixin, TimestampMixin, Base):
    """Identity model. Table: app_user. Email is globally unique (exact match)."""

    __tablename__ = "app_user"

    name: Mapped[str] = mapped_column(String, nullable=False)
    email: Mapped[str] = mapped_column(String, unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String, nullable=False)
    role: Mapped[str] = mapped_column(String, nullable=False, default=Role.USER.value)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, server_default=text("true")
    )

    __table_args__ = (
        CheckConstraint(
            "role IN ({})".format(", ".join(f"'{v}'" for v in Role.values())),
            name="app_user_role_check",
        ),
    )
