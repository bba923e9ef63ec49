"""SequenceCounter ORM model: last issued ordinal per (prefix, period)."""

from sqlalchemy import BigInteger, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from admin_core.infrastructure.persistence.database import Base
from admin_core.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class SequenceCounter(CuidMixin, TimestampMixin, Base):
    """Table: sequence_counter. Unique (prefix, period).

    Keyed on the resolved code prefix, the namespace the public code lives
    in, so every entity type spelling that renders the same prefix shares one
    counter. Rows are created on first allocation and only ever incremented.
    """

    __tablename__ = "sequence_counter"

    prefix: Mapped[str] = mapped_column(String(64), nullable=False)
    period: Mapped[str] = mapped_column(String(8), nullable=False)
    last_value: Mapped[int] = mapped_column(
        BigInteger, nullable=False, server_default=text("0")
    )

    __table_args__ = (
        UniqueConstraint("prefix", "period", name="uq_sequence_counter_key"),
    )
