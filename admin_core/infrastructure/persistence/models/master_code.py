"""Master code ORM models: groups and their subcodes (hierarchical enumerations)."""

from sqlalchemy import ForeignKey, Index, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from admin_core.infrastructure.persistence.database import Base
from admin_core.infrastructure.persistence.models.mixins import AdminManagedModel


class MasterCodeGroup(AdminManagedModel, Base):
    """Enumeration group. Table: master_code_group. Unique group_code."""

    __tablename__ = "master_code_group"

    group_code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    __table_args__ = (
        UniqueConstraint("group_code", name="uq_master_code_group_code"),
    )


class MasterCodeSubcode(AdminManagedModel, Base):
    """One permitted value of a group. Table: master_code_subcode.

    Unique (group_code, subcode). The FK on group_code has ON UPDATE RESTRICT:
    a group's code cannot change underneath its subcodes.
    """

    __tablename__ = "master_code_subcode"

    group_code: Mapped[str] = mapped_column(
        String(64),
        ForeignKey(
            "master_code_group.group_code",
            onupdate="RESTRICT",
            ondelete="RESTRICT",
        ),
        nullable=False,
    )
    subcode: Mapped[str] = mapped_column(String(128), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    remark: Mapped[str | None] = mapped_column(Text, nullable=True)
    # Free-form display values (colour, icon, ...)
    value1: Mapped[str | None] = mapped_column(String(255), nullable=True)
    value2: Mapped[str | None] = mapped_column(String(255), nullable=True)
    value3: Mapped[str | None] = mapped_column(String(255), nullable=True)

    __table_args__ = (
        UniqueConstraint("group_code", "subcode", name="uq_master_code_subcode"),
        Index(
            "ix_master_code_subcode_listing", "group_code", "display_order", "subcode"
        ),
    )
