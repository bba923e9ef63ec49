"""Role ORM model. Permissions are stored inline as a JSON list of entries."""

from typing import Any

from sqlalchemy import JSON, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from admin_core.infrastructure.persistence.database import Base
from admin_core.infrastructure.persistence.models.mixins import AdminManagedModel


class Role(AdminManagedModel, Base):
    """Role. Table: role. Unique role_code.

    permissions: ordered list of {"resource": str, "actions": [str, ...]}.
    Resource and action strings are stored as given.
    """

    __tablename__ = "role"

    role_code: Mapped[str] = mapped_column(String(64), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    permissions: Mapped[list[dict[str, Any]]] = mapped_column(
        JSON, nullable=False, default=list
    )

    __table_args__ = (UniqueConstraint("role_code", name="uq_role_code"),)
