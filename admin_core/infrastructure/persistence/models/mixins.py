"""SQLAlchemy mixins for common model patterns.

Provides: CuidMixin, TimestampMixin, ActiveFlagMixin, DisplayOrderMixin,
and the combined AdminManagedModel used by administrator-managed tables.
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String, text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column
from sqlalchemy.sql import func

from admin_core.shared.utils.generators import generate_cuid


class CuidMixin:
    """Mixin for models using CUID as primary key. Provides id with default generate_cuid."""

    @declared_attr
    def id(cls) -> Mapped[str]:
        return mapped_column(String, primary_key=True, default=generate_cuid)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class ActiveFlagMixin:
    """Mixin for soft delete via is_active, plus is_system for seeded rows.

    Referenced rows are never hard-deleted; they are deactivated.
    """

    @declared_attr
    def is_active(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean, nullable=False, default=True, server_default=text("true")
        )

    @declared_attr
    def is_system(cls) -> Mapped[bool]:
        return mapped_column(
            Boolean, nullable=False, default=False, server_default=text("false")
        )


class DisplayOrderMixin:
    """Mixin for an explicit display_order used by ordered listings."""

    @declared_attr
    def display_order(cls) -> Mapped[int]:
        return mapped_column(
            Integer, nullable=False, default=0, server_default=text("0")
        )


class AdminManagedModel(CuidMixin, TimestampMixin, ActiveFlagMixin, DisplayOrderMixin):
    """Combined mixin: CUID + timestamps + is_active/is_system + display_order."""

    __abstract__ = True
