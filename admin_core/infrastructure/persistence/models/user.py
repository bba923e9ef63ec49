"""User ORM model: the assigned-role list lives on the user record."""

from sqlalchemy import JSON, Boolean, String, UniqueConstraint, text
from sqlalchemy.orm import Mapped, mapped_column

from admin_core.infrastructure.persistence.database import Base
from admin_core.infrastructure.persistence.models.mixins import CuidMixin, TimestampMixin


class User(CuidMixin, TimestampMixin, Base):
    """User model. Table: app_user. Unique username.

    assigned_roles is an ordered list of role codes without duplicates.
    An inactive user keeps the list but is granted no permissions.
    Accounts themselves are owned by the surrounding application.
    """

    __tablename__ = "app_user"

    username: Mapped[str] = mapped_column(String(255), nullable=False)
    is_active: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=True, server_default=text("true")
    )
    assigned_roles: Mapped[list[str]] = mapped_column(
        JSON, nullable=False, default=list
    )

    __table_args__ = (UniqueConstraint("username", name="uq_app_user_username"),)
