"""Persistence models: ORM entities and mixins."""

from admin_core.infrastructure.persistence.models.master_code import (
    MasterCodeGroup,
    MasterCodeSubcode,
)
from admin_core.infrastructure.persistence.models.mixins import (
    ActiveFlagMixin,
    AdminManagedModel,
    CuidMixin,
    DisplayOrderMixin,
    TimestampMixin,
)
from admin_core.infrastructure.persistence.models.role import Role
from admin_core.infrastructure.persistence.models.sequence_counter import (
    SequenceCounter,
)
from admin_core.infrastructure.persistence.models.user import User

__all__ = [
    "MasterCodeGroup",
    "MasterCodeSubcode",
    "Role",
    "SequenceCounter",
    "User",
    "ActiveFlagMixin",
    "AdminManagedModel",
    "CuidMixin",
    "DisplayOrderMixin",
    "TimestampMixin",
]
