"""Persistence repositories. Re-exports for dependency injection."""

from admin_core.infrastructure.persistence.repositories.base import BaseRepository
from admin_core.infrastructure.persistence.repositories.master_code_repo import (
    MasterCodeRepository,
)
from admin_core.infrastructure.persistence.repositories.role_repo import RoleRepository
from admin_core.infrastructure.persistence.repositories.sequence_counter_repo import (
    SequenceCounterRepository,
)
from admin_core.infrastructure.persistence.repositories.user_role_repo import (
    UserRoleRepository,
)

__all__ = [
    "BaseRepository",
    "MasterCodeRepository",
    "RoleRepository",
    "SequenceCounterRepository",
    "UserRoleRepository",
]
