"""Application DTOs (no ORM dependency)."""

from admin_core.application.dtos.master_code import GroupResult, SubcodeResult
from admin_core.application.dtos.role import PermissionEntry, RoleResult
from admin_core.application.dtos.user import UserRoleAssignment
from admin_core.application.dtos.validation import (
    InvalidEnumValue,
    ValidationOk,
    ValidationResult,
)

__all__ = [
    "GroupResult",
    "InvalidEnumValue",
    "PermissionEntry",
    "RoleResult",
    "SubcodeResult",
    "UserRoleAssignment",
    "ValidationOk",
    "ValidationResult",
]
