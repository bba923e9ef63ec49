"""Write schemas (pydantic) for the administrator-facing write API."""

from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert
from admin_core.schemas.role import PermissionEntryIn, RoleUpsert

__all__ = [
    "GroupUpsert",
    "PermissionEntryIn",
    "RoleUpsert",
    "SubcodeUpsert",
]
