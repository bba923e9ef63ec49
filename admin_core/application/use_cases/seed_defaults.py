"""Seed default master codes and roles (idempotent; safe to run repeatedly)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert
from admin_core.schemas.role import PermissionEntryIn, RoleUpsert

if TYPE_CHECKING:
    from admin_core.application.services.master_code_registry import MasterCodeRegistry
    from admin_core.application.services.role_registry import RoleRegistry

DEFAULT_GROUPS: tuple[GroupUpsert, ...] = (
    GroupUpsert(
        group_code="GROUP002",
        name="Status",
        description="Work item status used across business tables",
        display_order=2,
        is_system=True,
    ),
)

DEFAULT_SUBCODES: tuple[SubcodeUpsert, ...] = (
    SubcodeUpsert(group_code="GROUP002", subcode="PENDING", name="Pending", display_order=1, is_system=True),
    SubcodeUpsert(group_code="GROUP002", subcode="IN_PROGRESS", name="In progress", display_order=2, is_system=True),
    SubcodeUpsert(group_code="GROUP002", subcode="DONE", name="Done", display_order=3, is_system=True),
    SubcodeUpsert(group_code="GROUP002", subcode="HOLD", name="On hold", display_order=4, is_system=True),
)

_ADMIN_RESOURCES = ("master_code", "role", "user", "report")

DEFAULT_ROLES: tuple[RoleUpsert, ...] = (
    RoleUpsert(
        role_code="ADMIN",
        name="Administrator",
        description="Full access to administration screens",
        display_order=1,
        is_system=True,
        permissions=[
            PermissionEntryIn(resource=resource, actions=["manage-all"])
            for resource in _ADMIN_RESOURCES
        ],
    ),
    RoleUpsert(
        role_code="EDITOR",
        name="Editor",
        display_order=2,
        permissions=[PermissionEntryIn(resource="report", actions=["read", "write"])],
    ),
    RoleUpsert(
        role_code="VIEWER",
        name="Viewer",
        display_order=3,
        permissions=[PermissionEntryIn(resource="report", actions=["read"])],
    ),
)


@dataclass(frozen=True)
class SeedResult:
    """Counts of upserted rows."""

    groups: int
    subcodes: int
    roles: int


class SeedDefaultsUseCase:
    """Upserts the default groups, subcodes, and roles."""

    def __init__(self, master_codes: MasterCodeRegistry, roles: RoleRegistry) -> None:
        self._master_codes = master_codes
        self._roles = roles

    async def execute(self) -> SeedResult:
        for group in DEFAULT_GROUPS:
            await self._master_codes.upsert_group(group)
        for subcode in DEFAULT_SUBCODES:
            await self._master_codes.upsert_subcode(subcode)
        for role in DEFAULT_ROLES:
            await self._roles.upsert_role(role)
        return SeedResult(
            groups=len(DEFAULT_GROUPS),
            subcodes=len(DEFAULT_SUBCODES),
            roles=len(DEFAULT_ROLES),
        )
