"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs or schemas only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from admin_core.application.dtos.master_code import GroupResult, SubcodeResult
    from admin_core.application.dtos.role import RoleResult
    from admin_core.application.dtos.user import UserRoleAssignment
    from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert
    from admin_core.schemas.role import RoleUpsert


# Master code repository interface
class IMasterCodeRepository(Protocol):
    """Protocol for group and subcode persistence (DIP)."""

    async def get_group(self, group_code: str) -> GroupResult | None:
        """Return the group (active or not) or None."""

    async def list_groups(self, *, include_inactive: bool = False) -> list[GroupResult]:
        """Return groups ordered by display_order, then group_code."""

    async def list_group_codes(self) -> list[str]:
        """Return every group code (active or not)."""

    async def upsert_group(self, data: GroupUpsert) -> GroupResult:
        """Create the group or update it in place, keyed by data.group_code."""

    async def rename_group(self, old_code: str, new_code: str) -> GroupResult | None:
        """Change a group's code; None if old_code does not exist."""

    async def count_subcodes(self, group_code: str) -> int:
        """Return the number of subcodes (active or not) under the group."""

    async def list_subcodes(
        self, group_code: str, *, include_inactive: bool = False
    ) -> list[SubcodeResult]:
        """Return subcodes ordered by display_order, ties by subcode ascending."""

    async def get_subcode(self, group_code: str, subcode: str) -> SubcodeResult | None:
        """Return the subcode (active or not) or None."""

    async def upsert_subcode(self, data: SubcodeUpsert) -> SubcodeResult:
        """Create the subcode or update it in place, keyed by (group_code, subcode)."""

    async def set_subcode_active(
        self, group_code: str, subcode: str, is_active: bool
    ) -> SubcodeResult | None:
        """Flip is_active; None if the subcode does not exist."""

    async def is_active_value(self, group_code: str, value: str) -> bool:
        """True iff an active subcode of an active group has this value."""


# Role repository interface
class IRoleRepository(Protocol):
    """Protocol for role persistence (DIP)."""

    async def get_by_code(self, role_code: str) -> RoleResult | None:
        """Return the role (active or not) or None."""

    async def get_by_codes(self, role_codes: list[str]) -> list[RoleResult]:
        """Return the roles that exist among role_codes (any order)."""

    async def list_roles(self, *, include_inactive: bool = False) -> list[RoleResult]:
        """Return roles ordered by display_order, then role_code."""

    async def upsert_role(self, data: RoleUpsert) -> RoleResult:
        """Create the role or update it in place, keyed by data.role_code."""

    async def set_active(self, role_code: str, is_active: bool) -> RoleResult | None:
        """Flip is_active; None if the role does not exist."""


# User role assignment repository interface
class IUserRoleRepository(Protocol):
    """Protocol for the role list attached to user records (DIP)."""

    async def get_assignment(self, user_id: str) -> UserRoleAssignment | None:
        """Return the user's ordered role codes, or None if the user does not exist."""

    async def set_assigned_roles(
        self, user_id: str, role_codes: list[str]
    ) -> UserRoleAssignment | None:
        """Replace the user's role list; None if the user does not exist."""


# Sequence counter repository interface
class ISequenceCounterRepository(Protocol):
    """Protocol for the per-(prefix, period) counter (DIP).

    increment runs in its own transaction and commits before returning, so
    the caller's transaction cannot roll an issued ordinal back.
    """

    async def increment(
        self, prefix: str, period: str, *, ceiling: int | None = None
    ) -> int:
        """Atomically add one and return the new value.

        Raises AllocationConflictException when a concurrent first allocation
        created the row, and SequenceExhaustedException (after rolling back)
        when the new value would exceed ceiling.
        """

    async def current_value(self, prefix: str, period: str) -> int:
        """Return the last issued ordinal, 0 if none."""
