"""Role repository. Read methods return RoleResult (DTO); ORM stays in this module."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_core.application.dtos.role import PermissionEntry, RoleResult
from admin_core.infrastructure.persistence.models.role import Role
from admin_core.infrastructure.persistence.repositories.base import BaseRepository
from admin_core.schemas.role import RoleUpsert


def _role_to_result(r: Role) -> RoleResult:
    """Map ORM Role to application RoleResult."""
    return RoleResult(
        id=r.id,
        role_code=r.role_code,
        name=r.name,
        description=r.description,
        display_order=r.display_order,
        is_active=r.is_active,
        is_system=r.is_system,
        permissions=tuple(PermissionEntry.from_dict(p) for p in r.permissions or ()),
    )


class RoleRepository(BaseRepository[Role]):
    """Role repository keyed by role_code."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, Role)

    async def get_by_code(self, role_code: str) -> RoleResult | None:
        row = await self.get_one_by(role_code=role_code)
        return _role_to_result(row) if row else None

    async def get_by_codes(self, role_codes: list[str]) -> list[RoleResult]:
        if not role_codes:
            return []
        result = await self.db.execute(
            select(Role).where(Role.role_code.in_(role_codes))
        )
        return [_role_to_result(r) for r in result.scalars().all()]

    async def list_roles(self, *, include_inactive: bool = False) -> list[RoleResult]:
        q = select(Role)
        if not include_inactive:
            q = q.where(Role.is_active.is_(True))
        q = q.order_by(Role.display_order, Role.role_code)
        result = await self.db.execute(q)
        return [_role_to_result(r) for r in result.scalars().all()]

    async def upsert_role(self, data: RoleUpsert) -> RoleResult:
        """Create the role or update it in place; permissions are replaced wholesale."""
        permissions = [entry.model_dump() for entry in data.permissions]
        row = await self.get_one_by(role_code=data.role_code)
        if row is None:
            row = Role(
                role_code=data.role_code,
                name=data.name,
                description=data.description,
                display_order=data.display_order,
                is_active=data.is_active,
                is_system=data.is_system,
                permissions=permissions,
            )
            return _role_to_result(await self.create(row))
        row.name = data.name
        row.description = data.description
        row.display_order = data.display_order
        row.is_active = data.is_active
        row.is_system = data.is_system
        # New list object so the JSON column is seen as changed.
        row.permissions = permissions
        return _role_to_result(await self.update(row))

    async def set_active(self, role_code: str, is_active: bool) -> RoleResult | None:
        row = await self.get_one_by(role_code=role_code)
        if row is None:
            return None
        row.is_active = is_active
        return _role_to_result(await self.update(row))
