"""Role registry: role definitions and the permissions they grant."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from admin_core.application.dtos.role import RoleResult
from admin_core.domain.exceptions import ResourceNotFoundException, ValidationException
from admin_core.infrastructure.cache.keys import (
    active_roles_key,
    permissions_pattern,
    role_key,
)

if TYPE_CHECKING:
    from admin_core.application.interfaces.repositories import IRoleRepository
    from admin_core.application.interfaces.services import ICacheService
    from admin_core.schemas.role import RoleUpsert

logger = logging.getLogger(__name__)


class RoleRegistry:
    """Reads and administers roles. Role edits drop every cached permission set."""

    def __init__(
        self,
        repo: IRoleRepository,
        cache: ICacheService | None = None,
        cache_ttl: int = 300,
    ) -> None:
        self._repo = repo
        self._cache = cache
        self._cache_ttl = cache_ttl

    async def get_role(self, role_code: str) -> RoleResult:
        """Return the role (active or not).

        Raises:
            ResourceNotFoundException: If no role has this code.
        """
        key = role_key(role_code)
        if self._cache and self._cache.is_available():
            cached = await self._cache.get(key)
            if cached is not None:
                return RoleResult.from_dict(cached)
        role = await self._repo.get_by_code(role_code)
        if role is None:
            raise ResourceNotFoundException("role", role_code)
        if self._cache and self._cache.is_available():
            await self._cache.set(key, role.to_dict(), ttl=self._cache_ttl)
        return role

    async def get_roles(self, role_codes: list[str] | tuple[str, ...]) -> list[RoleResult]:
        """Roles that exist among role_codes, in the order given. Unknown codes are skipped."""
        found = {r.role_code: r for r in await self._repo.get_by_codes(list(role_codes))}
        return [found[code] for code in role_codes if code in found]

    async def list_active_roles(self) -> list[RoleResult]:
        """Active roles ordered by display_order, then role_code."""
        key = active_roles_key()
        if self._cache and self._cache.is_available():
            cached = await self._cache.get(key)
            if cached is not None:
                return [RoleResult.from_dict(r) for r in cached]
        roles = await self._repo.list_roles()
        roles.sort(key=lambda r: (r.display_order, r.role_code))
        if self._cache and self._cache.is_available():
            await self._cache.set(key, [r.to_dict() for r in roles], ttl=self._cache_ttl)
        return roles

    async def permissions_of(self, role_code: str) -> frozenset[tuple[str, str]]:
        """Flattened (resource, action) pairs granted by the role."""
        role = await self.get_role(role_code)
        return role.permission_set()

    async def upsert_role(self, data: RoleUpsert) -> RoleResult:
        """Create or update a role and replace its permission entries."""
        role = await self._repo.upsert_role(data)
        await self.invalidate(role.role_code)
        logger.info(
            "Upserted role %s (%d permission entries)",
            role.role_code,
            len(role.permissions),
        )
        return role

    async def set_role_active(self, role_code: str, is_active: bool) -> RoleResult:
        """Deactivate or restore a role. System roles cannot be deactivated."""
        existing = await self._repo.get_by_code(role_code)
        if existing is None:
            raise ResourceNotFoundException("role", role_code)
        if existing.is_system and not is_active:
            raise ValidationException(
                f"System role {role_code} cannot be deactivated", field="is_active"
            )
        role = await self._repo.set_active(role_code, is_active)
        if role is None:
            raise ResourceNotFoundException("role", role_code)
        await self.invalidate(role_code)
        return role

    async def invalidate(self, role_code: str) -> None:
        """Drop the cached role, the active listing, and all effective permission sets."""
        if not (self._cache and self._cache.is_available()):
            return
        await self._cache.delete(role_key(role_code))
        await self._cache.delete(active_roles_key())
        await self._cache.delete_pattern(permissions_pattern())
