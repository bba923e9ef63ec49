"""Authorization service: effective permissions as the union of a user's active roles."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from admin_core.core.constants import MANAGE_ALL_ACTION
from admin_core.domain.enums import AuthorizationState
from admin_core.domain.exceptions import AuthorizationException, ResourceNotFoundException
from admin_core.infrastructure.cache.keys import permission_key
from admin_core.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from admin_core.application.interfaces.repositories import IUserRoleRepository
    from admin_core.application.interfaces.services import ICacheService
    from admin_core.application.services.role_registry import RoleRegistry

logger = logging.getLogger(__name__)

PermissionSet = frozenset[tuple[str, str]]


class AuthorizationService:
    """Centralized permission checking; caches effective permissions (5 min TTL typical).

    A user is allowed (resource, action) iff some active assigned role grants
    it, or grants "manage-all" on the resource. Missing users, users without
    roles, and users whose roles are unknown or inactive are all forbidden,
    and the denial never says which.
    """

    def __init__(
        self,
        role_registry: RoleRegistry,
        user_roles: IUserRoleRepository,
        cache: ICacheService | None = None,
        cache_ttl: int = 300,
    ) -> None:
        self.role_registry = role_registry
        self.user_roles = user_roles
        self.cache = cache
        self.cache_ttl = cache_ttl

    @traced("authorization.get_effective_permissions")
    async def get_effective_permissions(self, user_id: str | None) -> PermissionSet:
        """Union of the permissions of the user's active roles.

        Empty for unknown and deactivated users. Accounts are deactivated by
        the host application, which should call invalidate_user_cache after.
        """
        if not user_id:
            return frozenset()
        key = permission_key(user_id)
        if self.cache and self.cache.is_available():
            cached = await self.cache.get(key)
            if cached is not None:
                return frozenset((resource, action) for resource, action in cached)

        assignment = await self.user_roles.get_assignment(user_id)
        permissions: set[tuple[str, str]] = set()
        if assignment is not None and assignment.is_active and assignment.role_codes:
            for role in await self.role_registry.get_roles(assignment.role_codes):
                if role.is_active:
                    permissions |= role.permission_set()
        result = frozenset(permissions)

        if self.cache and self.cache.is_available():
            await self.cache.set(
                key, [list(pair) for pair in sorted(result)], ttl=self.cache_ttl
            )
        return result

    async def decide(
        self, user_id: str | None, resource: str, action: str
    ) -> AuthorizationState:
        """Walk the request through unauthenticated -> identified -> authorized | forbidden."""
        if not user_id:
            return AuthorizationState.UNAUTHENTICATED
        permissions = await self.get_effective_permissions(user_id)
        if (resource, action) in permissions or (resource, MANAGE_ALL_ACTION) in permissions:
            return AuthorizationState.AUTHORIZED
        logger.debug("Denied %s on %s", action, resource)
        return AuthorizationState.FORBIDDEN

    @traced("authorization.authorize")
    async def authorize(self, user_id: str | None, resource: str, action: str) -> bool:
        """True iff the user may perform action on resource."""
        state = await self.decide(user_id, resource, action)
        return state.is_allowed

    async def require(self, user_id: str | None, resource: str, action: str) -> None:
        """Raise AuthorizationException unless the user may perform action on resource."""
        if not await self.authorize(user_id, resource, action):
            raise AuthorizationException(resource=resource, action=action)

    async def assign_roles(self, user_id: str, role_codes: list[str]) -> tuple[str, ...]:
        """Replace the user's roles with role_codes (duplicates dropped, order kept).

        Raises:
            ResourceNotFoundException: If a role code or the user does not exist.
        """
        ordered = list(dict.fromkeys(role_codes))
        known = {r.role_code for r in await self.role_registry.get_roles(ordered)}
        for code in ordered:
            if code not in known:
                raise ResourceNotFoundException("role", code)
        assignment = await self.user_roles.set_assigned_roles(user_id, ordered)
        if assignment is None:
            raise ResourceNotFoundException("user", user_id)
        await self.invalidate_user_cache(user_id)
        logger.info("Assigned roles %s to user %s", list(assignment.role_codes), user_id)
        return assignment.role_codes

    async def _current_roles(self, user_id: str) -> list[str]:
        assignment = await self.user_roles.get_assignment(user_id)
        if assignment is None:
            raise ResourceNotFoundException("user", user_id)
        return list(assignment.role_codes)

    async def grant_role(self, user_id: str, role_code: str) -> tuple[str, ...]:
        """Append role_code to the user's roles (no-op if already present)."""
        current = await self._current_roles(user_id)
        return await self.assign_roles(user_id, [*current, role_code])

    async def revoke_role(self, user_id: str, role_code: str) -> tuple[str, ...]:
        """Remove role_code from the user's roles (no-op if absent)."""
        current = await self._current_roles(user_id)
        return await self.assign_roles(user_id, [c for c in current if c != role_code])

    async def invalidate_user_cache(self, user_id: str) -> None:
        """Invalidate cached permissions for one user."""
        if self.cache and self.cache.is_available():
            await self.cache.delete(permission_key(user_id))
