"""Master code registry: enumeration groups and their permitted subcodes.

Display reads (groups, subcode listings) go through the optional read-through
cache. Validation reads (is_valid_value) always hit the store so a freshly
deactivated subcode is rejected immediately.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from admin_core.application.dtos.master_code import GroupResult, SubcodeResult
from admin_core.domain.exceptions import (
    DuplicateGroupCodeException,
    GroupCodeImmutableException,
    ResourceNotFoundException,
)
from admin_core.domain.value_objects import GroupCode
from admin_core.infrastructure.cache.keys import (
    group_key,
    groups_list_key,
    subcodes_key,
    subcodes_pattern,
)
from admin_core.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from admin_core.application.interfaces.repositories import IMasterCodeRepository
    from admin_core.application.interfaces.services import ICacheService
    from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert

logger = logging.getLogger(__name__)


class MasterCodeRegistry:
    """Reads and administers groups and subcodes."""

    def __init__(
        self,
        repo: IMasterCodeRepository,
        cache: ICacheService | None = None,
        cache_ttl: int = 60,
    ) -> None:
        self._repo = repo
        self._cache = cache
        self._cache_ttl = cache_ttl

    async def _cache_get(self, key: str) -> Any | None:
        if self._cache and self._cache.is_available():
            return await self._cache.get(key)
        return None

    async def _cache_set(self, key: str, value: Any) -> None:
        if self._cache and self._cache.is_available():
            await self._cache.set(key, value, ttl=self._cache_ttl)

    async def invalidate_group(self, group_code: str) -> None:
        """Drop every cached entry that depends on this group."""
        cache = self._cache
        if cache is None or not cache.is_available():
            return
        await cache.delete(group_key(group_code))
        await cache.delete(groups_list_key(True))
        await cache.delete(groups_list_key(False))
        await cache.delete_pattern(subcodes_pattern(group_code))
        logger.debug("Invalidated cached master codes for %s", group_code)

    # Groups

    async def list_groups(self, *, include_inactive: bool = False) -> list[GroupResult]:
        """Groups ordered by display_order, then group_code."""
        key = groups_list_key(include_inactive)
        cached = await self._cache_get(key)
        if cached is not None:
            return [GroupResult.from_dict(g) for g in cached]
        groups = await self._repo.list_groups(include_inactive=include_inactive)
        await self._cache_set(key, [g.to_dict() for g in groups])
        return groups

    async def get_group(self, group_code: str) -> GroupResult:
        """Return the group (active or not).

        Raises:
            ResourceNotFoundException: If no group has this code.
        """
        key = group_key(group_code)
        cached = await self._cache_get(key)
        if cached is not None:
            return GroupResult.from_dict(cached)
        group = await self._repo.get_group(group_code)
        if group is None:
            raise ResourceNotFoundException("group", group_code)
        await self._cache_set(key, group.to_dict())
        return group

    async def group_exists(self, group_code: str) -> bool:
        """True if the group exists in the store, active or not. Not cached."""
        return await self._repo.get_group(group_code) is not None

    async def next_group_code(self) -> str:
        """Next auto-numbered group code (GROUP001, GROUP002, ...)."""
        numbers = [GroupCode(code).number or 0 for code in await self._repo.list_group_codes()]
        return GroupCode.numbered(max(numbers, default=0) + 1).value

    async def upsert_group(self, data: GroupUpsert) -> GroupResult:
        """Create or update a group. Idempotent for identical input.

        A rename (previous_code set and different from group_code) is only
        allowed while no subcode references the old code.

        Raises:
            ResourceNotFoundException: previous_code does not exist.
            GroupCodeImmutableException: the old code has subcodes.
            DuplicateGroupCodeException: the new code is already taken.
        """
        previous = data.previous_code
        if previous and previous != data.group_code:
            if await self._repo.get_group(previous) is None:
                raise ResourceNotFoundException("group", previous)
            subcode_count = await self._repo.count_subcodes(previous)
            if subcode_count:
                raise GroupCodeImmutableException(previous, subcode_count)
            if await self._repo.get_group(data.group_code) is not None:
                raise DuplicateGroupCodeException(data.group_code)
            await self._repo.rename_group(previous, data.group_code)
            await self.invalidate_group(previous)
            logger.info("Renamed group %s to %s", previous, data.group_code)
        group = await self._repo.upsert_group(data)
        await self.invalidate_group(group.group_code)
        return group

    # Subcodes

    @traced("master_codes.list_subcodes")
    async def list_subcodes(
        self, group_code: str, *, include_inactive: bool = False
    ) -> list[SubcodeResult]:
        """Subcodes of a group ordered by display_order, ties by subcode.

        Inactive subcodes are only included when include_inactive is True.
        An unknown group has no subcodes.
        """
        key = subcodes_key(group_code, include_inactive)
        cached = await self._cache_get(key)
        if cached is not None:
            return [SubcodeResult.from_dict(s) for s in cached]
        subcodes = await self._repo.list_subcodes(
            group_code, include_inactive=include_inactive
        )
        subcodes.sort(key=lambda s: s.sort_key)
        await self._cache_set(key, [s.to_dict() for s in subcodes])
        return subcodes

    @traced("master_codes.is_valid_value")
    async def is_valid_value(self, group_code: str, value: Any) -> bool:
        """True iff an active subcode of the active group equals value."""
        if value is None:
            return False
        return await self._repo.is_active_value(group_code, str(value))

    async def get_subcode_name(self, group_code: str, value: Any) -> str | None:
        """Display label for a stored value, inactive subcodes included."""
        if value is None:
            return None
        subcode = await self._repo.get_subcode(group_code, str(value))
        return subcode.name if subcode else None

    async def upsert_subcode(self, data: SubcodeUpsert) -> SubcodeResult:
        """Create or update a subcode. Idempotent for identical input.

        Raises:
            ResourceNotFoundException: If the group does not exist.
        """
        if await self._repo.get_group(data.group_code) is None:
            raise ResourceNotFoundException("group", data.group_code)
        subcode = await self._repo.upsert_subcode(data)
        await self.invalidate_group(data.group_code)
        return subcode

    async def set_subcode_active(
        self, group_code: str, subcode: str, is_active: bool
    ) -> SubcodeResult:
        """Deactivate (soft delete) or restore a subcode. The row is kept."""
        result = await self._repo.set_subcode_active(group_code, subcode, is_active)
        if result is None:
            raise ResourceNotFoundException("subcode", f"{group_code}/{subcode}")
        await self.invalidate_group(group_code)
        logger.info(
            "Subcode %s/%s %s",
            group_code,
            subcode,
            "activated" if is_active else "deactivated",
        )
        return result
