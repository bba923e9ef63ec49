"""Cache: Redis service and cache key builders.

Used by the registries and the authorization service as a read-through
cache. Key format is in keys.py.
"""

from admin_core.infrastructure.cache.keys import (
    active_roles_key,
    group_key,
    groups_list_key,
    groups_pattern,
    permission_key,
    permissions_pattern,
    role_key,
    subcodes_key,
    subcodes_pattern,
)
from admin_core.infrastructure.cache.redis_cache import CacheService

__all__ = [
    "CacheService",
    "active_roles_key",
    "group_key",
    "groups_list_key",
    "groups_pattern",
    "permission_key",
    "permissions_pattern",
    "role_key",
    "subcodes_key",
    "subcodes_pattern",
]
