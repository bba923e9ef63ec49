"""Cache key builders. Single place for key format.

Key components (group codes, role codes, user ids) must not contain
CACHE_KEY_SEP to avoid ambiguous or colliding keys.
"""

from admin_core.core.constants import (
    CACHE_KEY_SEP,
    CACHE_PREFIX_GROUP,
    CACHE_PREFIX_PERMISSION,
    CACHE_PREFIX_ROLE,
    CACHE_PREFIX_SUBCODES,
)


def _validate_key_component(value: str, name: str) -> None:
    """Raise ValueError if value contains the cache key separator."""
    if CACHE_KEY_SEP in value:
        raise ValueError(
            f"Cache key component {name!r} must not contain separator {CACHE_KEY_SEP!r}"
        )


def group_key(group_code: str) -> str:
    """Cache key for one group."""
    _validate_key_component(group_code, "group_code")
    return f"{CACHE_PREFIX_GROUP}{CACHE_KEY_SEP}{group_code}"


def groups_list_key(include_inactive: bool) -> str:
    """Cache key for the ordered group listing."""
    scope = "all" if include_inactive else "active"
    return f"{CACHE_PREFIX_GROUP}{CACHE_KEY_SEP}list{CACHE_KEY_SEP}{scope}"


def subcodes_key(group_code: str, include_inactive: bool) -> str:
    """Cache key for a group's ordered subcode listing."""
    _validate_key_component(group_code, "group_code")
    scope = "all" if include_inactive else "active"
    return f"{CACHE_PREFIX_SUBCODES}{CACHE_KEY_SEP}{group_code}{CACHE_KEY_SEP}{scope}"


def subcodes_pattern(group_code: str) -> str:
    """Pattern matching every subcode listing of a group."""
    _validate_key_component(group_code, "group_code")
    return f"{CACHE_PREFIX_SUBCODES}{CACHE_KEY_SEP}{group_code}{CACHE_KEY_SEP}*"


def groups_pattern() -> str:
    """Pattern matching every cached group and group listing."""
    return f"{CACHE_PREFIX_GROUP}{CACHE_KEY_SEP}*"


def role_key(role_code: str) -> str:
    """Cache key for one role."""
    _validate_key_component(role_code, "role_code")
    return f"{CACHE_PREFIX_ROLE}{CACHE_KEY_SEP}{role_code}"


def active_roles_key() -> str:
    """Cache key for the ordered active-role listing."""
    return f"{CACHE_PREFIX_ROLE}{CACHE_KEY_SEP}list{CACHE_KEY_SEP}active"


def permission_key(user_id: str) -> str:
    """Cache key for a user's effective permission set."""
    _validate_key_component(user_id, "user_id")
    return f"{CACHE_PREFIX_PERMISSION}{CACHE_KEY_SEP}{user_id}"


def permissions_pattern() -> str:
    """Pattern matching every cached effective permission set."""
    return f"{CACHE_PREFIX_PERMISSION}{CACHE_KEY_SEP}*"
