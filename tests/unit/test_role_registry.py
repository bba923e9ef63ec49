"""Tests for RoleRegistry."""

import pytest

from admin_core.domain.exceptions import ResourceNotFoundException, ValidationException
from admin_core.infrastructure.cache.keys import permission_key, role_key
from admin_core.schemas.role import PermissionEntryIn, RoleUpsert


def _role(code: str, order: int = 0, *, is_active: bool = True, **perms: list[str]) -> RoleUpsert:
    return RoleUpsert(
        role_code=code,
        name=code.title(),
        display_order=order,
        is_active=is_active,
        permissions=[PermissionEntryIn(resource=r, actions=a) for r, a in perms.items()],
    )


async def test_get_role_not_found(role_registry) -> None:
    with pytest.raises(ResourceNotFoundException):
        await role_registry.get_role("NOPE")


async def test_permissions_of_flattens_entries(role_registry) -> None:
    await role_registry.upsert_role(_role("EDITOR", report=["read", "write"], user=["read"]))
    assert await role_registry.permissions_of("EDITOR") == frozenset(
        {("report", "read"), ("report", "write"), ("user", "read")}
    )


async def test_permission_strings_preserved(role_registry) -> None:
    await role_registry.upsert_role(
        RoleUpsert(
            role_code="IT",
            name="IT",
            permissions=[PermissionEntryIn(resource="/apps/education", actions=["can_read", "can_full"])],
        )
    )
    perms = await role_registry.permissions_of("IT")
    assert ("/apps/education", "can_full") in perms


async def test_list_active_roles_sorted_and_filtered(role_registry) -> None:
    await role_registry.upsert_role(_role("VIEWER", 3))
    await role_registry.upsert_role(_role("ADMIN", 1))
    await role_registry.upsert_role(_role("EDITOR", 1))
    await role_registry.upsert_role(_role("GHOST", 0, is_active=False))
    roles = await role_registry.list_active_roles()
    assert [r.role_code for r in roles] == ["ADMIN", "EDITOR", "VIEWER"]


async def test_list_active_roles_cached(role_registry, role_repo) -> None:
    await role_registry.upsert_role(_role("VIEWER"))
    await role_registry.list_active_roles()
    await role_registry.list_active_roles()
    assert role_repo.calls.count("list_roles") == 1


async def test_upsert_idempotent_and_replaces_permissions(role_registry, role_repo) -> None:
    await role_registry.upsert_role(_role("EDITOR", report=["read", "write"]))
    await role_registry.upsert_role(_role("EDITOR", report=["read"]))
    assert len(role_repo.roles) == 1
    assert await role_registry.permissions_of("EDITOR") == frozenset({("report", "read")})


async def test_upsert_invalidates_role_and_permission_caches(role_registry, cache) -> None:
    await role_registry.upsert_role(_role("EDITOR", report=["read"]))
    await role_registry.get_role("EDITOR")
    cache.store[permission_key("u-alice")] = [["report", "read"]]
    await role_registry.upsert_role(_role("EDITOR", report=["write"]))
    assert role_key("EDITOR") not in cache.store
    assert permission_key("u-alice") not in cache.store


async def test_system_role_cannot_be_deactivated(role_registry) -> None:
    await role_registry.upsert_role(
        RoleUpsert(role_code="ADMIN", name="Admin", is_system=True)
    )
    with pytest.raises(ValidationException):
        await role_registry.set_role_active("ADMIN", False)


async def test_set_role_active(role_registry) -> None:
    await role_registry.upsert_role(_role("VIEWER"))
    role = await role_registry.set_role_active("VIEWER", False)
    assert role.is_active is False
    assert await role_registry.list_active_roles() == []


async def test_set_role_active_unknown(role_registry) -> None:
    with pytest.raises(ResourceNotFoundException):
        await role_registry.set_role_active("NOPE", True)
