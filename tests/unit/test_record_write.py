"""Tests for RecordWriteGuard (authorize, then validate, then allocate)."""

import pytest

from admin_core.application.use_cases.record_write import RecordWriteGuard
from admin_core.domain.exceptions import AuthorizationException, InvalidEnumValueException
from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert
from admin_core.schemas.role import PermissionEntryIn, RoleUpsert


@pytest.fixture
async def guard(authorization, validator, allocator, registry, role_registry):
    await registry.upsert_group(GroupUpsert(group_code="GROUP002", name="Status"))
    await registry.upsert_subcode(SubcodeUpsert(group_code="GROUP002", subcode="DONE", name="Done"))
    await role_registry.upsert_role(
        RoleUpsert(
            role_code="EDITOR",
            name="Editor",
            permissions=[PermissionEntryIn(resource="main_task", actions=["write"])],
        )
    )
    await authorization.assign_roles("u-alice", ["EDITOR"])
    return RecordWriteGuard(authorization, validator, allocator)


async def test_prepare_mints_code(guard) -> None:
    values = await guard.prepare(
        "u-alice",
        "main_task",
        "main_task_data",
        {"status": "DONE", "title": "Ship"},
        code_field="code",
        entity_type="main_task",
        period="25",
    )
    assert values == {"status": "DONE", "title": "Ship", "code": "MAIN-TASK-25-001"}


async def test_existing_code_kept(guard, counter_repo) -> None:
    values = await guard.prepare(
        "u-alice",
        "main_task",
        "main_task_data",
        {"status": "DONE", "code": "MAIN-TASK-25-042"},
        code_field="code",
        period="25",
    )
    assert values["code"] == "MAIN-TASK-25-042"
    assert counter_repo.increment_calls == 0


async def test_forbidden_writer_burns_no_ordinal(guard, counter_repo) -> None:
    with pytest.raises(AuthorizationException):
        await guard.prepare(
            "u-bob", "main_task", "main_task_data", {"status": "DONE"}, code_field="code", period="25"
        )
    assert counter_repo.increment_calls == 0


async def test_invalid_record_burns_no_ordinal(guard, counter_repo) -> None:
    with pytest.raises(InvalidEnumValueException):
        await guard.prepare(
            "u-alice",
            "main_task",
            "main_task_data",
            {"status": "CANCELLED"},
            code_field="code",
            period="25",
        )
    assert counter_repo.increment_calls == 0


async def test_input_not_mutated(guard) -> None:
    values = {"status": "DONE"}
    await guard.prepare(
        "u-alice", "main_task", "main_task_data", values, code_field="code", period="25"
    )
    assert values == {"status": "DONE"}
