"""Tests for MasterCodeRegistry (in-memory repository and cache)."""

import pytest

from admin_core.domain.exceptions import (
    DuplicateGroupCodeException,
    GroupCodeImmutableException,
    ResourceNotFoundException,
)
from admin_core.infrastructure.cache.keys import subcodes_key
from admin_core.schemas.master_code import GroupUpsert, SubcodeUpsert


async def _seed_status_group(registry) -> None:
    await registry.upsert_group(GroupUpsert(group_code="GROUP002", name="Status"))
    for order, code in ((3, "DONE"), (1, "PENDING"), (2, "IN_PROGRESS")):
        await registry.upsert_subcode(
            SubcodeUpsert(group_code="GROUP002", subcode=code, name=code.title(), display_order=order)
        )


class TestListSubcodes:
    async def test_returns_active_subcodes_in_display_order(self, registry) -> None:
        await _seed_status_group(registry)
        subcodes = await registry.list_subcodes("GROUP002")
        assert [s.subcode for s in subcodes] == ["PENDING", "IN_PROGRESS", "DONE"]

    async def test_ties_broken_by_subcode(self, registry) -> None:
        await registry.upsert_group(GroupUpsert(group_code="GROUP009", name="Ties"))
        for code in ("B", "C", "A"):
            await registry.upsert_subcode(
                SubcodeUpsert(group_code="GROUP009", subcode=code, name=code, display_order=5)
            )
        subcodes = await registry.list_subcodes("GROUP009")
        assert [s.subcode for s in subcodes] == ["A", "B", "C"]

    async def test_inactive_hidden_unless_requested(self, registry) -> None:
        await _seed_status_group(registry)
        await registry.set_subcode_active("GROUP002", "DONE", False)
        active = await registry.list_subcodes("GROUP002")
        everything = await registry.list_subcodes("GROUP002", include_inactive=True)
        assert [s.subcode for s in active] == ["PENDING", "IN_PROGRESS"]
        assert len(everything) == 3

    async def test_unknown_group_is_empty(self, registry) -> None:
        assert await registry.list_subcodes("GROUP404") == []

    async def test_served_from_cache_on_second_read(
        self, registry, master_code_repo, cache
    ) -> None:
        await _seed_status_group(registry)
        first = await registry.list_subcodes("GROUP002")
        assert subcodes_key("GROUP002", False) in cache.store
        calls_before = master_code_repo.calls.count("list_subcodes")
        second = await registry.list_subcodes("GROUP002")
        assert master_code_repo.calls.count("list_subcodes") == calls_before
        assert second == first

    async def test_write_invalidates_listing(self, registry, cache) -> None:
        await _seed_status_group(registry)
        await registry.list_subcodes("GROUP002")
        await registry.upsert_subcode(
            SubcodeUpsert(group_code="GROUP002", subcode="HOLD", name="Hold", display_order=4)
        )
        assert subcodes_key("GROUP002", False) not in cache.store
        subcodes = await registry.list_subcodes("GROUP002")
        assert subcodes[-1].subcode == "HOLD"


class TestIsValidValue:
    async def test_active_subcode_is_valid(self, registry) -> None:
        await _seed_status_group(registry)
        assert await registry.is_valid_value("GROUP002", "DONE") is True
        assert await registry.is_valid_value("GROUP002", "CANCELLED") is False

    async def test_deactivation_flips_validity_and_keeps_row(self, registry) -> None:
        await _seed_status_group(registry)
        await registry.set_subcode_active("GROUP002", "DONE", False)
        assert await registry.is_valid_value("GROUP002", "DONE") is False
        assert await registry.get_subcode_name("GROUP002", "DONE") == "Done"

    async def test_inactive_group_makes_all_values_invalid(self, registry) -> None:
        await _seed_status_group(registry)
        await registry.upsert_group(
            GroupUpsert(group_code="GROUP002", name="Status", is_active=False)
        )
        assert await registry.is_valid_value("GROUP002", "PENDING") is False

    async def test_bypasses_cache(self, registry, master_code_repo, cache) -> None:
        await _seed_status_group(registry)
        await registry.is_valid_value("GROUP002", "DONE")
        await registry.is_valid_value("GROUP002", "DONE")
        assert master_code_repo.calls.count("is_active_value") == 2

    async def test_none_is_not_a_value(self, registry) -> None:
        await _seed_status_group(registry)
        assert await registry.is_valid_value("GROUP002", None) is False


class TestGroups:
    async def test_upsert_is_idempotent(self, registry, master_code_repo) -> None:
        data = GroupUpsert(group_code="GROUP001", name="Type", display_order=1)
        first = await registry.upsert_group(data)
        second = await registry.upsert_group(data)
        assert first == second
        assert len(master_code_repo.groups) == 1

    async def test_get_group_not_found(self, registry) -> None:
        with pytest.raises(ResourceNotFoundException):
            await registry.get_group("GROUP404")

    async def test_list_groups_ordered(self, registry) -> None:
        await registry.upsert_group(GroupUpsert(group_code="GROUP003", name="C", display_order=1))
        await registry.upsert_group(GroupUpsert(group_code="GROUP001", name="A", display_order=2))
        await registry.upsert_group(GroupUpsert(group_code="GROUP002", name="B", display_order=1))
        groups = await registry.list_groups()
        assert [g.group_code for g in groups] == ["GROUP002", "GROUP003", "GROUP001"]

    async def test_rename_without_subcodes(self, registry) -> None:
        await registry.upsert_group(GroupUpsert(group_code="GROUP005", name="Draft"))
        renamed = await registry.upsert_group(
            GroupUpsert(group_code="GROUP006", name="Draft", previous_code="GROUP005")
        )
        assert renamed.group_code == "GROUP006"
        with pytest.raises(ResourceNotFoundException):
            await registry.get_group("GROUP005")

    async def test_rename_refused_once_subcodes_exist(self, registry) -> None:
        await _seed_status_group(registry)
        with pytest.raises(GroupCodeImmutableException) as exc_info:
            await registry.upsert_group(
                GroupUpsert(group_code="STATUS", name="Status", previous_code="GROUP002")
            )
        assert exc_info.value.details["subcode_count"] == 3
        assert (await registry.get_group("GROUP002")).group_code == "GROUP002"

    async def test_rename_onto_existing_code_refused(self, registry) -> None:
        await registry.upsert_group(GroupUpsert(group_code="GROUP005", name="A"))
        await registry.upsert_group(GroupUpsert(group_code="GROUP006", name="B"))
        with pytest.raises(DuplicateGroupCodeException) as exc_info:
            await registry.upsert_group(
                GroupUpsert(group_code="GROUP006", name="A", previous_code="GROUP005")
            )
        assert exc_info.value.details == {"group_code": "GROUP006"}
        assert (await registry.get_group("GROUP005")).name == "A"

    async def test_next_group_code(self, registry) -> None:
        assert await registry.next_group_code() == "GROUP001"
        await registry.upsert_group(GroupUpsert(group_code="GROUP007", name="Seven"))
        await registry.upsert_group(GroupUpsert(group_code="STATUS", name="Named"))
        assert await registry.next_group_code() == "GROUP008"


class TestSubcodes:
    async def test_upsert_into_unknown_group(self, registry) -> None:
        with pytest.raises(ResourceNotFoundException):
            await registry.upsert_subcode(
                SubcodeUpsert(group_code="GROUP404", subcode="X", name="X")
            )

    async def test_set_active_unknown_subcode(self, registry) -> None:
        await _seed_status_group(registry)
        with pytest.raises(ResourceNotFoundException):
            await registry.set_subcode_active("GROUP002", "NOPE", False)

    async def test_extra_display_values_kept(self, registry) -> None:
        await _seed_status_group(registry)
        result = await registry.upsert_subcode(
            SubcodeUpsert(
                group_code="GROUP002",
                subcode="DONE",
                name="Done",
                display_order=3,
                value1="#00aa00",
                remark="terminal state",
            )
        )
        assert result.value1 == "#00aa00"
        assert result.remark == "terminal state"

    async def test_works_without_cache(self, master_code_repo) -> None:
        from admin_core.application.services.master_code_registry import MasterCodeRegistry

        registry = MasterCodeRegistry(master_code_repo, cache=None)
        await _seed_status_group(registry)
        assert len(await registry.list_subcodes("GROUP002")) == 3
