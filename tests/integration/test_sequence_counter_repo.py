"""Code allocation against Postgres. Counter rows are committed, so each test uses its own prefix."""

import asyncio
import uuid

import pytest
from sqlalchemy import text

from admin_core.application.services.code_allocator import CodeAllocator
from admin_core.core.config import Settings
from admin_core.domain.exceptions import SequenceExhaustedException
from admin_core.infrastructure.persistence.repositories import SequenceCounterRepository


def _prefix() -> str:
    return f"IT-{uuid.uuid4().hex[:10].upper()}"


@pytest.mark.requires_db
async def test_first_allocation_creates_counter(session_factory) -> None:
    repo = SequenceCounterRepository(session_factory)
    prefix = _prefix()
    assert await repo.current_value(prefix, "25") == 0
    assert await repo.increment(prefix, "25") == 1
    assert await repo.increment(prefix, "25") == 2
    assert await repo.current_value(prefix, "25") == 2


@pytest.mark.requires_db
async def test_exhausted_increment_rolls_back(session_factory) -> None:
    repo = SequenceCounterRepository(session_factory)
    prefix = _prefix()
    await repo.increment(prefix, "25", ceiling=1)
    with pytest.raises(SequenceExhaustedException):
        await repo.increment(prefix, "25", ceiling=1)
    assert await repo.current_value(prefix, "25") == 1


@pytest.mark.requires_db
async def test_ordinal_survives_caller_rollback(session_factory, db_session) -> None:
    repo = SequenceCounterRepository(session_factory)
    prefix = _prefix()
    await db_session.execute(text("SELECT 1"))
    await repo.increment(prefix, "25")
    await db_session.rollback()
    assert await repo.current_value(prefix, "25") == 1


@pytest.mark.requires_db
async def test_thousand_concurrent_allocations_are_distinct(session_factory) -> None:
    allocator = CodeAllocator(
        SequenceCounterRepository(session_factory),
        settings=Settings(
            code_ordinal_width=4,
            allocation_max_retries=10,
            allocation_retry_backoff_ms=5,
            field_bindings={},
        ),
    )
    prefix = _prefix()
    codes = await asyncio.gather(
        *(allocator.next_code("user", "25", prefix=prefix) for _ in range(1000))
    )
    assert len(set(codes)) == 1000
    assert sorted(codes) == [f"{prefix}-25-{n:04d}" for n in range(1, 1001)]
    assert await allocator.current_value("user", "25", prefix=prefix) == 1000


@pytest.mark.requires_db
async def test_entity_type_spellings_share_one_counter(session_factory) -> None:
    allocator = CodeAllocator(
        SequenceCounterRepository(session_factory),
        settings=Settings(field_bindings={}),
    )
    entity_type = f"it_{uuid.uuid4().hex[:10]}"
    spellings = [entity_type, entity_type.upper().replace("_", "-"), entity_type.replace("_", "-")]
    codes = [await allocator.next_code(spelling, "25") for spelling in spellings]
    assert len(set(codes)) == 3
    assert [code.rsplit("-", 1)[1] for code in codes] == ["001", "002", "003"]
