"""Sequence counter repository: atomic per-(prefix, period) increments.

Each increment runs in its own session and transaction taken from the
session factory, and commits before returning. An ordinal handed out is
never reclaimed, even when the caller's business transaction rolls back.
"""

from __future__ import annotations

import logging

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from admin_core.domain.exceptions import (
    AllocationConflictException,
    SequenceExhaustedException,
)
from admin_core.infrastructure.persistence.models.sequence_counter import SequenceCounter

logger = logging.getLogger(__name__)


class SequenceCounterRepository:
    """UPDATE ... RETURNING on the counter row; INSERT on first use."""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        self._session_factory = session_factory

    async def increment(
        self, prefix: str, period: str, *, ceiling: int | None = None
    ) -> int:
        """Add one to the counter and return the new value.

        Concurrent callers serialize on the row lock taken by the UPDATE.
        When the row is missing it is inserted with last_value=1; losing that
        insert race to another caller raises AllocationConflictException.
        A value above ceiling raises SequenceExhaustedException and the
        transaction rolls back, leaving the counter unchanged.
        """
        async with self._session_factory() as session:
            async with session.begin():
                result = await session.execute(
                    update(SequenceCounter)
                    .where(
                        SequenceCounter.prefix == prefix,
                        SequenceCounter.period == period,
                    )
                    .values(last_value=SequenceCounter.last_value + 1)
                    .returning(SequenceCounter.last_value)
                    .execution_options(synchronize_session=False)
                )
                value = result.scalar_one_or_none()
                if value is None:
                    session.add(
                        SequenceCounter(
                            prefix=prefix, period=period, last_value=1
                        )
                    )
                    try:
                        await session.flush()
                    except IntegrityError:
                        logger.debug(
                            "Counter row for %s/%s created concurrently", prefix, period
                        )
                        raise AllocationConflictException(prefix, period) from None
                    value = 1
                if ceiling is not None and value > ceiling:
                    raise SequenceExhaustedException(
                        prefix, period, width=len(str(ceiling))
                    )
                return int(value)

    async def current_value(self, prefix: str, period: str) -> int:
        async with self._session_factory() as session:
            result = await session.execute(
                select(SequenceCounter.last_value).where(
                    SequenceCounter.prefix == prefix,
                    SequenceCounter.period == period,
                )
            )
            value = result.scalar_one_or_none()
            return int(value) if value is not None else 0
