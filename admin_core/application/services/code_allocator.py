"""Business code allocation: PREFIX-YY-NNN, one counter per (prefix, period)."""

from __future__ import annotations

import asyncio
import logging
import random
from collections.abc import Awaitable, Callable
from datetime import date
from typing import TYPE_CHECKING

from admin_core.core.config import Settings, get_settings
from admin_core.domain.enums import CodeOverflowPolicy
from admin_core.domain.exceptions import (
    AllocationConflictException,
    AllocationFailedException,
    ValidationException,
)
from admin_core.domain.value_objects import BusinessCode, CodePrefix, Period
from admin_core.shared.telemetry.tracing import (
    add_span_attributes,
    add_span_event,
    traced,
)
from admin_core.shared.utils.datetime import current_period_year

if TYPE_CHECKING:
    from admin_core.application.interfaces.repositories import (
        ISequenceCounterRepository,
    )

logger = logging.getLogger(__name__)


class CodeAllocator:
    """Mints sequential, human-readable business codes.

    Every call to next_code consumes one ordinal in its own committed
    transaction; ordinals are never handed out twice and never reclaimed.
    Counters are keyed on the resolved prefix rather than the entity type
    spelling, so two callers can only render the same code by sharing a
    counter.
    """

    def __init__(
        self,
        counter_repo: ISequenceCounterRepository,
        settings: Settings | None = None,
        *,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._counter_repo = counter_repo
        self._settings = settings or get_settings()
        self._sleep = sleep

    @property
    def width(self) -> int:
        return self._settings.code_ordinal_width

    @property
    def ceiling(self) -> int | None:
        """Highest ordinal that fits the digit budget; None when widening is allowed."""
        if self._settings.code_overflow_policy == CodeOverflowPolicy.WIDEN.value:
            return None
        return 10**self.width - 1

    def resolve_prefix(self, entity_type: str, prefix: str | None = None) -> str:
        """Explicit prefix, else the configured one, else the upper-cased entity type."""
        candidate = prefix or self._settings.code_prefixes.get(entity_type)
        if not candidate:
            candidate = entity_type.upper().replace("_", "-")
        try:
            return CodePrefix(candidate.strip().upper()).value
        except ValueError as e:
            raise ValidationException(str(e), field="prefix") from e

    @staticmethod
    def resolve_period(period: str | int | date | Period | None) -> str:
        """Two-digit period; defaults to the current year."""
        try:
            return Period.coerce(
                current_period_year() if period is None else period
            ).value
        except ValueError as e:
            raise ValidationException(str(e), field="period") from e

    @traced("code_allocator.next_code")
    async def next_code(
        self,
        entity_type: str,
        period: str | int | date | Period | None = None,
        prefix: str | None = None,
    ) -> str:
        """Allocate the next code, e.g. next_code("main_task", "25") -> 'MAIN-TASK-25-001'.

        Raises:
            ValidationException: Empty entity type, malformed prefix or period.
            SequenceExhaustedException: The ordinal would exceed the digit
                budget under the reject policy.
            AllocationFailedException: Still conflicting after the configured
                number of retries.
        """
        if not entity_type or not entity_type.strip():
            raise ValidationException("entity_type must be a non-empty string", field="entity_type")
        resolved_prefix = self.resolve_prefix(entity_type, prefix)
        resolved_period = self.resolve_period(period)
        ordinal = await self._increment_with_retry(resolved_prefix, resolved_period)
        code = str(
            BusinessCode(
                prefix=resolved_prefix,
                period=resolved_period,
                ordinal=ordinal,
                width=self.width,
            )
        )
        add_span_attributes(code=code, ordinal=ordinal)
        logger.info("Allocated %s for %s/%s", code, entity_type, resolved_period)
        return code

    async def _increment_with_retry(self, prefix: str, period: str) -> int:
        attempts = self._settings.allocation_max_retries
        backoff = self._settings.allocation_retry_backoff_ms / 1000
        for attempt in range(1, attempts + 1):
            try:
                return await self._counter_repo.increment(
                    prefix, period, ceiling=self.ceiling
                )
            except AllocationConflictException:
                logger.warning(
                    "Allocation conflict for %s-%s (attempt %s/%s)",
                    prefix,
                    period,
                    attempt,
                    attempts,
                )
                add_span_event("allocation_conflict", {"attempt": attempt})
                if attempt < attempts:
                    await self._sleep(backoff * attempt * random.uniform(0.5, 1.5))
        logger.error("Allocation for %s-%s failed after %s attempts", prefix, period, attempts)
        raise AllocationFailedException(prefix, period, attempts)

    async def current_value(
        self,
        entity_type: str,
        period: str | int | date | Period | None = None,
        prefix: str | None = None,
    ) -> int:
        """Last ordinal issued under the entity type's prefix; 0 if none. Does not allocate."""
        return await self._counter_repo.current_value(
            self.resolve_prefix(entity_type, prefix), self.resolve_period(period)
        )

    def parse_business_code(self, code: str) -> BusinessCode:
        """Split a code like 'MAIN-TASK-25-001' into prefix, period and ordinal."""
        try:
            return BusinessCode.parse(code, width=self.width)
        except ValueError as e:
            raise ValidationException(str(e), field="code") from e
