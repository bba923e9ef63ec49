"""Constraint validator: checks enumerated columns against the master code registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from admin_core.application.dtos.validation import (
    InvalidEnumValue,
    ValidationOk,
    ValidationResult,
)
from admin_core.domain.exceptions import ConfigurationException
from admin_core.shared.telemetry.tracing import traced

if TYPE_CHECKING:
    from admin_core.application.services.master_code_registry import MasterCodeRegistry

logger = logging.getLogger(__name__)


class ConstraintValidator:
    """Validates (table, column, value) through configured field bindings.

    A column without a binding accepts any value. A None value is accepted;
    nullability belongs to the schema.
    """

    def __init__(
        self,
        registry: MasterCodeRegistry,
        bindings: Mapping[tuple[str, str], str],
    ) -> None:
        self._registry = registry
        self._bindings = dict(bindings)

    def group_for(self, table: str, column: str) -> str | None:
        """Group code governing the column, or None if unbound."""
        return self._bindings.get((table, column))

    @traced("constraints.validate")
    async def validate(self, table: str, column: str, value: Any) -> ValidationResult:
        """Return ValidationOk or InvalidEnumValue(group_code, value). Never raises for bad values."""
        group_code = self.group_for(table, column)
        if group_code is None or value is None:
            return ValidationOk()
        if await self._registry.is_valid_value(group_code, value):
            return ValidationOk()
        logger.debug("Rejected %r for %s.%s (group %s)", value, table, column, group_code)
        return InvalidEnumValue(group_code, value, table=table, column=column)

    async def validate_record(
        self, table: str, values: Mapping[str, Any]
    ) -> list[InvalidEnumValue]:
        """Validate every bound column present in values; return the failures in column order."""
        failures: list[InvalidEnumValue] = []
        for column, value in values.items():
            result = await self.validate(table, column, value)
            if isinstance(result, InvalidEnumValue):
                failures.append(result)
        return failures

    async def require_valid(self, table: str, values: Mapping[str, Any]) -> None:
        """Raise InvalidEnumValueException for the first invalid bound column."""
        failures = await self.validate_record(table, values)
        if failures:
            raise failures[0].to_exception()

    async def verify_bindings(self) -> None:
        """Check every bound group exists. Run at startup; a failure is fatal.

        Raises:
            ConfigurationException: Lists every binding naming an unknown group.
        """
        missing: dict[str, str] = {}
        for (table, column), group_code in sorted(self._bindings.items()):
            if not await self._registry.group_exists(group_code):
                missing[f"{table}.{column}"] = group_code
        if missing:
            logger.error("Field bindings reference unknown groups: %s", missing)
            raise ConfigurationException(
                f"Field bindings reference unknown groups: {sorted(set(missing.values()))}",
                details={"bindings": missing},
            )
        logger.info("Verified %d field bindings", len(self._bindings))
