"""Record write guard: the checks every business write passes before it is stored."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import date
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from admin_core.application.services.authorization_service import (
        AuthorizationService,
    )
    from admin_core.application.services.code_allocator import CodeAllocator
    from admin_core.application.services.constraint_validator import (
        ConstraintValidator,
    )

logger = logging.getLogger(__name__)


class RecordWriteGuard:
    """Authorizes, validates, and (optionally) mints a business code for a write.

    Checks run in that order so a rejected writer or an invalid record never
    consumes an ordinal. The caller persists the returned values itself.
    """

    def __init__(
        self,
        authorization: AuthorizationService,
        validator: ConstraintValidator,
        allocator: CodeAllocator,
    ) -> None:
        self._authorization = authorization
        self._validator = validator
        self._allocator = allocator

    async def prepare(
        self,
        user_id: str | None,
        resource: str,
        table: str,
        values: Mapping[str, Any],
        *,
        action: str = "write",
        code_field: str | None = None,
        entity_type: str | None = None,
        period: str | int | date | None = None,
    ) -> dict[str, Any]:
        """Return a copy of values ready to persist.

        When code_field is given and values has no value for it, a code is
        allocated for entity_type (defaults to table) and stored there.

        Raises:
            AuthorizationException: The user may not perform action on resource.
            InvalidEnumValueException: A bound column holds an inactive or unknown value.
            SequenceExhaustedException / AllocationFailedException: From allocation.
        """
        await self._authorization.require(user_id, resource, action)
        await self._validator.require_valid(table, values)
        prepared = dict(values)
        if code_field and not prepared.get(code_field):
            prepared[code_field] = await self._allocator.next_code(
                entity_type or table, period
            )
            logger.debug("Assigned %s=%s on %s", code_field, prepared[code_field], table)
        return prepared
