"""Results of ConstraintValidator.validate (returned, not raised)."""

from dataclasses import dataclass, field
from typing import Any

from admin_core.domain.exceptions import InvalidEnumValueException


@dataclass(frozen=True)
class ValidationOk:
    """The value is acceptable (bound and active, or the field is unbound)."""

    ok: bool = True


@dataclass(frozen=True)
class InvalidEnumValue:
    """The value is not an active subcode of the group governing the field."""

    group_code: str
    value: Any
    # Context only; results compare by (group_code, value).
    table: str | None = field(default=None, compare=False)
    column: str | None = field(default=None, compare=False)
    ok: bool = field(default=False, compare=False)

    def to_exception(self) -> InvalidEnumValueException:
        return InvalidEnumValueException(
            self.group_code, self.value, table=self.table, column=self.column
        )


ValidationResult = ValidationOk | InvalidEnumValue
