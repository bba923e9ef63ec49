"""Domain value objects for admin-core.

Value objects are immutable types that represent domain concepts with
self-validation. They have no identity, only value.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime

from admin_core.core.constants import (
    CODE_SEPARATOR,
    GROUP_CODE_PREFIX,
    GROUP_CODE_WIDTH,
    PERIOD_WIDTH,
)

# Upper-case segments joined by hyphens (e.g. USER, MAIN-TASK, IT-EDU).
_PREFIX_RE = re.compile(r"^[A-Z0-9]+(-[A-Z0-9]+)*$")
_PERIOD_RE = re.compile(r"^\d{" + str(PERIOD_WIDTH) + r"}$")
_CODE_RE = re.compile(r"^[A-Za-z0-9_]+(-[A-Za-z0-9_]+)*$")
_GROUP_NUMBER_RE = re.compile(r"^" + GROUP_CODE_PREFIX + r"(\d+)$")


def _validate_code_token(value: str, field_name: str, max_len: int) -> None:
    """Validate non-empty, length, and token format. Raises ValueError on failure."""
    if not value:
        raise ValueError(f"{field_name} must be a non-empty string")
    if len(value) > max_len:
        raise ValueError(f"{field_name} must not exceed {max_len} characters")
    if not _CODE_RE.match(value):
        raise ValueError(
            f"{field_name} must be alphanumeric/underscore segments joined by hyphens"
        )


@dataclass(frozen=True)
class GroupCode:
    """Value object for a master code group identifier (e.g. 'GROUP002')."""

    value: str

    def __post_init__(self) -> None:
        _validate_code_token(self.value, "Group code", 64)

    @property
    def number(self) -> int | None:
        """Sequence number of an auto-numbered code (GROUP002 -> 2), else None."""
        match = _GROUP_NUMBER_RE.match(self.value)
        return int(match.group(1)) if match else None

    @classmethod
    def numbered(cls, number: int) -> "GroupCode":
        """Build an auto-numbered group code, e.g. 2 -> GROUP002."""
        return cls(f"{GROUP_CODE_PREFIX}{number:0{GROUP_CODE_WIDTH}d}")


@dataclass(frozen=True)
class CodePrefix:
    """Value object for a business code prefix (e.g. 'USER', 'MAIN-TASK')."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Code prefix must be a non-empty string")
        if not _PREFIX_RE.match(self.value):
            raise ValueError(
                "Code prefix must be upper-case alphanumeric segments joined by hyphens "
                "(e.g., 'USER', 'MAIN-TASK')"
            )


@dataclass(frozen=True)
class Period:
    """Value object for an allocation period: two-digit year (e.g. '25')."""

    value: str

    def __post_init__(self) -> None:
        if not _PERIOD_RE.match(self.value):
            raise ValueError(
                f"Period must be exactly {PERIOD_WIDTH} digits (e.g., '25'), got {self.value!r}"
            )

    @classmethod
    def coerce(cls, period: "str | int | date | Period") -> "Period":
        """Build a Period from '25', 2025, 25, or a date/datetime."""
        if isinstance(period, Period):
            return period
        if isinstance(period, (date, datetime)):
            return cls.from_year(period.year)
        if isinstance(period, bool):
            raise ValueError("Period must not be a boolean")
        if isinstance(period, int):
            if period >= 100:
                return cls.from_year(period)
            if period < 0:
                raise ValueError("Period must not be negative")
            return cls(f"{period:0{PERIOD_WIDTH}d}")
        return cls(str(period).strip())

    @classmethod
    def from_year(cls, year: int) -> "Period":
        """Two-digit period from a full year (2025 -> '25')."""
        return cls(f"{year % 100:0{PERIOD_WIDTH}d}")


@dataclass(frozen=True)
class BusinessCode:
    """Value object for a human-readable business code: PREFIX-YY-NNN.

    The ordinal is zero-padded to `width` digits; wider ordinals are
    rendered in full. The string form is a public contract.
    """

    prefix: str
    period: str
    ordinal: int
    width: int = 3

    def __post_init__(self) -> None:
        CodePrefix(self.prefix)
        Period(self.period)
        if self.ordinal < 1:
            raise ValueError("Ordinal must be positive")
        if self.width < 1:
            raise ValueError("Ordinal width must be positive")

    def __str__(self) -> str:
        return CODE_SEPARATOR.join(
            (self.prefix, self.period, f"{self.ordinal:0{self.width}d}")
        )

    @classmethod
    def parse(cls, code: str, width: int = 3) -> "BusinessCode":
        """Parse 'MAIN-TASK-25-001' into prefix, period, and ordinal.

        Raises:
            ValueError: If the string is not a well-formed business code.
        """
        parts = code.rsplit(CODE_SEPARATOR, 2)
        if len(parts) != 3:
            raise ValueError(f"Not a business code: {code!r}")
        prefix, period, ordinal = parts
        if not ordinal.isdigit() or len(ordinal) < width:
            raise ValueError(
                f"Business code ordinal must be at least {width} digits: {code!r}"
            )
        return cls(prefix=prefix, period=period, ordinal=int(ordinal), width=width)
