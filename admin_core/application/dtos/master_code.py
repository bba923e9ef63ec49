"""DTOs for master code use cases (no dependency on ORM)."""

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class GroupResult:
    """Group read-model (result of get_group, list_groups, upsert_group)."""

    id: str
    group_code: str
    name: str
    description: str | None
    display_order: int
    is_active: bool
    is_system: bool

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "GroupResult":
        return cls(**data)


@dataclass(frozen=True)
class SubcodeResult:
    """Subcode read-model (result of list_subcodes, upsert_subcode)."""

    id: str
    group_code: str
    subcode: str
    name: str
    description: str | None
    remark: str | None
    value1: str | None
    value2: str | None
    value3: str | None
    display_order: int
    is_active: bool
    is_system: bool

    @property
    def sort_key(self) -> tuple[int, str]:
        """Listing order: display_order, ties broken by subcode ascending."""
        return (self.display_order, self.subcode)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SubcodeResult":
        return cls(**data)
