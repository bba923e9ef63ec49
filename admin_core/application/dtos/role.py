"""DTOs for role and authorization use cases (no dependency on ORM)."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class PermissionEntry:
    """One resource and the actions allowed on it. Strings are kept verbatim."""

    resource: str
    actions: tuple[str, ...]

    def pairs(self) -> set[tuple[str, str]]:
        return {(self.resource, action) for action in self.actions}

    def to_dict(self) -> dict[str, Any]:
        return {"resource": self.resource, "actions": list(self.actions)}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "PermissionEntry":
        return cls(resource=data["resource"], actions=tuple(data.get("actions") or ()))


@dataclass(frozen=True)
class RoleResult:
    """Role read-model (result of get_role, list_active_roles, upsert_role)."""

    id: str
    role_code: str
    name: str
    description: str | None
    display_order: int
    is_active: bool
    is_system: bool
    permissions: tuple[PermissionEntry, ...] = field(default_factory=tuple)

    def permission_set(self) -> frozenset[tuple[str, str]]:
        """Flatten permission entries into (resource, action) pairs."""
        result: set[tuple[str, str]] = set()
        for entry in self.permissions:
            result |= entry.pairs()
        return frozenset(result)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "role_code": self.role_code,
            "name": self.name,
            "description": self.description,
            "display_order": self.display_order,
            "is_active": self.is_active,
            "is_system": self.is_system,
            "permissions": [p.to_dict() for p in self.permissions],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RoleResult":
        return cls(
            id=data["id"],
            role_code=data["role_code"],
            name=data["name"],
            description=data.get("description"),
            display_order=data.get("display_order", 0),
            is_active=data["is_active"],
            is_system=data.get("is_system", False),
            permissions=tuple(
                PermissionEntry.from_dict(p) for p in data.get("permissions") or ()
            ),
        )
