"""Role write schemas."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PermissionEntryIn(BaseModel):
    """A resource and the actions granted on it (free-form strings)."""

    resource: str = Field(..., min_length=1, max_length=255)
    actions: list[str] = Field(..., min_length=1, max_length=50)

    @field_validator("actions")
    @classmethod
    def dedupe_actions(cls, value: list[str]) -> list[str]:
        """Drop blank and repeated actions, keeping first occurrence order."""
        seen: dict[str, None] = {}
        for action in value:
            action = action.strip()
            if action:
                seen.setdefault(action, None)
        if not seen:
            raise ValueError("actions must contain at least one non-blank action")
        return list(seen)


class RoleUpsert(BaseModel):
    """Create-or-update a role, keyed by role_code. Permissions are replaced wholesale."""

    model_config = ConfigDict(str_strip_whitespace=True)

    role_code: str = Field(..., min_length=1, max_length=64)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    display_order: int = Field(default=0, ge=0)
    is_active: bool = True
    is_system: bool = False
    permissions: list[PermissionEntryIn] = Field(default_factory=list, max_length=500)

