"""Master code write schemas (group and subcode upserts)."""

from pydantic import BaseModel, ConfigDict, Field

_CODE_PATTERN = r"^[A-Za-z0-9_]+(-[A-Za-z0-9_]+)*$"


class GroupUpsert(BaseModel):
    """Create-or-update a group, keyed by group_code.

    Set previous_code to rename a group; renaming is refused once the
    group has subcodes.
    """

    model_config = ConfigDict(str_strip_whitespace=True)

    group_code: str = Field(..., min_length=1, max_length=64, pattern=_CODE_PATTERN)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    display_order: int = Field(default=0, ge=0)
    is_active: bool = True
    is_system: bool = False
    previous_code: str | None = Field(default=None, max_length=64)


class SubcodeUpsert(BaseModel):
    """Create-or-update a subcode, keyed by (group_code, subcode)."""

    model_config = ConfigDict(str_strip_whitespace=True)

    group_code: str = Field(..., min_length=1, max_length=64)
    subcode: str = Field(..., min_length=1, max_length=128)
    name: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=1000)
    remark: str | None = Field(default=None, max_length=1000)
    value1: str | None = Field(default=None, max_length=255)
    value2: str | None = Field(default=None, max_length=255)
    value3: str | None = Field(default=None, max_length=255)
    display_order: int = Field(default=0, ge=0)
    is_active: bool = True
    is_system: bool = False
