"""DTOs for user role assignment (no dependency on ORM)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class UserRoleAssignment:
    """A user's ordered set of role codes, snapshotted per request.

    An inactive user keeps their assignment but is granted nothing.
    """

    user_id: str
    role_codes: tuple[str, ...]
    is_active: bool = True
