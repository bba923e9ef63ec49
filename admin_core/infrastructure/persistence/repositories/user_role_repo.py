"""UserRole repository: the ordered role-code list stored on each user record."""

from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from admin_core.application.dtos.user import UserRoleAssignment
from admin_core.infrastructure.persistence.models.user import User
from admin_core.infrastructure.persistence.repositories.base import BaseRepository


class UserRoleRepository(BaseRepository[User]):
    """Reads and replaces app_user.assigned_roles. Does not manage accounts."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, User)

    async def get_assignment(self, user_id: str) -> UserRoleAssignment | None:
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        return UserRoleAssignment(
            user_id=user.id,
            role_codes=tuple(user.assigned_roles or ()),
            is_active=user.is_active,
        )

    async def set_assigned_roles(
        self, user_id: str, role_codes: list[str]
    ) -> UserRoleAssignment | None:
        user = await self.get_by_id(user_id)
        if user is None:
            return None
        user.assigned_roles = list(role_codes)
        user = await self.update(user)
        return UserRoleAssignment(
            user_id=user.id,
            role_codes=tuple(user.assigned_roles),
            is_active=user.is_active,
        )
