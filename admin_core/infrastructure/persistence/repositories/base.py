"""Base repository: generic reads and create/update for ORM models."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from admin_core.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository with get_by_id, get_one_by, create and update.

    Rows are soft-deleted through is_active, so there is no delete here.
    Cache invalidation belongs to the services that own the cached views.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def get_one_by(self, **criteria: Any) -> ModelType | None:
        """Return the record matching all column=value criteria, or None."""
        model: Any = self.model
        stmt = select(self.model).where(
            *(getattr(model, name) == value for name, value in criteria.items())
        )
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record and return it refreshed (server defaults loaded)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes to an attached record and return it refreshed."""
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
