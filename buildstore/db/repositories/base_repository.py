"""
Base repository - generic data access shared by all tables.
Every write is a single statement committed immediately.
"""

from typing import Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from buildstore.db.base import Base

ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Generic async repository. Subclasses define table-specific queries."""

    def __init__(self, session: AsyncSession, model: type[ModelType]):
        self.session = session
        self.model = model

    async def list_all(self) -> list[ModelType]:
        """Every row, in the store's default order."""
        result = await self.session.execute(select(self.model))
        return list(result.scalars().all())

    async def add(self, entity: ModelType) -> ModelType:
        """Insert and commit; the entity comes back with its new id."""
        self.session.add(entity)
        try:
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise
        return entity
