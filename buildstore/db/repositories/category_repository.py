"""
Category repository - read side of the seeded category table.
"""

from sqlalchemy import select

from buildstore.db.models.category import Category
from buildstore.db.repositories.base_repository import BaseRepository


class CategoryRepository(BaseRepository[Category]):
    def __init__(self, session):
        super().__init__(session, Category)

    async def get_id_by_name(self, name: str | None) -> int | None:
        """Resolve a category name to its id."""
        result = await self.session.execute(select(Category.id).where(Category.name == name))
        return result.scalar_one_or_none()
