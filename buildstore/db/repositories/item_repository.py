"""
Item repository - item queries by category name and single-statement writes.
"""

from sqlalchemy import delete, select, update

from buildstore.db.models.category import Category
from buildstore.db.models.item import Item
from buildstore.db.repositories.base_repository import BaseRepository


class ItemRepository(BaseRepository[Item]):
    """Item-specific queries. Update and delete report affected row counts."""

    def __init__(self, session):
        super().__init__(session, Item)

    async def list_by_category_name(self, name: str) -> list[Item]:
        """Items whose category has this name; empty when the name is unknown."""
        category_id = select(Category.id).where(Category.name == name).scalar_subquery()
        result = await self.session.execute(select(Item).where(Item.category_id == category_id))
        return list(result.scalars().all())

    async def create(self, category_id: int, description: str | None, price: float | None) -> int:
        """Insert an item and return its id."""
        item = await self.add(Item(category_id=category_id, description=description, price=price))
        return item.id

    async def update(self, id: int | str, description: str | None, price: float | None) -> int:
        """Overwrite description and price. Returns rows affected (0 for a missing id)."""
        result = await self.session.execute(
            update(Item).where(Item.id == id).values(description=description, price=price)
        )
        await self.session.commit()
        return result.rowcount

    async def delete(self, id: int | str) -> int:
        """Delete by id. Returns rows affected (0 for a missing or non-numeric id)."""
        result = await self.session.execute(delete(Item).where(Item.id == id))
        await self.session.commit()
        return result.rowcount
