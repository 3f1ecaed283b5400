"""
Catalog service - categories and items.
Keeps routers thin: resolves categories, maps store failures onto StoreError.
"""

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError

from buildstore.core.errors import NotFoundError, StoreError
from buildstore.db.repositories.category_repository import CategoryRepository
from buildstore.db.repositories.item_repository import ItemRepository
from buildstore.schemas.category import CategoryResponse
from buildstore.schemas.item import ItemCreate, ItemResponse, ItemUpdate

GENERIC_FAILURE = "Internal Server Error"


class CatalogService:
    """Handles category listing and item CRUD."""

    def __init__(self, category_repo: CategoryRepository, item_repo: ItemRepository):
        self.category_repo = category_repo
        self.item_repo = item_repo

    async def list_categories(self) -> list[CategoryResponse]:
        try:
            categories = await self.category_repo.list_all()
        except SQLAlchemyError as exc:
            logger.error("Category query failed: {}", exc)
            raise StoreError(GENERIC_FAILURE) from exc
        return [CategoryResponse.model_validate(c) for c in categories]

    async def list_items(self, category_name: str) -> list[ItemResponse]:
        """Items of the named category. Unknown names yield an empty list."""
        try:
            items = await self.item_repo.list_by_category_name(category_name)
        except SQLAlchemyError as exc:
            logger.error("Item query failed for category {!r}: {}", category_name, exc)
            raise StoreError(GENERIC_FAILURE) from exc
        return [ItemResponse.model_validate(i) for i in items]

    async def add_item(self, data: ItemCreate) -> int:
        """Resolve the category by name, then insert. Not atomic: two statements."""
        try:
            category_id = await self.category_repo.get_id_by_name(data.category)
        except SQLAlchemyError as exc:
            logger.error("Category lookup failed for {!r}: {}", data.category, exc)
            raise StoreError(GENERIC_FAILURE) from exc
        if category_id is None:
            raise NotFoundError("Category not found")

        try:
            item_id = await self.item_repo.create(category_id, data.description, data.price)
        except SQLAlchemyError as exc:
            logger.error("Item insert failed: {}", exc)
            raise StoreError("Failed to add item") from exc
        logger.info("Item {} added to category {!r}", item_id, data.category)
        return item_id

    async def update_item(self, item_id: int | str, data: ItemUpdate) -> None:
        """Overwrite description and price. A missing id still counts as success."""
        try:
            affected = await self.item_repo.update(item_id, data.description, data.price)
        except SQLAlchemyError as exc:
            logger.error("Item {} update failed: {}", item_id, exc)
            raise StoreError("Failed to update item") from exc
        if not affected:
            logger.warning("Update matched no item with id {}", item_id)

    async def delete_item(self, item_id: int | str) -> None:
        """Delete by id. A missing id still counts as success."""
        try:
            affected = await self.item_repo.delete(item_id)
        except SQLAlchemyError as exc:
            logger.error("Item {} delete failed: {}", item_id, exc)
            raise StoreError("Failed to delete item") from exc
        if not affected:
            logger.warning("Delete matched no item with id {}", item_id)
