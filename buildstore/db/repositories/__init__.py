# Repository pattern: one class per table, data access only

from buildstore.db.repositories.category_repository import CategoryRepository
from buildstore.db.repositories.item_repository import ItemRepository
from buildstore.db.repositories.user_repository import UserRepository

__all__ = ["CategoryRepository", "ItemRepository", "UserRepository"]
