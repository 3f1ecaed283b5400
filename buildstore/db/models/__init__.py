from buildstore.db.models.category import Category
from buildstore.db.models.item import Item
from buildstore.db.models.user import User

__all__ = ["Category", "Item", "User"]
