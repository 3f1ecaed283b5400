"""
Category model - named grouping of items (Steel, Sand, ...).
"""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column

from buildstore.db.base import Base

# Inserted idempotently on every startup
DEFAULT_CATEGORIES = ("Steel", "Sand", "Tapi", "Cement")


class Category(Base):
    """Category entity. Seeded at bootstrap, immutable afterwards."""

    __tablename__ = "categories"
    __table_args__ = (CheckConstraint("name <> ''", name="ck_categories_name_not_empty"),)

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String, unique=True, nullable=False)

    def __repr__(self) -> str:
        return f"<Category(id={self.id}, name={self.name})>"
