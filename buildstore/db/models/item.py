"""
Item model - priced, described entry belonging to one category.
"""

from sqlalchemy import Float, ForeignKey, Text
from sqlalchemy.orm import Mapped, mapped_column

from buildstore.db.base import Base


class Item(Base):
    """Item entity. Referenced category is checked at insert time, no cascade."""

    __tablename__ = "items"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    category_id: Mapped[int | None] = mapped_column(ForeignKey("categories.id"), nullable=True)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    price: Mapped[float | None] = mapped_column(Float, nullable=True)

    def __repr__(self) -> str:
        return f"<Item(id={self.id}, category_id={self.category_id}, price={self.price})>"
