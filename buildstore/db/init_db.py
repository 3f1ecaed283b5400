"""
Schema creation and seed data, run at application startup.
"""

from loguru import logger
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncEngine

from buildstore.db.base import Base
from buildstore.db.models import Category
from buildstore.db.models.category import DEFAULT_CATEGORIES


async def init_db(engine: AsyncEngine) -> None:
    """Create missing tables and insert the default categories (insert-or-ignore on name)."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
        stmt = (
            insert(Category)
            .values([{"name": name} for name in DEFAULT_CATEGORIES])
            .on_conflict_do_nothing(index_elements=["name"])
        )
        await conn.execute(stmt)
    logger.info("Store ready ({} default categories ensured)", len(DEFAULT_CATEGORIES))
