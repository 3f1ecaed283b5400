"""
Async database session management.
The engine and session factory are built by the application factory and kept on
app.state; each request gets its own session from that injected factory.
"""

from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from buildstore.config import Settings


def build_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the configured store."""
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,  # Verify connections before use
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory: one session per request."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Yield a database session per request. Rolls back on error, closes on exit."""
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


# Type alias for FastAPI dependency injection
DbSession = Annotated[AsyncSession, Depends(get_db)]
