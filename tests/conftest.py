"""
Pytest fixtures - per-test SQLite store, application and HTTP client.
"""

from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from buildstore.config import Settings
from buildstore.db.init_db import init_db
from buildstore.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    # A file database per test: aiosqlite in-memory databases are per-connection
    return Settings(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")


@pytest_asyncio.fixture
async def app(settings: Settings) -> AsyncGenerator[FastAPI, None]:
    app = create_app(settings)
    await init_db(app.state.engine)
    yield app
    await app.state.engine.dispose()


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac


@pytest_asyncio.fixture
async def session(app: FastAPI) -> AsyncGenerator[AsyncSession, None]:
    async with app.state.session_maker() as s:
        yield s


@pytest.fixture
def count_rows(session: AsyncSession):
    """Count rows of a model straight from the store."""

    async def count(model) -> int:
        result = await session.execute(select(func.count()).select_from(model))
        return result.scalar_one()

    return count


@pytest_asyncio.fixture
async def registered_user(client: AsyncClient) -> dict:
    credentials = {"username": "alice", "password": "p1"}
    response = await client.post("/signup", json=credentials)
    assert response.status_code == 200
    return credentials
