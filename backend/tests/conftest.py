"""Root conftest: shared test configuration and SQL store fixtures.

Invariants:
    - Tests never reach a real Firestore project
    - Every test gets a fresh in-memory SQLite database
"""

import os

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, async_sessionmaker, create_async_engine,
)

os.environ.setdefault("STORE_BACKEND", "sql")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///test.db")

from tasks_api.db.base import Base  # noqa: E402
from tasks_api.infrastructure.database import DatabaseSessionManager  # noqa: E402
from tasks_api.infrastructure.sql_store import SqlTaskStore  # noqa: E402
import tasks_api.models  # noqa: E402,F401


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
def session_manager(test_engine, test_session_factory):
    """DatabaseSessionManager bound to the in-memory engine (no pool kwargs)."""
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
def sql_store(session_manager):
    return SqlTaskStore(session_manager, "tasks")
