"""Route test fixtures: FastAPI test client over the SQL store.

Invariants:
    - get_task_store dependency overridden to the in-memory SqlTaskStore
    - Overrides cleared after every test

Design Decisions:
    - httpx ASGITransport does not run the lifespan, so no real store is built
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tasks_api.infrastructure.document_store import get_task_store
from tasks_api.main import app


@pytest.fixture
async def client(sql_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_task_store] = lambda: sql_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def client_for():
    """Build a test client around an arbitrary store stub."""

    def _make(store, raise_app_exceptions: bool = True) -> AsyncClient:
        app.dependency_overrides[get_task_store] = lambda: store
        return AsyncClient(
            transport=ASGITransport(
                app=app, raise_app_exceptions=raise_app_exceptions,
            ),
            base_url="http://test",
        )

    yield _make
    app.dependency_overrides.clear()
