"""API test fixtures — in-memory store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_user_store dependency overridden to use the test store
    - Lifespan never runs: ASGITransport skips it, so no file database is created
"""

import pytest
from httpx import ASGITransport, AsyncClient

from tracker.api.dependencies import get_user_store
from tracker.infrastructure.database import DatabaseSessionManager
from tracker.infrastructure.user_store import SqlUserStore
from tracker.main import create_app


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
def user_store(db_manager):
    return SqlUserStore(db_manager)


@pytest.fixture
def app():
    return create_app()


@pytest.fixture
async def client(app, user_store):
    """FastAPI test client with the store dependency overridden."""
    app.dependency_overrides[get_user_store] = lambda: user_store
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
async def seed_user(client):
    """Create a user through the API and return its JSON body."""
    res = await client.post("/api/users", data={"username": "bob"})
    assert res.status_code == 200
    return res.json()
