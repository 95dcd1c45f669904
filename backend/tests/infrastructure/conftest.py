"""Store fixtures — fresh in-memory SQLite per test."""

import pytest

from tracker.infrastructure.database import DatabaseSessionManager
from tracker.infrastructure.user_store import SqlUserStore


@pytest.fixture
async def db_manager():
    manager = DatabaseSessionManager("sqlite+aiosqlite:///:memory:")
    await manager.create_all()
    yield manager
    await manager.dispose()


@pytest.fixture
def store(db_manager):
    return SqlUserStore(db_manager)
