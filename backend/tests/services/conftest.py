"""Service test fixtures — in-memory SQLite store + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_message_store and get_clock dependencies overridden per test
    - db_manager singleton patched so readiness probes see the test database

Design Decisions:
    - SQLite in-memory with StaticPool: fast, no external dependency, one shared
      connection across sessions
    - Routes exercised against the real SqlMessageStore, not the in-memory fake
"""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

import board.infrastructure.database as db_module
from board.api.dependencies import get_clock, get_message_store
from board.infrastructure.database import DatabaseSessionManager
from board.infrastructure.message_store import SqlMessageStore
from board.main import app


@pytest.fixture
def test_db_manager():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    manager = DatabaseSessionManager.from_engine(engine)
    manager.create_schema()
    yield manager
    manager.dispose()


@pytest.fixture
def sql_store(test_db_manager):
    return SqlMessageStore(test_db_manager)


@pytest.fixture
async def client(test_db_manager, sql_store, clock):
    """FastAPI test client with store and clock dependencies overridden."""
    app.dependency_overrides[get_message_store] = lambda: sql_store
    app.dependency_overrides[get_clock] = lambda: clock

    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
