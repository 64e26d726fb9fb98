"""Store test fixtures — in-memory SQLite engine and store instances.

Invariants:
    - Every test gets a fresh database (StaticPool keeps one shared connection)
    - Both store implementations exposed through one parametrized fixture
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from board.infrastructure.database import DatabaseSessionManager
from board.infrastructure.message_store import SqlMessageStore


@pytest.fixture
def db_manager():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    manager = DatabaseSessionManager.from_engine(engine)
    manager.create_schema()
    yield manager
    manager.dispose()


@pytest.fixture(params=["sql", "memory"])
def store(request, db_manager, memory_store):
    if request.param == "sql":
        return SqlMessageStore(db_manager)
    return memory_store
