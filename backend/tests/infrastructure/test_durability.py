"""Durability tests — records survive a full teardown of the engine and store.

Design Decisions:
    - File-backed SQLite in tmp_path: a new DatabaseSessionManager over the same
      file stands in for a process restart
"""

from datetime import datetime, timezone

from board.core.message import Message
from board.infrastructure.database import DatabaseSessionManager
from board.infrastructure.message_store import SqlMessageStore


def test_insert_is_readable_after_restart(tmp_path):
    url = f"sqlite:///{tmp_path / 'nested' / 'board.db'}"
    msg = Message(
        id="persist-me", title="Hello", body="World",
        created_at=datetime(2026, 10, 18, tzinfo=timezone.utc),
    )

    first = DatabaseSessionManager(url)
    first.create_schema()
    SqlMessageStore(first).insert(msg.id, msg)
    first.dispose()

    second = DatabaseSessionManager(url)
    second.create_schema()
    try:
        store = SqlMessageStore(second)
        assert store.get("persist-me") == msg
        assert store.list() == [msg]
    finally:
        second.dispose()


def test_remove_is_durable(tmp_path):
    url = f"sqlite:///{tmp_path / 'board.db'}"
    msg = Message(
        id="gone", title="t", body="b",
        created_at=datetime(2026, 10, 18, tzinfo=timezone.utc),
    )

    first = DatabaseSessionManager(url)
    first.create_schema()
    store = SqlMessageStore(first)
    store.insert(msg.id, msg)
    store.remove(msg.id)
    first.dispose()

    second = DatabaseSessionManager(url)
    try:
        assert SqlMessageStore(second).get("gone") is None
    finally:
        second.dispose()
