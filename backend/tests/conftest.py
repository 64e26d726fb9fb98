"""Root conftest — shared test configuration and fakes.

Invariants:
    - Importing board.main never points at the real database file
    - Tests that need time use the stepping clock, never the wall clock
    - InMemoryMessageStore honors the MessageStore contract (absence is None,
      last write wins, values copied in and out)
"""

import copy
import os
from datetime import datetime, timedelta, timezone

import pytest

from board.core.domain_types import MessageId
from board.core.message import Message
from board.core.search_messages import filter_messages

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FORMAT", "text")

T0 = datetime(2026, 10, 18, 12, 0, 0, 123000, tzinfo=timezone.utc)


class SteppingClock:
    """Deterministic Clock: returns start, then start + step, start + 2*step, ..."""

    def __init__(self, start: datetime = T0, step: timedelta = timedelta(seconds=1)):
        self.current = start
        self.step = step

    def now(self) -> datetime:
        value = self.current
        self.current = self.current + self.step
        return value


class InMemoryMessageStore:
    """MessageStore held in a plain dict (insertion-ordered, not durable)."""

    def __init__(self):
        self._messages: dict[MessageId, Message] = {}

    def insert(self, message_id: MessageId, message: Message) -> None:
        self._messages[message_id] = copy.copy(message)

    def get(self, message_id: MessageId) -> Message | None:
        message = self._messages.get(message_id)
        return copy.copy(message) if message is not None else None

    def remove(self, message_id: MessageId) -> Message | None:
        return self._messages.pop(message_id, None)

    def search(self, query: str) -> list[Message]:
        return filter_messages(self.list(), query)

    def list(self) -> list[Message]:
        return [copy.copy(m) for m in self._messages.values()]


@pytest.fixture
def clock() -> SteppingClock:
    return SteppingClock()


@pytest.fixture
def memory_store() -> InMemoryMessageStore:
    return InMemoryMessageStore()
