"""Boundary Protocols — contracts between core and shell.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO (storage, clock) accessed through Protocol types
    - Implementations provided by shell via dependency injection

Design Decisions:
    - Protocol over ABC: structural subtyping, test fakes need no inheritance
    - Store methods are synchronous: every operation is a bounded single-key
      (or full-scan) computation with no async IO
"""

from datetime import datetime
from typing import Protocol

from board.core.domain_types import MessageId
from board.core.message import Message


class MessageStore(Protocol):
    """Contract for durable message persistence — implemented by shell.

    get/remove return None for a missing key; absence is never an error.
    Returned messages are snapshots detached from the stored record.
    """
    def insert(self, message_id: MessageId, message: Message) -> None: ...
    def get(self, message_id: MessageId) -> Message | None: ...
    def remove(self, message_id: MessageId) -> Message | None: ...
    def search(self, query: str) -> list[Message]: ...
    def list(self) -> list[Message]: ...


class Clock(Protocol):
    """Contract for the current time — UTC, millisecond resolution."""
    def now(self) -> datetime: ...
