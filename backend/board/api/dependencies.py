"""Request Dependencies — FastAPI providers for the store, clock, and board service.

Invariants:
    - Routes obtain the MessageBoard only through get_message_board
    - get_message_store fails loudly if the database was never initialized

Design Decisions:
    - Store and clock are separate dependencies so tests override either one via
      app.dependency_overrides without touching the database singleton
"""

from fastapi import Depends

import board.infrastructure.database as db_module
from board.core.repository_protocols import Clock, MessageStore
from board.infrastructure.clock import SystemClock
from board.infrastructure.message_store import SqlMessageStore
from board.services.message_board import MessageBoard

_system_clock = SystemClock()


def get_message_store() -> MessageStore:
    if db_module.db_manager is None:
        raise RuntimeError("Database not initialized")
    return SqlMessageStore(db_module.db_manager)


def get_clock() -> Clock:
    return _system_clock


def get_message_board(
    store: MessageStore = Depends(get_message_store),
    clock: Clock = Depends(get_clock),
) -> MessageBoard:
    return MessageBoard(store, clock)
