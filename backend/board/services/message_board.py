"""Message Board Service — orchestrates entity rules and the store for each request.

Invariants:
    - Store absence becomes NotFoundError here, and only here
    - Every successful create/update is persisted before it is returned
    - A rejected update never reaches the store (entity validates before mutating)

Design Decisions:
    - Store and clock injected through the constructor: routes get a board from a
      FastAPI dependency, tests pass an in-memory store and a fixed clock
    - Service methods are synchronous: the core contract has no async IO
    - update and delete hold a process-wide lock so a read-merge-write never
      interleaves with a delete of the same record (threaded servers)
"""

import logging
import threading

from board.core.domain_types import MessageId
from board.core.errors import NotFoundError, ValidationError
from board.core.message import (
    Message, MessageDraft, MessagePatch, apply_update, create_message,
)
from board.core.repository_protocols import Clock, MessageStore

logger = logging.getLogger(__name__)

_RESOURCE = "Message"

_mutation_lock = threading.RLock()


class MessageBoard:
    """CRUD + search over a MessageStore."""

    def __init__(self, store: MessageStore, clock: Clock):
        self._store = store
        self._clock = clock

    def create(self, draft: MessageDraft) -> Message:
        message = create_message(draft, self._clock.now())
        self._store.insert(message.id, message)
        logger.info("Message created", extra={"message_id": message.id})
        return message

    def list_all(self) -> list[Message]:
        return self._store.list()

    def get(self, message_id: MessageId) -> Message:
        message = self._store.get(message_id)
        if message is None:
            raise NotFoundError(_RESOURCE, message_id)
        return message

    def update(self, message_id: MessageId, patch: MessagePatch) -> Message:
        with _mutation_lock:
            existing = self.get(message_id)
            updated = apply_update(existing, patch, self._clock.now())
            self._store.insert(updated.id, updated)
        logger.info("Message updated", extra={"message_id": message_id})
        return updated

    def delete(self, message_id: MessageId) -> Message:
        with _mutation_lock:
            removed = self._store.remove(message_id)
        if removed is None:
            raise NotFoundError(_RESOURCE, message_id)
        logger.info("Message deleted", extra={"message_id": message_id})
        return removed

    def search(self, query: str | None) -> list[Message]:
        """Case-insensitive substring search over title and body."""
        if not query:
            raise ValidationError("Query parameter is required.", field="query")
        return self._store.search(query)
