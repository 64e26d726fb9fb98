"""SQL Message Store — durable, write-through MessageStore over SQLAlchemy.

Invariants:
    - Every write commits in its own session before returning (write-through)
    - get/remove return None for a missing key — absence is never an exception
    - Returned Messages are built fresh from rows (snapshots, never ORM instances)
    - Single-call writes are serialized by a process-wide lock: last write wins, no
      interleaving (multi-call read-modify-write is serialized by the service)

Design Decisions:
    - session.merge for insert: one statement path for insert and overwrite
    - Timestamps converted to UTC on write and re-tagged as UTC on read: SQLite
      drops tzinfo on DateTime columns
    - search delegates to the pure core filter over list() (linear scan, no index)
"""

import logging
import threading
from datetime import datetime, timezone

from sqlalchemy import select

from board.core.domain_types import MessageId
from board.core.message import Message
from board.core.search_messages import filter_messages
from board.infrastructure.database import DatabaseSessionManager
from board.models.message import MessageRecord

logger = logging.getLogger(__name__)

_write_lock = threading.RLock()


def _as_utc(ts: datetime | None) -> datetime | None:
    if ts is None or ts.tzinfo is not None:
        return ts
    return ts.replace(tzinfo=timezone.utc)


def _to_message(row: MessageRecord) -> Message:
    return Message(
        id=MessageId(row.id),
        title=row.title,
        body=row.body,
        attachment_url=row.attachment_url,
        created_at=_as_utc(row.created_at),
        updated_at=_as_utc(row.updated_at),
    )


def _to_utc(ts: datetime | None) -> datetime | None:
    return ts.astimezone(timezone.utc) if ts is not None else None


def _to_record(message_id: MessageId, message: Message) -> MessageRecord:
    return MessageRecord(
        id=message_id,
        title=message.title,
        body=message.body,
        attachment_url=message.attachment_url,
        created_at=_to_utc(message.created_at),
        updated_at=_to_utc(message.updated_at),
    )


class SqlMessageStore:
    """MessageStore backed by the `messages` table."""

    def __init__(self, db: DatabaseSessionManager):
        self._db = db

    def insert(self, message_id: MessageId, message: Message) -> None:
        with _write_lock, self._db.session() as session:
            session.merge(_to_record(message_id, message))
            session.commit()
        logger.debug("Message stored", extra={"message_id": message_id})

    def get(self, message_id: MessageId) -> Message | None:
        with self._db.session() as session:
            row = session.get(MessageRecord, message_id)
            return _to_message(row) if row is not None else None

    def remove(self, message_id: MessageId) -> Message | None:
        with _write_lock, self._db.session() as session:
            row = session.get(MessageRecord, message_id)
            if row is None:
                return None
            removed = _to_message(row)
            session.delete(row)
            session.commit()
        logger.debug("Message removed", extra={"message_id": message_id})
        return removed

    def search(self, query: str) -> list[Message]:
        return filter_messages(self.list(), query)

    def list(self) -> list[Message]:
        with self._db.session() as session:
            rows = session.scalars(
                select(MessageRecord).order_by(
                    MessageRecord.created_at, MessageRecord.id,
                ),
            ).all()
            return [_to_message(r) for r in rows]
