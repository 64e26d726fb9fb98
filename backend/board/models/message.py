"""Message ORM — persists board messages keyed by their generated id.

Invariants:
    - id is the string primary key assigned by the entity layer (never by the DB)
    - title and body are non-nullable text
    - created_at is non-nullable; updated_at stays NULL until the first update

Design Decisions:
    - String(36) key over a native UUID column: ids are opaque strings to callers
      and the same column type works on SQLite and PostgreSQL
    - No server defaults for timestamps: the injected clock is the only time source
    - Index on created_at: listing returns creation order
"""

from datetime import datetime

from sqlalchemy import String, Text, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from board.db.base import Base


class MessageRecord(Base):
    """Row representation of a Message."""
    __tablename__ = "messages"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(Text, nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    attachment_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False, index=True,
    )
    updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True,
    )
