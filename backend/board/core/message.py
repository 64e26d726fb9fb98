"""Message Entity — record shape, identity assignment, and create/update rules.

Invariants:
    - id is a UUID4 string, assigned once by create_message, never reassigned
    - title and body are non-empty (non-whitespace) after create and after update
    - created_at is set once; updated_at is None until the first update
    - created_at <= updated_at whenever updated_at is present
    - Pure functions: the current time is passed in, storage is never touched

Design Decisions:
    - Mutable dataclass: apply_update merges in place and returns the same record;
      stores hand out copies, so callers never hold the canonical instance
    - Update validates before mutating: a rejected patch leaves the record untouched
    - Supplied-but-empty title/body rejected on update too (same rule as create)
"""

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from board.core.domain_types import MessageId, Some
from board.core.errors import ValidationError

_REQUIRED_FIELDS = ("title", "body")


@dataclass
class Message:
    """A single persisted board message."""
    id: MessageId
    title: str
    body: str
    created_at: datetime
    attachment_url: str | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class MessageDraft:
    """Creation input — fields exactly as received, not yet validated."""
    title: str | None = None
    body: str | None = None
    attachment_url: str | None = None


@dataclass(frozen=True)
class MessagePatch:
    """Partial update — Some(value) for supplied fields, None for omitted ones."""
    title: Some[str | None] | None = None
    body: Some[str | None] | None = None
    attachment_url: Some[str | None] | None = None


def new_message_id() -> MessageId:
    """128-bit random identifier, independent of content and time."""
    return MessageId(str(uuid.uuid4()))


def truncate_to_millis(ts: datetime) -> datetime:
    """Drop sub-millisecond precision."""
    return ts.replace(microsecond=ts.microsecond - ts.microsecond % 1000)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def _require_text(field_name: str, value: str | None) -> str:
    if _is_blank(value):
        raise ValidationError(f"'{field_name}' is required and cannot be empty.", field_name)
    return value


def create_message(
    draft: MessageDraft,
    now: datetime,
    new_id: Callable[[], MessageId] = new_message_id,
) -> Message:
    """Build a new Message from a draft.

    Raises ValidationError if title or body is missing or blank. An empty
    attachment_url is stored as absent.
    """
    missing = [name for name in _REQUIRED_FIELDS if _is_blank(getattr(draft, name))]
    if missing:
        raise ValidationError(
            "Both 'title' and 'body' are required.", field=missing[0],
        )
    return Message(
        id=new_id(),
        title=draft.title,
        body=draft.body,
        attachment_url=draft.attachment_url or None,
        created_at=now,
    )


def apply_update(existing: Message, patch: MessagePatch, now: datetime) -> Message:
    """Merge supplied patch fields into existing and stamp updated_at.

    updated_at is set even when no field changes.
    """
    if patch.title is not None:
        _require_text("title", patch.title.value)
    if patch.body is not None:
        _require_text("body", patch.body.value)

    if patch.title is not None:
        existing.title = patch.title.value
    if patch.body is not None:
        existing.body = patch.body.value
    if patch.attachment_url is not None:
        existing.attachment_url = patch.attachment_url.value
    existing.updated_at = max(now, existing.created_at)
    return existing
