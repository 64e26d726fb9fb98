"""Message Schemas — Pydantic models for the HTTP boundary.

Invariants:
    - JSON field names are camelCase (attachmentURL, createdAt, updatedAt)
    - MessageCreate/MessageUpdate check types only; emptiness is an entity rule
    - MessageUpdate distinguishes omitted fields from explicit nulls via model_fields_set

Design Decisions:
    - Explicit aliases over an alias generator: "attachmentURL" is not plain camelCase
    - populate_by_name=True: snake_case names accepted too (tests, internal callers)
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from board.core.domain_types import Some
from board.core.message import Message, MessageDraft, MessagePatch


class MessageCreate(BaseModel):
    """Create request — title and body presence validated by the entity."""
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    body: str | None = None
    attachment_url: str | None = Field(None, alias="attachmentURL")

    def to_draft(self) -> MessageDraft:
        return MessageDraft(
            title=self.title, body=self.body, attachment_url=self.attachment_url,
        )


class MessageUpdate(BaseModel):
    """Partial update request — only fields present in the payload are applied."""
    model_config = ConfigDict(populate_by_name=True)

    title: str | None = None
    body: str | None = None
    attachment_url: str | None = Field(None, alias="attachmentURL")

    def to_patch(self) -> MessagePatch:
        supplied = self.model_fields_set
        return MessagePatch(**{
            name: Some(getattr(self, name))
            for name in ("title", "body", "attachment_url")
            if name in supplied
        })


class MessageResponse(BaseModel):
    """Message as returned to clients."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    body: str
    attachment_url: str | None = Field(None, alias="attachmentURL")
    created_at: datetime = Field(alias="createdAt")
    updated_at: datetime | None = Field(None, alias="updatedAt")

    @classmethod
    def from_message(cls, message: Message) -> "MessageResponse":
        return cls(
            id=message.id,
            title=message.title,
            body=message.body,
            attachment_url=message.attachment_url,
            created_at=message.created_at,
            updated_at=message.updated_at,
        )
