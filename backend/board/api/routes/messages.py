"""Message Routes — CRUD and search endpoints over the message board.

Invariants:
    - Handlers only translate HTTP <-> service calls; rules live in core/services
    - /search is registered before /{message_id} so it is never captured as an id
    - NotFoundError/ValidationError propagate to the global BoardError handler

Design Decisions:
    - async def handlers calling the synchronous service: request bodies run one
      at a time on the event loop, which is the store's concurrency model
    - POST returns 201; DELETE returns the removed message (200)
"""

from fastapi import APIRouter, Depends, Query, status

from board.api.dependencies import get_message_board
from board.core.domain_types import MessageId
from board.schemas.message import MessageCreate, MessageResponse, MessageUpdate
from board.services.message_board import MessageBoard

router = APIRouter(prefix="/api/v1/messages", tags=["messages"])


@router.post(
    "", response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_message(
    body: MessageCreate, board: MessageBoard = Depends(get_message_board),
):
    """Create a new message."""
    return MessageResponse.from_message(board.create(body.to_draft()))


@router.get("", response_model=list[MessageResponse])
async def list_messages(board: MessageBoard = Depends(get_message_board)):
    """List all messages."""
    return [MessageResponse.from_message(m) for m in board.list_all()]


@router.get("/search", response_model=list[MessageResponse])
async def search_messages(
    query: str | None = Query(None),
    board: MessageBoard = Depends(get_message_board),
):
    """Case-insensitive substring search over title and body."""
    return [MessageResponse.from_message(m) for m in board.search(query)]


@router.get("/{message_id}", response_model=MessageResponse)
async def get_message(
    message_id: str, board: MessageBoard = Depends(get_message_board),
):
    """Get a single message."""
    return MessageResponse.from_message(board.get(MessageId(message_id)))


@router.put("/{message_id}", response_model=MessageResponse)
async def update_message(
    message_id: str,
    body: MessageUpdate,
    board: MessageBoard = Depends(get_message_board),
):
    """Merge supplied fields into an existing message."""
    updated = board.update(MessageId(message_id), body.to_patch())
    return MessageResponse.from_message(updated)


@router.delete("/{message_id}", response_model=MessageResponse)
async def delete_message(
    message_id: str, board: MessageBoard = Depends(get_message_board),
):
    """Delete a message and return its last stored version."""
    return MessageResponse.from_message(board.delete(MessageId(message_id)))
