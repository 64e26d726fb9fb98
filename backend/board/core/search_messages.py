"""Message Search — case-insensitive substring filter over title and body.

Invariants:
    - Pure function: no IO, no async, no DB
    - A message matches when the query occurs in its title OR its body
    - Input order preserved; no ranking
    - No matches returns an empty list, never an error

Design Decisions:
    - Linear scan over the full listing (no index): predictable at message-board scale
"""

from collections.abc import Iterable

from board.core.message import Message


def _matches(message: Message, needle: str) -> bool:
    return needle in message.title.lower() or needle in message.body.lower()


def filter_messages(messages: Iterable[Message], query: str) -> list[Message]:
    """Return the messages whose title or body contains query, ignoring case."""
    needle = query.lower()
    return [m for m in messages if _matches(m, needle)]
