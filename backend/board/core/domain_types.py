"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - MessageId wraps the string key — never pass a bare str where an id is meant
    - Some(value) marks a field as supplied; None (not Some(None)) marks it omitted

Design Decisions:
    - NewType over dataclass wrapper for ids: zero runtime cost, full type-checker support
    - Frozen Some wrapper over a sentinel object: "explicitly cleared" (Some(None))
      and "not supplied" (None) stay distinguishable in partial updates
"""

from dataclasses import dataclass
from typing import Generic, NewType, TypeVar


# ─── Identity Types ──────────────────────────────────────────────

MessageId = NewType("MessageId", str)


# ─── Presence Wrapper ────────────────────────────────────────────

T = TypeVar("T")


@dataclass(frozen=True)
class Some(Generic[T]):
    """A value that was explicitly supplied (may itself be None)."""
    value: T
