"""System Clock — production Clock reading wall time in UTC, millisecond resolution."""

from datetime import datetime, timezone

from board.core.message import truncate_to_millis


class SystemClock:
    """Clock backed by datetime.now(timezone.utc)."""

    def now(self) -> datetime:
        return truncate_to_millis(datetime.now(timezone.utc))
