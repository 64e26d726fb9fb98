"""SystemClock tests — UTC, millisecond resolution."""

from datetime import timezone

from board.infrastructure.clock import SystemClock


def test_system_clock_is_utc_millis():
    now = SystemClock().now()
    assert now.tzinfo is timezone.utc
    assert now.microsecond % 1000 == 0
