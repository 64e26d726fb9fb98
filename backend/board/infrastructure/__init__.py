"""Infrastructure — database sessions, store implementations, clock, logging."""
