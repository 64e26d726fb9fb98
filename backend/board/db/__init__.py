"""Database Infrastructure — session factory and SQLAlchemy Base.

Invariants:
    - Single engine per process (initialized via init_db)
    - All sessions are synchronous (Session)

Design Decisions:
    - SQLite by default: a file database gives restart durability with no server
"""
