"""Database Session Manager tests — health check, schema creation, error mapping."""

import pytest
from sqlalchemy import inspect, text

from board.core.errors import DatabaseError
from board.infrastructure.database import DatabaseSessionManager


def test_create_schema_creates_messages_table(db_manager):
    assert "messages" in inspect(db_manager.engine).get_table_names()


def test_health_check_ok(db_manager):
    assert db_manager.health_check() is True


def test_sqlalchemy_errors_mapped_to_database_error(db_manager):
    with pytest.raises(DatabaseError) as exc_info:
        with db_manager.session() as db:
            db.execute(text("SELECT * FROM missing_table"))
    assert exc_info.value.http_status == 503


def test_sqlite_parent_directory_created(tmp_path):
    db_file = tmp_path / "a" / "b" / "board.db"
    manager = DatabaseSessionManager(f"sqlite:///{db_file}")
    manager.create_schema()
    manager.dispose()
    assert db_file.exists()
