"""Error Hierarchy tests — codes, statuses, and the REST envelope."""

from board.core.errors import (
    BoardError, DatabaseError, ErrorCategory, ErrorSeverity,
    NotFoundError, ValidationError,
)


def test_validation_error_shape():
    err = ValidationError("'title' is required", field="title")
    assert isinstance(err, BoardError)
    assert err.http_status == 400
    assert err.code == "VALIDATION_ERROR"
    assert err.category is ErrorCategory.VALIDATION
    body = err.to_response()["error"]
    assert body["message"] == "'title' is required"
    assert body["context"]["field"] == "title"


def test_not_found_error_names_resource():
    err = NotFoundError("Message", "abc")
    assert err.http_status == 404
    assert err.code == "RESOURCE_NOT_FOUND"
    assert err.message == "Message with id=abc not found."
    assert err.to_response()["error"]["context"]["message_id"] == "abc"


def test_database_error_is_critical():
    err = DatabaseError("boom", "commit")
    assert err.http_status == 503
    assert err.severity is ErrorSeverity.CRITICAL
    assert "commit" in err.message
