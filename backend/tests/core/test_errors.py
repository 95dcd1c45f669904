"""Tests for the error hierarchy — status codes and response envelope."""

from tracker.core.errors import (
    ErrorCategory, NotFoundError, StorageError, TrackerError, ValidationError,
)


def test_validation_error_is_400():
    err = ValidationError("Invalid 'from' date", field="from")
    assert err.http_status == 400
    assert err.category == ErrorCategory.VALIDATION
    assert err.to_response() == {
        "error": "Invalid 'from' date", "code": "VALIDATION_ERROR",
    }


def test_not_found_hides_identifier_from_message():
    err = NotFoundError("User", "abc123")
    assert err.http_status == 404
    assert err.message == "User not found"
    assert err.resource_id == "abc123"


def test_storage_error_is_500_and_keeps_operation():
    err = StorageError("Failed to create user", "create")
    assert err.http_status == 500
    assert err.operation == "create"
    assert err.to_response()["code"] == "STORAGE_ERROR"


def test_all_errors_share_base():
    for err in (
        ValidationError("x"), NotFoundError("User", "1"), StorageError("x"),
    ):
        assert isinstance(err, TrackerError)
