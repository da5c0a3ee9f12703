"""Error hierarchy tests — codes, statuses, and the REST envelope."""

from chatroom.core.errors import (
    AlreadyRegisteredError, ChatroomError, ErrorCategory, ErrorSeverity,
    NameValidationError, NotRegisteredError,
)


def test_domain_errors_share_base():
    assert issubclass(AlreadyRegisteredError, ChatroomError)
    assert issubclass(NotRegisteredError, ChatroomError)


def test_already_registered_envelope():
    body = AlreadyRegisteredError("alice").to_response()["error"]
    assert body["code"] == "ALREADY_REGISTERED"
    assert body["message"] == "User already connected"
    assert body["category"] == ErrorCategory.CONFLICT.value
    assert body["severity"] == ErrorSeverity.WARNING.value
    assert body["context"]["participant_name"] == "alice"
    assert "timestamp" in body


def test_not_registered_envelope():
    exc = NotRegisteredError("eve")
    body = exc.to_response()["error"]
    assert exc.http_status == 400
    assert body["code"] == "NOT_REGISTERED"
    assert body["message"] == "User not connected"
    assert body["category"] == ErrorCategory.BUSINESS_RULE.value


def test_name_validation_envelope():
    exc = NameValidationError("name cannot be empty or whitespace")
    body = exc.to_response()["error"]
    assert exc.http_status == 400
    assert body["code"] == "VALIDATION_ERROR"
    assert body["category"] == ErrorCategory.VALIDATION.value
    assert body["severity"] == ErrorSeverity.ERROR.value
