"""Tests for the error handling framework."""
import logging

from tindev.core.exceptions import (
    AlreadyInteractedError,
    AuthenticationError,
    DatabaseError,
    MediaHostError,
    NotFoundError,
    RoleDeniedError,
    TindevError,
    handle_error,
)


def test_base_error_initialization():
    """Test TindevError initialization."""
    error = TindevError(
        message="Test error",
        error_code="TEST_ERROR",
        user_message="User message",
        context={"test": "data"}
    )

    assert error.error_code == "TEST_ERROR"
    assert error.user_message == "User message"
    assert error.status_code == 500
    assert error.context["test"] == "data"
    assert "timestamp" in error.context
    assert error.context["error_type"] == "TindevError"


def test_role_denied_error():
    """Test RoleDeniedError message and status."""
    error = RoleDeniedError("Developer", "Company")

    assert error.status_code == 401
    assert error.error_code == "ROLE_DENIED"
    assert error.user_message == "Role Access Denied: Only Company can access this API"
    assert error.context["role"] == "Developer"


def test_not_found_error():
    """Test NotFoundError names the resource."""
    error = NotFoundError("job recruitment", "j1")

    assert error.status_code == 404
    assert error.resource == "job recruitment"
    assert error.user_message == "The job recruitment was not found"
    assert error.context["resource_id"] == "j1"
    assert "j1" in error.message


def test_already_interacted_error():
    """Test AlreadyInteractedError message."""
    error = AlreadyInteractedError("developer")

    assert error.status_code == 400
    assert error.user_message == "You have interacted to this developer!!!"


def test_authentication_error_status():
    """Test authentication errors carry their own status."""
    assert AuthenticationError("bad token").status_code == 400
    missing = AuthenticationError("no header", user_message="Access Denied!", status_code=401)
    assert missing.status_code == 401
    assert missing.user_message == "Access Denied!"


def test_database_error_sanitization():
    """Test DatabaseError removes sensitive information."""
    context = {
        "password": "secret",
        "secret_key": "salt",
        "safe_field": "visible",
    }

    error = DatabaseError(message="Database error", context=context)

    assert error.context["password"] == "[REDACTED]"
    assert error.context["secret_key"] == "[REDACTED]"
    assert error.context["safe_field"] == "visible"
    assert context["password"] == "secret"


def test_client_errors_log_as_warning(caplog):
    """Test client errors are logged at WARNING, server errors at ERROR."""
    caplog.set_level(logging.WARNING, logger="tindev.core.exceptions")

    NotFoundError("developer", "d1")
    MediaHostError("media host down")

    levels = {record.getMessage(): record.levelno for record in caplog.records}
    assert levels["developer d1 was not found"] == logging.WARNING
    assert levels["media host down"] == logging.ERROR


def test_handle_error_known():
    """Test handling of application errors."""
    response = handle_error(NotFoundError("developer"))

    assert response["error"] is True
    assert response["error_code"] == "NOT_FOUND"
    assert response["message"] == "The developer was not found"
    assert response["details"]["resource"] == "developer"


def test_handle_error_unknown():
    """Test unknown errors are wrapped."""
    response = handle_error(ValueError("boom"))

    assert response["error_code"] == "UNKNOWN_ERROR"
    assert response["message"] == "An unexpected error occurred"
    assert response["details"]["error_type"] == "TindevError"
