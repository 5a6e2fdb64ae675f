"""
Exception handling framework for the Tindev matching backend.

This module defines custom exceptions and error handling utilities to ensure:
1. Consistent error reporting across the application
2. Proper logging of errors with context
3. User-friendly error messages
4. Safe handling of sensitive information
"""
import logging
from datetime import datetime, timezone
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class BaseError(Exception):
    """Base exception class."""

    log_level: int = logging.ERROR

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize exception.

        Args:
            message: Error message for logging
            error_code: Error code for categorizing errors
            user_message: User-friendly error message
            context: Additional context for logging
            original_error: Original exception if wrapping
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.user_message = user_message or message
        self.context = context or {}
        self.original_error = original_error
        self.timestamp = datetime.now(timezone.utc)

        # Add standard context
        self.context.update({
            "error_code": error_code,
            "timestamp": self.timestamp.isoformat(),
            "error_type": self.__class__.__name__
        })

        # Log the error
        logger.log(
            self.log_level,
            message,
            extra={
                "error_code": self.error_code,
                "error_type": self.__class__.__name__,
                "context": self.context,
                "original_error": str(self.original_error) if self.original_error else None
            },
            exc_info=self.original_error,
        )


class TindevError(BaseError):
    """Base exception for all application errors."""

    status_code: int = 500

    def __init__(
        self,
        message: str,
        error_code: str,
        user_message: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize the error with context and logging.

        Args:
            message: Technical error message for logging
            error_code: Unique error code for tracking
            user_message: User-friendly error message
            context: Additional context for debugging
            original_error: Original exception if this wraps another error
        """
        super().__init__(
            message=message,
            error_code=error_code,
            user_message=user_message or "An unexpected error occurred",
            context=context,
            original_error=original_error,
        )


class ClientError(TindevError):
    """Errors caused by the caller's request rather than the service."""

    status_code = 400
    log_level = logging.WARNING


class RoleDeniedError(ClientError):
    """The caller's role may not perform the requested action."""

    status_code = 401

    def __init__(
        self,
        role: str,
        required_role: str,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize role denied error."""
        context = context or {}
        context.update({"role": role, "required_role": required_role})

        super().__init__(
            message=f"Role {role} may not perform an action reserved for {required_role}",
            error_code="ROLE_DENIED",
            user_message=f"Role Access Denied: Only {required_role} can access this API",
            context=context,
        )


class NotFoundError(ClientError):
    """A target entity or its counterpart profile does not exist."""

    status_code = 404

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Initialize not found error."""
        context = context or {}
        context["resource"] = resource
        if resource_id:
            context["resource_id"] = resource_id

        message = f"{resource} {resource_id} was not found" if resource_id else f"{resource} was not found"
        super().__init__(
            message=message,
            error_code="NOT_FOUND",
            user_message=f"The {resource} was not found",
            context=context,
        )
        self.resource = resource


class AlreadyInteractedError(ClientError):
    """The scope is closed or the caller's side has already decided."""

    def __init__(
        self,
        target: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize already interacted error."""
        super().__init__(
            message=f"Repeated interaction with {target}",
            error_code="ALREADY_INTERACTED",
            user_message=f"You have interacted to this {target}!!!",
            context=context,
            original_error=original_error,
        )


class AuthenticationError(ClientError):
    """Missing or invalid caller credentials."""

    def __init__(
        self,
        message: str,
        user_message: str = "Invalid Token",
        status_code: int = 400,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize authentication error."""
        super().__init__(
            message=message,
            error_code="AUTH_ERROR",
            user_message=user_message,
            context=context,
            original_error=original_error,
        )
        self.status_code = status_code


class DatabaseError(TindevError):
    """Database-related errors."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize database error."""
        super().__init__(
            message=message,
            error_code="DB_ERROR",
            user_message="A database error occurred",
            context=self._sanitize_context(context),
            original_error=original_error
        )

    def _sanitize_context(self, context: Optional[Dict[str, Any]]) -> Dict[str, Any]:
        """Remove sensitive information from context."""
        if not context:
            return {}

        # Create a copy to avoid modifying the original
        safe_context = context.copy()

        sensitive_fields = {"password", "token", "secret", "secret_key"}
        for field in sensitive_fields:
            if field in safe_context:
                safe_context[field] = "[REDACTED]"

        return safe_context


class MediaHostError(TindevError):
    """Media host (Publitio) API related errors."""

    status_code = 502

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize media host error."""
        super().__init__(
            message=message,
            error_code="MEDIA_HOST_ERROR",
            user_message="Unable to load media",
            context=context,
            original_error=original_error
        )


class ServiceError(TindevError):
    """Service-related errors."""

    def __init__(
        self,
        message: str,
        context: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ) -> None:
        """Initialize service error."""
        super().__init__(
            message=message,
            error_code="SERVICE_ERROR",
            user_message="An error occurred in the service",
            context=context,
            original_error=original_error
        )


def handle_error(error: Exception) -> Dict[str, Any]:
    """Convert any error to a standardized response format.

    Args:
        error: The exception to handle

    Returns:
        Dict containing error details in a standard format
    """
    if isinstance(error, BaseError):
        return {
            "error": True,
            "error_code": error.error_code,
            "message": error.user_message,
            "details": error.context
        }

    # Wrap unknown errors
    wrapped_error = TindevError(
        message=str(error),
        error_code="UNKNOWN_ERROR",
        user_message="An unexpected error occurred",
        original_error=error
    )

    return {
        "error": True,
        "error_code": wrapped_error.error_code,
        "message": wrapped_error.user_message,
        "details": wrapped_error.context
    }
