"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    SocialStreamException (base)
       │
       ├── AuthenticationError (401)     ← No session, unknown user, wrong password
       ├── NotFoundError (404)           ← Resource not found
       │      ├── UserNotFoundError
       │      ├── PostNotFoundError
       │      └── RoomNotFoundError
       ├── ValidationError (400)         ← Invalid input data
       ├── ConflictError (409)           ← Resource already exists
       │      └── DuplicateResourceError
       └── ServiceUnavailableError (503) ← Store or external service down
              └── ExternalServiceError

Usage:
======
    from socialstream.shared.core.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Post", post_id)
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Post with id 'abc' not found"}}

    raise ValidationError("Description is required", details={"field": "description"})

Exceptions are converted to JSON by the API error handler:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Post with id 'abc-123' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class SocialStreamException(Exception):
    """
    Base exception for all SocialStream application errors.

    Attributes:
        message: Human-readable error message
        status_code: HTTP status code (default 500)
        error_code: Machine-readable error code
        details: Additional error context
    """

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.status_code = status_code
        self.error_code = error_code or "INTERNAL_ERROR"
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to the API error envelope."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION (401)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(SocialStreamException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - No user is logged in for the client context
    - Login fails (unknown user or wrong password)
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="AUTHENTICATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(SocialStreamException):
    """
    Resource not found error (404 Not Found).

    Example:
        raise NotFoundError("Room", room_id)
        # Message: "Room with id 'room9' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with id '{resource_id}' not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: str) -> None:
        super().__init__(resource="User", resource_id=user_id)


class PostNotFoundError(NotFoundError):
    """Post not found error."""

    def __init__(self, post_id: str) -> None:
        super().__init__(resource="Post", resource_id=post_id)


class RoomNotFoundError(NotFoundError):
    """Room not found error."""

    def __init__(self, room_id: str) -> None:
        super().__init__(resource="Room", resource_id=room_id)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(SocialStreamException):
    """Validation error (400 Bad Request)."""

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="VALIDATION_ERROR",
            details=details,
        )


class ConflictError(SocialStreamException):
    """
    Resource conflict error (409 Conflict).

    Example:
        raise ConflictError("Username is already taken.")
    """

    def __init__(
        self,
        message: str = "Resource conflict",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=409,
            error_code="CONFLICT",
            details=details,
        )


class DuplicateResourceError(ConflictError):
    """Conflict raised when creating a resource that already exists."""

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)


# ═══════════════════════════════════════════════════════════════════════════════
# SERVICE ERRORS (503)
# ═══════════════════════════════════════════════════════════════════════════════


class ServiceUnavailableError(SocialStreamException):
    """
    Service temporarily unavailable error (503).

    Raised when the collection store cannot be reached.
    """

    def __init__(
        self,
        message: str = "Service temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="SERVICE_UNAVAILABLE",
            details=details,
        )


class ExternalServiceError(ServiceUnavailableError):
    """
    External service error.

    Raised by adapters when a third-party API call fails or is not configured.
    The AI services catch it and fall back to canned values.
    """

    def __init__(
        self,
        service_name: str,
        message: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        msg = message or f"{service_name} service error"
        extra_details = details or {}
        extra_details["service"] = service_name
        super().__init__(message=msg, details=extra_details)
