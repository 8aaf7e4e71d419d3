"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    YoboException (base)
       │
       ├── AuthenticationError (401)    ← Invalid credentials, token missing/expired/invalid
       ├── AuthorizationError (403)     ← Authenticated but not the resource owner
       ├── NotFoundError (404)          ← Resource absent or hidden by visibility rules
       │      ├── UserNotFoundError
       │      └── PostNotFoundError
       ├── ValidationError (400)        ← Invalid input data, password policy violations
       └── ConflictError (409)          ← Email or slug already taken
              └── DuplicateResourceError

Usage:
======
    from src.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise PostNotFoundError("42")
    # Results in: {"error": {"code": "NOT_FOUND", "message": "Post with id '42' not found"}}

    # Raise with additional details
    raise ValidationError("Invalid post", details={"errors": {"title": "Title is required"}})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "message": "Post with id '42' not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class YoboException(Exception):
    """
    Base exception for all Yobo application errors.

    All custom exceptions inherit from this class, providing:
    - HTTP status code mapping
    - Error code for programmatic handling
    - Optional details dictionary
    - Consistent JSON serialization

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
        """
        Convert exception to dictionary for API response.

        Returns:
            Dictionary with error details for JSON response
        """
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(YoboException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - Login credentials are wrong or the user does not exist
    - Bearer token is missing, expired, or malformed

    Messages stay generic so callers cannot probe which accounts exist.
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


class AuthorizationError(YoboException):
    """
    Authorization failed error (403 Forbidden).

    Raised when user is authenticated but does not own the resource.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="AUTHORIZATION_ERROR",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(YoboException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.

    Example:
        raise NotFoundError("Post", "42")
        # Message: "Post with id '42' not found"

        raise NotFoundError("Post", "ben-ahmet", lookup_field="slug")
        # Message: "Post with slug 'ben-ahmet' not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
        lookup_field: str = "id",
    ) -> None:
        message = f"{resource} not found"
        if resource_id:
            message = f"{resource} with {lookup_field} '{resource_id}' not found"
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
    """Blog post not found (or not visible to the viewer)."""

    def __init__(self, post_ref: Optional[str] = None, lookup_field: str = "id") -> None:
        super().__init__(resource="Post", resource_id=post_ref, lookup_field=lookup_field)


# ═══════════════════════════════════════════════════════════════════════════════
# VALIDATION & CONFLICT ERRORS (400, 409)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(YoboException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation. Field-level problems go in
    details["errors"].
    """

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


class ConflictError(YoboException):
    """
    Resource conflict error (409 Conflict).

    Raised when operation conflicts with existing resource.

    Example:
        raise ConflictError("Email already registered")
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
    """
    Duplicate resource error.

    Specific case of conflict when a unique column already holds the value.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message=message, details=details)
