"""
Application Exceptions

Services raise these; the handlers registered in main.py turn them into
JSON `{"message": ...}` responses with the matching status code.

    FeedbackAPIError (base)          -> 500
    ├── ValidationError              -> 400 missing or unusable input
    ├── ConflictError                -> 400 user already exists
    ├── AuthError                    -> 401 missing, bad or expired token
    │   └── InvalidCredentialsError  -> 400 wrong email or password
    └── StorageError                 -> 500 database failure
"""
from typing import Any, Dict, Optional


class FeedbackAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message: User-facing description, safe to return in the response
        context: Debug details, logged but never returned to the client
    """
    status_code = 500

    def __init__(
        self,
        message: str = "Internal server error",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(FeedbackAPIError):
    """Client input is missing or unusable."""
    status_code = 400

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class ConflictError(FeedbackAPIError):
    """The resource being created already exists."""
    status_code = 400

    def __init__(self, message: str = "User already exists", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class AuthError(FeedbackAPIError):
    """Bearer token missing, malformed, tampered with or expired."""
    status_code = 401

    def __init__(self, message: str = "Unauthorized", context: Optional[Dict[str, Any]] = None):
        super().__init__(message=message, context=context)


class InvalidCredentialsError(AuthError):
    """
    Login failed.

    The message never says whether the email or the password was wrong.
    """
    status_code = 400

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid email or password", context=context)


class StorageError(FeedbackAPIError):
    """A database read or write failed."""
    status_code = 500

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if operation:
            ctx["operation"] = operation
        super().__init__(message=message, context=ctx)
        self.operation = operation
