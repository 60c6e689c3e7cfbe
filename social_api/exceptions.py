"""
Social API — Custom Exception Hierarchy
=========================================

What:  Application-specific exceptions for the distinct ways a request can fail.
How:   Each exception carries a message and an optional context dict. Stores
       raise DatabaseError; services raise ValidationError, NotFoundError and
       InvalidCredentialsError. Route handlers translate them into the
       per-endpoint HTTP outcome (see social_api/routes).
Who:   Raised by repositories and services; caught by route handlers.

Exception Hierarchy:
    SocialApiError (base)
    ├── ValidationError             → POST /register, POST /messages, PATCH: 400
    │   └── DuplicateUsernameError  → POST /register: 400
    ├── InvalidCredentialsError     → POST /login: 401
    ├── NotFoundError               → GET/DELETE /messages/{id}: 200 empty, PATCH: 400
    └── DatabaseError               → same outcome as the endpoint's other failures

The HTTP surface collapses these into "empty body with a status code". Keeping
them distinct internally lets services and stores be tested per failure kind.
"""

from typing import Any, Dict, Optional


class SocialApiError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable error description
        context:  Additional debug info (logged, never returned to the client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(SocialApiError):
    """
    Raised when input breaks a business rule.

    When:    Blank username, short password, blank or over-long message text,
             non-positive posted_by.
    """

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


class DuplicateUsernameError(ValidationError):
    """Raised when registering a username that already exists."""

    def __init__(self, username: str):
        super().__init__(
            message=f"Username '{username}' is already registered",
            field="username",
        )
        self.username = username


class InvalidCredentialsError(SocialApiError):
    """
    Raised when no account matches a username/password pair.

    Wrong username and wrong password raise the same error.
    """

    def __init__(self, context: Optional[Dict[str, Any]] = None):
        super().__init__(message="Invalid username or password", context=context)


class NotFoundError(SocialApiError):
    """Raised when a requested resource does not exist."""

    def __init__(
        self,
        resource: str = "resource",
        resource_id: Optional[Any] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        message = f"The requested {resource} was not found"
        if resource_id is not None:
            message = f"{resource} with ID '{resource_id}' was not found"
        ctx = context or {}
        ctx["resource"] = resource
        if resource_id is not None:
            ctx["resource_id"] = resource_id
        super().__init__(message=message, context=ctx)


class DatabaseError(SocialApiError):
    """
    Raised when a database statement fails.

    When:    Connection lost, constraint violation other than duplicate username,
             driver errors of any kind.
    The original driver error type is recorded in context, never exposed.
    """

    def __init__(
        self,
        message: str = "A database error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
