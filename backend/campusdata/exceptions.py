"""
Campus Data Backend — Custom Exception Hierarchy
=================================================

What:  Defines application-specific exceptions for different error scenarios.
Why:   Custom exceptions enable targeted error handling with appropriate HTTP
       status codes and user-friendly messages.
How:   Each exception class carries a message and optional context dict.
       Global exception handlers (registered in main.py) catch these and
       return structured JSON error responses with correct HTTP status codes.
Who:   Raised by services, repositories and the auth layer; caught by global handlers.

Exception Hierarchy:
    CampusDataError (base)
    ├── ValidationError          → 400 Bad Request (client can fix)
    ├── UnauthenticatedError     → 401 Unauthorized (no identity)
    ├── ForbiddenError           → 403 Forbidden (missing role)
    ├── EntityNotFoundError      → 404 Not Found
    ├── ConflictError            → 409 Conflict (duplicate natural key)
    └── DatabaseError            → 500 Internal Server Error
"""

from typing import Any, Dict, Optional


class CampusDataError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  User-facing error description (safe to return in API response)
        context:  Additional debug info (logged; only some handlers return it)
    """

    status_code: int = 500
    error_code: str = "server_error"

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class ValidationError(CampusDataError):
    """
    Raised when client input fails validation.

    When:    Missing or malformed request field that FastAPI's own schema
             validation does not cover.
    HTTP:    400 Bad Request
    """

    status_code = 400
    error_code = "validation_error"

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


class UnauthenticatedError(CampusDataError):
    """Raised when a protected route is called without an identity."""

    status_code = 401
    error_code = "unauthenticated"

    def __init__(
        self,
        message: str = "Authentication is required to access this resource",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ForbiddenError(CampusDataError):
    """
    Raised when an authenticated caller lacks the role a route requires.

    The required role goes into context so it can be logged; it is not secret
    but the response only carries the message.
    """

    status_code = 403
    error_code = "forbidden"

    def __init__(
        self,
        required_role: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        message = "You do not have permission to perform this operation"
        if required_role:
            ctx["required_role"] = required_role
        super().__init__(message=message, context=ctx)
        self.required_role = required_role


class EntityNotFoundError(CampusDataError):
    """
    Raised when a lookup by identifier finds nothing.

    What:    Parameterized by entity type and requested key, e.g.
             EntityNotFoundError("UCSBDate", 7) → "UCSBDate with id 7 not found".
    HTTP:    404 Not Found

    Why a custom exception:
        SQLAlchemy returns None for missing rows. The service layer converts
        None into this error so get, update and delete all report a miss the
        same way instead of silently doing nothing.
    """

    status_code = 404
    error_code = "not_found"

    def __init__(
        self,
        entity_name: str,
        key: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity_name
        ctx["key"] = str(key)
        super().__init__(message=f"{entity_name} with id {key} not found", context=ctx)
        self.entity_name = entity_name
        self.key = key


class ConflictError(CampusDataError):
    """Raised when creating a record whose natural key is already taken."""

    status_code = 409
    error_code = "conflict"

    def __init__(
        self,
        entity_name: str,
        key: Any,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["entity"] = entity_name
        ctx["key"] = str(key)
        super().__init__(message=f"{entity_name} with id {key} already exists", context=ctx)
        self.entity_name = entity_name
        self.key = key


class DatabaseError(CampusDataError):
    """
    Raised when database operations fail unexpectedly.

    Security Note:
        The message returned to the client is always generic.
        Detailed error info (SQL, constraint names) is logged server-side only.
    """

    def __init__(
        self,
        message: str = "A database error occurred. Please try again later.",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
