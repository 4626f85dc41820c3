"""
Custom Exceptions

Application-specific exceptions with HTTP status codes and error codes.

Exception Hierarchy:
====================
    CatalogException (base)
       │
       ├── ValidationError (400)          ← Malformed input, bad paging, duplicate name
       │      ├── DuplicateResourceError  ← Unique field already taken
       │      └── DependencyError         ← Delete blocked by dependent records
       ├── AuthenticationError (401)      ← No principal where one is required
       ├── AuthorizationError (403)       ← Authenticated but not allowed
       ├── NotFoundError (404)            ← Resource not found
       │      ├── ManufacturerNotFoundError
       │      └── BeerNotFoundError
       ├── ConflictError (409)            ← Uniqueness race caught by the database
       └── StorageUnavailableError (503)  ← Database failure not caused by the caller

Usage:
======
    from taproom.shared.core.exceptions import NotFoundError, ValidationError

    # Raise with automatic status code
    raise ManufacturerNotFoundError(42)
    # Results in: {"error": {"code": "NOT_FOUND",
    #                        "description": "Manufacturer with id 42 not found"}}

    # Raise with additional details
    raise ValidationError("Manufacturer name must not be blank", details={"field": "name"})

Exception Handling:
===================
    Exceptions are caught by the error handler middleware and converted to JSON:
    {
        "error": {
            "code": "NOT_FOUND",
            "description": "Manufacturer with id 42 not found",
            "details": {}
        }
    }
"""

from typing import Any, Optional


class CatalogException(Exception):
    """
    Base exception for all Taproom application errors.

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
                "description": self.message,
                "details": self.details,
            }
        }


# ═══════════════════════════════════════════════════════════════════════════════
# BAD REQUEST ERRORS (400)
# ═══════════════════════════════════════════════════════════════════════════════


class ValidationError(CatalogException):
    """
    Validation error (400 Bad Request).

    Raised when input data fails validation: blank required fields,
    invalid pagination, duplicate names.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=400,
            error_code="BAD_REQUEST",
            details=details,
        )


class DuplicateResourceError(ValidationError):
    """
    Duplicate resource error.

    Raised by the pre-insert uniqueness check. A race that slips past the
    check surfaces as ConflictError instead.

    Example:
        raise DuplicateResourceError("User with name brew1 already exists")
    """


class DependencyError(ValidationError):
    """Raised when a delete is blocked because other records reference the resource."""


# ═══════════════════════════════════════════════════════════════════════════════
# AUTHENTICATION & AUTHORIZATION ERRORS (401, 403)
# ═══════════════════════════════════════════════════════════════════════════════


class AuthenticationError(CatalogException):
    """
    Authentication failed error (401 Unauthorized).

    Raised when:
    - An operation requires a principal but the caller is anonymous
    - Token expired or malformed
    - Invalid credentials on login
    """

    def __init__(
        self,
        message: str = "Authentication required",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=401,
            error_code="UNAUTHENTICATED",
            details=details,
        )


class AuthorizationError(CatalogException):
    """
    Authorization failed error (403 Forbidden).

    Raised when the caller is authenticated but may not touch the resource,
    either because of the wrong owner scope or an insufficient role.
    """

    def __init__(
        self,
        message: str = "Access denied",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=403,
            error_code="FORBIDDEN",
            details=details,
        )


# ═══════════════════════════════════════════════════════════════════════════════
# NOT FOUND ERRORS (404)
# ═══════════════════════════════════════════════════════════════════════════════


class NotFoundError(CatalogException):
    """
    Resource not found error (404 Not Found).

    Base class for all "not found" errors with automatic message formatting.
    Only echoes identifiers the caller supplied.

    Example:
        raise NotFoundError("Beer", 7)
        # Message: "Beer with id 7 not found"
    """

    def __init__(
        self,
        resource: str,
        resource_id: Optional[Any] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} with id {resource_id} not found"
        super().__init__(
            message=message,
            status_code=404,
            error_code="NOT_FOUND",
            details=details,
        )


class ManufacturerNotFoundError(NotFoundError):
    """Manufacturer not found error."""

    def __init__(self, manufacturer_id: int) -> None:
        super().__init__(resource="Manufacturer", resource_id=manufacturer_id)


class BeerNotFoundError(NotFoundError):
    """Beer not found error."""

    def __init__(self, beer_id: int) -> None:
        super().__init__(resource="Beer", resource_id=beer_id)


# ═══════════════════════════════════════════════════════════════════════════════
# CONFLICT & STORAGE ERRORS (409, 503)
# ═══════════════════════════════════════════════════════════════════════════════


class ConflictError(CatalogException):
    """
    Resource conflict error (409 Conflict).

    Raised when the database rejects a write because of a constraint
    violation, typically two concurrent creates with the same unique value.
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


class StorageUnavailableError(CatalogException):
    """
    Storage unavailable error (503).

    Raised when the database fails for reasons not attributable to the
    caller. The driver's message is logged, never returned to the client.
    """

    def __init__(
        self,
        message: str = "Storage temporarily unavailable",
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(
            message=message,
            status_code=503,
            error_code="STORAGE_UNAVAILABLE",
            details=details,
        )
