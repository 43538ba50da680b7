"""
Domain Exceptions

These exceptions represent business rule violations and access failures.
They are raised by services and use cases and translated to HTTP responses
by the API layer (see gooddeal.api.exception_handlers).
"""

from typing import Any


class DomainException(Exception):
    """
    Base exception for all domain-related errors.

    Provides a standardized way to communicate business rule violations.
    """

    status_code: int = 400

    def __init__(self, message: str, code: str | None = None, details: dict[str, Any] | None = None):
        """
        Initialize domain exception.

        Args:
            message: Human-readable error message
            code: Machine-readable error code (e.g., "VALIDATION_ERROR")
            details: Additional context about the error
        """
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__.upper()
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary for API responses."""
        return {
            "success": False,
            "error": self.code,
            "message": self.message,
            "details": self.details,
            "status_code": self.status_code,
        }


class ValidationException(DomainException):
    """
    Raised when input or entity validation fails.

    Covers missing fields, out-of-range values and uniqueness conflicts.
    """

    status_code = 400

    def __init__(self, message: str, field: str | None = None, details: dict[str, Any] | None = None):
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, "VALIDATION_ERROR", details)
        self.field = field


class AuthenticationException(DomainException):
    """Raised when credentials or a bearer token cannot be accepted."""

    status_code = 401

    def __init__(self, message: str = "Not authenticated", details: dict[str, Any] | None = None):
        super().__init__(message, "AUTHENTICATION_ERROR", details)


class AuthorizationException(DomainException):
    """Raised when a user is not authorized to perform an operation."""

    status_code = 403

    def __init__(self, operation: str, resource: str | None = None, user_id: str | None = None):
        self.operation = operation
        self.resource = resource
        self.user_id = user_id
        msg = f"Not authorized to perform '{operation}'"
        if resource:
            msg += f" on '{resource}'"
        super().__init__(
            msg,
            "AUTHORIZATION_ERROR",
            {
                "operation": operation,
                "resource": resource,
            },
        )


class EntityNotFoundException(DomainException):
    """
    Raised when an entity is not found.
    """

    status_code = 404

    def __init__(
        self,
        entity_type: str,
        entity_id: Any,
        message: str | None = None,
    ):
        self.entity_type = entity_type
        self.entity_id = entity_id
        msg = message or f"{entity_type} not found"
        super().__init__(
            msg,
            "ENTITY_NOT_FOUND",
            {"entity_type": entity_type, "entity_id": str(entity_id)},
        )


__all__ = [
    "DomainException",
    "ValidationException",
    "AuthenticationException",
    "AuthorizationException",
    "EntityNotFoundException",
]
