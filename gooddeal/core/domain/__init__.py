"""
Domain Layer - shared building blocks

- Exceptions: domain-specific error handling
- Value objects: roles and statuses shared across services
"""

from gooddeal.core.domain.exceptions import (
    AuthenticationException,
    AuthorizationException,
    DomainException,
    EntityNotFoundException,
    ValidationException,
)
from gooddeal.core.domain.value_objects import StatusEnum, UserRole

__all__ = [
    # Exceptions
    "DomainException",
    "ValidationException",
    "AuthenticationException",
    "AuthorizationException",
    "EntityNotFoundException",
    # Value objects
    "StatusEnum",
    "UserRole",
]
