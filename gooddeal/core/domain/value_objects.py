"""
Shared value objects.
"""

from enum import Enum


class StatusEnum(str, Enum):
    """
    Base class for enumerated string values stored in the database.

    Provides common functionality for all status value objects.
    """

    @classmethod
    def values(cls) -> list[str]:
        """Get all possible values."""
        return [e.value for e in cls]


class UserRole(StatusEnum):
    """Role flag carried by every user account."""

    CUSTOMER = "customer"
    ADMIN = "admin"
