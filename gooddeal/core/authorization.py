"""
Authorization policy.

Every role check in the application goes through this module. Routes and
use cases ask for a Permission instead of comparing role strings.
"""

import logging
from enum import Enum
from typing import Protocol

from gooddeal.core.domain import AuthorizationException, UserRole

logger = logging.getLogger(__name__)


class Permission(str, Enum):
    MANAGE_CATALOG = "manage_catalog"
    MANAGE_ORDERS = "manage_orders"
    MANAGE_USERS = "manage_users"
    VIEW_ALL_ORDERS = "view_all_orders"
    VIEW_DASHBOARD = "view_dashboard"


ROLE_PERMISSIONS: dict[UserRole, frozenset[Permission]] = {
    UserRole.ADMIN: frozenset(Permission),
    UserRole.CUSTOMER: frozenset(),
}


class Principal(Protocol):
    id: object
    role: str


class OwnedResource(Protocol):
    user_id: object


def permissions_for(role: str | None) -> frozenset[Permission]:
    """Permissions granted to a role value; unknown roles get none."""
    try:
        return ROLE_PERMISSIONS[UserRole(role)]
    except ValueError:
        return frozenset()


def has_permission(user: Principal | None, permission: Permission) -> bool:
    if user is None:
        return False
    return permission in permissions_for(user.role)


def authorize(user: Principal | None, permission: Permission, resource: str | None = None) -> None:
    """
    Raise AuthorizationException unless the user holds the permission.

    Args:
        user: Authenticated user (or None)
        permission: Permission required by the operation
        resource: Optional resource name for the error message
    """
    if not has_permission(user, permission):
        user_id = str(user.id) if user is not None else None
        logger.warning(f"Permission '{permission.value}' denied for user {user_id}")
        raise AuthorizationException(permission.value, resource=resource, user_id=user_id)


def can_view_order(user: Principal | None, order: OwnedResource) -> bool:
    """Owners see their own orders; VIEW_ALL_ORDERS holders see every order."""
    if user is None:
        return False
    return order.user_id == user.id or has_permission(user, Permission.VIEW_ALL_ORDERS)


__all__ = [
    "Permission",
    "ROLE_PERMISSIONS",
    "permissions_for",
    "has_permission",
    "authorize",
    "can_view_order",
]
