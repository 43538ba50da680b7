"""
FastAPI dependencies: database session, services, and the authenticated user.
"""

import logging
from typing import Optional

from fastapi import Depends, Header, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from gooddeal.core.authorization import Permission, authorize
from gooddeal.core.container import DependencyContainer
from gooddeal.core.domain import AuthenticationException, EntityNotFoundException
from gooddeal.database.async_db import get_async_db
from gooddeal.models.db.user import UserDB
from gooddeal.services import TokenService, UserService

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

_token_service: TokenService | None = None


def get_token_service() -> TokenService:
    """Process-wide TokenService."""
    global _token_service
    if _token_service is None:
        _token_service = TokenService()
    return _token_service


def get_container(
    db: AsyncSession = Depends(get_async_db),  # noqa: B008
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
) -> DependencyContainer:
    """Dependency container bound to the request's database session."""
    return DependencyContainer(db, token_service=token_service)


def get_user_service(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> UserService:
    return container.create_user_service()


def extract_token(
    credentials: Optional[HTTPAuthorizationCredentials],
    legacy_token: Optional[str],
) -> Optional[str]:
    """Bearer credentials first, then the legacy x-auth-token header."""
    if credentials is not None and credentials.credentials:
        return credentials.credentials
    if legacy_token:
        return legacy_token.strip() or None
    return None


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),  # noqa: B008
    x_auth_token: Optional[str] = Header(None),
    token_service: TokenService = Depends(get_token_service),  # noqa: B008
    user_service: UserService = Depends(get_user_service),  # noqa: B008
) -> UserDB:
    """
    Resolve the bearer token to a stored user.

    Raises:
        AuthenticationException: Missing, expired or invalid token, or the
            user no longer exists
    """
    token = extract_token(credentials, x_auth_token)
    if token is None:
        raise AuthenticationException("No token, authorization denied")

    user_id = token_service.get_user_id(token)
    try:
        user = await user_service.get_user(user_id)
    except EntityNotFoundException as e:
        logger.info(f"Token refers to missing user {user_id}")
        raise AuthenticationException("Token is not valid") from e

    request.state.user_id = str(user.id)
    return user


def require_permission(permission: Permission, resource: str | None = None):
    """
    Dependency factory requiring a permission of the authenticated user.

    Args:
        permission: Permission the route needs
        resource: Optional resource name for the error message
    """

    async def dependency(user: UserDB = Depends(get_current_user)) -> UserDB:  # noqa: B008
        authorize(user, permission, resource=resource)
        return user

    return dependency


require_catalog_admin = require_permission(Permission.MANAGE_CATALOG, "products")
require_order_admin = require_permission(Permission.MANAGE_ORDERS, "orders")
require_order_viewer = require_permission(Permission.VIEW_ALL_ORDERS, "orders")
require_user_admin = require_permission(Permission.MANAGE_USERS, "users")
require_dashboard = require_permission(Permission.VIEW_DASHBOARD, "dashboard")
