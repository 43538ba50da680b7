"""
Storefront client: API access, application state and catalog browsing.
"""

from gooddeal.client.api_client import ApiError, StorefrontClient
from gooddeal.client.store import (
    Action,
    ActionType,
    AppState,
    AuthState,
    CartItem,
    CartState,
    CatalogState,
    Store,
    auth_reducer,
    cart_reducer,
    catalog_reducer,
)

__all__ = [
    "ApiError",
    "StorefrontClient",
    "Action",
    "ActionType",
    "AppState",
    "AuthState",
    "CartItem",
    "CartState",
    "CatalogState",
    "Store",
    "auth_reducer",
    "cart_reducer",
    "catalog_reducer",
]
