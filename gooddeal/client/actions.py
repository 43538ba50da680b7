"""
Async thunks: API calls through StorefrontClient with the outcome dispatched
to a Store.
"""

import logging
from typing import Any

from gooddeal.client.api_client import ApiError, StorefrontClient
from gooddeal.client.store import Action, ActionType, Store

logger = logging.getLogger(__name__)


async def register_user(client: StorefrontClient, store: Store, name: str, email: str, password: str) -> bool:
    """Register and sign in. Failures end up in state.auth.error."""
    store.dispatch(Action(ActionType.AUTH_LOADING))
    try:
        data = await client.register(name, email, password)
    except ApiError as e:
        logger.info(f"Registration failed: {e.message}")
        store.dispatch(Action(ActionType.AUTH_ERROR, e.message or "Registration failed"))
        return False

    store.dispatch(Action(ActionType.REGISTER_SUCCESS, data))
    return True


async def login_user(client: StorefrontClient, store: Store, email: str, password: str) -> bool:
    store.dispatch(Action(ActionType.AUTH_LOADING))
    try:
        data = await client.login(email, password)
    except ApiError as e:
        logger.info(f"Login failed: {e.message}")
        store.dispatch(Action(ActionType.AUTH_ERROR, e.message or "Login failed"))
        return False

    store.dispatch(Action(ActionType.LOGIN_SUCCESS, data))
    return True


async def load_user(client: StorefrontClient, store: Store) -> dict[str, Any] | None:
    """Resolve the token held in the store to its user."""
    token = store.state.auth.token
    if not token:
        store.dispatch(Action(ActionType.AUTH_ERROR))
        return None

    client.token = token
    try:
        user = await client.me()
    except ApiError as e:
        logger.info(f"Stored token rejected: {e.message}")
        client.logout()
        store.dispatch(Action(ActionType.AUTH_ERROR, e.message))
        return None

    store.dispatch(Action(ActionType.USER_LOADED, user))
    return user


def logout_user(client: StorefrontClient, store: Store) -> None:
    client.logout()
    store.dispatch(Action(ActionType.LOGOUT))


async def fetch_products(
    client: StorefrontClient,
    store: Store,
    category: str | None = None,
    search: str | None = None,
) -> list[dict[str, Any]]:
    store.dispatch(Action(ActionType.PRODUCTS_LOADING))
    try:
        data = await client.list_products(category=category, search=search)
    except ApiError as e:
        store.dispatch(Action(ActionType.PRODUCTS_ERROR, e.message or "Error fetching products"))
        return []

    products = data["products"]
    store.dispatch(Action(ActionType.PRODUCTS_LOADED, products))
    return products


async def checkout(
    client: StorefrontClient,
    store: Store,
    shipping_address: str | None = None,
    notes: str | None = None,
) -> dict[str, Any]:
    """
    Place an order for the cart contents and clear the cart.

    Raises:
        ValueError: Cart is empty or nobody is signed in
        ApiError: The order was rejected; the cart is left untouched
    """
    state = store.state
    if not state.auth.is_authenticated or not state.auth.token:
        raise ValueError("Sign in before checking out")
    if not state.cart.items:
        raise ValueError("Cart is empty")

    client.token = state.auth.token
    order = await client.create_order(
        items=[{"product_id": item.product_id, "quantity": item.quantity} for item in state.cart.items],
        shipping_address=shipping_address,
        notes=notes,
    )
    store.dispatch(Action(ActionType.CART_CLEAR))
    logger.info(f"Order {order.get('id')} placed")
    return order
