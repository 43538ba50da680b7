"""
Client state container.

State is an immutable AppState. Actions go through pure reducers, one per
slice, and every state change is pushed to the subscribers. A Store only
accepts actions between start() and stop().
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from decimal import Decimal
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)


class ActionType(str, Enum):
    # Auth
    AUTH_LOADING = "AUTH_LOADING"
    LOGIN_SUCCESS = "LOGIN_SUCCESS"
    REGISTER_SUCCESS = "REGISTER_SUCCESS"
    USER_LOADED = "USER_LOADED"
    AUTH_ERROR = "AUTH_ERROR"
    LOGOUT = "LOGOUT"
    # Cart
    CART_ADD = "CART_ADD"
    CART_REMOVE = "CART_REMOVE"
    CART_UPDATE_QUANTITY = "CART_UPDATE_QUANTITY"
    CART_CLEAR = "CART_CLEAR"
    # Catalog
    PRODUCTS_LOADING = "PRODUCTS_LOADING"
    PRODUCTS_LOADED = "PRODUCTS_LOADED"
    PRODUCTS_ERROR = "PRODUCTS_ERROR"


@dataclass(frozen=True)
class Action:
    type: ActionType | str
    payload: Any = None


@dataclass(frozen=True)
class AuthState:
    token: str | None = None
    is_authenticated: bool = False
    loading: bool = True
    user: dict[str, Any] | None = None
    error: str | None = None

    @property
    def is_admin(self) -> bool:
        return bool(self.user) and self.user.get("role") == "admin"  # type: ignore[union-attr]


@dataclass(frozen=True)
class CartItem:
    product_id: str
    name: str
    price: Decimal
    quantity: int
    image: str | None = None

    @property
    def subtotal(self) -> Decimal:
        return self.price * self.quantity


@dataclass(frozen=True)
class CartState:
    items: tuple[CartItem, ...] = ()

    @property
    def total(self) -> Decimal:
        return sum((item.subtotal for item in self.items), Decimal("0"))

    @property
    def count(self) -> int:
        return sum(item.quantity for item in self.items)

    def find(self, product_id: str) -> CartItem | None:
        return next((item for item in self.items if item.product_id == product_id), None)


@dataclass(frozen=True)
class CatalogState:
    products: tuple[dict[str, Any], ...] = ()
    loading: bool = False
    error: str | None = None


@dataclass(frozen=True)
class AppState:
    auth: AuthState = field(default_factory=AuthState)
    cart: CartState = field(default_factory=CartState)
    catalog: CatalogState = field(default_factory=CatalogState)


# ==================== REDUCERS ====================


def auth_reducer(state: AuthState, action: Action) -> AuthState:
    if action.type == ActionType.AUTH_LOADING:
        return replace(state, loading=True, error=None)

    if action.type in (ActionType.LOGIN_SUCCESS, ActionType.REGISTER_SUCCESS):
        return AuthState(
            token=action.payload["token"],
            is_authenticated=True,
            loading=False,
            user=action.payload.get("user"),
        )

    if action.type == ActionType.USER_LOADED:
        return replace(state, is_authenticated=True, loading=False, user=action.payload, error=None)

    if action.type == ActionType.AUTH_ERROR:
        return AuthState(loading=False, error=action.payload)

    if action.type == ActionType.LOGOUT:
        return AuthState(loading=False)

    return state


def _cart_item(product: dict[str, Any], quantity: int) -> CartItem:
    images = product.get("images") or []
    return CartItem(
        product_id=str(product["id"]),
        name=product["name"],
        price=Decimal(str(product["price"])),
        quantity=quantity,
        image=images[0] if images else None,
    )


def cart_reducer(state: CartState, action: Action) -> CartState:
    """
    Payloads:
        CART_ADD: {"product": <product dict>, "quantity": int (default 1)}
        CART_REMOVE: product id
        CART_UPDATE_QUANTITY: {"product_id": str, "quantity": int}
    """
    if action.type == ActionType.CART_ADD:
        product = action.payload["product"]
        quantity = int(action.payload.get("quantity", 1))
        if quantity <= 0:
            return state

        product_id = str(product["id"])
        if state.find(product_id) is None:
            return CartState(items=state.items + (_cart_item(product, quantity),))
        return CartState(
            items=tuple(
                replace(item, quantity=item.quantity + quantity) if item.product_id == product_id else item
                for item in state.items
            )
        )

    if action.type == ActionType.CART_REMOVE:
        product_id = str(action.payload)
        return CartState(items=tuple(item for item in state.items if item.product_id != product_id))

    if action.type == ActionType.CART_UPDATE_QUANTITY:
        product_id = str(action.payload["product_id"])
        quantity = int(action.payload["quantity"])
        if quantity <= 0:
            return CartState(items=tuple(item for item in state.items if item.product_id != product_id))
        return CartState(
            items=tuple(
                replace(item, quantity=quantity) if item.product_id == product_id else item for item in state.items
            )
        )

    if action.type == ActionType.CART_CLEAR:
        return CartState()

    return state


def catalog_reducer(state: CatalogState, action: Action) -> CatalogState:
    if action.type == ActionType.PRODUCTS_LOADING:
        return replace(state, loading=True, error=None)

    if action.type == ActionType.PRODUCTS_LOADED:
        return CatalogState(products=tuple(action.payload or ()), loading=False)

    if action.type == ActionType.PRODUCTS_ERROR:
        return replace(state, loading=False, error=action.payload)

    return state


def root_reducer(state: AppState, action: Action) -> AppState:
    return AppState(
        auth=auth_reducer(state.auth, action),
        cart=cart_reducer(state.cart, action),
        catalog=catalog_reducer(state.catalog, action),
    )


def initial_state(token: str | None = None) -> AppState:
    return AppState(auth=AuthState(token=token, loading=token is not None))


# ==================== STORE ====================

Listener = Callable[[AppState], None]


class Store:
    """
    Explicit state container with a start/stop lifecycle.

    Usage:
        store = Store()
        store.start(token=saved_token)
        unsubscribe = store.subscribe(render)
        store.dispatch(Action(ActionType.CART_CLEAR))
        store.stop()
    """

    def __init__(self) -> None:
        self._state: AppState | None = None
        self._listeners: list[Listener] = []

    @property
    def running(self) -> bool:
        return self._state is not None

    @property
    def state(self) -> AppState:
        if self._state is None:
            raise RuntimeError("Store is not started")
        return self._state

    def start(self, token: str | None = None) -> AppState:
        """Initialize state, restoring a persisted token when given."""
        if self._state is not None:
            raise RuntimeError("Store is already started")
        self._state = initial_state(token)
        logger.debug(f"Store started (token restored: {token is not None})")
        return self._state

    def stop(self) -> None:
        """Drop subscribers and reset state."""
        self._listeners.clear()
        self._state = None
        logger.debug("Store stopped")

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; the returned callable removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def dispatch(self, action: Action) -> AppState:
        """
        Apply an action and notify subscribers.

        Raises:
            RuntimeError: Store is not started
        """
        if self._state is None:
            raise RuntimeError(f"Cannot dispatch {action.type}: store is not started")

        self._state = root_reducer(self._state, action)
        for listener in list(self._listeners):
            listener(self._state)
        return self._state
