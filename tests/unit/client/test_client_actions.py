"""
Unit tests for the client thunks.
"""

import json

import httpx
import pytest

from gooddeal.client.actions import checkout, fetch_products, load_user, login_user, logout_user, register_user
from gooddeal.client.api_client import ApiError, StorefrontClient
from gooddeal.client.store import Action, ActionType, Store

USER = {"id": "u-1", "name": "Alice", "email": "alice@shop.com", "role": "customer", "created_at": None}
SHIRT = {"id": "p-2", "name": "T-Shirt", "price": 19.99, "images": []}


class FakeApi:
    """Routes requests to canned responses and records them."""

    def __init__(self):
        self.requests: list[httpx.Request] = []
        self.responses: dict[tuple[str, str], httpx.Response] = {}

    def on(self, method: str, path: str, status_code: int, body) -> None:
        self.responses[(method, path)] = httpx.Response(status_code, json=body)

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.responses[(request.method, request.url.path)]


@pytest.fixture
def api():
    return FakeApi()


@pytest.fixture
def client(api):
    return StorefrontClient(base_url="http://shop.api", transport=httpx.MockTransport(api))


@pytest.fixture
def store():
    store = Store()
    store.start()
    yield store
    store.stop()


def error(status_code: int, code: str, message: str) -> dict:
    return {"success": False, "error": code, "message": message, "details": {}, "status_code": status_code}


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_register_user_success(api, client, store):
    api.on("POST", "/api/auth/register", 201, {"token": "new-token", "user": USER})

    assert await register_user(client, store, "Alice", "alice@shop.com", "secret123") is True

    assert store.state.auth.is_authenticated
    assert store.state.auth.token == "new-token"
    assert client.token == "new-token"


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_login_failure_records_message(api, client, store):
    api.on("POST", "/api/auth/login", 401, error(401, "AUTHENTICATION_ERROR", "Invalid credentials"))

    assert await login_user(client, store, "alice@shop.com", "nope") is False

    assert store.state.auth.is_authenticated is False
    assert store.state.auth.loading is False
    assert store.state.auth.error == "Invalid credentials"


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_load_user_with_restored_token(api, client):
    api.on("GET", "/api/auth/me", 200, USER)
    store = Store()
    store.start(token="saved-token")

    user = await load_user(client, store)

    assert user == USER
    assert store.state.auth.is_authenticated
    assert api.requests[0].headers["authorization"] == "Bearer saved-token"


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_load_user_without_token(api, client, store):
    assert await load_user(client, store) is None

    assert api.requests == []
    assert store.state.auth.loading is False


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_load_user_with_expired_token(api, client):
    api.on("GET", "/api/auth/me", 401, error(401, "AUTHENTICATION_ERROR", "Token has expired"))
    store = Store()
    store.start(token="old-token")

    assert await load_user(client, store) is None

    assert store.state.auth.token is None
    assert client.token is None


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_logout_user(api, client, store):
    api.on("POST", "/api/auth/login", 200, {"token": "t", "user": USER})
    await login_user(client, store, "alice@shop.com", "secret123")

    logout_user(client, store)

    assert client.token is None
    assert store.state.auth.is_authenticated is False


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_fetch_products(api, client, store):
    api.on("GET", "/api/products", 200, {"products": [SHIRT], "total": 1})

    products = await fetch_products(client, store, category="clothing")

    assert products == [SHIRT]
    assert store.state.catalog.products == (SHIRT,)
    assert store.state.catalog.loading is False


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_fetch_products_failure(api, client, store):
    api.on("GET", "/api/products", 500, error(500, "SERVER_ERROR", "Internal server error"))

    assert await fetch_products(client, store) == []
    assert store.state.catalog.error == "Internal server error"


# ============================================================================
# checkout
# ============================================================================


async def signed_in_with_cart(api, client, store):
    api.on("POST", "/api/auth/login", 200, {"token": "t", "user": USER})
    await login_user(client, store, "alice@shop.com", "secret123")
    store.dispatch(Action(ActionType.CART_ADD, {"product": SHIRT, "quantity": 2}))


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_checkout_posts_cart_and_clears_it(api, client, store):
    await signed_in_with_cart(api, client, store)
    api.on("POST", "/api/orders", 201, {"id": "o-1", "status": "pending", "total_amount": 39.98})

    order = await checkout(client, store, shipping_address="1 Main St")

    assert order["id"] == "o-1"
    assert store.state.cart.items == ()
    assert json.loads(api.requests[-1].content) == {
        "items": [{"product_id": "p-2", "quantity": 2}],
        "shipping_address": "1 Main St",
    }


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_checkout_failure_keeps_cart(api, client, store):
    await signed_in_with_cart(api, client, store)
    api.on("POST", "/api/orders", 400, error(400, "VALIDATION_ERROR", "Item 0: product p-2 is not available"))

    with pytest.raises(ApiError):
        await checkout(client, store)

    assert store.state.cart.count == 2


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_checkout_with_empty_cart(api, client, store):
    api.on("POST", "/api/auth/login", 200, {"token": "t", "user": USER})
    await login_user(client, store, "alice@shop.com", "secret123")

    with pytest.raises(ValueError):
        await checkout(client, store)


@pytest.mark.unit
@pytest.mark.client
@pytest.mark.asyncio
async def test_checkout_requires_sign_in(client, store):
    store.dispatch(Action(ActionType.CART_ADD, {"product": SHIRT}))

    with pytest.raises(ValueError):
        await checkout(client, store)
