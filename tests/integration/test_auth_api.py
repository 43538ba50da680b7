"""
Integration tests for the auth endpoints.

The app runs in-process against an in-memory database.
"""

from datetime import timedelta

import pytest
from jose import jwt

from gooddeal.config.settings import get_settings


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_register_then_me(api_client, auth_headers):
    # Arrange
    payload = {"name": "Bob", "email": "Bob@Shop.com", "password": "bob-pass-123"}

    # Act
    response = await api_client.post("/api/auth/register", json=payload)

    # Assert
    assert response.status_code == 201
    body = response.json()
    assert body["user"]["email"] == "bob@shop.com"
    assert body["user"]["role"] == "customer"
    assert "password" not in body["user"]
    assert "password_hash" not in body["user"]

    me = await api_client.get("/api/auth/me", headers=auth_headers(body["token"]))
    assert me.status_code == 200
    assert me.json()["id"] == body["user"]["id"]


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_register_duplicate_email(api_client, customer):
    response = await api_client.post(
        "/api/auth/register",
        json={"name": "Other Alice", "email": "ALICE@shop.com", "password": "another-pass"},
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"
    assert response.json()["message"] == "Email already registered"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_register_rejects_short_password(api_client):
    response = await api_client.post(
        "/api/auth/register", json={"name": "Bob", "email": "bob@shop.com", "password": "123"}
    )

    body = response.json()
    assert response.status_code == 400
    assert body["success"] is False
    assert body["error"] == "VALIDATION_ERROR"
    assert any(error["field"].endswith("password") for error in body["details"]["errors"])


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_login(api_client, customer, auth_headers):
    response = await api_client.post(
        "/api/auth/login", json={"email": "alice@shop.com", "password": "alice-pass-123"}
    )

    assert response.status_code == 200
    token = response.json()["token"]
    me = await api_client.get("/api/auth/me", headers=auth_headers(token))
    assert me.json()["email"] == "alice@shop.com"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_login_wrong_password_and_unknown_email_look_the_same(api_client, customer):
    wrong_password = await api_client.post(
        "/api/auth/login", json={"email": "alice@shop.com", "password": "not-her-password"}
    )
    unknown_email = await api_client.post(
        "/api/auth/login", json={"email": "nobody@shop.com", "password": "alice-pass-123"}
    )

    assert wrong_password.status_code == 401
    assert unknown_email.status_code == 401
    assert wrong_password.json()["message"] == unknown_email.json()["message"] == "Invalid credentials"


# ============================================================================
# Token handling
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_me_without_token(api_client):
    response = await api_client.get("/api/auth/me")

    assert response.status_code == 401
    assert response.json()["message"] == "No token, authorization denied"
    assert response.headers["www-authenticate"] == "Bearer"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_me_with_expired_token(api_client, customer, token_service, auth_headers):
    expired = token_service.create_access_token(customer.user.id, expires_delta=timedelta(seconds=-30))

    response = await api_client.get("/api/auth/me", headers=auth_headers(expired))

    assert response.status_code == 401
    assert response.json()["message"] == "Token has expired"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_me_with_forged_token(api_client, customer, auth_headers):
    settings = get_settings()
    forged = jwt.encode(
        {"sub": str(customer.user.id), "token_type": "access"},
        "someone-elses-secret",
        algorithm=settings.JWT_ALGORITHM,
    )

    response = await api_client.get("/api/auth/me", headers=auth_headers(forged))

    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_me_with_legacy_header(api_client, customer):
    response = await api_client.get("/api/auth/me", headers={"x-auth-token": customer.token})

    assert response.status_code == 200
    assert response.json()["name"] == "Alice"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_register_rejects_password_over_72_bytes(api_client):
    # 40 characters, 80 bytes in UTF-8
    response = await api_client.post(
        "/api/auth/register", json={"name": "Bob", "email": "bob@shop.com", "password": "é" * 40}
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "password"


# ============================================================================
# Rejected tokens on every protected route
# ============================================================================

SOME_ID = "7d3c7a52-4a4e-4b8e-9a49-3b7f6f1c2d10"

PROTECTED_ROUTES = [
    ("POST", "/api/orders", {"items": [{"product_id": SOME_ID, "quantity": 1}]}),
    ("GET", "/api/orders/my-orders", None),
    ("GET", "/api/orders", None),
    ("GET", f"/api/orders/{SOME_ID}", None),
    ("PUT", f"/api/orders/{SOME_ID}/status", {"status": "completed"}),
    ("POST", "/api/products", {"name": "Lamp"}),
    ("PUT", f"/api/products/{SOME_ID}", {"price": 10}),
    ("DELETE", f"/api/products/{SOME_ID}", None),
    ("GET", "/api/admin/products", None),
    ("GET", "/api/admin/orders", None),
    ("GET", "/api/admin/users", None),
    ("PUT", f"/api/admin/users/{SOME_ID}/role", {"role": "admin"}),
    ("GET", "/api/admin/stats", None),
]


def expired_token(token_service, user_id) -> str:
    return token_service.create_access_token(user_id, expires_delta=timedelta(seconds=-30))


def forged_token(token_service, user_id) -> str:
    return jwt.encode(
        {"sub": str(user_id), "token_type": "access"},
        "someone-elses-secret",
        algorithm=get_settings().JWT_ALGORITHM,
    )


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
@pytest.mark.parametrize("make_token", [expired_token, forged_token], ids=["expired", "forged"])
@pytest.mark.parametrize("method,path,body", PROTECTED_ROUTES)
async def test_rejected_token_on_protected_route(api_client, admin, token_service, make_token, method, path, body):
    # Arrange: the token names a real admin, so only the token itself is wrong
    token = make_token(token_service, admin.user.id)

    # Act
    response = await api_client.request(
        method, path, json=body, headers={"Authorization": f"Bearer {token}"}
    )

    # Assert
    assert response.status_code == 401
    assert response.json()["error"] == "AUTHENTICATION_ERROR"
    assert response.headers["www-authenticate"] == "Bearer"
