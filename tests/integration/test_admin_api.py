"""
Integration tests for the admin console endpoints and the health check.
"""

import pytest


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_health(api_client):
    response = await api_client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "environment": "test"}


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_responses_carry_correlation_id(api_client):
    response = await api_client.get("/health", headers={"X-Correlation-ID": "req-42"})

    assert response.headers["x-correlation-id"] == "req-42"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
@pytest.mark.parametrize("path", ["/api/admin/products", "/api/admin/orders", "/api/admin/users", "/api/admin/stats"])
async def test_admin_routes_reject_customers(api_client, customer, auth_headers, path):
    response = await api_client.get(path, headers=auth_headers(customer.token))

    assert response.status_code == 403
    assert response.json()["success"] is False


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_list_users(api_client, customer, admin, auth_headers):
    response = await api_client.get("/api/admin/users", headers=auth_headers(admin.token))

    assert response.status_code == 200
    body = response.json()
    assert body["count"] == 2
    assert {user["email"] for user in body["users"]} == {"alice@shop.com", "admin@shop.com"}
    assert all("password_hash" not in user for user in body["users"])


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_promote_customer(api_client, customer, admin, auth_headers):
    response = await api_client.put(
        f"/api/admin/users/{customer.user.id}/role", json={"role": "admin"}, headers=auth_headers(admin.token)
    )

    assert response.status_code == 200
    assert response.json()["role"] == "admin"
    # The same token now carries admin rights
    stats = await api_client.get("/api/admin/stats", headers=auth_headers(customer.token))
    assert stats.status_code == 200


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_invalid_role(api_client, customer, admin, auth_headers):
    response = await api_client.put(
        f"/api/admin/users/{customer.user.id}/role", json={"role": "owner"}, headers=auth_headers(admin.token)
    )

    assert response.status_code == 400


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_stats(api_client, customer, admin, auth_headers, product_factory):
    # Arrange
    shirt = await product_factory()
    await product_factory(name="Retired Mug", category="home", is_active=False)
    headers = {"Authorization": f"Bearer {customer.token}"}
    first = await api_client.post(
        "/api/orders", json={"items": [{"product_id": str(shirt.id), "quantity": 2}]}, headers=headers
    )
    second = await api_client.post(
        "/api/orders", json={"items": [{"product_id": str(shirt.id), "quantity": 1}]}, headers=headers
    )
    await api_client.put(
        f"/api/orders/{second.json()['id']}/status", json={"status": "cancelled"}, headers=auth_headers(admin.token)
    )

    # Act
    response = await api_client.get("/api/admin/stats", headers=auth_headers(admin.token))

    # Assert
    assert first.status_code == 201
    stats = response.json()
    assert stats["total_products"] == 2
    assert stats["active_products"] == 1
    assert stats["total_orders"] == 2
    assert stats["orders_by_status"] == {"pending": 1, "processing": 0, "completed": 0, "cancelled": 1}
    assert stats["total_users"] == 2
    assert stats["revenue"] == 39.98


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
@pytest.mark.parametrize(
    "as_admin,method,path,body,status_code",
    [
        (False, "POST", "/api/products", {"name": "Lamp"}, 403),
        (False, "GET", "/api/orders/7d3c7a52-4a4e-4b8e-9a49-3b7f6f1c2d10", None, 404),
        (False, "GET", "/api/admin/stats", None, 403),
        (True, "DELETE", "/api/products/7d3c7a52-4a4e-4b8e-9a49-3b7f6f1c2d10", None, 404),
        (True, "PUT", "/api/orders/7d3c7a52-4a4e-4b8e-9a49-3b7f6f1c2d10/status", {"status": "shipped"}, 400),
    ],
)
async def test_signed_in_errors_keep_their_status(
    api_client, customer, admin, auth_headers, as_admin, method, path, body, status_code
):
    token = admin.token if as_admin else customer.token

    response = await api_client.request(method, path, json=body, headers=auth_headers(token))

    assert response.status_code == status_code
    assert response.json()["status_code"] == status_code
    assert "x-response-time-ms" in response.headers
