"""
Integration tests for the order endpoints.
"""

import uuid
from decimal import Decimal

import pytest


async def place_order(api_client, token, items, **extra):
    return await api_client.post(
        "/api/orders",
        json={"items": items, **extra},
        headers={"Authorization": f"Bearer {token}"},
    )


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_place_order_with_two_items(api_client, customer, product_factory):
    # Arrange
    headphones = await product_factory(name="Headphones", price=Decimal("99.99"), category="electronics")
    shirt = await product_factory()

    # Act
    response = await place_order(
        api_client,
        customer.token,
        [
            {"product_id": str(headphones.id), "quantity": 2},
            {"product_id": str(shirt.id), "quantity": 1},
        ],
        shipping_address="1 Main St",
    )

    # Assert
    assert response.status_code == 201
    order = response.json()
    assert order["status"] == "pending"
    assert order["user_id"] == str(customer.user.id)
    assert order["total_amount"] == 219.97
    assert order["shipping_address"] == "1 Main St"
    assert [item["product"]["name"] for item in order["items"]] == ["Headphones", "Cotton T-Shirt"]
    assert [item["unit_price"] for item in order["items"]] == [99.99, 19.99]
    assert order["items"][0]["subtotal"] == 199.98


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_order_keeps_prices_after_catalog_changes(api_client, customer, admin, auth_headers, product_factory):
    shirt = await product_factory()
    placed = (await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 3}])).json()

    await api_client.put(f"/api/products/{shirt.id}", json={"price": 29.99}, headers=auth_headers(admin.token))
    await api_client.delete(f"/api/products/{shirt.id}", headers=auth_headers(admin.token))

    response = await api_client.get(f"/api/orders/{placed['id']}", headers=auth_headers(customer.token))

    assert response.status_code == 200
    order = response.json()
    assert order["total_amount"] == 59.97
    assert order["items"][0]["unit_price"] == 19.99
    assert order["items"][0]["product"]["name"] == "Cotton T-Shirt"
    assert order["items"][0]["product"]["is_active"] is False


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_order_requires_authentication(api_client, product_factory):
    shirt = await product_factory()

    response = await api_client.post("/api/orders", json={"items": [{"product_id": str(shirt.id), "quantity": 1}]})

    assert response.status_code == 401


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_empty_order_is_rejected(api_client, customer):
    response = await place_order(api_client, customer.token, [])

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_order_with_zero_quantity(api_client, customer, product_factory):
    shirt = await product_factory()

    response = await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 0}])

    assert response.status_code == 400


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_order_with_unavailable_product(api_client, customer, auth_headers, product_factory):
    retired = await product_factory(is_active=False)

    response = await place_order(
        api_client,
        customer.token,
        [{"product_id": str(uuid.uuid4()), "quantity": 1}, {"product_id": str(retired.id), "quantity": 1}],
    )

    assert response.status_code == 400
    assert response.json()["details"]["field"] == "items.0.product_id"
    mine = await api_client.get("/api/orders/my-orders", headers=auth_headers(customer.token))
    assert mine.json() == []


# ============================================================================
# Reading orders
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_my_orders_only_lists_own_orders(api_client, customer, user_service, auth_headers, product_factory):
    shirt = await product_factory()
    bob = await user_service.register("Bob", "bob@shop.com", "bob-pass-123")
    await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 1}])
    await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 2}])
    await place_order(api_client, bob.token, [{"product_id": str(shirt.id), "quantity": 5}])

    response = await api_client.get("/api/orders/my-orders", headers=auth_headers(customer.token))

    assert response.status_code == 200
    orders = response.json()
    assert len(orders) == 2
    assert {order["user_id"] for order in orders} == {str(customer.user.id)}


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_other_customers_order_is_forbidden(api_client, customer, user_service, auth_headers, product_factory):
    shirt = await product_factory()
    bob = await user_service.register("Bob", "bob@shop.com", "bob-pass-123")
    placed = (await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 1}])).json()

    response = await api_client.get(f"/api/orders/{placed['id']}", headers=auth_headers(bob.token))

    assert response.status_code == 403


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_admin_sees_any_order(api_client, customer, admin, auth_headers, product_factory):
    shirt = await product_factory()
    placed = (await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 1}])).json()

    single = await api_client.get(f"/api/orders/{placed['id']}", headers=auth_headers(admin.token))
    listing = await api_client.get("/api/orders", headers=auth_headers(admin.token))

    assert single.status_code == 200
    assert single.json()["user"]["email"] == "alice@shop.com"
    assert listing.json()["count"] == 1


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_customer_cannot_list_all_orders(api_client, customer, auth_headers):
    response = await api_client.get("/api/orders", headers=auth_headers(customer.token))

    assert response.status_code == 403


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_unknown_order(api_client, customer, auth_headers):
    response = await api_client.get(f"/api/orders/{uuid.uuid4()}", headers=auth_headers(customer.token))

    assert response.status_code == 404


# ============================================================================
# Status updates
# ============================================================================


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_admin_updates_status(api_client, customer, admin, auth_headers, product_factory):
    shirt = await product_factory()
    placed = (await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 1}])).json()

    response = await api_client.put(
        f"/api/orders/{placed['id']}/status", json={"status": "completed"}, headers=auth_headers(admin.token)
    )

    assert response.status_code == 200
    assert response.json()["status"] == "completed"
    reread = await api_client.get(f"/api/orders/{placed['id']}", headers=auth_headers(customer.token))
    assert reread.json()["status"] == "completed"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_invalid_status(api_client, customer, admin, auth_headers, product_factory):
    shirt = await product_factory()
    placed = (await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 1}])).json()

    response = await api_client.put(
        f"/api/orders/{placed['id']}/status", json={"status": "shipped"}, headers=auth_headers(admin.token)
    )

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_customer_cannot_update_status(api_client, customer, auth_headers, product_factory):
    shirt = await product_factory()
    placed = (await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 1}])).json()

    response = await api_client.put(
        f"/api/orders/{placed['id']}/status", json={"status": "cancelled"}, headers=auth_headers(customer.token)
    )

    assert response.status_code == 403


@pytest.mark.integration
@pytest.mark.api
@pytest.mark.asyncio
async def test_order_quantity_beyond_integer_range(api_client, customer, product_factory):
    shirt = await product_factory()

    response = await place_order(api_client, customer.token, [{"product_id": str(shirt.id), "quantity": 2**31}])

    assert response.status_code == 400
    assert response.json()["error"] == "VALIDATION_ERROR"
