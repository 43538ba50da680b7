"""
Async HTTP client for the storefront REST API.
"""

import logging
from typing import Any
from uuid import UUID

import httpx

from gooddeal.config.settings import get_settings

logger = logging.getLogger(__name__)

NETWORK_ERROR = "NETWORK_ERROR"


class ApiError(Exception):
    """
    Error reported by the API, or a request that never got a response.

    Attributes:
        status_code: HTTP status, 0 when the server could not be reached
        error: Machine-readable code from the error body
        message: Human-readable message from the error body
    """

    def __init__(self, status_code: int, error: str, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.error = error
        self.message = message
        self.details = details or {}

    def __repr__(self) -> str:
        return f"ApiError(status_code={self.status_code}, error={self.error!r}, message={self.message!r})"


class StorefrontClient:
    """
    Client for every storefront endpoint.

    Stores the bearer token returned by register/login and sends it on
    subsequent requests. Use as an async context manager or call aclose().
    """

    def __init__(
        self,
        base_url: str | None = None,
        token: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.CLIENT_API_BASE_URL).rstrip("/")
        self.token = token
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout or settings.CLIENT_TIMEOUT_SECONDS,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> "StorefrontClient":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    def _headers(self) -> dict[str, str]:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
    ) -> Any:
        """
        Send a request and return the decoded JSON body.

        Raises:
            ApiError: Non-2xx response, or status 0 on transport failure
        """
        if params:
            params = {key: value for key, value in params.items() if value not in (None, "")}

        try:
            response = await self._client.request(method, path, params=params, json=json, headers=self._headers())
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise ApiError(0, NETWORK_ERROR, "No response from server. Please check if backend is running.") from e

        logger.debug(f"{method} {path} -> {response.status_code}")
        if response.is_success:
            return response.json() if response.content else None

        raise self._error_from(response)

    @staticmethod
    def _error_from(response: httpx.Response) -> ApiError:
        try:
            body = response.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            return ApiError(
                response.status_code,
                str(body.get("error") or "HTTP_ERROR"),
                str(body.get("message") or f"Server error: {response.status_code}"),
                body.get("details") if isinstance(body.get("details"), dict) else None,
            )
        return ApiError(response.status_code, "HTTP_ERROR", f"Server error: {response.status_code}")

    # ==================== AUTH ====================

    async def register(self, name: str, email: str, password: str) -> dict[str, Any]:
        data = await self._request(
            "POST", "/api/auth/register", json={"name": name, "email": email, "password": password}
        )
        self.token = data["token"]
        return data

    async def login(self, email: str, password: str) -> dict[str, Any]:
        data = await self._request("POST", "/api/auth/login", json={"email": email, "password": password})
        self.token = data["token"]
        return data

    async def me(self) -> dict[str, Any]:
        return await self._request("GET", "/api/auth/me")

    def logout(self) -> None:
        self.token = None

    # ==================== CATALOG ====================

    async def list_products(self, category: str | None = None, search: str | None = None) -> dict[str, Any]:
        return await self._request("GET", "/api/products", params={"category": category, "search": search})

    async def list_categories(self) -> list[str]:
        data = await self._request("GET", "/api/products/categories")
        return data["categories"]

    async def get_product(self, product_id: UUID | str) -> dict[str, Any]:
        data = await self._request("GET", f"/api/products/{product_id}")
        return data["product"]

    async def create_product(self, fields: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("POST", "/api/products", json=fields)
        return data["product"]

    async def update_product(self, product_id: UUID | str, fields: dict[str, Any]) -> dict[str, Any]:
        data = await self._request("PUT", f"/api/products/{product_id}", json=fields)
        return data["product"]

    async def delete_product(self, product_id: UUID | str) -> dict[str, Any]:
        return await self._request("DELETE", f"/api/products/{product_id}")

    # ==================== ORDERS ====================

    async def create_order(
        self,
        items: list[dict[str, Any]],
        shipping_address: str | None = None,
        notes: str | None = None,
    ) -> dict[str, Any]:
        payload: dict[str, Any] = {"items": items}
        if shipping_address is not None:
            payload["shipping_address"] = shipping_address
        if notes is not None:
            payload["notes"] = notes
        return await self._request("POST", "/api/orders", json=payload)

    async def my_orders(self) -> list[dict[str, Any]]:
        return await self._request("GET", "/api/orders/my-orders")

    async def get_order(self, order_id: UUID | str) -> dict[str, Any]:
        return await self._request("GET", f"/api/orders/{order_id}")

    async def list_orders(self) -> dict[str, Any]:
        return await self._request("GET", "/api/orders")

    async def update_order_status(self, order_id: UUID | str, status: str) -> dict[str, Any]:
        return await self._request("PUT", f"/api/orders/{order_id}/status", json={"status": status})

    # ==================== ADMIN ====================

    async def admin_products(self) -> dict[str, Any]:
        return await self._request("GET", "/api/admin/products")

    async def admin_orders(self) -> dict[str, Any]:
        return await self._request("GET", "/api/admin/orders")

    async def admin_users(self) -> dict[str, Any]:
        return await self._request("GET", "/api/admin/users")

    async def change_user_role(self, user_id: UUID | str, role: str) -> dict[str, Any]:
        return await self._request("PUT", f"/api/admin/users/{user_id}/role", json={"role": role})

    async def admin_stats(self) -> dict[str, Any]:
        return await self._request("GET", "/api/admin/stats")

    async def health(self) -> dict[str, Any]:
        return await self._request("GET", "/health")
