"""
Ecommerce Application Ports

Interface definitions (ports) for the Ecommerce domain.
Uses Protocol for structural typing.
"""

from decimal import Decimal
from typing import Protocol, runtime_checkable
from uuid import UUID

from gooddeal.models.db import Order, Product


@runtime_checkable
class IProductRepository(Protocol):
    """
    Interface for product repository.

    Defines the contract for product data access.
    """

    async def get_by_id(self, product_id: UUID, include_inactive: bool = False) -> Product | None:
        """Get product by ID"""
        ...

    async def get_many(self, product_ids: list[UUID]) -> dict[UUID, Product]:
        """Get active products by ID, keyed by ID"""
        ...

    async def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
        include_inactive: bool = False,
    ) -> list[Product]:
        """List products newest first"""
        ...

    async def list_categories(self) -> list[str]:
        """Distinct categories of active products"""
        ...

    async def add(self, product: Product) -> Product:
        """Persist a new product"""
        ...

    async def save(self, product: Product) -> Product:
        """Persist changes to an existing product"""
        ...

    async def count(self, active_only: bool = False) -> int:
        """Count products"""
        ...


@runtime_checkable
class IOrderRepository(Protocol):
    """
    Interface for order repository.

    Defines the contract for order data access.
    """

    async def create(self, order: Order) -> Order:
        """Create a new order"""
        ...

    async def get_by_id(self, order_id: UUID) -> Order | None:
        """Get order by ID"""
        ...

    async def get_by_user(self, user_id: UUID) -> list[Order]:
        """Get orders owned by a user, newest first"""
        ...

    async def list_all(self) -> list[Order]:
        """Get every order, newest first"""
        ...

    async def update_status(self, order: Order, status: str) -> Order:
        """Overwrite order status"""
        ...

    async def count_by_status(self) -> dict[str, int]:
        """Number of orders per status"""
        ...

    async def revenue(self, excluded_statuses: list[str]) -> Decimal:
        """Sum of order totals, skipping the given statuses"""
        ...


__all__ = [
    "IProductRepository",
    "IOrderRepository",
]
