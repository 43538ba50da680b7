"""
Create Order Use Case

Business logic for placing an order from a cart.
"""

import logging
import uuid
from dataclasses import dataclass, field
from decimal import Decimal
from uuid import UUID

from gooddeal.core.domain import ValidationException
from gooddeal.domains.ecommerce.application.dto import MAX_INT
from gooddeal.domains.ecommerce.application.ports import IOrderRepository, IProductRepository
from gooddeal.domains.ecommerce.domain.value_objects import OrderStatus
from gooddeal.models.db import Order, OrderItem

logger = logging.getLogger(__name__)

# NUMERIC(12,2) upper bound of orders.total_amount
MAX_ORDER_TOTAL = Decimal("9999999999.99")


@dataclass
class OrderItemRequest:
    """Single line of an order request."""

    product_id: UUID
    quantity: int = 1


@dataclass
class CreateOrderRequest:
    """Request for creating an order."""

    user_id: UUID
    items: list[OrderItemRequest] = field(default_factory=list)
    shipping_address: str | None = None
    notes: str | None = None


class CreateOrderUseCase:
    """
    Use Case: Create Order

    Responsibilities:
    - Validate order items
    - Check every product exists and is active
    - Snapshot unit prices from the current catalog
    - Calculate the order total
    - Persist the order with status pending

    Stock levels are not adjusted.
    """

    def __init__(self, order_repository: IOrderRepository, product_repository: IProductRepository):
        """
        Initialize use case with dependencies.

        Args:
            order_repository: Repository for order data access
            product_repository: Repository for product lookups
        """
        self.order_repository = order_repository
        self.product_repository = product_repository

    async def execute(self, request: CreateOrderRequest) -> Order:
        """
        Create a new order.

        Raises:
            ValidationException: Empty order, bad quantity, or unknown/inactive product
        """
        if not request.items:
            raise ValidationException("Order must contain at least one item", field="items")

        for index, item in enumerate(request.items):
            if item.quantity is None or not 1 <= item.quantity <= MAX_INT:
                raise ValidationException(
                    f"Item {index}: quantity must be between 1 and {MAX_INT}",
                    field=f"items.{index}.quantity",
                )

        products = await self.product_repository.get_many([item.product_id for item in request.items])

        order = Order(
            id=uuid.uuid4(),
            user_id=request.user_id,
            status=OrderStatus.PENDING.value,
            shipping_address=request.shipping_address,
            notes=request.notes,
        )
        total = Decimal("0")
        for index, item in enumerate(request.items):
            product = products.get(item.product_id)
            if product is None:
                raise ValidationException(
                    f"Item {index}: product {item.product_id} is not available",
                    field=f"items.{index}.product_id",
                    details={"product_id": str(item.product_id)},
                )

            unit_price = Decimal(product.price)  # type: ignore[arg-type]
            order.items.append(
                OrderItem(
                    id=uuid.uuid4(),
                    product_id=product.id,
                    position=index,
                    quantity=item.quantity,
                    unit_price=unit_price,
                )
            )
            total += unit_price * item.quantity

        if total > MAX_ORDER_TOTAL:
            raise ValidationException(
                f"Order total exceeds {MAX_ORDER_TOTAL}",
                field="items",
                details={"total_amount": str(total)},
            )
        order.total_amount = total  # type: ignore[assignment]

        created = await self.order_repository.create(order)
        logger.info(f"Order {created.id} placed by user {request.user_id} ({len(request.items)} items)")
        return created
