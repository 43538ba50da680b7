"""
Update Order Status Use Case

Admin operation overwriting an order's status. Any status may follow any
other status.
"""

import logging
from uuid import UUID

from gooddeal.core.domain import EntityNotFoundException, ValidationException
from gooddeal.domains.ecommerce.application.ports import IOrderRepository
from gooddeal.domains.ecommerce.domain.value_objects import OrderStatus
from gooddeal.models.db import Order

logger = logging.getLogger(__name__)


class UpdateOrderStatusUseCase:
    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, order_id: UUID, status: OrderStatus | str) -> Order:
        """
        Raises:
            ValidationException: Unknown status value
            EntityNotFoundException: Unknown order
        """
        try:
            new_status = status if isinstance(status, OrderStatus) else OrderStatus(status)
        except ValueError as e:
            raise ValidationException(
                f"Invalid status: {status}",
                field="status",
                details={"allowed": OrderStatus.values()},
            ) from e

        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)

        previous = order.status
        order = await self.order_repository.update_status(order, new_status.value)
        logger.info(f"Order {order_id} status: {previous} -> {new_status.value}")
        return order
