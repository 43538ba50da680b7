"""
Get Order Use Case
"""

import logging
from uuid import UUID

from gooddeal.core.authorization import Principal, can_view_order
from gooddeal.core.domain import AuthorizationException, EntityNotFoundException
from gooddeal.domains.ecommerce.application.ports import IOrderRepository
from gooddeal.models.db import Order

logger = logging.getLogger(__name__)


class GetOrderUseCase:
    """Fetch one order for its owner or for an admin."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, user: Principal, order_id: UUID) -> Order:
        """
        Raises:
            EntityNotFoundException: Unknown order
            AuthorizationException: Caller neither owns the order nor may view all orders
        """
        order = await self.order_repository.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundException("Order", order_id)

        if not can_view_order(user, order):
            logger.warning(f"User {user.id} denied access to order {order_id}")
            raise AuthorizationException("view_order", resource=f"order {order_id}", user_id=str(user.id))
        return order
