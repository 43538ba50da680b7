"""
Get Customer Orders Use Case

Business logic for retrieving a customer's order history.
"""

from uuid import UUID

from gooddeal.domains.ecommerce.application.ports import IOrderRepository
from gooddeal.models.db import Order


class GetCustomerOrdersUseCase:
    """Orders owned by the caller, newest first, with product details."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self, user_id: UUID) -> list[Order]:
        return await self.order_repository.get_by_user(user_id)
