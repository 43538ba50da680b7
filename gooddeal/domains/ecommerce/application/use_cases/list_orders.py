"""
List Orders Use Case
"""

from dataclasses import dataclass, field

from gooddeal.domains.ecommerce.application.ports import IOrderRepository
from gooddeal.models.db import Order


@dataclass
class ListOrdersResponse:
    orders: list[Order] = field(default_factory=list)
    count: int = 0


class ListOrdersUseCase:
    """Every order in the store, newest first, with the owner loaded."""

    def __init__(self, order_repository: IOrderRepository):
        self.order_repository = order_repository

    async def execute(self) -> ListOrdersResponse:
        orders = await self.order_repository.list_all()
        return ListOrdersResponse(orders=orders, count=len(orders))
