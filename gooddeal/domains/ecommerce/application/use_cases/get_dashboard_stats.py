"""
Get Dashboard Stats Use Case

Counters shown on the admin console dashboard.
"""

from dataclasses import dataclass, field
from decimal import Decimal

from gooddeal.domains.ecommerce.application.ports import IOrderRepository, IProductRepository
from gooddeal.domains.ecommerce.domain.value_objects import OrderStatus
from gooddeal.services.user_service import UserService

CENTS = Decimal("0.01")


@dataclass
class DashboardStats:
    total_products: int = 0
    active_products: int = 0
    total_orders: int = 0
    orders_by_status: dict[str, int] = field(default_factory=dict)
    total_users: int = 0
    revenue: Decimal = Decimal("0.00")


class GetDashboardStatsUseCase:
    """
    Use Case: Get Dashboard Stats

    Revenue is the sum of order totals excluding cancelled orders.
    """

    def __init__(
        self,
        product_repository: IProductRepository,
        order_repository: IOrderRepository,
        user_service: UserService,
    ):
        self.product_repository = product_repository
        self.order_repository = order_repository
        self.user_service = user_service

    async def execute(self) -> DashboardStats:
        by_status = await self.order_repository.count_by_status()
        orders_by_status = {status.value: by_status.get(status.value, 0) for status in OrderStatus}

        excluded = [status.value for status in OrderStatus if not status.counts_as_revenue()]
        revenue = await self.order_repository.revenue(excluded)

        return DashboardStats(
            total_products=await self.product_repository.count(),
            active_products=await self.product_repository.count(active_only=True),
            total_orders=sum(by_status.values()),
            orders_by_status=orders_by_status,
            total_users=await self.user_service.count_users(),
            revenue=Decimal(revenue).quantize(CENTS),
        )
