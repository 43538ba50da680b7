"""
Ecommerce Application Use Cases

Business logic for catalog management and order handling.
"""

from gooddeal.domains.ecommerce.application.use_cases.create_order import (
    CreateOrderRequest,
    CreateOrderUseCase,
    OrderItemRequest,
)
from gooddeal.domains.ecommerce.application.use_cases.create_product import CreateProductUseCase
from gooddeal.domains.ecommerce.application.use_cases.deactivate_product import DeactivateProductUseCase
from gooddeal.domains.ecommerce.application.use_cases.get_categories import GetCategoriesUseCase
from gooddeal.domains.ecommerce.application.use_cases.get_customer_orders import GetCustomerOrdersUseCase
from gooddeal.domains.ecommerce.application.use_cases.get_dashboard_stats import (
    DashboardStats,
    GetDashboardStatsUseCase,
)
from gooddeal.domains.ecommerce.application.use_cases.get_order import GetOrderUseCase
from gooddeal.domains.ecommerce.application.use_cases.get_product import GetProductUseCase
from gooddeal.domains.ecommerce.application.use_cases.list_orders import ListOrdersResponse, ListOrdersUseCase
from gooddeal.domains.ecommerce.application.use_cases.list_products import (
    ListAllProductsUseCase,
    ListProductsRequest,
    ListProductsResponse,
    ListProductsUseCase,
)
from gooddeal.domains.ecommerce.application.use_cases.update_order_status import UpdateOrderStatusUseCase
from gooddeal.domains.ecommerce.application.use_cases.update_product import UpdateProductUseCase

__all__ = [
    # Catalog
    "ListProductsRequest",
    "ListProductsResponse",
    "ListProductsUseCase",
    "ListAllProductsUseCase",
    "GetProductUseCase",
    "GetCategoriesUseCase",
    "CreateProductUseCase",
    "UpdateProductUseCase",
    "DeactivateProductUseCase",
    # Orders
    "OrderItemRequest",
    "CreateOrderRequest",
    "CreateOrderUseCase",
    "GetCustomerOrdersUseCase",
    "GetOrderUseCase",
    "ListOrdersResponse",
    "ListOrdersUseCase",
    "UpdateOrderStatusUseCase",
    # Admin
    "DashboardStats",
    "GetDashboardStatsUseCase",
]
