"""
E-commerce API Dependencies

FastAPI dependencies for the e-commerce domain.
"""

from fastapi import Depends

from gooddeal.api.dependencies import get_container
from gooddeal.core.container import DependencyContainer
from gooddeal.domains.ecommerce.application.use_cases import (
    CreateOrderUseCase,
    CreateProductUseCase,
    DeactivateProductUseCase,
    GetCategoriesUseCase,
    GetCustomerOrdersUseCase,
    GetDashboardStatsUseCase,
    GetOrderUseCase,
    GetProductUseCase,
    ListAllProductsUseCase,
    ListOrdersUseCase,
    ListProductsUseCase,
    UpdateOrderStatusUseCase,
    UpdateProductUseCase,
)


def get_list_products_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> ListProductsUseCase:
    """Get ListProductsUseCase instance."""
    return container.create_list_products_use_case()


def get_list_all_products_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> ListAllProductsUseCase:
    """Get ListAllProductsUseCase instance."""
    return container.create_list_all_products_use_case()


def get_product_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> GetProductUseCase:
    """Get GetProductUseCase instance."""
    return container.create_get_product_use_case()


def get_categories_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> GetCategoriesUseCase:
    """Get GetCategoriesUseCase instance."""
    return container.create_get_categories_use_case()


def get_create_product_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> CreateProductUseCase:
    """Get CreateProductUseCase instance."""
    return container.create_create_product_use_case()


def get_update_product_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> UpdateProductUseCase:
    """Get UpdateProductUseCase instance."""
    return container.create_update_product_use_case()


def get_deactivate_product_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> DeactivateProductUseCase:
    """Get DeactivateProductUseCase instance."""
    return container.create_deactivate_product_use_case()


def get_create_order_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> CreateOrderUseCase:
    """Get CreateOrderUseCase instance."""
    return container.create_create_order_use_case()


def get_customer_orders_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> GetCustomerOrdersUseCase:
    """Get GetCustomerOrdersUseCase instance."""
    return container.create_get_customer_orders_use_case()


def get_order_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> GetOrderUseCase:
    """Get GetOrderUseCase instance."""
    return container.create_get_order_use_case()


def get_list_orders_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> ListOrdersUseCase:
    """Get ListOrdersUseCase instance."""
    return container.create_list_orders_use_case()


def get_update_order_status_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> UpdateOrderStatusUseCase:
    """Get UpdateOrderStatusUseCase instance."""
    return container.create_update_order_status_use_case()


def get_dashboard_stats_use_case(
    container: DependencyContainer = Depends(get_container),  # noqa: B008
) -> GetDashboardStatsUseCase:
    """Get GetDashboardStatsUseCase instance."""
    return container.create_get_dashboard_stats_use_case()


__all__ = [
    "get_list_products_use_case",
    "get_list_all_products_use_case",
    "get_product_use_case",
    "get_categories_use_case",
    "get_create_product_use_case",
    "get_update_product_use_case",
    "get_deactivate_product_use_case",
    "get_create_order_use_case",
    "get_customer_orders_use_case",
    "get_order_use_case",
    "get_list_orders_use_case",
    "get_update_order_status_use_case",
    "get_dashboard_stats_use_case",
]
