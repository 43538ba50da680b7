"""
Dependency Container.

Single Responsibility: Wire repositories, services and use cases for a
database session.
"""

from sqlalchemy.ext.asyncio import AsyncSession

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
from gooddeal.domains.ecommerce.infrastructure.repositories import (
    SQLAlchemyOrderRepository,
    SQLAlchemyProductRepository,
)
from gooddeal.services import TokenService, UserService


class DependencyContainer:
    """
    Creates the object graph bound to one database session.

    Args:
        db: SQLAlchemy async session shared by everything created here
    """

    def __init__(self, db: AsyncSession, token_service: TokenService | None = None):
        self.db = db
        self._token_service = token_service

    # ==================== REPOSITORIES ====================

    def create_product_repository(self) -> SQLAlchemyProductRepository:
        """Create Product Repository."""
        return SQLAlchemyProductRepository(session=self.db)

    def create_order_repository(self) -> SQLAlchemyOrderRepository:
        """Create Order Repository."""
        return SQLAlchemyOrderRepository(session=self.db)

    # ==================== SERVICES ====================

    def get_token_service(self) -> TokenService:
        if self._token_service is None:
            self._token_service = TokenService()
        return self._token_service

    def create_user_service(self) -> UserService:
        return UserService(self.db, token_service=self.get_token_service())

    # ==================== CATALOG USE CASES ====================

    def create_list_products_use_case(self) -> ListProductsUseCase:
        return ListProductsUseCase(product_repository=self.create_product_repository())

    def create_list_all_products_use_case(self) -> ListAllProductsUseCase:
        return ListAllProductsUseCase(product_repository=self.create_product_repository())

    def create_get_product_use_case(self) -> GetProductUseCase:
        return GetProductUseCase(product_repository=self.create_product_repository())

    def create_get_categories_use_case(self) -> GetCategoriesUseCase:
        return GetCategoriesUseCase(product_repository=self.create_product_repository())

    def create_create_product_use_case(self) -> CreateProductUseCase:
        return CreateProductUseCase(product_repository=self.create_product_repository())

    def create_update_product_use_case(self) -> UpdateProductUseCase:
        return UpdateProductUseCase(product_repository=self.create_product_repository())

    def create_deactivate_product_use_case(self) -> DeactivateProductUseCase:
        return DeactivateProductUseCase(product_repository=self.create_product_repository())

    # ==================== ORDER USE CASES ====================

    def create_create_order_use_case(self) -> CreateOrderUseCase:
        """Create CreateOrderUseCase with dependencies."""
        return CreateOrderUseCase(
            order_repository=self.create_order_repository(),
            product_repository=self.create_product_repository(),
        )

    def create_get_customer_orders_use_case(self) -> GetCustomerOrdersUseCase:
        return GetCustomerOrdersUseCase(order_repository=self.create_order_repository())

    def create_get_order_use_case(self) -> GetOrderUseCase:
        return GetOrderUseCase(order_repository=self.create_order_repository())

    def create_list_orders_use_case(self) -> ListOrdersUseCase:
        return ListOrdersUseCase(order_repository=self.create_order_repository())

    def create_update_order_status_use_case(self) -> UpdateOrderStatusUseCase:
        return UpdateOrderStatusUseCase(order_repository=self.create_order_repository())

    # ==================== ADMIN USE CASES ====================

    def create_get_dashboard_stats_use_case(self) -> GetDashboardStatsUseCase:
        return GetDashboardStatsUseCase(
            product_repository=self.create_product_repository(),
            order_repository=self.create_order_repository(),
            user_service=self.create_user_service(),
        )
