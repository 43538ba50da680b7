"""
Admin console endpoints.

Every route here requires an admin permission; customers get 403.
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends

from gooddeal.api.dependencies import (
    get_user_service,
    require_catalog_admin,
    require_dashboard,
    require_order_viewer,
    require_user_admin,
)
from gooddeal.domains.ecommerce.api.dependencies import (
    get_dashboard_stats_use_case,
    get_list_all_products_use_case,
    get_list_orders_use_case,
)
from gooddeal.domains.ecommerce.api.schemas import (
    DashboardStatsResponse,
    OrderListResponse,
    OrderResponse,
    ProductListResponse,
    ProductResponse,
)
from gooddeal.domains.ecommerce.application.use_cases import (
    GetDashboardStatsUseCase,
    ListAllProductsUseCase,
    ListOrdersUseCase,
)
from gooddeal.models.auth import RoleUpdateRequest, UserListResponse, UserPublic
from gooddeal.models.db.user import UserDB
from gooddeal.services import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/products", response_model=ProductListResponse)
async def list_all_products(
    _admin: UserDB = Depends(require_catalog_admin),
    use_case: ListAllProductsUseCase = Depends(get_list_all_products_use_case),
):
    """Every product, inactive ones included."""
    result = await use_case.execute()
    return ProductListResponse(
        products=[ProductResponse.model_validate(product) for product in result.products],
        total=result.total,
    )


@router.get("/orders", response_model=OrderListResponse)
async def list_all_orders(
    _admin: UserDB = Depends(require_order_viewer),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
):
    result = await use_case.execute()
    return OrderListResponse(
        orders=[OrderResponse.model_validate(order) for order in result.orders],
        count=result.count,
    )


@router.get("/users", response_model=UserListResponse)
async def list_users(
    _admin: UserDB = Depends(require_user_admin),
    user_service: UserService = Depends(get_user_service),
):
    users = await user_service.list_users()
    return UserListResponse(users=[UserPublic.model_validate(user) for user in users], count=len(users))


@router.put("/users/{user_id}/role", response_model=UserPublic)
async def change_user_role(
    user_id: UUID,
    request: RoleUpdateRequest,
    admin: UserDB = Depends(require_user_admin),
    user_service: UserService = Depends(get_user_service),
):
    """Grant or revoke the admin role."""
    user = await user_service.change_role(user_id, request.role)
    logger.info(f"Admin {admin.id} set role of user {user_id} to {request.role.value}")
    return UserPublic.model_validate(user)


@router.get("/stats", response_model=DashboardStatsResponse)
async def dashboard_stats(
    _admin: UserDB = Depends(require_dashboard),
    use_case: GetDashboardStatsUseCase = Depends(get_dashboard_stats_use_case),
):
    """Counters for the dashboard."""
    stats = await use_case.execute()
    return DashboardStatsResponse.model_validate(stats)
