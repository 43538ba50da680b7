"""
E-commerce API Routes

FastAPI routers for the catalog and order endpoints.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, Query, status

from gooddeal.api.dependencies import (
    get_current_user,
    require_catalog_admin,
    require_order_admin,
    require_order_viewer,
)
from gooddeal.domains.ecommerce.api.dependencies import (
    get_categories_use_case,
    get_create_order_use_case,
    get_create_product_use_case,
    get_customer_orders_use_case,
    get_deactivate_product_use_case,
    get_list_orders_use_case,
    get_list_products_use_case,
    get_order_use_case,
    get_product_use_case,
    get_update_order_status_use_case,
    get_update_product_use_case,
)
from gooddeal.domains.ecommerce.api.schemas import (
    CategoryListResponse,
    CreateOrderRequest,
    MessageResponse,
    OrderListResponse,
    OrderResponse,
    ProductCreateRequest,
    ProductEnvelope,
    ProductListResponse,
    ProductResponse,
    ProductUpdateRequest,
    StatusUpdateRequest,
)
from gooddeal.domains.ecommerce.application.use_cases import (
    CreateOrderRequest as CreateOrderCommand,
)
from gooddeal.domains.ecommerce.application.use_cases import (
    CreateOrderUseCase,
    CreateProductUseCase,
    DeactivateProductUseCase,
    GetCategoriesUseCase,
    GetCustomerOrdersUseCase,
    GetOrderUseCase,
    GetProductUseCase,
    ListOrdersUseCase,
    ListProductsRequest,
    ListProductsUseCase,
    OrderItemRequest,
    UpdateOrderStatusUseCase,
    UpdateProductUseCase,
)
from gooddeal.models.db.user import UserDB

products_router = APIRouter(prefix="/products", tags=["Products"])
orders_router = APIRouter(prefix="/orders", tags=["Orders"])


# ==================== PRODUCTS ====================


@products_router.get("", response_model=ProductListResponse)
async def list_products(
    category: str | None = Query(None, description="Exact category"),
    search: str | None = Query(None, description="Text contained in name or description"),
    use_case: ListProductsUseCase = Depends(get_list_products_use_case),
):
    """List active products, newest first."""
    result = await use_case.execute(ListProductsRequest(category=category, search=search))
    return ProductListResponse(
        products=[ProductResponse.model_validate(product) for product in result.products],
        total=result.total,
    )


@products_router.get("/categories", response_model=CategoryListResponse)
async def list_categories(use_case: GetCategoriesUseCase = Depends(get_categories_use_case)):
    """Distinct categories of the active catalog."""
    return CategoryListResponse(categories=await use_case.execute())


@products_router.get("/{product_id}", response_model=ProductEnvelope)
async def get_product(
    product_id: UUID,
    use_case: GetProductUseCase = Depends(get_product_use_case),
):
    """Get product by ID."""
    product = await use_case.execute(product_id)
    return ProductEnvelope(product=ProductResponse.model_validate(product))


@products_router.post("", response_model=ProductEnvelope, status_code=status.HTTP_201_CREATED)
async def create_product(
    request: ProductCreateRequest,
    _admin: UserDB = Depends(require_catalog_admin),
    use_case: CreateProductUseCase = Depends(get_create_product_use_case),
):
    """Create a product (admin)."""
    product = await use_case.execute(request.model_dump())
    return ProductEnvelope(product=ProductResponse.model_validate(product))


@products_router.put("/{product_id}", response_model=ProductEnvelope)
async def update_product(
    product_id: UUID,
    request: ProductUpdateRequest,
    _admin: UserDB = Depends(require_catalog_admin),
    use_case: UpdateProductUseCase = Depends(get_update_product_use_case),
):
    """Update the fields sent in the body (admin)."""
    product = await use_case.execute(product_id, request.model_dump(exclude_unset=True))
    return ProductEnvelope(product=ProductResponse.model_validate(product))


@products_router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: UUID,
    _admin: UserDB = Depends(require_catalog_admin),
    use_case: DeactivateProductUseCase = Depends(get_deactivate_product_use_case),
):
    """Remove a product from the catalog (admin). The row is kept as inactive."""
    await use_case.execute(product_id)
    return MessageResponse(message="Product deleted successfully")


# ==================== ORDERS ====================


@orders_router.post("", response_model=OrderResponse, status_code=status.HTTP_201_CREATED)
async def create_order(
    request: CreateOrderRequest,
    user: UserDB = Depends(get_current_user),
    use_case: CreateOrderUseCase = Depends(get_create_order_use_case),
):
    """Place an order for the authenticated user."""
    command = CreateOrderCommand(
        user_id=user.id,  # type: ignore[arg-type]
        items=[OrderItemRequest(product_id=item.product_id, quantity=item.quantity) for item in request.items],
        shipping_address=request.shipping_address,
        notes=request.notes,
    )
    order = await use_case.execute(command)
    return OrderResponse.model_validate(order)


@orders_router.get("/my-orders", response_model=list[OrderResponse])
async def get_my_orders(
    user: UserDB = Depends(get_current_user),
    use_case: GetCustomerOrdersUseCase = Depends(get_customer_orders_use_case),
):
    """Orders of the authenticated user, newest first."""
    orders = await use_case.execute(user.id)  # type: ignore[arg-type]
    return [OrderResponse.model_validate(order) for order in orders]


@orders_router.get("", response_model=OrderListResponse)
async def list_orders(
    _admin: UserDB = Depends(require_order_viewer),
    use_case: ListOrdersUseCase = Depends(get_list_orders_use_case),
):
    """Every order (admin)."""
    result = await use_case.execute()
    return OrderListResponse(
        orders=[OrderResponse.model_validate(order) for order in result.orders],
        count=result.count,
    )


@orders_router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: UUID,
    user: UserDB = Depends(get_current_user),
    use_case: GetOrderUseCase = Depends(get_order_use_case),
):
    """Get an order owned by the caller, or any order for admins."""
    order = await use_case.execute(user, order_id)
    return OrderResponse.model_validate(order)


@orders_router.put("/{order_id}/status", response_model=OrderResponse)
async def update_order_status(
    order_id: UUID,
    request: StatusUpdateRequest,
    _admin: UserDB = Depends(require_order_admin),
    use_case: UpdateOrderStatusUseCase = Depends(get_update_order_status_use_case),
):
    """Overwrite an order's status (admin)."""
    order = await use_case.execute(order_id, request.status)
    return OrderResponse.model_validate(order)
