"""
E-commerce API Schemas

Pydantic schemas for API request/response validation.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from gooddeal.domains.ecommerce.application.dto import MAX_INT, ProductData
from gooddeal.domains.ecommerce.domain.value_objects import OrderStatus

# Money travels as a JSON number
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


# ==================== PRODUCTS ====================


class ProductResponse(BaseModel):
    """Product response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str
    price: Money
    original_price: Money | None = None
    category: str
    subcategory: str | None = None
    brand: str | None = None
    images: list[str] = Field(default_factory=list)
    stock: int
    specifications: dict[str, str] = Field(default_factory=dict)
    features: list[str] = Field(default_factory=list)
    is_active: bool = True
    created_at: datetime | None = None
    updated_at: datetime | None = None


class ProductListResponse(BaseModel):
    products: list[ProductResponse]
    total: int


class ProductEnvelope(BaseModel):
    product: ProductResponse


class CategoryListResponse(BaseModel):
    categories: list[str]


class ProductCreateRequest(ProductData):
    """Create product request schema."""


class ProductUpdateRequest(BaseModel):
    """Partial product update. Only the fields sent are changed."""

    model_config = ConfigDict(extra="ignore")

    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    original_price: Decimal | None = None
    category: str | None = None
    subcategory: str | None = None
    brand: str | None = None
    images: list[str] | None = None
    stock: int | None = None
    specifications: dict[str, str] | None = None
    features: list[str] | None = None
    is_active: bool | None = None


class MessageResponse(BaseModel):
    success: bool = True
    message: str


# ==================== ORDERS ====================


class OrderItemRequest(BaseModel):
    """Order item request schema."""

    product_id: UUID
    quantity: int = Field(..., ge=1, le=MAX_INT)


class CreateOrderRequest(BaseModel):
    """Create order request schema."""

    items: list[OrderItemRequest] = Field(..., min_length=1)
    shipping_address: str | None = Field(None, max_length=500)
    notes: str | None = Field(None, max_length=1000)


class StatusUpdateRequest(BaseModel):
    status: OrderStatus


class OrderProductSummary(BaseModel):
    """Product details joined into an order line."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    price: Money
    category: str
    images: list[str] = Field(default_factory=list)
    is_active: bool = True


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    product_id: UUID
    product: OrderProductSummary | None = None
    quantity: int
    unit_price: Money
    subtotal: Money


class OrderOwner(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str


class OrderResponse(BaseModel):
    """Order response schema."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    user: OrderOwner | None = None
    status: OrderStatus
    total_amount: Money
    shipping_address: str | None = None
    notes: str | None = None
    items: list[OrderItemResponse] = Field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


class OrderListResponse(BaseModel):
    orders: list[OrderResponse]
    count: int


# ==================== ADMIN ====================


class DashboardStatsResponse(BaseModel):
    """Admin dashboard counters."""

    model_config = ConfigDict(from_attributes=True)

    total_products: int
    active_products: int
    total_orders: int
    orders_by_status: dict[str, int]
    total_users: int
    revenue: Money
