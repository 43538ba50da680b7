"""
List Products Use Case

Public catalog listing with optional category and text filters.
"""

import logging
from dataclasses import dataclass, field, replace

from gooddeal.domains.ecommerce.application.ports import IProductRepository
from gooddeal.models.db import Product

logger = logging.getLogger(__name__)


@dataclass
class ListProductsRequest:
    """Request for listing products."""

    category: str | None = None
    search: str | None = None
    include_inactive: bool = False


@dataclass
class ListProductsResponse:
    """Products matching the request, newest first."""

    products: list[Product] = field(default_factory=list)
    total: int = 0


class ListProductsUseCase:
    """
    Use Case: List Products

    Responsibilities:
    - Hide soft-deleted products from the public catalog
    - Filter by exact category
    - Case-insensitive substring search over name and description
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, request: ListProductsRequest) -> ListProductsResponse:
        category = request.category or None
        search = request.search.strip() if request.search else None

        products = await self.product_repository.list_products(
            category=category,
            search=search or None,
            include_inactive=request.include_inactive,
        )
        logger.debug(f"Listed {len(products)} products (category={category}, search={search})")
        return ListProductsResponse(products=products, total=len(products))


class ListAllProductsUseCase(ListProductsUseCase):
    """Use Case: List every product, inactive ones included, for the admin console."""

    async def execute(self, request: ListProductsRequest | None = None) -> ListProductsResponse:
        request = replace(request or ListProductsRequest(), include_inactive=True)
        return await super().execute(request)
