"""
Update Product Use Case

Admin operation applying a partial update to a product.
"""

import logging
from typing import Any
from uuid import UUID

from gooddeal.core.domain import EntityNotFoundException
from gooddeal.domains.ecommerce.application.dto import ProductData, validate_product_data
from gooddeal.domains.ecommerce.application.ports import IProductRepository
from gooddeal.models.db import Product

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = tuple(ProductData.model_fields)


def product_fields(product: Product) -> dict[str, Any]:
    """Current values of every updatable field."""
    return {name: getattr(product, name) for name in UPDATABLE_FIELDS}


class UpdateProductUseCase:
    """
    Use Case: Update Product

    Provided fields are merged onto the stored product and the merged result
    is validated as a whole. Inactive products can be updated and reactivated.
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: UUID, changes: dict[str, Any]) -> Product:
        """
        Raises:
            EntityNotFoundException: Unknown product
            ValidationException: Merged product is invalid
        """
        product = await self.product_repository.get_by_id(product_id, include_inactive=True)
        if product is None:
            raise EntityNotFoundException("Product", product_id)

        provided = {key: value for key, value in changes.items() if key in UPDATABLE_FIELDS}
        merged = {**product_fields(product), **provided}
        validated = validate_product_data(merged)

        for name in provided:
            setattr(product, name, getattr(validated, name))

        product = await self.product_repository.save(product)
        logger.info(f"Product {product_id} updated: {sorted(provided)}")
        return product
