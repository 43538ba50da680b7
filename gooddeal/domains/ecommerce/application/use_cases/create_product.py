"""
Create Product Use Case

Admin operation adding a product to the catalog.
"""

import logging
from typing import Any

from gooddeal.domains.ecommerce.application.dto import validate_product_data
from gooddeal.domains.ecommerce.application.ports import IProductRepository
from gooddeal.models.db import Product

logger = logging.getLogger(__name__)


class CreateProductUseCase:
    """
    Use Case: Create Product

    Validates the submitted fields and persists a new product. Nothing is
    written when validation fails.
    """

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, data: dict[str, Any]) -> Product:
        """
        Args:
            data: Raw product fields

        Raises:
            ValidationException: Missing required field or value out of bounds
        """
        validated = validate_product_data(data)
        product = Product(**validated.model_dump())
        product = await self.product_repository.add(product)
        logger.info(f"Catalog product added: {product.id}")
        return product
