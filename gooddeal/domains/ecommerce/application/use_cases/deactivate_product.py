"""
Deactivate Product Use Case

Products are never removed: deleting one clears its active flag so that
orders referencing it keep resolving it.
"""

import logging
from uuid import UUID

from gooddeal.core.domain import EntityNotFoundException
from gooddeal.domains.ecommerce.application.ports import IProductRepository
from gooddeal.models.db import Product

logger = logging.getLogger(__name__)


class DeactivateProductUseCase:
    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: UUID) -> Product:
        """
        Raises:
            EntityNotFoundException: Unknown or already inactive product
        """
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundException("Product", product_id)

        product.is_active = False  # type: ignore[assignment]
        product = await self.product_repository.save(product)
        logger.info(f"Product {product_id} deactivated")
        return product
