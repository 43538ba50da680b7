"""
Get Product Use Case
"""

from uuid import UUID

from gooddeal.core.domain import EntityNotFoundException
from gooddeal.domains.ecommerce.application.ports import IProductRepository
from gooddeal.models.db import Product


class GetProductUseCase:
    """Fetch one active product."""

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self, product_id: UUID) -> Product:
        """
        Raises:
            EntityNotFoundException: Unknown or inactive product
        """
        product = await self.product_repository.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundException("Product", product_id)
        return product
