"""
Get Categories Use Case
"""

from gooddeal.domains.ecommerce.application.ports import IProductRepository


class GetCategoriesUseCase:
    """Distinct categories of the active catalog, sorted."""

    def __init__(self, product_repository: IProductRepository):
        self.product_repository = product_repository

    async def execute(self) -> list[str]:
        return await self.product_repository.list_categories()
