"""
Product Repository Implementation

SQLAlchemy implementation of IProductRepository.
"""

import logging
import uuid

from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from gooddeal.domains.ecommerce.application.ports import IProductRepository
from gooddeal.models.db.catalog import Product

logger = logging.getLogger(__name__)


def escape_like(term: str) -> str:
    """Escape LIKE wildcards so the term matches literally."""
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class SQLAlchemyProductRepository(IProductRepository):
    """
    SQLAlchemy implementation of product repository.

    Handles all product data persistence operations.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def get_by_id(self, product_id: uuid.UUID, include_inactive: bool = False) -> Product | None:
        """Get product by ID. Inactive products are hidden unless asked for."""
        stmt = select(Product).where(Product.id == product_id)
        if not include_inactive:
            stmt = stmt.where(Product.is_active.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_many(self, product_ids: list[uuid.UUID]) -> dict[uuid.UUID, Product]:
        """Get active products by ID, keyed by ID. Missing IDs are absent from the result."""
        if not product_ids:
            return {}
        result = await self.session.execute(
            select(Product).where(Product.id.in_(set(product_ids)), Product.is_active.is_(True))
        )
        return {product.id: product for product in result.scalars().all()}  # type: ignore[misc]

    async def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
        include_inactive: bool = False,
    ) -> list[Product]:
        """
        List products newest first.

        Args:
            category: Exact category match
            search: Case-insensitive substring of name or description
            include_inactive: Include soft-deleted products
        """
        stmt = select(Product)
        if not include_inactive:
            stmt = stmt.where(Product.is_active.is_(True))
        if category:
            stmt = stmt.where(Product.category == category)
        if search:
            pattern = f"%{escape_like(search)}%"
            stmt = stmt.where(
                or_(
                    Product.name.ilike(pattern, escape="\\"),
                    Product.description.ilike(pattern, escape="\\"),
                )
            )
        stmt = stmt.order_by(Product.created_at.desc(), Product.name)

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def list_categories(self) -> list[str]:
        """Distinct categories of active products, sorted."""
        result = await self.session.execute(
            select(Product.category).where(Product.is_active.is_(True)).distinct().order_by(Product.category)
        )
        return [row[0] for row in result.all()]

    async def add(self, product: Product) -> Product:
        """Persist a new product."""
        self.session.add(product)
        try:
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating product {product.name}: {e}")
            raise
        await self.session.refresh(product)
        logger.info(f"Product created: {product.name} (ID: {product.id})")
        return product

    async def save(self, product: Product) -> Product:
        """Persist changes to an existing product."""
        try:
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error saving product {product.id}: {e}")
            raise
        await self.session.refresh(product)
        return product

    async def count(self, active_only: bool = False) -> int:
        stmt = select(func.count(Product.id))
        if active_only:
            stmt = stmt.where(Product.is_active.is_(True))
        result = await self.session.execute(stmt)
        return result.scalar() or 0
