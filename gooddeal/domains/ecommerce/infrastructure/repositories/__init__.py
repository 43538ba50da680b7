"""
Ecommerce Infrastructure Repositories

SQLAlchemy implementations of the ecommerce repository ports.
"""

from gooddeal.domains.ecommerce.infrastructure.repositories.order_repository import SQLAlchemyOrderRepository
from gooddeal.domains.ecommerce.infrastructure.repositories.product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyProductRepository",
    "SQLAlchemyOrderRepository",
]
