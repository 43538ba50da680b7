"""
Product catalog model
"""

import uuid

from sqlalchemy import Boolean, CheckConstraint, Column, Index, Integer, Numeric, String, Text, Uuid

from .base import Base, JSONType, TimestampMixin


class Product(Base, TimestampMixin):
    """Catalog product. Soft-deleted products keep is_active=False."""

    __tablename__ = "products"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(200), nullable=False, index=True)
    description = Column(Text, nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    original_price = Column(Numeric(10, 2), nullable=True)
    category = Column(String(100), nullable=False)
    subcategory = Column(String(100), nullable=True)
    brand = Column(String(100), nullable=True)
    images = Column(JSONType, nullable=False, default=list)
    stock = Column(Integer, nullable=False, default=0)
    specifications = Column(JSONType, nullable=False, default=dict)
    features = Column(JSONType, nullable=False, default=list)
    is_active = Column(Boolean, nullable=False, default=True)

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_non_negative"),
        CheckConstraint("stock >= 0", name="ck_products_stock_non_negative"),
        Index("idx_products_category_active", "category", "is_active"),
    )

    def __repr__(self):
        return f"<Product(name='{self.name}', price={self.price}, active={self.is_active})>"
