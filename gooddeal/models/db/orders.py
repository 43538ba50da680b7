"""
Order management models
"""

import uuid
from typing import TYPE_CHECKING, List

from sqlalchemy import CheckConstraint, Column, ForeignKey, Index, Integer, Numeric, String, Text, Uuid
from sqlalchemy.orm import Mapped, relationship

from .base import Base, TimestampMixin

if TYPE_CHECKING:
    from .catalog import Product
    from .user import UserDB


class Order(Base, TimestampMixin):
    """Customer order"""

    __tablename__ = "orders"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id = Column(Uuid, ForeignKey("users.id"), nullable=False)
    status = Column(String(20), nullable=False, default="pending")  # pending, processing, completed, cancelled
    total_amount = Column(Numeric(12, 2), nullable=False)
    shipping_address = Column(Text)
    notes = Column(Text)

    # Relationships
    user: Mapped["UserDB"] = relationship("UserDB")
    items: Mapped[List["OrderItem"]] = relationship(
        "OrderItem", back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.position"
    )

    __table_args__ = (
        Index("idx_orders_user", user_id),
        Index("idx_orders_status", status),
    )

    def __repr__(self):
        return f"<Order(id='{self.id}', status='{self.status}', total={self.total_amount})>"


class OrderItem(Base):
    """Order line item with the unit price captured at checkout"""

    __tablename__ = "order_items"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    order_id = Column(Uuid, ForeignKey("orders.id", ondelete="CASCADE"), nullable=False)
    product_id = Column(Uuid, ForeignKey("products.id"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    quantity = Column(Integer, nullable=False)
    unit_price = Column(Numeric(10, 2), nullable=False)

    order: Mapped["Order"] = relationship("Order", back_populates="items")
    product: Mapped["Product"] = relationship("Product")

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_order_items_quantity_positive"),
        Index("idx_order_items_order", order_id),
    )

    @property
    def subtotal(self):
        return self.unit_price * self.quantity
