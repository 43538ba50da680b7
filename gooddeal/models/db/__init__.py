"""
Database models
"""

from .base import Base, TimestampMixin
from .catalog import Product
from .orders import Order, OrderItem
from .user import UserDB

__all__ = [
    "Base",
    "TimestampMixin",
    "Product",
    "Order",
    "OrderItem",
    "UserDB",
]
