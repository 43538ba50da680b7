"""
E-commerce Domain Layer

Value objects for the catalog and order lifecycle.
"""

from .value_objects import OrderStatus

__all__ = ["OrderStatus"]
