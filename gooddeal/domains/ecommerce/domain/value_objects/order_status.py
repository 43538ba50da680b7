"""
Order Status Value Object for E-commerce Domain

Represents the lifecycle states of an order.
"""

from gooddeal.core.domain import StatusEnum


class OrderStatus(StatusEnum):
    """
    Order lifecycle states.

    Transitions are unconstrained: an admin may move an order from any
    status to any other status.
    """

    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"

    def counts_as_revenue(self) -> bool:
        """Cancelled orders do not count towards revenue."""
        return self != OrderStatus.CANCELLED
