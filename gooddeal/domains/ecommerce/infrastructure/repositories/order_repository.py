"""
Order Repository Implementation

SQLAlchemy implementation of IOrderRepository.
"""

import logging
import uuid
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from gooddeal.domains.ecommerce.application.ports import IOrderRepository
from gooddeal.models.db.orders import Order, OrderItem

logger = logging.getLogger(__name__)


def _with_details(stmt):
    return stmt.options(
        selectinload(Order.items).selectinload(OrderItem.product),
        selectinload(Order.user),
    )


class SQLAlchemyOrderRepository(IOrderRepository):
    """
    SQLAlchemy implementation of order repository.

    Handles all order data persistence operations. Orders are always
    returned with their items, the items' products and the owning user loaded.
    """

    def __init__(self, session: AsyncSession):
        """
        Initialize repository.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def create(self, order: Order) -> Order:
        """Create a new order together with its items."""
        self.session.add(order)
        try:
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error creating order for user {order.user_id}: {e}")
            raise

        created = await self._load(order.id)  # type: ignore[arg-type]
        logger.info(f"Order created: {order.id} (total {order.total_amount})")
        return created if created is not None else order

    async def get_by_id(self, order_id: uuid.UUID) -> Order | None:
        """Get order by ID."""
        result = await self.session.execute(_with_details(select(Order)).where(Order.id == order_id))
        return result.scalar_one_or_none()

    async def get_by_user(self, user_id: uuid.UUID) -> list[Order]:
        """Get orders owned by a user, newest first."""
        result = await self.session.execute(
            _with_details(select(Order)).where(Order.user_id == user_id).order_by(Order.created_at.desc())
        )
        return list(result.scalars().all())

    async def list_all(self) -> list[Order]:
        """Get every order, newest first."""
        result = await self.session.execute(_with_details(select(Order)).order_by(Order.created_at.desc()))
        return list(result.scalars().all())

    async def update_status(self, order: Order, status: str) -> Order:
        """Overwrite order status."""
        try:
            order.status = status  # type: ignore[assignment]
            await self.session.commit()
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error updating status of order {order.id}: {e}")
            raise

        updated = await self._load(order.id)  # type: ignore[arg-type]
        return updated if updated is not None else order

    async def count_by_status(self) -> dict[str, int]:
        result = await self.session.execute(select(Order.status, func.count(Order.id)).group_by(Order.status))
        return {status: count for status, count in result.all()}

    async def revenue(self, excluded_statuses: list[str]) -> Decimal:
        stmt = select(func.coalesce(func.sum(Order.total_amount), 0))
        if excluded_statuses:
            stmt = stmt.where(Order.status.not_in(excluded_statuses))
        result = await self.session.execute(stmt)
        return Decimal(str(result.scalar() or 0))

    async def _load(self, order_id: uuid.UUID) -> Order | None:
        result = await self.session.execute(
            _with_details(select(Order)).where(Order.id == order_id).execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()
