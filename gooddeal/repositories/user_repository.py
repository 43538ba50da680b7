"""
Repository for user accounts
"""

import logging
import uuid
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from gooddeal.core.domain import UserRole
from gooddeal.models.db.user import UserDB

logger = logging.getLogger(__name__)


class DuplicateEmailError(Exception):
    """The email is already taken by another account."""


class UserRepository:
    """
    CRUD operations for user accounts.

    Attributes:
        session: SQLAlchemy async session
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create_user(
        self,
        name: str,
        email: str,
        password_hash: str,
        role: UserRole = UserRole.CUSTOMER,
    ) -> UserDB:
        """
        Persist a new user.

        Raises:
            DuplicateEmailError: If the unique email constraint fires
        """
        user = UserDB(
            id=uuid.uuid4(),
            name=name,
            email=email,
            password_hash=password_hash,
            role=role.value,
        )
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            await self.session.rollback()
            logger.warning(f"Email already registered: {email}")
            raise DuplicateEmailError(email) from e

        await self.session.refresh(user)
        logger.info(f"User created: {email} (ID: {user.id})")
        return user

    async def get_by_email(self, email: str) -> Optional[UserDB]:
        result = await self.session.execute(select(UserDB).where(UserDB.email == email))
        return result.scalar_one_or_none()

    async def get_by_id(self, user_id: uuid.UUID) -> Optional[UserDB]:
        result = await self.session.execute(select(UserDB).where(UserDB.id == user_id))
        return result.scalar_one_or_none()

    async def email_exists(self, email: str) -> bool:
        result = await self.session.execute(select(UserDB.id).where(UserDB.email == email))
        return result.first() is not None

    async def list_all(self) -> list[UserDB]:
        result = await self.session.execute(select(UserDB).order_by(UserDB.created_at.desc()))
        return list(result.scalars().all())

    async def count(self) -> int:
        result = await self.session.execute(select(func.count(UserDB.id)))
        return result.scalar() or 0

    async def update_role(self, user: UserDB, role: UserRole) -> UserDB:
        try:
            user.role = role.value  # type: ignore[assignment]
            await self.session.commit()
            await self.session.refresh(user)
        except Exception as e:
            await self.session.rollback()
            logger.error(f"Error updating role for user {user.id}: {e}")
            raise
        logger.info(f"Role for user {user.id} set to {role.value}")
        return user
