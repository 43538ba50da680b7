"""
User account model
"""

import uuid

from sqlalchemy import Column, Index, String, Uuid

from gooddeal.core.domain import UserRole

from .base import Base, TimestampMixin


class UserDB(Base, TimestampMixin):
    """
    Registered user account.

    Attributes:
        id: Unique user UUID
        name: Display name
        email: Unique, lower-cased email used to log in
        password_hash: bcrypt hash of the password
        role: "customer" or "admin"
    """

    __tablename__ = "users"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, default=UserRole.CUSTOMER.value)

    __table_args__ = (Index("idx_users_role", "role"),)

    def __repr__(self):
        return f"<UserDB(id='{self.id}', email='{self.email}', role='{self.role}')>"
