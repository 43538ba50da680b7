from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from gooddeal.core.domain import UserRole


class RegisterRequest(BaseModel):
    """Registration payload"""

    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr
    password: str = Field(..., min_length=6, max_length=72)


class LoginRequest(BaseModel):
    """Login payload"""

    email: EmailStr
    password: str = Field(..., min_length=1)


class UserPublic(BaseModel):
    """User fields safe to return to any caller"""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    role: UserRole
    created_at: datetime | None = None


class AuthResponse(BaseModel):
    """Token plus the authenticated user"""

    token: str
    user: UserPublic


class RoleUpdateRequest(BaseModel):
    role: UserRole


class UserListResponse(BaseModel):
    users: list[UserPublic]
    count: int
