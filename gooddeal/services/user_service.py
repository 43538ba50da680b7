import logging
from dataclasses import dataclass
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from gooddeal.core.domain import (
    AuthenticationException,
    EntityNotFoundException,
    UserRole,
    ValidationException,
)
from gooddeal.models.db.user import UserDB
from gooddeal.repositories.user_repository import DuplicateEmailError, UserRepository
from gooddeal.services.token_service import TokenService

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6
# bcrypt only accepts up to 72 bytes of input
MAX_PASSWORD_BYTES = 72
INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthResult:
    """Token issued for a user"""

    token: str
    user: UserDB


def normalize_email(email: str) -> str:
    return email.strip().lower()


def check_password_size(password: str) -> None:
    if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationException(f"Password must be at most {MAX_PASSWORD_BYTES} bytes", field="password")


class UserService:
    """
    Registration, login and account administration.

    Passwords are stored as bcrypt hashes and never leave this service.
    """

    def __init__(self, session: AsyncSession, token_service: TokenService | None = None):
        self.repository = UserRepository(session)
        self.token_service = token_service or TokenService()

    async def register(self, name: str, email: str, password: str) -> AuthResult:
        """
        Create a customer account and issue its first token.

        Raises:
            ValidationException: Missing fields, short password or email already registered
        """
        name = (name or "").strip()
        email = normalize_email(email or "")

        if not name:
            raise ValidationException("Name is required", field="name")
        if not email or "@" not in email:
            raise ValidationException("A valid email is required", field="email")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationException(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters", field="password"
            )
        check_password_size(password)

        if await self.repository.email_exists(email):
            raise ValidationException("Email already registered", field="email")

        password_hash = self.token_service.get_password_hash(password)
        try:
            user = await self.repository.create_user(name=name, email=email, password_hash=password_hash)
        except DuplicateEmailError as e:
            # Lost a race against a concurrent registration
            raise ValidationException("Email already registered", field="email") from e

        token = self.token_service.create_access_token(user.id)
        return AuthResult(token=token, user=user)

    async def login(self, email: str, password: str) -> AuthResult:
        """
        Verify credentials and issue a token.

        Unknown email and wrong password fail the same way.
        """
        user = await self.repository.get_by_email(normalize_email(email or ""))
        if user is None or not self.token_service.verify_password(password or "", user.password_hash):
            logger.info("Rejected login attempt")
            raise AuthenticationException(INVALID_CREDENTIALS)

        token = self.token_service.create_access_token(user.id)
        logger.info(f"User {user.id} logged in")
        return AuthResult(token=token, user=user)

    async def get_user(self, user_id: UUID) -> UserDB:
        user = await self.repository.get_by_id(user_id)
        if user is None:
            raise EntityNotFoundException("User", user_id)
        return user

    async def list_users(self) -> list[UserDB]:
        return await self.repository.list_all()

    async def count_users(self) -> int:
        return await self.repository.count()

    async def change_role(self, user_id: UUID, role: UserRole | str) -> UserDB:
        """Overwrite a user's role."""
        try:
            new_role = UserRole(role)
        except ValueError as e:
            raise ValidationException(f"Invalid role: {role}", field="role") from e

        user = await self.get_user(user_id)
        return await self.repository.update_role(user, new_role)

    async def ensure_admin(self, email: str, password: str, name: str) -> UserDB:
        """
        Make sure an admin account exists for the email.

        Creates it when missing and promotes an existing account otherwise.
        The password of an existing account is left untouched.
        """
        email = normalize_email(email)
        existing = await self.repository.get_by_email(email)
        if existing is not None:
            if existing.role != UserRole.ADMIN.value:
                logger.info(f"Promoting existing account {email} to admin")
                return await self.repository.update_role(existing, UserRole.ADMIN)
            logger.info(f"Admin user already exists: {email}")
            return existing

        check_password_size(password)
        password_hash = self.token_service.get_password_hash(password)
        user = await self.repository.create_user(
            name=name, email=email, password_hash=password_hash, role=UserRole.ADMIN
        )
        logger.info(f"Admin user created: {email}")
        return user
