import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Optional
from uuid import UUID

import bcrypt
from jose import ExpiredSignatureError, JWTError, jwt

from gooddeal.config.settings import Settings, get_settings
from gooddeal.core.domain import AuthenticationException

logger = logging.getLogger(__name__)


class TokenService:
    """
    Password hashing and JWT access tokens.

    Tokens carry only the user identifier. There is no server-side session
    store and no revocation list: logging out means the client discards the
    token.
    """

    TOKEN_TYPE = "access"

    def __init__(self, settings: Settings | None = None):
        self.settings = settings or get_settings()

        # JWT configuration
        self.SECRET_KEY = self.settings.JWT_SECRET_KEY
        self.ALGORITHM = self.settings.JWT_ALGORITHM
        self.ACCESS_TOKEN_EXPIRE_MINUTES = self.settings.ACCESS_TOKEN_EXPIRE_MINUTES

    def verify_password(self, plain_password: str, hashed_password: str) -> bool:
        """Check a plain password against its bcrypt hash."""
        try:
            return bcrypt.checkpw(plain_password.encode("utf-8"), hashed_password.encode("utf-8"))
        except ValueError:
            # Malformed hash in storage
            logger.warning("Stored password hash is not a valid bcrypt hash")
            return False

    def get_password_hash(self, password: str) -> str:
        """Hash a password with a freshly generated salt."""
        salt = bcrypt.gensalt()
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    def create_access_token(self, user_id: UUID | str, expires_delta: Optional[timedelta] = None) -> str:
        """
        Create a signed access token for a user.

        Args:
            user_id: Identifier embedded as the "sub" claim
            expires_delta: Custom lifetime (defaults to ACCESS_TOKEN_EXPIRE_MINUTES)

        Returns:
            Encoded JWT
        """
        now = datetime.now(timezone.utc)
        if expires_delta is not None:
            expire = now + expires_delta
        else:
            expire = now + timedelta(minutes=self.ACCESS_TOKEN_EXPIRE_MINUTES)

        to_encode = {
            "sub": str(user_id),
            "iat": now,
            "exp": expire,
            "token_type": self.TOKEN_TYPE,
        }
        return jwt.encode(to_encode, self.SECRET_KEY, algorithm=self.ALGORITHM)

    def decode_token(self, token: str) -> Dict[str, Any]:
        """
        Verify signature and expiry and return the payload.

        Raises:
            AuthenticationException: expired, tampered, malformed or wrong token type
        """
        try:
            payload = jwt.decode(token, self.SECRET_KEY, algorithms=[self.ALGORITHM])
        except ExpiredSignatureError as e:
            raise AuthenticationException("Token has expired") from e
        except JWTError as e:
            raise AuthenticationException("Token is not valid") from e

        if payload.get("token_type") != self.TOKEN_TYPE:
            raise AuthenticationException("Token is not valid")
        if not payload.get("sub"):
            raise AuthenticationException("Token is not valid")
        return payload

    def get_user_id(self, token: str) -> UUID:
        """Return the user id embedded in a valid token."""
        payload = self.decode_token(token)
        try:
            return UUID(payload["sub"])
        except (ValueError, TypeError) as e:
            raise AuthenticationException("Token is not valid") from e
