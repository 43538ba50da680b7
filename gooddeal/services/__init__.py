from gooddeal.services.token_service import TokenService
from gooddeal.services.user_service import AuthResult, UserService

__all__ = ["AuthResult", "TokenService", "UserService"]
