from gooddeal.repositories.user_repository import DuplicateEmailError, UserRepository

__all__ = ["DuplicateEmailError", "UserRepository"]
