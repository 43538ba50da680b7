from fastapi import APIRouter, Depends, status

from gooddeal.api.dependencies import get_current_user, get_user_service
from gooddeal.models.auth import AuthResponse, LoginRequest, RegisterRequest, UserPublic
from gooddeal.models.db.user import UserDB
from gooddeal.services import UserService

router = APIRouter(prefix="/auth", tags=["Auth"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest,
    user_service: UserService = Depends(get_user_service),  # noqa: B008
):
    """Create a customer account and return its token."""
    result = await user_service.register(request.name, request.email, request.password)
    return AuthResponse(token=result.token, user=UserPublic.model_validate(result.user))


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    user_service: UserService = Depends(get_user_service),  # noqa: B008
):
    """Exchange email and password for a token."""
    result = await user_service.login(request.email, request.password)
    return AuthResponse(token=result.token, user=UserPublic.model_validate(result.user))


@router.get("/me", response_model=UserPublic)
async def me(user: UserDB = Depends(get_current_user)):  # noqa: B008
    """The user the bearer token belongs to."""
    return UserPublic.model_validate(user)
