"""User registration and authentication endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import auth, get_current_user
from app.database import get_db
from app.domains.user.service import UserService
from app.schemas.user import (
    AuthResponse,
    UserLoginRequest,
    UserResponse,
    UserSignupRequest,
    UserWithLists,
)
from models.user import User

router = APIRouter(prefix="/api/users", tags=["Users"])
login_router = APIRouter(prefix="/api/login", tags=["Authentication"])


def _auth_response(user: User) -> AuthResponse:
    return AuthResponse(
        token=auth.create_token(user.id, user.username),
        username=user.username,
        name=user.name,
    )


@router.post("", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(signup_data: UserSignupRequest, db: AsyncSession = Depends(get_db)):
    """Register a new user.

    Returns a token right away so the client does not have to log in after
    signing up.
    """
    user_service = UserService(db)
    user = await user_service.create_user(signup_data)
    return _auth_response(user)


@router.get("", response_model=list[UserWithLists])
async def get_users(
    _current_user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """List all users together with their lists."""
    user_service = UserService(db)
    users = await user_service.get_users_with_lists()
    return [UserWithLists.model_validate(user) for user in users]


@router.get("/me", response_model=UserResponse)
async def get_current_user_info(current_user: User = Depends(get_current_user)):
    """Get current authenticated user information."""
    return UserResponse.model_validate(current_user)


@login_router.post("", response_model=AuthResponse)
async def login(login_data: UserLoginRequest, db: AsyncSession = Depends(get_db)):
    """Issue a bearer token for valid credentials."""
    user_service = UserService(db)
    user = await user_service.authenticate(login_data.username, login_data.password)
    return _auth_response(user)
