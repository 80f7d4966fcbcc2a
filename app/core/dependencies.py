# app/core/dependencies.py
import logging

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.security import TokenAuthenticator
from app.database import get_db
from app.domains.user.service import UserService
from app.exceptions.base import AuthenticationError
from models import User

logger = logging.getLogger(__name__)

# auto_error is off so a missing header yields 401 instead of FastAPI's 403
security = HTTPBearer(auto_error=False)
auth = TokenAuthenticator()


async def validate_token(
    token: HTTPAuthorizationCredentials | None = Depends(security),
) -> dict:
    """Validate and decode the bearer token.

    Returns:
        dict: Decoded token payload

    Raises:
        AuthenticationError: If the token is missing, invalid or expired
    """
    if not token or not token.credentials:
        raise AuthenticationError("token missing")

    return auth.verify_token(token.credentials)


async def get_current_user(
    request: Request,
    payload: dict = Depends(validate_token),
    db: AsyncSession = Depends(get_db),
) -> User:
    """Get current authenticated user from the token payload.

    Returns:
        User: Current authenticated user

    Raises:
        AuthenticationError: If the token refers to a user that does not exist
    """
    user_service = UserService(db)
    user = await user_service.get_user_by_token_subject(payload["sub"])

    if not user:
        logger.warning("Token presented for unknown user %s", payload["sub"])
        raise AuthenticationError("non-existent user")

    # Add user info to request state for logging
    request.state.user_id = user.id

    return user
