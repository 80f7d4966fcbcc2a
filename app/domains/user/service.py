# app/domains/user/service.py
import logging
from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.core.config import settings
from app.core.security import hash_password, verify_password
from app.exceptions.base import DatabaseOperationError, ValidationError
from app.exceptions.user import InvalidCredentialsError, UserAlreadyExistsError
from app.schemas.user import UserSignupRequest
from models import User

logger = logging.getLogger(__name__)


class UserService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_user_by_username(self, username: str) -> Optional[User]:
        """Get a user by username."""
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()

    async def get_user_by_id(self, user_id: UUID) -> Optional[User]:
        """Get a user by ID."""
        result = await self.db.execute(select(User).where(User.id == user_id))
        return result.scalar_one_or_none()

    async def get_user_by_token_subject(self, subject: str) -> Optional[User]:
        """Resolve the ``sub`` claim of a token to a user."""
        try:
            user_id = UUID(subject)
        except (TypeError, ValueError):
            return None
        return await self.get_user_by_id(user_id)

    async def create_user(self, signup_data: UserSignupRequest) -> User:
        """Register a new user after checking the password rules."""
        password = signup_data.password
        if not password:
            raise ValidationError("password is required")
        if len(password) < settings.min_password_length:
            raise ValidationError(
                f"password must have a minimum length of {settings.min_password_length}"
            )

        if await self.get_user_by_username(signup_data.username):
            raise UserAlreadyExistsError()

        user = User(
            username=signup_data.username,
            first_name=signup_data.first_name,
            last_name=signup_data.last_name,
            password_hash=hash_password(password),
        )

        try:
            self.db.add(user)
            await self.db.commit()
            await self.db.refresh(user)
        except IntegrityError as e:
            # lost a race with a concurrent registration of the same username
            await self.db.rollback()
            raise UserAlreadyExistsError() from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("Failed to create user %s: %s", signup_data.username, e)
            raise DatabaseOperationError("Failed to create user") from e

        logger.info("Registered user %s", user.username)
        return user

    async def authenticate(self, username: str, password: str) -> User:
        """Return the user matching the credentials."""
        user = await self.get_user_by_username(username)
        if not user or not verify_password(password, user.password_hash):
            raise InvalidCredentialsError()
        return user

    async def get_users_with_lists(self) -> list[User]:
        """Get every user together with the lists they own."""
        stmt = select(User).options(selectinload(User.lists)).order_by(User.username)
        result = await self.db.execute(stmt.execution_options(populate_existing=True))
        return list(result.scalars().all())
