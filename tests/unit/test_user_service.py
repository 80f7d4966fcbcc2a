# ruff: noqa: SIM117
"""
Unit tests for UserService.

This module contains unit tests for the UserService class, covering
registration rules, credential checks and token subject lookups.
"""

import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import SQLAlchemyError

from app.core.security import verify_password
from app.domains.user.service import UserService
from app.exceptions.base import DatabaseOperationError, ValidationError
from app.exceptions.user import InvalidCredentialsError, UserAlreadyExistsError
from app.schemas.user import UserSignupRequest


class TestUserService:
    """Test cases for UserService."""

    @pytest.mark.asyncio
    async def test_get_user_by_username_existing_user(self, test_db, test_user):
        """Test getting an existing user by username."""
        service = UserService(test_db)

        result = await service.get_user_by_username("infocus@email.com")

        assert result is not None
        assert result.id == test_user.id

    @pytest.mark.asyncio
    async def test_get_user_by_username_nonexistent_user(self, test_db):
        service = UserService(test_db)

        assert await service.get_user_by_username("nobody@email.com") is None

    @pytest.mark.asyncio
    async def test_get_user_by_token_subject(self, test_db, test_user):
        service = UserService(test_db)

        result = await service.get_user_by_token_subject(str(test_user.id))

        assert result.id == test_user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("subject", ["not-a-uuid", str(uuid.UUID(int=0))])
    async def test_get_user_by_token_subject_unknown(self, test_db, subject):
        service = UserService(test_db)

        assert await service.get_user_by_token_subject(subject) is None

    @pytest.mark.asyncio
    async def test_create_user_success(self, test_db):
        """Test successful user creation; only the hash is stored."""
        service = UserService(test_db)
        signup = UserSignupRequest(
            username="new@email.com",
            first_name="New",
            last_name="Person",
            password="long-enough-secret",
        )

        result = await service.create_user(signup)

        assert result.id is not None
        assert result.username == "new@email.com"
        assert result.name == "New Person"
        assert result.password_hash != "long-enough-secret"
        assert verify_password("long-enough-secret", result.password_hash)

    @pytest.mark.asyncio
    async def test_create_user_without_password(self, test_db):
        service = UserService(test_db)

        with pytest.raises(ValidationError, match="password is required"):
            await service.create_user(UserSignupRequest(username="nopass@email.com"))

    @pytest.mark.asyncio
    async def test_create_user_short_password(self, test_db):
        service = UserService(test_db)

        with pytest.raises(ValidationError, match="password must have a minimum length of 8"):
            await service.create_user(
                UserSignupRequest(username="short@email.com", password="1234567")
            )

    @pytest.mark.asyncio
    async def test_create_user_duplicate_username(self, test_db, test_user):
        service = UserService(test_db)

        with pytest.raises(UserAlreadyExistsError):
            await service.create_user(
                UserSignupRequest(username=test_user.username, password="another-password")
            )

    @pytest.mark.asyncio
    async def test_create_user_database_error(self, test_db):
        """Test user creation with database error."""
        service = UserService(test_db)
        signup = UserSignupRequest(username="err@email.com", password="long-enough-secret")

        with patch.object(test_db, "commit", side_effect=SQLAlchemyError("Database error")):
            with pytest.raises(DatabaseOperationError, match="Failed to create user"):
                await service.create_user(signup)

    @pytest.mark.asyncio
    async def test_authenticate_success(self, test_db, test_user, test_password):
        service = UserService(test_db)

        result = await service.authenticate(test_user.username, test_password)

        assert result.id == test_user.id

    @pytest.mark.asyncio
    async def test_authenticate_wrong_password(self, test_db, test_user):
        service = UserService(test_db)

        with pytest.raises(InvalidCredentialsError, match="invalid username or password"):
            await service.authenticate(test_user.username, "wrong-password")

    @pytest.mark.asyncio
    async def test_authenticate_unknown_user(self, test_db, test_password):
        service = UserService(test_db)

        with pytest.raises(InvalidCredentialsError):
            await service.authenticate("ghost@email.com", test_password)

    @pytest.mark.asyncio
    async def test_get_users_with_lists(self, test_db, test_user, test_user_2, test_list):
        service = UserService(test_db)

        users = await service.get_users_with_lists()

        by_name = {user.username: user for user in users}
        assert [task_list.id for task_list in by_name[test_user.username].lists] == [test_list.id]
        assert by_name[test_user_2.username].lists == []
