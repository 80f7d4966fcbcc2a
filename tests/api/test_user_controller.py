"""
API tests for registration, login and user listing endpoints.
"""

import pytest
from fastapi import status

from app.core.dependencies import auth


class TestRegisterEndpoint:
    """Test cases for POST /api/users."""

    @pytest.mark.asyncio
    async def test_register_returns_token(self, client):
        response = await client.post(
            "/api/users",
            json={
                "username": "new@email.com",
                "first_name": "Ada",
                "last_name": "Lovelace",
                "password": "analytical-engine",
            },
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["username"] == "new@email.com"
        assert data["name"] == "Ada Lovelace"
        assert "password" not in data
        assert "password_hash" not in data
        assert auth.verify_token(data["token"])["username"] == "new@email.com"

    @pytest.mark.asyncio
    async def test_register_duplicate_username(self, client, test_user):
        response = await client.post(
            "/api/users",
            json={"username": test_user.username, "password": "another-password"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "username is already registered"

    @pytest.mark.asyncio
    async def test_register_without_password(self, client):
        response = await client.post("/api/users", json={"username": "nopass@email.com"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "password is required"

    @pytest.mark.asyncio
    async def test_register_short_password(self, client):
        response = await client.post(
            "/api/users", json={"username": "short@email.com", "password": "abc"}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "password must have a minimum length of 8"

    @pytest.mark.asyncio
    async def test_register_without_username(self, client):
        response = await client.post("/api/users", json={"password": "long-enough-secret"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["status"] == "error"
        assert body["error_code"] == "VALIDATION_ERROR"
        assert "username" in body["error"]


class TestLoginEndpoint:
    """Test cases for POST /api/login."""

    @pytest.mark.asyncio
    async def test_login_success(self, client, test_user, test_password):
        response = await client.post(
            "/api/login", json={"username": test_user.username, "password": test_password}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["username"] == test_user.username
        assert data["name"] == "Test User"
        assert auth.verify_token(data["token"])["sub"] == str(test_user.id)

    @pytest.mark.asyncio
    async def test_login_wrong_password(self, client, test_user):
        response = await client.post(
            "/api/login", json={"username": test_user.username, "password": "not-it-at-all"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "invalid username or password"

    @pytest.mark.asyncio
    async def test_login_unknown_user(self, client, test_password):
        response = await client.post(
            "/api/login", json={"username": "ghost@email.com", "password": test_password}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_registered_user_can_log_in(self, client):
        await client.post(
            "/api/users", json={"username": "fresh@email.com", "password": "fresh-password"}
        )

        response = await client.post(
            "/api/login", json={"username": "fresh@email.com", "password": "fresh-password"}
        )

        assert response.status_code == status.HTTP_200_OK


class TestUsersEndpoint:
    """Test cases for GET /api/users and /api/users/me."""

    @pytest.mark.asyncio
    async def test_list_users_with_lists(
        self, client, auth_headers, test_user, test_user_2, test_list
    ):
        response = await client.get("/api/users", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        users = {user["username"]: user for user in response.json()}
        assert [lst["title"] for lst in users[test_user.username]["lists"]] == ["To dos"]
        assert users[test_user_2.username]["lists"] == []
        assert all("password_hash" not in user for user in users.values())

    @pytest.mark.asyncio
    async def test_list_users_requires_token(self, client):
        response = await client.get("/api/users")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "token missing"

    @pytest.mark.asyncio
    async def test_me(self, client, auth_headers, test_user):
        response = await client.get("/api/users/me", headers=auth_headers)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["id"] == str(test_user.id)

    @pytest.mark.asyncio
    async def test_token_for_deleted_user(self, client, test_db, test_user, token_for):
        headers = token_for(test_user)
        await test_db.delete(test_user)
        await test_db.commit()

        response = await client.get("/api/users/me", headers=headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "non-existent user"
