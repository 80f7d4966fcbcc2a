"""
Unit tests for Main Application module.

This module contains unit tests for the FastAPI application factory, its
middleware, exception handlers and the informational endpoints.
"""

from unittest.mock import patch

import pytest
from fastapi import status
from sqlalchemy.exc import OperationalError

from app.core.config import settings
from app.main import create_app


class TestAppCreation:
    """Test cases for FastAPI application creation."""

    def test_create_app_metadata(self):
        test_app = create_app()

        assert test_app.title == "Task Board API"
        assert test_app.version == settings.version

    def test_docs_hidden_outside_development(self):
        """The suite runs in the testing environment, so docs are off."""
        test_app = create_app()

        assert test_app.docs_url is None
        assert test_app.redoc_url is None

    def test_routes_registered(self):
        paths = {route.path for route in create_app().routes}

        for expected in [
            "/api/users",
            "/api/login",
            "/api/lists",
            "/api/lists/{list_id}",
            "/api/cards",
            "/api/cards/timer",
            "/api/cards/{card_id}/timer/start",
            "/api/projects/{project_id}",
            "/api/notes/{note_id}",
            "/health",
        ]:
            assert expected in paths


class TestEndpoints:
    """Test cases for the root and health endpoints."""

    @pytest.mark.asyncio
    async def test_root(self, client):
        response = await client.get("/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["name"] == "Task Board API"

    @pytest.mark.asyncio
    async def test_health(self, client):
        response = await client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        body = response.json()
        assert body["status"] == "healthy"
        assert body["services"]["database"] == "healthy"

    @pytest.mark.asyncio
    async def test_health_database_down(self, client):
        with patch("app.main.AsyncSessionLocal") as session_factory:
            session_factory.return_value.__aenter__.side_effect = OperationalError(
                "SELECT 1", {}, Exception("down")
            )
            response = await client.get("/health")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["status"] == "unhealthy"


class TestMiddlewareAndHandlers:
    """Test cases for the request id middleware and error envelope."""

    @pytest.mark.asyncio
    async def test_request_id_header(self, client):
        first = await client.get("/")
        second = await client.get("/")

        assert first.headers["X-Request-ID"]
        assert first.headers["X-Request-ID"] != second.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_missing_token_envelope(self, client):
        response = await client.get("/api/lists")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.headers["WWW-Authenticate"] == "Bearer"
        body = response.json()
        assert body["status"] == "error"
        assert body["error"] == "token missing"
        assert body["error_code"] == "AUTHENTICATION_FAILED"
        assert body["request_id"] == response.headers["X-Request-ID"]

    @pytest.mark.asyncio
    async def test_invalid_token(self, client):
        response = await client.get(
            "/api/lists", headers={"Authorization": "Bearer not-a-real-token"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["error"] == "token invalid"

    @pytest.mark.asyncio
    async def test_validation_error_is_400(self, client, auth_headers):
        response = await client.post("/api/lists", json={}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["error"].startswith("title:")
        assert body["details"][0]["loc"] == ["body", "title"]

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/api/nothing-here")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json()["status"] == "error"
