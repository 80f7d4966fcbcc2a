"""
API tests for note endpoints.
"""

import uuid

import pytest
from fastapi import status


class TestNoteController:
    """Test cases for /api/notes."""

    @pytest.mark.asyncio
    async def test_create_note_on_card(self, client, auth_headers, test_card):
        response = await client.post(
            "/api/notes",
            json={"content": "Ask about scope", "label": "question", "card_id": str(test_card.id)},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_201_CREATED
        note = response.json()["data"]
        assert note["content"] == "Ask about scope"
        assert note["card_id"] == str(test_card.id)

        card = (await client.get(f"/api/cards/{test_card.id}", headers=auth_headers)).json()
        assert card["data"]["notes"] == [note["id"]]

    @pytest.mark.asyncio
    async def test_create_note_blank_card_reference(self, client, auth_headers):
        response = await client.post(
            "/api/notes", json={"content": "Loose", "card_id": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json()["data"]["card_id"] is None

    @pytest.mark.asyncio
    async def test_create_note_without_content(self, client, auth_headers):
        response = await client.post("/api/notes", json={"title": "Empty"}, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    @pytest.mark.asyncio
    async def test_create_note_unknown_card(self, client, auth_headers):
        response = await client.post(
            "/api/notes",
            json={"content": "Lost", "card_id": str(uuid.uuid4())},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"] == "no such card"

    @pytest.mark.asyncio
    async def test_get_notes(self, client, auth_headers, other_auth_headers, test_note):
        mine = await client.get("/api/notes", headers=auth_headers)
        theirs = await client.get("/api/notes", headers=other_auth_headers)

        assert [n["id"] for n in mine.json()["data"]["items"]] == [str(test_note.id)]
        assert theirs.json()["data"]["items"] == []

    @pytest.mark.asyncio
    async def test_get_notes_for_card(self, client, auth_headers, project_card, test_note):
        response = await client.get(
            f"/api/notes?card_id={project_card.id}", headers=auth_headers
        )

        assert response.json()["data"]["items"] == []

    @pytest.mark.asyncio
    async def test_get_note_of_other_user(self, client, other_auth_headers, test_note):
        response = await client.get(f"/api/notes/{test_note.id}", headers=other_auth_headers)

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_update_note(self, client, auth_headers, test_note):
        response = await client.put(
            f"/api/notes/{test_note.id}",
            json={"content": "Remember the appendix and index", "colour": "blue"},
            headers=auth_headers,
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()["data"]
        assert data["content"] == "Remember the appendix and index"
        assert data["colour"] == "blue"

    @pytest.mark.asyncio
    async def test_update_note_blank_content(self, client, auth_headers, test_note):
        response = await client.put(
            f"/api/notes/{test_note.id}", json={"content": ""}, headers=auth_headers
        )

        assert response.status_code == status.HTTP_304_NOT_MODIFIED

    @pytest.mark.asyncio
    async def test_delete_note(self, client, auth_headers, test_card, test_note):
        response = await client.delete(f"/api/notes/{test_note.id}", headers=auth_headers)

        assert response.status_code == status.HTTP_204_NO_CONTENT
        card = (await client.get(f"/api/cards/{test_card.id}", headers=auth_headers)).json()
        assert card["data"]["notes"] == []
