"""Tests for concept API endpoints."""

import logging
from typing import Any

import pytest
from aiohttp.test_utils import TestClient
from guidebook.config import Config
from guidebook.server import create_app


@pytest.fixture
async def client(test_config: Config, aiohttp_client: Any) -> TestClient:
    """Create test client with the content_root fixture pages."""
    return await aiohttp_client(create_app(test_config))


class TestGetConceptPages:
    """Tests for GET /api/concepts."""

    @pytest.mark.asyncio
    async def test__pages__returned_in_loader_order(self, client: TestClient) -> None:
        """Return concepts in filename order."""
        response = await client.get("/api/concepts")

        assert response.status == 200
        data = await response.json()
        assert [item["id"] for item in data["items"]] == ["broken", "document", "front-matter"]


class TestGetConceptPage:
    """Tests for GET /api/concepts/{id}."""

    @pytest.mark.asyncio
    async def test__existing_concept__returns_page_and_related(
        self,
        client: TestClient,
    ) -> None:
        """Resolve related concepts."""
        response = await client.get("/api/concepts/document")

        assert response.status == 200
        data = await response.json()
        assert data["page"]["title"] == "Document"
        assert data["page"]["href"] == "/concepts/document"
        assert [item["id"] for item in data["related"]] == ["front-matter"]
        assert data["related"][0]["readMore"] == ["https://yaml.org"]

    @pytest.mark.asyncio
    async def test__no_related__returns_empty_list(self, client: TestClient) -> None:
        """Concept without related ids has no related pages."""
        response = await client.get("/api/concepts/front-matter")

        assert response.status == 200
        data = await response.json()
        assert data["related"] == []

    @pytest.mark.asyncio
    async def test__unknown_concept__returns_404(self, client: TestClient) -> None:
        """Return 404 for an unknown id."""
        response = await client.get("/api/concepts/nonexistent")

        assert response.status == 404
        data = await response.json()
        assert data["error"] == "Concept not found"
        assert data["id"] == "nonexistent"

    @pytest.mark.asyncio
    async def test__missing_related__returns_500_with_missing_ids(
        self,
        client: TestClient,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        """Report related ids without a page instead of dropping them."""
        with caplog.at_level(logging.ERROR, logger="guidebook.api.concepts"):
            response = await client.get("/api/concepts/broken")

        assert response.status == 500
        data = await response.json()
        assert data["error"] == "Related concepts not found"
        assert data["missing"] == ["nowhere"]
        assert "nowhere" in caplog.text
