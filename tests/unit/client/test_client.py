"""Tests for the MedSearch Python SDK client."""

from __future__ import annotations

import httpx
import pytest
from fastapi import FastAPI

from medsearch.api.app import create_app
from medsearch.client.client import AsyncMedSearchClient, MedSearchClient
from medsearch.config.settings import Settings
from medsearch.core.engine import SearchEngine


@pytest.fixture
def app(settings: Settings, engine: SearchEngine) -> FastAPI:
    return create_app(settings, engine=engine)


def _sdk(app: FastAPI) -> AsyncMedSearchClient:
    return AsyncMedSearchClient(base_url="http://testserver", transport=httpx.ASGITransport(app=app))


class TestAsyncMedSearchClient:
    """Test the async SDK client against the in-process app."""

    async def test_health(self, app: FastAPI) -> None:
        async with _sdk(app) as sdk:
            result = await sdk.health()

        assert result["status"] == "healthy"
        assert result["service"] == "medsearch"

    async def test_search(self, app: FastAPI) -> None:
        async with _sdk(app) as sdk:
            result = await sdk.search("rinoplastia", types=["case", "article"], limit=1)

        assert result["total"] == 2
        assert [r["id"] for r in result["results"]] == ["caso-1"]
        assert result["pagination"]["hasMore"] is True

    async def test_search_filters_are_joined(self, app: FastAPI) -> None:
        async with _sdk(app) as sdk:
            result = await sdk.search("rinoplastia", specialties=["Rinoplastia", "Lifting"])

        assert result["filters"]["specialty"] == ["Rinoplastia", "Lifting"]
        assert [r["id"] for r in result["results"]] == ["caso-1"]

    async def test_suggest(self, app: FastAPI) -> None:
        async with _sdk(app) as sdk:
            suggestions = await sdk.suggest("rino", limit=1)

        assert suggestions == ["Rinoplastia em paciente jovem"]

    async def test_error_status_raises(self, app: FastAPI) -> None:
        async with _sdk(app) as sdk:
            with pytest.raises(httpx.HTTPStatusError):
                await sdk.search("x", limit=500)


def test_sync_client_with_mock_transport() -> None:
    """The sync wrapper forwards query parameters and returns parsed JSON."""
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"suggestions": ["Lifting"]})

    client = MedSearchClient("http://medsearch.local", transport=httpx.MockTransport(handler))
    assert client.suggest("lift", limit=2) == ["Lifting"]

    params = seen[0].url.params
    assert seen[0].url.path == "/v1/search"
    assert params["q"] == "lift"
    assert params["suggestions"] == "true"
    assert params["limit"] == "2"
