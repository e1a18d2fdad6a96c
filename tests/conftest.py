"""Pytest configuration and fixtures."""

from __future__ import annotations

import httpx
import pytest

from fanart_tv import FanartClient, FanartConfig

TEST_API_KEY = "test_api_key"


@pytest.fixture
def api_key() -> str:
    return TEST_API_KEY


@pytest.fixture
def config() -> FanartConfig:
    """Create a configuration for testing."""
    return FanartConfig(api_key=TEST_API_KEY, timeout=5.0)


@pytest.fixture
async def client(config):
    """Create a FanartClient that owns its HTTP client."""
    fanart = FanartClient.from_config(config)
    try:
        yield fanart
    finally:
        await fanart.close()


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
async def offline_client(recorded_requests):
    """Create a FanartClient whose transport records every request it receives."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json={})

    http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
    fanart = FanartClient(TEST_API_KEY, http_client=http_client)
    try:
        yield fanart
    finally:
        await http_client.aclose()


@pytest.fixture
def movie_response() -> dict:
    """Return a trimmed movie artwork response."""
    return {
        "name": "Fight Club",
        "tmdb_id": "550",
        "imdb_id": "tt0137523",
        "movieposter": [
            {
                "id": "1",
                "url": "https://assets.fanart.tv/fanart/movies/550/movieposter/fight-club.jpg",
                "lang": "en",
                "likes": "5",
            }
        ],
        "moviebackground": [
            {
                "id": "2",
                "url": "https://assets.fanart.tv/fanart/movies/550/moviebackground/fight-club.jpg",
                "lang": "",
                "likes": "3",
            }
        ],
    }
