"""Tests for the movie, music and TV resource accessors."""

import httpx
import pytest
import respx

from fanart_tv.core.config import RequestOptions
from fanart_tv.core.constants import FANART_API_BASE_URL as API_BASE
from fanart_tv.core.exceptions import NotFoundError, ValidationError
from fanart_tv.resources.base import latest_path

MBID = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"
INVALID_IDS = [0, -1, 1.5, 550.0, True, "550", None]
BLANK_MBIDS = ["", "   ", "\t", None]
MALFORMED_DATES = ["2024-1-1", "24-01-01", "2024/01/01", "yesterday"]


def test_latest_path():
    assert latest_path("/movies", None) == "/movies/latest"
    assert latest_path("/movies", "2024-01-01") == "/movies/latest/2024-01-01"


class TestPaths:
    """Test each accessor requests the expected endpoint."""

    @pytest.mark.parametrize(
        ("call", "path"),
        [
            (lambda f: f.movie.get(550), "/movies/550"),
            (lambda f: f.movie.latest(), "/movies/latest"),
            (lambda f: f.movie.latest("2024-01-01"), "/movies/latest/2024-01-01"),
            (lambda f: f.music.artists.get(MBID), f"/music/{MBID}"),
            (lambda f: f.music.artists.get(f"  {MBID} "), f"/music/{MBID}"),
            (lambda f: f.music.artists.latest(), "/music/latest"),
            (lambda f: f.music.artists.latest("2024-01-01"), "/music/latest/2024-01-01"),
            (lambda f: f.music.album(MBID), f"/music/albums/{MBID}"),
            (lambda f: f.music.label(MBID), f"/music/labels/{MBID}"),
            (lambda f: f.tv.get(81189), "/tv/81189"),
            (lambda f: f.tv.latest(), "/tv/latest"),
            (lambda f: f.tv.latest("2024-01-01"), "/tv/latest/2024-01-01"),
        ],
    )
    async def test_endpoint(self, offline_client, recorded_requests, call, path):
        await call(offline_client)

        assert len(recorded_requests) == 1
        assert str(recorded_requests[0].url) == f"{API_BASE}{path}"


class TestValidation:
    """Test invalid arguments fail before any request is made."""

    @pytest.mark.parametrize("movie_id", INVALID_IDS)
    async def test_movie_id(self, offline_client, recorded_requests, movie_id):
        with pytest.raises(ValidationError, match="movie ID"):
            await offline_client.movie.get(movie_id)
        assert recorded_requests == []

    @pytest.mark.parametrize("tvdb_id", INVALID_IDS)
    async def test_tvdb_id(self, offline_client, recorded_requests, tvdb_id):
        with pytest.raises(ValidationError, match="TVDB ID"):
            await offline_client.tv.get(tvdb_id)
        assert recorded_requests == []

    @pytest.mark.parametrize("mbid", BLANK_MBIDS)
    async def test_mbids(self, offline_client, recorded_requests, mbid):
        with pytest.raises(ValidationError, match="artist MBID"):
            await offline_client.music.artists.get(mbid)
        with pytest.raises(ValidationError, match="album MBID"):
            await offline_client.music.album(mbid)
        with pytest.raises(ValidationError, match="label MBID"):
            await offline_client.music.label(mbid)
        assert recorded_requests == []

    @pytest.mark.parametrize("date", MALFORMED_DATES)
    async def test_latest_dates(self, offline_client, recorded_requests, date):
        for resource in (offline_client.movie, offline_client.music.artists, offline_client.tv):
            with pytest.raises(ValidationError, match="YYYY-MM-DD"):
                await resource.latest(date)
        assert recorded_requests == []


class TestResponses:
    """Test accessors return the executor's result."""

    @respx.mock
    async def test_movie_with_preview(self, client, movie_response):
        respx.get(f"{API_BASE}/movies/550").mock(return_value=httpx.Response(200, json=movie_response))

        artwork = await client.movie.get(550, RequestOptions(use_preview=True))

        assert artwork["name"] == "Fight Club"
        assert artwork["movieposter"][0]["url"] == (
            "https://assets.fanart.tv/fanart/movies/550/movieposter/fight-club/preview.jpg"
        )

    @respx.mock
    async def test_show_not_found(self, client):
        respx.get(f"{API_BASE}/tv/99999999").mock(
            return_value=httpx.Response(404, json={"status": "error", "error message": "Not found"})
        )

        with pytest.raises(NotFoundError) as exc_info:
            await client.tv.get(99999999)

        assert exc_info.value.status_code == 404
        assert "Not found" in exc_info.value.response

    @respx.mock
    async def test_latest_passthrough(self, client):
        """Test loosely structured latest payloads are returned unchanged."""
        payload = [
            {"id": MBID, "name": "Nirvana", "new_images": "2", "total_images": "90"},
        ]
        respx.get(f"{API_BASE}/music/latest/2024-01-01").mock(
            return_value=httpx.Response(200, json=payload)
        )

        assert await client.music.artists.latest("2024-01-01") == payload
