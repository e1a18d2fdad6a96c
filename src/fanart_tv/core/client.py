"""FanartClient - Main entry point for the fanart-tv library."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fanart_tv.core.config import FanartConfig
from fanart_tv.core.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, FANART_API_BASE_URL
from fanart_tv.core.executor import RequestExecutor
from fanart_tv.resources.movies import MovieResource
from fanart_tv.resources.music import MusicResource
from fanart_tv.resources.tv import TvResource

if TYPE_CHECKING:
    import httpx

logger = logging.getLogger(__name__)


class FanartClient:
    """Unified access to Fanart.tv movie, music and TV artwork.

    All resource accessors share one API key and one HTTP client.

    Example:
        from fanart_tv import FanartClient, RequestOptions

        async with FanartClient("your_api_key") as fanart:
            movie = await fanart.movie.get(550)
            artist = await fanart.music.artists.get("5b11f4ce-a62d-471e-81fc-a69a8278c7da")
            album = await fanart.music.album("f5093c06-23e3-404f-afe0-f259bbc4b5b6")
            show = await fanart.tv.get(81189, RequestOptions(use_preview=True))
    """

    def __init__(
        self,
        api_key: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = FANART_API_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the FanartClient.

        Args:
            api_key: Fanart.tv personal or project API key
            timeout: Total request deadline in seconds
            base_url: API base URL
            user_agent: User agent string for HTTP requests
            http_client: Optional httpx client; the caller keeps ownership

        Raises:
            AuthenticationError: If the API key is missing or blank
        """
        self._executor = RequestExecutor(
            api_key,
            timeout=timeout,
            base_url=base_url,
            user_agent=user_agent,
            http_client=http_client,
        )
        self.movie = MovieResource(self._executor)
        self.music = MusicResource(self._executor)
        self.tv = TvResource(self._executor)

    @classmethod
    def from_config(
        cls, config: FanartConfig, http_client: httpx.AsyncClient | None = None
    ) -> FanartClient:
        """Create a client from a FanartConfig."""
        return cls(
            config.api_key,
            timeout=config.timeout,
            base_url=config.base_url,
            user_agent=config.user_agent,
            http_client=http_client,
        )

    @property
    def executor(self) -> RequestExecutor:
        return self._executor

    async def __aenter__(self) -> FanartClient:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP client if the library created it."""
        logger.debug("Closing Fanart.tv client")
        await self._executor.close()
