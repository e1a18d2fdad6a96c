"""Shared HTTP request handling for all Fanart.tv resources."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx

from fanart_tv.core.config import RequestOptions
from fanart_tv.core.constants import (
    API_KEY_HEADER,
    DEFAULT_HEADERS,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    FANART_API_BASE_URL,
    UNKNOWN_ERROR_TEXT,
)
from fanart_tv.core.exceptions import (
    AuthenticationError,
    FanartApiError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
)
from fanart_tv.core.preview import apply_preview_urls

logger = logging.getLogger(__name__)


def normalize_api_key(api_key: Any) -> str:
    """Trim an API key, rejecting anything that is not a non-empty string.

    Raises:
        AuthenticationError: If the key is missing or blank
    """
    if not isinstance(api_key, str) or not api_key.strip():
        raise AuthenticationError("API key is required and must be a non-empty string")
    return api_key.strip()


class RequestExecutor:
    """Performs GET requests against the Fanart.tv API.

    One executor is shared by every resource accessor of a client. It holds
    the API key and the httpx client, maps HTTP failures onto the exception
    hierarchy in :mod:`fanart_tv.core.exceptions`, and rewrites image URLs
    to preview variants on request.

    Example:
        executor = RequestExecutor("your_api_key")
        data = await executor.get("/movies/550", RequestOptions(use_preview=True))
        await executor.close()
    """

    def __init__(
        self,
        api_key: str,
        timeout: float = DEFAULT_TIMEOUT,
        base_url: str = FANART_API_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize the executor.

        Args:
            api_key: Fanart.tv API key, trimmed before use
            timeout: Total request deadline in seconds
            base_url: API base URL
            user_agent: User agent string
            http_client: Optional httpx client to use instead of an owned one

        Raises:
            AuthenticationError: If the API key is missing or blank
        """
        self._api_key = normalize_api_key(api_key)
        self._timeout = timeout
        self._base_url = base_url.rstrip("/")
        self._user_agent = user_agent
        self._client = http_client
        self._owns_client = http_client is None

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def timeout(self) -> float:
        return self._timeout

    @property
    def base_url(self) -> str:
        return self._base_url

    def _headers(self) -> dict[str, str]:
        return {
            **DEFAULT_HEADERS,
            "User-Agent": self._user_agent,
            API_KEY_HEADER: self._api_key,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Get or create the httpx client."""
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=self._timeout)
            self._owns_client = True
        return self._client

    async def get(self, path: str, options: RequestOptions | None = None) -> Any:
        """Fetch a resource path and return the decoded JSON body.

        Args:
            path: Resource path beginning with "/" (e.g. "/movies/550")
            options: Per-call request options

        Returns:
            Decoded JSON, with preview URLs when ``options.use_preview`` is set

        Raises:
            RequestTimeoutError: If the deadline expires
            NetworkError: If the request fails without a response
            AuthenticationError: On HTTP 401
            NotFoundError: On HTTP 404
            RateLimitError: On HTTP 429
            MalformedResponseError: If a successful body is not JSON
            FanartApiError: On any other non-success status
        """
        client = await self._get_client()
        if client.is_closed:
            raise NetworkError("HTTP client has been closed")
        url = f"{self._base_url}{path}"

        logger.debug("Fanart.tv API: GET %s", url)

        try:
            async with asyncio.timeout(self._timeout):
                response = await client.get(
                    url, headers=self._headers(), follow_redirects=True
                )
        except (TimeoutError, httpx.TimeoutException) as e:
            logger.debug("Fanart.tv API: request to %s timed out", path)
            raise RequestTimeoutError(self._timeout) from e
        except httpx.RequestError as e:
            logger.debug("Fanart.tv API error: %s", e)
            raise NetworkError(str(e) or type(e).__name__) from e

        if not response.is_success:
            raise self._error_for_response(response)

        try:
            data = response.json()
        except ValueError as e:
            logger.debug("Fanart.tv API: invalid JSON from %s", path)
            raise MalformedResponseError(
                str(e), response.status_code, self._read_text(response)
            ) from e

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "Fanart.tv API response:\n%s", json.dumps(data, indent=2, ensure_ascii=False)
            )

        if options is not None and options.use_preview:
            return apply_preview_urls(data)
        return data

    def _error_for_response(self, response: httpx.Response) -> FanartApiError:
        """Map a non-success response onto an exception."""
        status = response.status_code
        text = self._read_text(response)
        logger.debug("Fanart.tv API: %d %s", status, response.reason_phrase)

        if status == 401:
            return AuthenticationError(text, text)
        if status == 404:
            return NotFoundError(text, text)
        if status == 429:
            return RateLimitError(text, text)
        return FanartApiError(f"API request failed ({status}): {text}", status, text)

    @staticmethod
    def _read_text(response: httpx.Response) -> str:
        try:
            return response.text
        except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError):
            return UNKNOWN_ERROR_TEXT

    async def close(self) -> None:
        """Close the httpx client if this executor created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
