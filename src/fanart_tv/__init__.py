"""
fanart-tv: An async client for the Fanart.tv artwork API.

This library provides typed access to movie, music and TV show artwork from
Fanart.tv, with a small exception hierarchy for API failures and optional
rewriting of image URLs to their preview renditions.

Example usage:
    from fanart_tv import FanartClient, RequestOptions

    async with FanartClient("your_api_key") as fanart:
        artwork = await fanart.movie.get(550, RequestOptions(use_preview=True))
        for poster in artwork.get("movieposter", []):
            print(poster["url"], poster["likes"])
"""

from fanart_tv.core.client import FanartClient
from fanart_tv.core.config import FanartConfig, RequestOptions
from fanart_tv.core.exceptions import (
    AuthenticationError,
    ErrorKind,
    FanartApiError,
    MalformedResponseError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    RequestTimeoutError,
    ValidationError,
)
from fanart_tv.core.executor import RequestExecutor
from fanart_tv.core.preview import apply_preview_urls, to_preview_url
from fanart_tv.types import AlbumImages, ArtistImages, ImageBase, LabelImages, MovieImages, ShowImages

__version__ = "1.0.0"

__all__ = [
    # Core
    "FanartClient",
    "FanartConfig",
    "RequestExecutor",
    "RequestOptions",
    # Exceptions
    "AuthenticationError",
    "ErrorKind",
    "FanartApiError",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "RequestTimeoutError",
    "ValidationError",
    # Utilities
    "apply_preview_urls",
    "to_preview_url",
    # Types
    "AlbumImages",
    "ArtistImages",
    "ImageBase",
    "LabelImages",
    "MovieImages",
    "ShowImages",
]
