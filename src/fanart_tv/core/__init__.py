"""Core functionality for fanart-tv."""

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

__all__ = [
    "FanartClient",
    "FanartConfig",
    "RequestOptions",
    "RequestExecutor",
    "AuthenticationError",
    "ErrorKind",
    "FanartApiError",
    "MalformedResponseError",
    "NetworkError",
    "NotFoundError",
    "RateLimitError",
    "RequestTimeoutError",
    "ValidationError",
    "apply_preview_urls",
    "to_preview_url",
]
