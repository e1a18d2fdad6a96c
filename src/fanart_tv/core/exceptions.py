"""Custom exceptions for the fanart-tv library.

Every exception raised by the library carries a ``kind`` so callers can
branch on :class:`ErrorKind` instead of on the exception class.
"""

from __future__ import annotations

import enum


@enum.unique
class ErrorKind(enum.StrEnum):
    """Discriminant shared by all library errors."""

    AUTHENTICATION = "authentication"
    NOT_FOUND = "not_found"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    NETWORK = "network"
    GENERIC = "generic"
    VALIDATION = "validation"


class FanartApiError(Exception):
    """Base exception for errors talking to the Fanart.tv API.

    Attributes:
        kind: Error category
        status_code: HTTP status code, when one applies
        response: Raw response body, when one was read
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: str | None = None,
    ) -> None:
        self.status_code = status_code
        self.response = response
        super().__init__(message)


class AuthenticationError(FanartApiError):
    """Raised when the API key is missing or rejected."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, details: str | None = None, response: str | None = None) -> None:
        message = "Invalid or missing API key"
        if details:
            message += f": {details}"
        super().__init__(message, 401, response)


class NotFoundError(FanartApiError):
    """Raised when the requested resource does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, details: str | None = None, response: str | None = None) -> None:
        message = "Resource not found"
        if details:
            message += f": {details}"
        super().__init__(message, 404, response)


class RateLimitError(FanartApiError):
    """Raised when the API rate limit is exceeded."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, details: str | None = None, response: str | None = None) -> None:
        message = "Rate limit exceeded"
        if details:
            message += f": {details}"
        super().__init__(message, 429, response)


class RequestTimeoutError(FanartApiError):
    """Raised when a request does not complete before the deadline."""

    kind = ErrorKind.TIMEOUT

    def __init__(self, timeout: float) -> None:
        self.timeout = timeout
        super().__init__(f"Request timed out after {timeout:g}s", 408)


class NetworkError(FanartApiError):
    """Raised when the request fails before any HTTP response is received."""

    kind = ErrorKind.NETWORK

    def __init__(self, details: str | None = None) -> None:
        message = "Network error"
        if details:
            message += f": {details}"
        super().__init__(message)


class MalformedResponseError(FanartApiError):
    """Raised when a successful response body is not valid JSON."""

    def __init__(
        self,
        details: str | None = None,
        status_code: int | None = None,
        response: str | None = None,
    ) -> None:
        message = "Invalid JSON response"
        if details:
            message += f": {details}"
        super().__init__(message, status_code, response)


class ValidationError(ValueError):
    """Raised when a caller-supplied argument is rejected.

    Raised before any network activity. It does not derive from
    :class:`FanartApiError`.
    """

    kind = ErrorKind.VALIDATION

    def __init__(self, argument: str, details: str) -> None:
        self.argument = argument
        super().__init__(f"Invalid {argument}: {details}")
