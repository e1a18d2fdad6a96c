"""Constants for the Fanart.tv API client."""

from __future__ import annotations

from typing import Final

FANART_API_BASE_URL: Final = "https://webservice.fanart.tv/v3"

# Seconds before an in-flight request is cancelled
DEFAULT_TIMEOUT: Final = 10.0

DEFAULT_USER_AGENT: Final = "fanart-tv/1.0"

DEFAULT_HEADERS: Final[dict[str, str]] = {
    "Content-Type": "application/json",
}

API_KEY_HEADER: Final = "api-key"

PREVIEW_SUFFIX: Final = "/preview"

# Only URLs served from this domain have preview renditions
FANART_DOMAIN: Final = "fanart.tv"

UNKNOWN_ERROR_TEXT: Final = "Unknown error"
