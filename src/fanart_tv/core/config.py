"""Configuration classes for the fanart-tv library."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from fanart_tv.core.constants import DEFAULT_TIMEOUT, DEFAULT_USER_AGENT, FANART_API_BASE_URL
from fanart_tv.core.exceptions import AuthenticationError

API_KEY_ENV_VAR = "FANART_API_KEY"
TIMEOUT_ENV_VAR = "FANART_TIMEOUT"


@dataclass(frozen=True)
class RequestOptions:
    """Per-call request options.

    Attributes:
        use_preview: Rewrite every image URL in the response to its preview variant
    """

    use_preview: bool = False


@dataclass
class FanartConfig:
    """Configuration for a FanartClient.

    Attributes:
        api_key: Fanart.tv personal or project API key
        timeout: Total request deadline in seconds
        base_url: API base URL
        user_agent: User agent string for HTTP requests
    """

    api_key: str = ""
    timeout: float = DEFAULT_TIMEOUT
    base_url: str = FANART_API_BASE_URL
    user_agent: str = DEFAULT_USER_AGENT

    @property
    def is_configured(self) -> bool:
        """Check if an API key is present."""
        return bool(self.api_key and self.api_key.strip())

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> FanartConfig:
        """Create a FanartConfig from a dictionary, ignoring unknown keys."""
        kwargs: dict[str, Any] = {}
        for key in ["api_key", "timeout", "base_url", "user_agent"]:
            if key in data:
                kwargs[key] = data[key]
        if "timeout" in kwargs:
            kwargs["timeout"] = float(kwargs["timeout"])
        return cls(**kwargs)

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> FanartConfig:
        """Create a FanartConfig from FANART_API_KEY and FANART_TIMEOUT.

        Raises:
            AuthenticationError: If FANART_API_KEY is unset or blank
        """
        if environ is None:
            environ = dict(os.environ)
        api_key = environ.get(API_KEY_ENV_VAR, "")
        if not api_key.strip():
            raise AuthenticationError(f"{API_KEY_ENV_VAR} is not set")

        data: dict[str, Any] = {"api_key": api_key}
        if environ.get(TIMEOUT_ENV_VAR):
            data["timeout"] = environ[TIMEOUT_ENV_VAR]
        return cls.from_dict(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert the configuration to a dictionary."""
        from dataclasses import asdict

        return asdict(self)
