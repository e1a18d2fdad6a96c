"""Preview image URL rewriting.

Fanart.tv serves a smaller rendition of each image under a ``/preview``
marker. These helpers are pure and never perform I/O.
"""

from __future__ import annotations

from typing import Any

from fanart_tv.core.constants import FANART_DOMAIN, PREVIEW_SUFFIX

URL_KEY = "url"


def to_preview_url(url: str) -> str:
    """Convert a full-size image URL to its preview variant.

    The marker is inserted before the last dot in the whole URL, or
    appended when the URL has no dot. URLs outside fanart.tv and URLs that
    already carry the marker are returned unchanged, so the conversion is
    idempotent.

    Args:
        url: Image URL

    Returns:
        Preview URL

    Examples:
        >>> to_preview_url("https://assets.fanart.tv/fanart/movies/1/p.jpg")
        'https://assets.fanart.tv/fanart/movies/1/p/preview.jpg'
        >>> to_preview_url("https://example.com/p.jpg")
        'https://example.com/p.jpg'
    """
    if FANART_DOMAIN not in url:
        return url

    if PREVIEW_SUFFIX in url:
        return url

    last_dot = url.rfind(".")
    if last_dot == -1:
        return url + PREVIEW_SUFFIX

    return url[:last_dot] + PREVIEW_SUFFIX + url[last_dot:]


def apply_preview_urls(data: Any) -> Any:
    """Rewrite every string stored under a ``url`` key to its preview variant.

    Walks nested lists and dicts and returns a new structure; the input is
    not modified. Key order is preserved.

    Args:
        data: Decoded JSON value

    Returns:
        Copy of ``data`` with preview URLs
    """
    if isinstance(data, list):
        return [apply_preview_urls(item) for item in data]

    if isinstance(data, dict):
        processed: dict[str, Any] = {}
        for key, value in data.items():
            if key == URL_KEY and isinstance(value, str):
                processed[key] = to_preview_url(value)
            else:
                processed[key] = apply_preview_urls(value)
        return processed

    return data
