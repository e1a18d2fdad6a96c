"""Common type definitions shared by every Fanart.tv resource.

These mirror the JSON returned by the API. They are only used for typing;
responses are returned as plain dicts.
"""

from __future__ import annotations

from typing import Any, NotRequired, TypeAlias, TypedDict


class ImageBase(TypedDict):
    """A single artwork image.

    Fanart.tv encodes every field, including ``likes``, as a string.
    """

    id: str
    url: str
    likes: str
    lang: NotRequired[str]
    size: NotRequired[str]


# Latest endpoints are loosely structured and are passed through unchanged
LatestResponse: TypeAlias = "dict[str, Any] | list[Any]"
