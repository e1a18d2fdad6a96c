"""TV show artwork type definitions.

Based on the Fanart.tv API: https://fanarttv.docs.apiary.io/#reference/tv
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

from fanart_tv.types.common import ImageBase, LatestResponse


class TvImage(ImageBase):
    """TV show artwork image."""


class SeasonImage(ImageBase):
    """Season artwork; ``season`` is "all" or the season number."""

    season: NotRequired[str]


class ShowImages(TypedDict):
    """TV show artwork keyed by category."""

    name: str
    thetvdb_id: str
    clearlogo: NotRequired[list[TvImage]]
    hdtvlogo: NotRequired[list[TvImage]]
    clearart: NotRequired[list[TvImage]]
    hdclearart: NotRequired[list[TvImage]]
    showbackground: NotRequired[list[SeasonImage]]
    tvthumb: NotRequired[list[TvImage]]
    seasonposter: NotRequired[list[SeasonImage]]
    seasonthumb: NotRequired[list[SeasonImage]]
    seasonbanner: NotRequired[list[SeasonImage]]
    tvbanner: NotRequired[list[TvImage]]
    characterart: NotRequired[list[TvImage]]
    tvposter: NotRequired[list[TvImage]]


LatestShows = LatestResponse
