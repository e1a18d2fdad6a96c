"""Music artwork type definitions.

Based on the Fanart.tv API: https://fanarttv.docs.apiary.io/#reference/music
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

from fanart_tv.types.common import ImageBase, LatestResponse


class MusicImage(ImageBase):
    """Artist artwork image."""


class CdArt(ImageBase):
    """CD art, with the disc number for multi-disc releases."""

    disc: NotRequired[str]


class LabelImage(ImageBase):
    """Record label image in a given colour variant."""

    colour: NotRequired[str]


class ArtistImages(TypedDict):
    """Artist artwork keyed by category."""

    name: str
    mbid_id: str
    artistbackground: NotRequired[list[MusicImage]]
    artistthumb: NotRequired[list[MusicImage]]
    musiclogo: NotRequired[list[MusicImage]]
    hdmusiclogo: NotRequired[list[MusicImage]]
    musicbanner: NotRequired[list[MusicImage]]


class AlbumArtwork(TypedDict):
    """Artwork for one release group."""

    albumcover: NotRequired[list[MusicImage]]
    cdart: NotRequired[list[CdArt]]


class AlbumImages(TypedDict):
    """Album artwork, keyed by release group MBID under ``albums``."""

    name: str
    mbid_id: str
    albums: NotRequired[dict[str, AlbumArtwork]]


class LabelImages(TypedDict):
    """Record label artwork."""

    name: str
    id: str
    musiclabel: NotRequired[list[LabelImage]]


LatestArtists = LatestResponse
