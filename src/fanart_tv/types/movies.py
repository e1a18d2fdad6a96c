"""Movie artwork type definitions.

Based on the Fanart.tv API: https://fanarttv.docs.apiary.io/#reference/movies
"""

from __future__ import annotations

from typing import NotRequired, TypedDict

from fanart_tv.types.common import ImageBase, LatestResponse


class MovieImage(ImageBase):
    """Movie artwork image."""


class MovieDisc(ImageBase):
    """Movie disc art, with the disc type (e.g. "bluray", "dvd")."""

    disc: NotRequired[str]
    disc_type: NotRequired[str]


class MovieImages(TypedDict):
    """Movie artwork keyed by category."""

    name: str
    tmdb_id: str
    imdb_id: str
    movieposter: NotRequired[list[MovieImage]]
    moviebackground: NotRequired[list[MovieImage]]
    movielogo: NotRequired[list[MovieImage]]
    hdmovielogo: NotRequired[list[MovieImage]]
    moviedisc: NotRequired[list[MovieDisc]]
    moviebanner: NotRequired[list[MovieImage]]
    moviethumb: NotRequired[list[MovieImage]]
    movieart: NotRequired[list[MovieImage]]
    hdmovieclearart: NotRequired[list[MovieImage]]


LatestMovies = LatestResponse
