"""Resource accessors for the Fanart.tv API."""

from fanart_tv.resources.base import Resource
from fanart_tv.resources.movies import MovieResource
from fanart_tv.resources.music import ArtistResource, MusicResource
from fanart_tv.resources.tv import TvResource

__all__ = [
    "ArtistResource",
    "MovieResource",
    "MusicResource",
    "Resource",
    "TvResource",
]
