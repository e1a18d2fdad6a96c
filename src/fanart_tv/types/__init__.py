"""Type definitions for the fanart-tv library."""

from fanart_tv.types.common import ImageBase, LatestResponse
from fanart_tv.types.movies import LatestMovies, MovieDisc, MovieImage, MovieImages
from fanart_tv.types.music import (
    AlbumArtwork,
    AlbumImages,
    ArtistImages,
    CdArt,
    LabelImage,
    LabelImages,
    LatestArtists,
    MusicImage,
)
from fanart_tv.types.tv import LatestShows, SeasonImage, ShowImages, TvImage

__all__ = [
    "AlbumArtwork",
    "AlbumImages",
    "ArtistImages",
    "CdArt",
    "ImageBase",
    "LabelImage",
    "LabelImages",
    "LatestArtists",
    "LatestMovies",
    "LatestResponse",
    "LatestShows",
    "MovieDisc",
    "MovieImage",
    "MovieImages",
    "MusicImage",
    "SeasonImage",
    "ShowImages",
    "TvImage",
]
