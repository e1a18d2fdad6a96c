"""Music artwork accessors, keyed by MusicBrainz ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fanart_tv.core.validation import validate_date, validate_mbid
from fanart_tv.resources.base import Resource, latest_path

if TYPE_CHECKING:
    from fanart_tv.core.config import RequestOptions
    from fanart_tv.core.executor import RequestExecutor
    from fanart_tv.types.music import AlbumImages, ArtistImages, LabelImages, LatestArtists


class ArtistResource(Resource):
    """Artist backgrounds, thumbnails, logos and banners."""

    name = "music"

    async def get(
        self, mbid: str, options: "RequestOptions | None" = None
    ) -> "ArtistImages":
        """Get all artwork for an artist.

        Args:
            mbid: MusicBrainz artist ID (surrounding whitespace is ignored)
            options: Request options

        Raises:
            ValidationError: If mbid is empty
        """
        mbid = validate_mbid(mbid, "artist MBID")
        return await self._request(f"/{self.name}/{mbid}", options)

    async def latest(
        self, date: str | None = None, options: "RequestOptions | None" = None
    ) -> "LatestArtists":
        """Get artists with recently added artwork.

        Raises:
            ValidationError: If date is not in YYYY-MM-DD format
        """
        date = validate_date(date)
        return await self._request(latest_path(f"/{self.name}", date), options)


class MusicResource(Resource):
    """Album and label artwork, with artist artwork under ``artists``.

    Example:
        artist = await client.music.artists.get("5b11f4ce-a62d-471e-81fc-a69a8278c7da")
        album = await client.music.album("f5093c06-23e3-404f-afe0-f259bbc4b5b6")
    """

    name = "music"

    def __init__(self, executor: "RequestExecutor") -> None:
        super().__init__(executor)
        self.artists = ArtistResource(executor)

    async def album(
        self, mbid: str, options: "RequestOptions | None" = None
    ) -> "AlbumImages":
        """Get cover and CD art for a release group.

        Raises:
            ValidationError: If mbid is empty
        """
        mbid = validate_mbid(mbid, "album MBID")
        return await self._request(f"/{self.name}/albums/{mbid}", options)

    async def label(
        self, mbid: str, options: "RequestOptions | None" = None
    ) -> "LabelImages":
        """Get artwork for a record label.

        Raises:
            ValidationError: If mbid is empty
        """
        mbid = validate_mbid(mbid, "label MBID")
        return await self._request(f"/{self.name}/labels/{mbid}", options)
