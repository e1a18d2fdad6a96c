"""TV show artwork accessor, keyed by TVDB ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fanart_tv.core.validation import validate_date, validate_positive_id
from fanart_tv.resources.base import Resource, latest_path

if TYPE_CHECKING:
    from fanart_tv.core.config import RequestOptions
    from fanart_tv.types.tv import LatestShows, ShowImages


class TvResource(Resource):
    """TV show logos, clear art, backgrounds, season art and banners."""

    name = "tv"

    async def get(
        self, tvdb_id: int, options: "RequestOptions | None" = None
    ) -> "ShowImages":
        """Get all artwork for a TV show.

        Args:
            tvdb_id: TheTVDB series ID
            options: Request options

        Returns:
            Show artwork keyed by category

        Raises:
            ValidationError: If tvdb_id is not a positive integer
        """
        tvdb_id = validate_positive_id(tvdb_id, "TVDB ID")
        return await self._request(f"/{self.name}/{tvdb_id}", options)

    async def latest(
        self, date: str | None = None, options: "RequestOptions | None" = None
    ) -> "LatestShows":
        """Get shows with recently added artwork.

        Raises:
            ValidationError: If date is not in YYYY-MM-DD format
        """
        date = validate_date(date)
        return await self._request(latest_path(f"/{self.name}", date), options)
