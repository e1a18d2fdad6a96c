"""Movie artwork accessor, keyed by TMDb ID."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fanart_tv.core.validation import validate_date, validate_positive_id
from fanart_tv.resources.base import Resource, latest_path

if TYPE_CHECKING:
    from fanart_tv.core.config import RequestOptions
    from fanart_tv.types.movies import LatestMovies, MovieImages


class MovieResource(Resource):
    """Movie posters, backgrounds, logos, disc art, banners and thumbnails.

    Example:
        artwork = await client.movie.get(550)
        posters = artwork.get("movieposter", [])
    """

    name = "movies"

    async def get(
        self, movie_id: int, options: "RequestOptions | None" = None
    ) -> "MovieImages":
        """Get all artwork for a movie.

        Args:
            movie_id: The Movie Database (TMDb) ID
            options: Request options

        Returns:
            Movie artwork keyed by category

        Raises:
            ValidationError: If movie_id is not a positive integer
        """
        movie_id = validate_positive_id(movie_id, "movie ID")
        return await self._request(f"/{self.name}/{movie_id}", options)

    async def latest(
        self, date: str | None = None, options: "RequestOptions | None" = None
    ) -> "LatestMovies":
        """Get movies with recently added artwork.

        Args:
            date: Only include artwork added since this YYYY-MM-DD date
            options: Request options

        Raises:
            ValidationError: If date is not in YYYY-MM-DD format
        """
        date = validate_date(date)
        return await self._request(latest_path(f"/{self.name}", date), options)
