"""
Movie Data Service

Read-only client for the YTS public movie API (v2).

Endpoints used:
- list_movies.json: movie listing, filtered by minimum rating
- movie_details.json: a single movie with its full description
- movie_suggestions.json: movies related to a given movie

The service returns the raw movie dictionaries from the API payload;
the GraphQL layer projects them onto its Movie and MovieDetail types.
"""

import logging
from typing import Any

import httpx

from hackernews.config import get_settings

logger = logging.getLogger(__name__)
settings = get_settings()


class MovieServiceError(Exception):
    """Raised when the movie API cannot be reached or answers with an error."""

    pass


class MovieClient:
    """
    Async client for the YTS API.

    A client is cheap to create; each call opens its own
    httpx.AsyncClient so no connection state outlives a request.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None):
        self.base_url = (base_url or settings.movies_api_url).rstrip("/") + "/"
        self.timeout = timeout if timeout is not None else settings.movies_timeout

    async def _get(self, endpoint: str, params: dict[str, Any]) -> dict[str, Any]:
        """
        Call an API endpoint and return its ``data`` object.

        None-valued params are dropped so the API applies its own defaults.

        Raises:
            MovieServiceError: On transport failures, non-200 responses
                or a payload whose status is not "ok"
        """
        query = {k: v for k, v in params.items() if v is not None}
        url = f"{self.base_url}{endpoint}"

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(url, params=query)
        except httpx.HTTPError as e:
            logger.error(f"Movie API request to {endpoint} failed: {e}")
            raise MovieServiceError(f"Movie API request failed: {e}") from e

        if response.status_code != 200:
            logger.error(
                f"Movie API {endpoint} returned {response.status_code}: {response.text}"
            )
            raise MovieServiceError(
                f"Movie API returned status {response.status_code}"
            )

        payload = response.json()
        if payload.get("status") != "ok":
            message = payload.get("status_message", "unknown error")
            logger.error(f"Movie API {endpoint} error: {message}")
            raise MovieServiceError(f"Movie API error: {message}")

        return payload.get("data") or {}

    async def get_movies(
        self,
        limit: int | None = None,
        rating: float | None = None,
    ) -> list[dict[str, Any]]:
        """
        List movies.

        Args:
            limit: Maximum number of movies (API default when None)
            rating: Minimum IMDb rating (no filter when None)

        Returns:
            List of movie dictionaries, empty when nothing matches
        """
        data = await self._get(
            "list_movies.json",
            {"limit": limit, "minimum_rating": rating},
        )
        return data.get("movies") or []

    async def get_movie(self, id: int | str) -> dict[str, Any]:
        """Get the details of a single movie."""
        data = await self._get("movie_details.json", {"movie_id": id})
        return data.get("movie") or {}

    async def get_suggestions(self, id: int | str) -> list[dict[str, Any]]:
        """Get movies suggested for a given movie."""
        data = await self._get("movie_suggestions.json", {"movie_id": id})
        return data.get("movies") or []
