"""Movie resources."""

from __future__ import annotations

from typing import Any

from moviedb.models import VirtualPage

from .base import Resource, ResourceContext
from .endpoints import get_endpoint_table

Options = dict[str, Any] | None


class Movie(Resource):
    """Endpoints of a single movie.

    See https://developer.themoviedb.org/reference/movie-details
    """

    def __init__(self, context: ResourceContext, movie_id: int | str) -> None:
        super().__init__(context, get_endpoint_table("movie"), {"id": movie_id})
        self.id = movie_id

    async def get_details(self, options: Options = None) -> dict[str, Any]:
        """Primary information about the movie.

        Accepts ``append_to_response`` (comma separated endpoint names);
        appended paginated endpoints are re-windowed like direct calls.
        """
        return await self.get_endpoint("details", options)

    async def get_alternative_titles(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("alternative_titles", options)

    async def get_changes(self, options: Options = None) -> dict[str, Any]:
        """Changes for the movie. Last 24 hours by default, up to 14 days."""
        return await self.get_endpoint("changes", options)

    async def get_credits(self, options: Options = None) -> dict[str, Any]:
        """Cast and crew. Windowed into pages when ``always_use_results`` is set."""
        return await self.get_endpoint("credits", options)

    async def get_external_ids(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("external_ids", options)

    async def get_images(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("images", options)

    async def get_keywords(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("keywords", options)

    async def get_release_dates(self, options: Options = None) -> dict[str, Any]:
        """Release dates with certifications, per country."""
        return await self.get_endpoint("release_dates", options)

    async def get_videos(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("videos", options)

    async def get_translations(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("translations", options)

    async def get_recommendations(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("recommendations", options)

    async def get_similar(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("similar", options)

    async def get_reviews(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("reviews", options)

    async def get_lists(self, options: Options = None) -> VirtualPage:
        """Lists the movie belongs to."""
        return await self.get_endpoint("lists", options)

    async def get_account_states(self, options: Options = None) -> dict[str, Any]:
        """Rated, favourite and watchlist state for the session."""
        return await self.get_endpoint("account_states", options)

    async def add_rating(self, value: float, options: Options = None) -> dict[str, Any]:
        """Rate the movie (0.5 to 10) for the session."""
        return await self.update_endpoint("POST", "rating", options, {"value": value})

    async def remove_rating(self, options: Options = None) -> dict[str, Any]:
        return await self.update_endpoint("DELETE", "rating", options)


class MovieMore(Resource):
    """Movie endpoints not tied to one movie."""

    def __init__(self, context: ResourceContext) -> None:
        super().__init__(context, get_endpoint_table("movie_more"))

    async def get_latest(self, options: Options = None) -> dict[str, Any]:
        """Most recently created movie."""
        return await self.get_endpoint("latest", options)

    async def get_now_playing(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("now_playing", options)

    async def get_popular(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("popular", options)

    async def get_top_rated(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("top_rated", options)

    async def get_upcoming(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("upcoming", options)
