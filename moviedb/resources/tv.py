"""TV show resources."""

from __future__ import annotations

from typing import Any

from moviedb.models import VirtualPage

from .base import Resource, ResourceContext
from .endpoints import get_endpoint_table

Options = dict[str, Any] | None


class TV(Resource):
    """Endpoints of a single TV show."""

    def __init__(self, context: ResourceContext, tv_id: int | str) -> None:
        super().__init__(context, get_endpoint_table("tv"), {"id": tv_id})
        self.id = tv_id

    async def get_details(self, options: Options = None) -> dict[str, Any]:
        """Primary information about the show; supports ``append_to_response``."""
        return await self.get_endpoint("details", options)

    async def get_alternative_titles(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("alternative_titles", options)

    async def get_changes(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("changes", options)

    async def get_content_ratings(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("content_ratings", options)

    async def get_credits(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("credits", options)

    async def get_episode_groups(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("episode_groups", options)

    async def get_external_ids(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("external_ids", options)

    async def get_images(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("images", options)

    async def get_keywords(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("keywords", options)

    async def get_recommendations(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("recommendations", options)

    async def get_reviews(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("reviews", options)

    async def get_screened_theatrically(self, options: Options = None) -> dict[str, Any]:
        """Episodes that have been screened in a film festival or theatre."""
        return await self.get_endpoint("screened_theatrically", options)

    async def get_similar(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("similar", options)

    async def get_translations(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("translations", options)

    async def get_videos(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("videos", options)

    async def get_account_states(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("account_states", options)

    async def add_rating(self, value: float, options: Options = None) -> dict[str, Any]:
        """Rate the show (0.5 to 10) for the session."""
        return await self.update_endpoint("POST", "rating", options, {"value": value})

    async def remove_rating(self, options: Options = None) -> dict[str, Any]:
        return await self.update_endpoint("DELETE", "rating", options)


class TVMore(Resource):
    """TV endpoints not tied to one show."""

    def __init__(self, context: ResourceContext) -> None:
        super().__init__(context, get_endpoint_table("tv_more"))

    async def get_latest(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("latest", options)

    async def get_airing_today(self, options: Options = None) -> VirtualPage:
        """Shows with an episode airing today, in the API's US Eastern day."""
        return await self.get_endpoint("airing_today", options)

    async def get_on_the_air(self, options: Options = None) -> VirtualPage:
        """Shows with an episode airing in the next 7 days."""
        return await self.get_endpoint("on_the_air", options)

    async def get_popular(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("popular", options)

    async def get_top_rated(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("top_rated", options)
