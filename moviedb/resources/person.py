"""Person resources."""

from __future__ import annotations

from typing import Any

from moviedb.models import VirtualPage

from .base import Resource, ResourceContext
from .endpoints import get_endpoint_table

Options = dict[str, Any] | None


class Person(Resource):
    """Endpoints of a single person."""

    def __init__(self, context: ResourceContext, person_id: int | str) -> None:
        super().__init__(context, get_endpoint_table("person"), {"id": person_id})
        self.id = person_id

    async def get_details(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("details", options)

    async def get_changes(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("changes", options)

    async def get_movie_credits(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("movie_credits", options)

    async def get_tv_credits(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("tv_credits", options)

    async def get_combined_credits(self, options: Options = None) -> dict[str, Any]:
        """Movie and TV credits together."""
        return await self.get_endpoint("combined_credits", options)

    async def get_external_ids(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("external_ids", options)

    async def get_images(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("images", options)

    async def get_tagged_images(self, options: Options = None) -> VirtualPage:
        """Images the person has been tagged in."""
        return await self.get_endpoint("tagged_images", options)

    async def get_translations(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("translations", options)


class PersonMore(Resource):
    def __init__(self, context: ResourceContext) -> None:
        super().__init__(context, get_endpoint_table("person_more"))

    async def get_latest(self, options: Options = None) -> dict[str, Any]:
        return await self.get_endpoint("latest", options)

    async def get_popular(self, options: Options = None) -> VirtualPage:
        """Popular people; the list updates daily."""
        return await self.get_endpoint("popular", options)
