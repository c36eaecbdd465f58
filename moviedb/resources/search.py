"""Search resource."""

from __future__ import annotations

from typing import Any

from moviedb.core import InvalidRequestError, NoResultsError, ResultType
from moviedb.models import VirtualPage

from .base import Resource, ResourceContext
from .endpoints import get_endpoint_table

Options = dict[str, Any] | None

# Search endpoint used to resolve an ID for each result group
_ENDPOINT_FOR_TYPE = {
    ResultType.MOVIE: "movie",
    ResultType.TV: "tv",
    ResultType.PERSON: "person",
}


class Search(Resource):
    """Search endpoints. All results are paginated."""

    def __init__(self, context: ResourceContext) -> None:
        super().__init__(context, get_endpoint_table("search"))

    async def get_combined_results(self, options: Options = None) -> VirtualPage:
        """Movies, TV shows and people in one result set."""
        return await self.get_endpoint("multi", options)

    async def get_movies(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("movie", options)

    async def get_tv_shows(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("tv", options)

    async def get_people(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("person", options)

    async def get_companies(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("company", options)

    async def get_collections(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("collection", options)

    async def get_keywords(self, options: Options = None) -> VirtualPage:
        return await self.get_endpoint("keyword", options)

    async def get_id_from_query(
        self, query: str, result_type: ResultType | str, options: Options = None
    ) -> int:
        """TMDb ID of the first search hit for ``query``.

        Args:
            query: Search text
            result_type: Result group to search in
            options: Extra search options (language, year, ...)

        Raises:
            InvalidRequestError: If the result type is unknown
            NoResultsError: If the search has no hits
        """
        try:
            endpoint = _ENDPOINT_FOR_TYPE[ResultType(result_type)]
        except ValueError as e:
            raise InvalidRequestError(f"Unknown result type: {result_type!r}") from e

        page = await self.get_endpoint(endpoint, {**(options or {}), "query": query, "page": 1})
        if page.total_results == 0 or not page.results:
            raise NoResultsError(f"No results for query {query!r}.")
        return page.results[0]["id"]
