"""Find resource: look up TMDb objects by external ID."""

from __future__ import annotations

from typing import Any

from moviedb.core import InvalidRequestError, NoResultsError, ResultType

from .base import Resource, ResourceContext
from .endpoints import find, get_endpoint_table


class Find(Resource):
    def __init__(self, context: ResourceContext) -> None:
        super().__init__(context, get_endpoint_table("find"))

    async def find_by_external_id(
        self, external_id: str, options: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Objects matching an external ID, grouped by media type.

        ``options`` must carry ``external_source`` (e.g. ``imdb_id``).
        """
        return await self.get_endpoint("external_id", options, {"external_id": external_id})

    def get_external_source(self, external_id: str, result_type: ResultType | str) -> str | None:
        """Name of the external source an ID belongs to, or None."""
        sources = find.EXTERNAL_SOURCES.get(ResultType(result_type), {})
        for source, pattern in sources.items():
            if pattern.match(external_id):
                return source
        return None

    async def get_id_from_external_id(
        self, external_id: str, result_type: ResultType | str
    ) -> int:
        """TMDb ID for an external ID.

        With ``custom_id`` enabled, ``t<digits>`` is taken as the TMDb ID
        itself and nothing is requested.

        Raises:
            InvalidRequestError: If the ID matches no known external source
            NoResultsError: If the API knows no object for the ID
        """
        try:
            result_type = ResultType(result_type)
        except ValueError as e:
            raise InvalidRequestError(f"Unknown result type: {result_type!r}") from e

        if self._context.config.custom_id:
            custom = find.CUSTOM_ID.match(external_id)
            if custom:
                return int(custom.group(1))

        source = self.get_external_source(external_id, result_type)
        if source is None:
            raise InvalidRequestError(f"Invalid external ID: {external_id!r}")

        response = await self.find_by_external_id(external_id, {"external_source": source})
        results = response.get(result_type.value) or []
        if not results:
            raise NoResultsError(f"No results for external ID {external_id!r}.")
        return results[0]["id"]
