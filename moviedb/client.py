"""MovieDB client entry point.

Architecture:
    The client builds one immutable ClientConfig, one REST transport, one
    runner carrying the static API options and one paginator, and shares
    them with every resource through a ResourceContext. Resources hold no
    mutable state, so one client can serve concurrent calls.
"""

from __future__ import annotations

import logging
from typing import Any

from .core import (
    ClientConfig,
    ConfigurationError,
    InvalidRequestError,
    MovieDBError,
    ResultType,
)
from .resources import (
    TV,
    Find,
    Movie,
    MovieMore,
    Person,
    PersonMore,
    ResourceContext,
    Search,
    TVMore,
)
from .runtime import PagePolicy, Paginator, RestRunner, RESTTransport

logger = logging.getLogger(__name__)


class MovieDB:
    """Client for the TMDb v3 API.

    Example:
        async with MovieDB(api_key="...", results_per_page=10) as db:
            page = await db.movie.get_popular({"page": 3})
            details = await db.get_movie(550).get_details()
    """

    def __init__(
        self,
        api_key: str | None = None,
        *,
        config: ClientConfig | None = None,
        transport: RESTTransport | None = None,
        **options: Any,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: TMDb API key (required unless ``config`` is given)
            config: Ready-made configuration; excludes ``api_key`` and ``options``
            transport: Optional transport (defaults to one for ``config.api_url``)
            **options: Remaining ClientConfig fields (session_id, language,
                region, results_per_page, always_use_results, custom_id, ...)

        Raises:
            ConfigurationError: If the API key is missing, the page size is invalid
                or ``config`` is combined with ``api_key`` or ``options``
        """
        if config is not None and (api_key is not None or options):
            raise ConfigurationError("Pass either config or api_key and options, not both.")
        self.config = config or ClientConfig(api_key=api_key, **options)
        self._transport = transport or RESTTransport(
            base_url=self.config.api_url, timeout=self.config.timeout
        )
        runner = RestRunner(self._transport, base_query=self.config.api_options())
        paginator = Paginator(runner, PagePolicy(virtual_page_size=self.config.results_per_page))
        self._context = ResourceContext(config=self.config, runner=runner, paginator=paginator)

        self.find = Find(self._context)
        self.search = Search(self._context)
        self.movie = MovieMore(self._context)
        self.tv = TVMore(self._context)
        self.person = PersonMore(self._context)

    @classmethod
    def from_env(cls, **overrides: Any) -> MovieDB:
        """Create a client configured from ``TMDB_*`` environment variables."""
        return cls(config=ClientConfig.from_env(**overrides))

    @property
    def transport(self) -> RESTTransport:
        return self._transport

    def get_movie(self, movie_id: int | str) -> Movie:
        return Movie(self._context, movie_id)

    def get_tv_show(self, tv_id: int | str) -> TV:
        return TV(self._context, tv_id)

    def get_person(self, person_id: int | str) -> Person:
        return Person(self._context, person_id)

    async def get_movie_from_method(
        self,
        *,
        id: int | None = None,  # noqa: A002
        external_id: str | None = None,
        query: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> Movie:
        """Movie endpoints for an ID resolved from an ID, external ID or query."""
        movie_id = await self._get_id_from_method(
            ResultType.MOVIE, id=id, external_id=external_id, query=query, options=options
        )
        return self.get_movie(movie_id)

    async def get_tv_show_from_method(
        self,
        *,
        id: int | None = None,  # noqa: A002
        external_id: str | None = None,
        query: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> TV:
        tv_id = await self._get_id_from_method(
            ResultType.TV, id=id, external_id=external_id, query=query, options=options
        )
        return self.get_tv_show(tv_id)

    async def get_person_from_method(
        self,
        *,
        id: int | None = None,  # noqa: A002
        external_id: str | None = None,
        query: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> Person:
        person_id = await self._get_id_from_method(
            ResultType.PERSON, id=id, external_id=external_id, query=query, options=options
        )
        return self.get_person(person_id)

    async def _get_id_from_method(
        self,
        result_type: ResultType,
        *,
        id: int | None = None,  # noqa: A002
        external_id: str | None = None,
        query: str | None = None,
        options: dict[str, Any] | None = None,
    ) -> int:
        """Resolve a TMDb ID.

        Methods are tried in order: explicit ID, external ID, search query.
        A failed external ID lookup falls through to the query when one is
        given and is raised otherwise.

        Raises:
            InvalidRequestError: If no method is given
        """
        if id is not None:
            return id

        if external_id:
            try:
                return await self.find.get_id_from_external_id(external_id, result_type)
            except MovieDBError as e:
                if not query:
                    raise
                logger.info(
                    "external_id_lookup_failed",
                    extra={
                        "external_id": external_id,
                        "error_type": type(e).__name__,
                        "fallback": "query",
                    },
                )

        if query:
            return await self.search.get_id_from_query(query, result_type, options)

        raise InvalidRequestError("Method required.")

    async def close(self) -> None:
        """Close the underlying HTTP session."""
        await self._transport.close()

    async def __aenter__(self) -> MovieDB:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
