"""Generic resource dispatcher.

A Resource binds an endpoint table and optional path parameters (such as a
TMDb ID) to the shared runner and paginator, and dispatches each named
endpoint by its kind. Per-resource classes only add named methods on top.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from moviedb.core import ClientConfig, EndpointKind, InvalidRequestError, NoResultsError
from moviedb.models import VirtualPage
from moviedb.runtime.paging import PagePlan, Paginator
from moviedb.runtime.rest import RestEndpointSpec, RestRunner

logger = logging.getLogger(__name__)


def _page_option(page: Any) -> Any:
    # An unset page means the first one; 0 and other values are left to the planner
    return 1 if page is None else page


@dataclass(frozen=True)
class ResourceContext:
    """Shared, read-only collaborators handed to every resource."""

    config: ClientConfig
    runner: RestRunner
    paginator: Paginator


class Resource:
    """Dispatches named endpoints of one endpoint table."""

    def __init__(
        self,
        context: ResourceContext,
        endpoints: Mapping[str, RestEndpointSpec],
        params: dict[str, Any] | None = None,
    ) -> None:
        self._context = context
        self._endpoints = endpoints
        self._params = dict(params or {})

    @property
    def endpoints(self) -> list[str]:
        return list(self._endpoints)

    def _get_spec(self, name: str) -> RestEndpointSpec:
        spec = self._endpoints.get(name)
        if spec is None:
            raise InvalidRequestError(f"Invalid endpoint name: {name!r}")
        return spec

    def _path_params(self, params: dict[str, Any] | None) -> dict[str, Any]:
        return {**self._params, **(params or {})}

    async def get_endpoint(
        self,
        name: str,
        options: dict[str, Any] | None = None,
        params: dict[str, Any] | None = None,
    ) -> Any:
        """Request a named endpoint.

        Args:
            name: Endpoint name in this resource's table
            options: Query options; ``page`` selects a virtual page on
                paginated endpoints
            params: Path parameters overriding the resource's own

        Returns:
            VirtualPage for paginated endpoints, otherwise the decoded response
            (with windowed lists when ``always_use_results`` is set)

        Raises:
            InvalidRequestError: If the endpoint name is unknown
        """
        spec = self._get_spec(name)
        options = dict(options or {})
        path_params = self._path_params(params)
        logger.debug("endpoint_dispatch", extra={"endpoint_id": spec.id, "kind": spec.kind.value})

        if spec.kind is EndpointKind.APPENDS:
            return await self._get_appends(spec, options, path_params)

        if spec.kind is EndpointKind.RESULTS:
            page = _page_option(options.pop("page", None))
            return await self._context.paginator.fetch_page(
                spec, page, query=options, path_params=path_params
            )

        if spec.kind is EndpointKind.LIST and self._context.config.always_use_results:
            page = _page_option(options.pop("page", None))
            data = await self._context.runner.run(
                spec=spec, path_params=path_params, query=options
            )
            return self._window_fields(spec, data, page)

        return await self._context.runner.run(spec=spec, path_params=path_params, query=options)

    async def update_endpoint(
        self,
        method: str,
        name: str,
        options: dict[str, Any] | None = None,
        content: Any = None,
    ) -> Any:
        """Send a state-changing request (e.g. rating) to a named endpoint."""
        if not method:
            raise InvalidRequestError("Method required.")
        spec = self._get_spec(name)
        return await self._context.runner.run(
            spec=spec,
            path_params=self._params,
            query=options,
            body=content,
            method=method,
        )

    async def _get_appends(
        self, spec: RestEndpointSpec, options: dict[str, Any], path_params: dict[str, Any]
    ) -> Any:
        appends = options.get("append_to_response")
        if not appends:
            return await self._context.runner.run(
                spec=spec, path_params=path_params, query=options
            )

        paginator = self._context.paginator
        page = _page_option(options.get("page"))
        plan = paginator.plan(page)
        if options.get("page") is not None:
            options["page"] = plan.remote_page
        else:
            options.pop("page", None)

        data = await self._context.runner.run(spec=spec, path_params=path_params, query=options)
        if not isinstance(data, Mapping):
            return data
        data = dict(data)

        for name in (part.strip() for part in appends.split(",")):
            sub = self._endpoints.get(name)
            if sub is None or name not in data:
                continue
            if sub.kind is EndpointKind.RESULTS:
                data[name] = self._reshape_appended(plan, data[name])
            elif sub.kind is EndpointKind.LIST and self._context.config.always_use_results:
                data[name] = self._window_fields(sub, data[name], page)

        return data

    def _reshape_appended(self, plan: PagePlan, data: Any) -> VirtualPage:
        # An appended sub-resource with nothing at this offset becomes an empty page
        try:
            return self._context.paginator.reshape(plan, data)
        except NoResultsError:
            total = int(data.get("total_results", 0)) if isinstance(data, Mapping) else 0
            return VirtualPage(
                page=plan.virtual_page,
                total_pages=-(-total // plan.size),
                total_results=total,
                results=[],
            )

    def _window_fields(self, spec: RestEndpointSpec, data: Any, page: int) -> Any:
        if not isinstance(data, Mapping):
            return data
        windowed = dict(data)
        for field in spec.list_fields:
            try:
                windowed[field] = self._context.paginator.window_list(data.get(field), page)
            except NoResultsError:
                windowed[field] = VirtualPage(page=1, total_pages=0, total_results=0)
        return windowed
