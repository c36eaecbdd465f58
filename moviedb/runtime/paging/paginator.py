"""Paginator: re-windows fixed-size remote pages into virtual pages.

Each call to :meth:`Paginator.fetch_page` plans the single remote page that
holds the requested virtual page, fetches it, annotates every record with its
absolute rank and slices out the caller's page.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from time import perf_counter
from typing import Any

from ...core.exceptions import NoResultsError, PageOutOfRangeError
from ...models import VirtualPage
from ..rest.runner import RestEndpointSpec, RestRunner
from .definitions import PagePlan, PagePolicy
from .planners import PagePlanner
from .telemetry import log_page_error, log_page_fetched, log_page_plan


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


class Paginator:
    """Fetches virtual pages from paginated endpoints.

    The paginator holds no per-call state; concurrent calls on one instance
    are independent.
    """

    def __init__(self, runner: RestRunner, policy: PagePolicy) -> None:
        self._runner = runner
        self._planner = PagePlanner(policy)

    @property
    def policy(self) -> PagePolicy:
        return self._planner.policy

    def plan(self, virtual_page: int) -> PagePlan:
        """Plan the remote fetch for ``virtual_page``."""
        return self._planner.plan(virtual_page)

    async def fetch_page(
        self,
        spec: RestEndpointSpec,
        virtual_page: int = 1,
        query: dict[str, Any] | None = None,
        path_params: dict[str, Any] | None = None,
    ) -> VirtualPage:
        """Fetch one virtual page from a paginated endpoint.

        Args:
            spec: Endpoint to request
            virtual_page: 1-based page number in the caller's page size
            query: Additional query parameters, forwarded verbatim
            path_params: Values for the endpoint path placeholders

        Returns:
            VirtualPage with at most ``virtual_page_size`` indexed records

        Raises:
            PageOutOfRangeError: Page outside the addressable range (nothing is sent)
            NoResultsError: The requested page lies past the end of the data
            TransportError: Propagated unchanged from the transport
        """
        try:
            plan = self._planner.plan(virtual_page)
        except PageOutOfRangeError as e:
            log_page_error(
                endpoint_id=spec.id,
                virtual_page=virtual_page,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise
        log_page_plan(endpoint_id=spec.id, plan=plan)

        start = perf_counter()
        try:
            data = await self._runner.run(
                spec=spec,
                path_params=path_params,
                query={**(query or {}), "page": plan.remote_page},
            )
            page = self.reshape(plan, data)
        except Exception as e:
            log_page_error(
                endpoint_id=spec.id,
                virtual_page=virtual_page,
                error_type=type(e).__name__,
                error_message=str(e),
            )
            raise

        log_page_fetched(
            endpoint_id=spec.id,
            plan=plan,
            remote_results=len(data.get("results") or []),
            results=len(page.results),
            total_results=page.total_results,
            latency_ms=(perf_counter() - start) * 1000.0,
        )
        return page

    def reshape(self, plan: PagePlan, data: Any) -> VirtualPage:
        """Cut the virtual page described by ``plan`` out of a remote page.

        Args:
            plan: Page plan the remote page was fetched for
            data: Decoded remote page (``results`` and ``total_results``)

        Returns:
            VirtualPage for ``plan.virtual_page``

        Raises:
            NoResultsError: If the remote page has no records at the plan's offset
        """
        results: Sequence[Any] = (data.get("results") or []) if isinstance(data, Mapping) else []
        if not results or plan.offset_position >= len(results):
            raise NoResultsError("No results.")

        # Ranks follow the remote numbering so they do not depend on the page size
        base = (plan.remote_page - 1) * self.policy.remote_page_size
        indexed = [{**record, "index": base + i + 1} for i, record in enumerate(results)]

        total_results = int(data.get("total_results", len(results)))
        return VirtualPage(
            page=plan.virtual_page,
            total_pages=_ceil_div(total_results, plan.size),
            total_results=total_results,
            results=indexed[plan.offset_position : plan.offset_position + plan.size],
        )

    def window_list(self, items: Sequence[Any] | None, virtual_page: int = 1) -> VirtualPage:
        """Window a complete list into the caller's page size.

        Used for endpoints that return whole lists (credits cast and crew)
        rather than remote pages.

        Raises:
            NoResultsError: If the list is empty
            PageOutOfRangeError: If the page is outside ``[1, total_pages]``
        """
        if not items:
            raise NoResultsError("No results.")

        size = self.policy.virtual_page_size
        total_pages = _ceil_div(len(items), size)
        if (
            isinstance(virtual_page, bool)
            or not isinstance(virtual_page, int)
            or not 1 <= virtual_page <= total_pages
        ):
            raise PageOutOfRangeError(virtual_page, total_pages)

        offset = (virtual_page - 1) * size
        indexed = [{**record, "index": i + 1} for i, record in enumerate(items)]
        return VirtualPage(
            page=virtual_page,
            total_pages=total_pages,
            total_results=len(items),
            results=indexed[offset : offset + size],
        )
