"""Unit tests for Paginator re-windowing."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from moviedb.core import (
    EndpointKind,
    NoResponseError,
    NoResultsError,
    PageOutOfRangeError,
    ServerError,
)
from moviedb.models import VirtualPage
from moviedb.runtime.paging import PagePolicy, Paginator
from moviedb.runtime.rest import RestEndpointSpec, RestRunner

SPEC = RestEndpointSpec(id="movie.popular", path="/movie/popular", kind=EndpointKind.RESULTS)


def make_remote_dataset(total: int, page_size: int = 20) -> dict[int, dict]:
    """Remote pages for a fixed data set of ``total`` records."""
    pages = {}
    page_count = max(1, -(-total // page_size))
    for page in range(1, page_count + 1):
        start = (page - 1) * page_size
        pages[page] = {
            "page": page,
            "total_pages": page_count if total else 0,
            "total_results": total,
            "results": [{"id": i + 1} for i in range(start, min(start + page_size, total))],
        }
    return pages


def make_runner(pages: dict[int, dict]) -> MagicMock:
    """Mock runner serving ``pages`` by the requested ``page`` query value."""
    runner = MagicMock(spec=RestRunner)

    async def run(*, spec, path_params=None, query=None, **kwargs):
        return pages[query["page"]]

    runner.run = AsyncMock(side_effect=run)
    return runner


class TestPaginatorFetchPage:
    """Test Paginator.fetch_page."""

    @pytest.mark.asyncio
    async def test_pass_through_page(self):
        """Virtual page size equal to the remote size returns the remote page."""
        runner = make_runner(make_remote_dataset(45))
        paginator = Paginator(runner, PagePolicy())

        page = await paginator.fetch_page(SPEC, 1)

        assert isinstance(page, VirtualPage)
        assert page.page == 1
        assert page.total_pages == 3
        assert page.total_results == 45
        assert page.indices == list(range(1, 21))
        runner.run.assert_called_once_with(spec=SPEC, path_params=None, query={"page": 1})

    @pytest.mark.asyncio
    async def test_index_continuity_across_half_pages(self):
        """Virtual pages 1 and 2 split remote page 1 with no gap or overlap."""
        runner = make_runner(make_remote_dataset(100))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        first = await paginator.fetch_page(SPEC, 1)
        second = await paginator.fetch_page(SPEC, 2)

        assert first.indices == list(range(1, 11))
        assert second.indices == list(range(11, 21))
        assert [r["id"] for r in second.results] == list(range(11, 21))
        # Both came from remote page 1
        assert [c.kwargs["query"]["page"] for c in runner.run.call_args_list] == [1, 1]

    @pytest.mark.asyncio
    async def test_exactly_one_request_per_page(self):
        """Each virtual page costs one remote request and is full-sized."""
        runner = make_runner(make_remote_dataset(200))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=5))

        for page in range(1, 41):
            result = await paginator.fetch_page(SPEC, page)
            assert len(result.results) == 5
            assert result.indices[0] == (page - 1) * 5 + 1

        assert runner.run.call_count == 40

    @pytest.mark.asyncio
    async def test_short_last_page(self):
        """25 results, 10 per page: page 3 is remote page 2 with 5 records."""
        runner = make_runner(make_remote_dataset(25))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        page = await paginator.fetch_page(SPEC, 3)

        assert page.page == 3
        assert page.total_pages == 3
        assert page.total_results == 25
        assert page.indices == [21, 22, 23, 24, 25]
        assert runner.run.call_args.kwargs["query"]["page"] == 2

    @pytest.mark.asyncio
    async def test_page_past_end_of_data(self):
        """Offset beyond the remote results raises NoResultsError after the fetch."""
        runner = make_runner(make_remote_dataset(25))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        with pytest.raises(NoResultsError):
            await paginator.fetch_page(SPEC, 4)

        runner.run.assert_called_once()

    @pytest.mark.asyncio
    async def test_empty_result_set(self):
        """No results at all raises NoResultsError after a successful fetch."""
        runner = make_runner(make_remote_dataset(0))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        with pytest.raises(NoResultsError):
            await paginator.fetch_page(SPEC, 1)

        runner.run.assert_called_once()

    @pytest.mark.asyncio
    async def test_out_of_range_makes_no_request(self):
        """Page one past the limit fails before any network call."""
        runner = make_runner(make_remote_dataset(25))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        with pytest.raises(PageOutOfRangeError):
            await paginator.fetch_page(SPEC, 1001)

        runner.run.assert_not_called()

    @pytest.mark.asyncio
    async def test_query_forwarded_with_remote_page(self):
        runner = make_runner(make_remote_dataset(60))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=4))

        await paginator.fetch_page(
            SPEC, 7, query={"language": "en-US", "region": "GB"}, path_params={"id": 5}
        )

        runner.run.assert_called_once_with(
            spec=SPEC,
            path_params={"id": 5},
            query={"language": "en-US", "region": "GB", "page": 2},
        )

    @pytest.mark.asyncio
    async def test_idempotent(self):
        """Repeated calls against the same data produce identical pages."""
        runner = make_runner(make_remote_dataset(73))
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        first = await paginator.fetch_page(SPEC, 6)
        second = await paginator.fetch_page(SPEC, 6)

        assert first == second

    @pytest.mark.asyncio
    async def test_remote_response_not_mutated(self):
        pages = make_remote_dataset(20)
        paginator = Paginator(make_runner(pages), PagePolicy(virtual_page_size=10))

        await paginator.fetch_page(SPEC, 2)

        assert all("index" not in record for record in pages[1]["results"])
        assert len(pages[1]["results"]) == 20

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "error",
        [ServerError("API error.", 401, {"status_code": 7}), NoResponseError("down")],
    )
    async def test_transport_errors_propagate(self, error):
        runner = MagicMock(spec=RestRunner)
        runner.run = AsyncMock(side_effect=error)
        paginator = Paginator(runner, PagePolicy(virtual_page_size=10))

        with pytest.raises(type(error)) as exc_info:
            await paginator.fetch_page(SPEC, 1)

        assert exc_info.value is error


class TestPaginatorReshape:
    """Test Paginator.reshape on raw remote pages."""

    def test_indices_use_remote_numbering(self):
        """Ranks depend on the remote page, not on the virtual page size."""
        remote = make_remote_dataset(100)[3]

        for size in (2, 5, 10, 20):
            paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy(virtual_page_size=size))
            offset_count = 20 // size
            plan = paginator.plan(2 * offset_count + 1)  # first virtual page on remote page 3
            page = paginator.reshape(plan, remote)
            assert page.indices[0] == 41

    def test_offset_equal_to_length_has_no_results(self):
        paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy(virtual_page_size=10))
        plan = paginator.plan(2)
        data = {"results": [{"id": i} for i in range(10)], "total_results": 10}

        with pytest.raises(NoResultsError):
            paginator.reshape(plan, data)

    def test_missing_results_key(self):
        paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy())

        with pytest.raises(NoResultsError):
            paginator.reshape(paginator.plan(1), {"status_message": "weird"})


class TestPaginatorWindowList:
    """Test Paginator.window_list on complete lists."""

    def test_window_list_pages(self):
        paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy(virtual_page_size=10))
        items = [{"name": f"actor {i}"} for i in range(25)]

        page = paginator.window_list(items, 2)

        assert page.page == 2
        assert page.total_pages == 3
        assert page.total_results == 25
        assert page.indices == list(range(11, 21))
        assert page.results[0]["name"] == "actor 10"

    def test_window_list_last_page(self):
        paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy(virtual_page_size=10))

        page = paginator.window_list([{"id": i} for i in range(25)], 3)

        assert page.indices == [21, 22, 23, 24, 25]

    def test_window_list_empty(self):
        paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy())
        with pytest.raises(NoResultsError):
            paginator.window_list([], 1)

    @pytest.mark.parametrize("page", [0, 4])
    def test_window_list_page_out_of_range(self, page):
        paginator = Paginator(MagicMock(spec=RestRunner), PagePolicy(virtual_page_size=10))
        with pytest.raises(PageOutOfRangeError):
            paginator.window_list([{"id": i} for i in range(25)], page)
