"""Unit tests for page planning and paging policy."""

from __future__ import annotations

import pytest

from moviedb.core import ConfigurationError, PageOutOfRangeError
from moviedb.runtime.paging import PagePlanner, PagePolicy


class TestPagePolicy:
    """Test PagePolicy validation and derived limits."""

    def test_default_is_pass_through(self):
        """Default policy uses the remote page size."""
        policy = PagePolicy()
        assert policy.virtual_page_size == 20
        assert policy.offset_count == 1
        assert policy.virtual_page_limit == 500

    @pytest.mark.parametrize(
        ("size", "offset_count", "limit"),
        [(1, 20, 10000), (2, 10, 5000), (4, 5, 2500), (5, 4, 2000), (10, 2, 1000)],
    )
    def test_divisor_sizes(self, size, offset_count, limit):
        """Every divisor of the remote page size is accepted."""
        policy = PagePolicy(virtual_page_size=size)
        assert policy.offset_count == offset_count
        assert policy.virtual_page_limit == limit

    @pytest.mark.parametrize("size", [3, 7, 15, 40])
    def test_rejects_non_divisor_sizes(self, size):
        """Sizes that would straddle remote pages are rejected."""
        with pytest.raises(ConfigurationError):
            PagePolicy(virtual_page_size=size)

    @pytest.mark.parametrize("size", [0, -5, 2.5, True, "10"])
    def test_rejects_non_positive_or_non_int(self, size):
        with pytest.raises(ConfigurationError):
            PagePolicy(virtual_page_size=size)


class TestPagePlanner:
    """Test PagePlanner mapping of virtual pages to remote pages."""

    def test_pass_through_first_page(self):
        """Page 1 at the remote page size maps to remote page 1, zero offset."""
        plan = PagePlanner(PagePolicy()).plan(1)

        assert plan.remote_page == 1
        assert plan.offset_index == 0
        assert plan.offset_position == 0
        assert plan.size == 20

    def test_half_pages(self):
        """With ten per page, two virtual pages share each remote page."""
        planner = PagePlanner(PagePolicy(virtual_page_size=10))

        first, second, third = planner.plan(1), planner.plan(2), planner.plan(3)

        assert (first.remote_page, first.offset_position) == (1, 0)
        assert (second.remote_page, second.offset_position) == (1, 10)
        assert (third.remote_page, third.offset_position) == (2, 0)

    def test_every_page_maps_to_one_remote_page(self):
        """Consecutive virtual pages tile the remote pages without gaps."""
        planner = PagePlanner(PagePolicy(virtual_page_size=5))

        positions = []
        for page in range(1, 13):
            plan = planner.plan(page)
            positions.append((plan.remote_page - 1) * 20 + plan.offset_position)

        assert positions == [i * 5 for i in range(12)]

    def test_last_addressable_page(self):
        planner = PagePlanner(PagePolicy(virtual_page_size=10))

        plan = planner.plan(1000)

        assert plan.remote_page == 500
        assert plan.offset_position == 10

    def test_page_past_limit_rejected(self):
        """One past the virtual page limit is rejected."""
        planner = PagePlanner(PagePolicy(virtual_page_size=10))

        with pytest.raises(PageOutOfRangeError) as exc_info:
            planner.plan(1001)

        assert exc_info.value.page == 1001
        assert exc_info.value.limit == 1000

    @pytest.mark.parametrize("page", [0, -1, 1.5, "2", None, True])
    def test_invalid_pages_rejected(self, page):
        planner = PagePlanner(PagePolicy())
        with pytest.raises(PageOutOfRangeError):
            planner.plan(page)
