"""Page planning logic.

This module provides the PagePlanner class that maps a virtual page number
onto the single remote page that contains it.
"""

from __future__ import annotations

from ...core.exceptions import PageOutOfRangeError
from .definitions import PagePlan, PagePolicy


class PagePlanner:
    """Plans remote page fetches for virtual page requests.

    Because the virtual page size always divides the remote page size, every
    virtual page lies entirely inside one remote page.
    """

    def __init__(self, policy: PagePolicy) -> None:
        """Initialize page planner.

        Args:
            policy: Paging policy
        """
        self._policy = policy

    @property
    def policy(self) -> PagePolicy:
        return self._policy

    def plan(self, virtual_page: int) -> PagePlan:
        """Plan the remote fetch for a virtual page.

        Args:
            virtual_page: 1-based page number in the caller's page size

        Returns:
            PagePlan for the request

        Raises:
            PageOutOfRangeError: If the page is not an integer in
                ``[1, virtual_page_limit]``
        """
        limit = self._policy.virtual_page_limit
        if (
            isinstance(virtual_page, bool)
            or not isinstance(virtual_page, int)
            or not 1 <= virtual_page <= limit
        ):
            raise PageOutOfRangeError(virtual_page, limit)

        offset_count = self._policy.offset_count
        size = self._policy.virtual_page_size
        # Ceiling division without floats
        remote_page = -(-virtual_page // offset_count)
        offset_index = (virtual_page - 1) % offset_count

        return PagePlan(
            virtual_page=virtual_page,
            remote_page=remote_page,
            offset_index=offset_index,
            offset_position=offset_index * size,
            size=size,
        )
