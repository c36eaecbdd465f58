"""Paging policy and plan structures.

This module defines the data structures used to translate between the
caller's virtual pages and the fixed-size pages served by the API.
"""

from __future__ import annotations

from dataclasses import dataclass

from ...core.config import validate_page_size
from ...core.constants import REMOTE_PAGE_LIMIT, REMOTE_PAGE_SIZE
from ...core.exceptions import ConfigurationError


@dataclass(frozen=True)
class PagePolicy:
    """Re-windowing policy for paginated endpoints.

    Attributes:
        virtual_page_size: Results per page as seen by the caller
        remote_page_size: Results per page served by the API
        remote_page_limit: Highest remote page number the API serves

    Examples:
        # Ten results per page over the API's twenty
        PagePolicy(virtual_page_size=10)  # offset_count == 2, virtual_page_limit == 1000
    """

    virtual_page_size: int = REMOTE_PAGE_SIZE
    remote_page_size: int = REMOTE_PAGE_SIZE
    remote_page_limit: int = REMOTE_PAGE_LIMIT

    def __post_init__(self) -> None:
        """Validate paging policy configuration."""
        if self.remote_page_size < 1 or self.remote_page_limit < 1:
            raise ConfigurationError("remote page size and limit must be positive")
        validate_page_size(self.virtual_page_size, self.remote_page_size)

    @property
    def offset_count(self) -> int:
        """Number of virtual pages contained in one remote page."""
        return self.remote_page_size // self.virtual_page_size

    @property
    def virtual_page_limit(self) -> int:
        """Highest virtual page number that maps to a servable remote page."""
        return self.remote_page_limit * self.offset_count


@dataclass(frozen=True)
class PagePlan:
    """Plan for a single virtual page.

    Attributes:
        virtual_page: Requested page number in the caller's page size
        remote_page: Remote page that holds the virtual page
        offset_index: Position of the virtual page within the remote page (0-based)
        offset_position: Index of the first result of the virtual page in the remote results
        size: Virtual page size
    """

    virtual_page: int
    remote_page: int
    offset_index: int
    offset_position: int
    size: int
