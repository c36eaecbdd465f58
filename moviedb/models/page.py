"""Virtual page data model."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VirtualPage(BaseModel):
    """One page of results in the caller's page size.

    ``total_results`` and ``total_pages`` are a snapshot of what the API
    reported for the request that produced this page; they can change
    between requests.
    """

    page: int = Field(..., ge=1)
    total_pages: int = Field(..., ge=0)
    total_results: int = Field(..., ge=0)
    results: list[dict[str, Any]] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    @property
    def indices(self) -> list[int]:
        """Absolute ranks of the records on this page."""
        return [record["index"] for record in self.results]
