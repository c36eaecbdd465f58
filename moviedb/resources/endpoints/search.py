"""Search endpoint definitions. Every search endpoint is paginated."""

from __future__ import annotations

from moviedb.core import EndpointKind
from moviedb.runtime.rest import RestEndpointSpec

BASE_PATH = "/search"

SEARCH: dict[str, RestEndpointSpec] = {
    name: RestEndpointSpec(
        id=f"search.{name}", path=f"{BASE_PATH}/{name}", kind=EndpointKind.RESULTS
    )
    for name in ("company", "collection", "keyword", "movie", "multi", "person", "tv")
}
