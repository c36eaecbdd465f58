"""Endpoint registry.

Endpoint tables are plain data: each group maps an endpoint name to its
RestEndpointSpec. Resources look specs up by group and name.
"""

from __future__ import annotations

from moviedb.runtime.rest import RestEndpointSpec

from . import find, movie, person, search, tv

# Registry mapping group IDs to endpoint tables
_ENDPOINT_REGISTRY: dict[str, dict[str, RestEndpointSpec]] = {
    "movie": movie.MEDIA,
    "movie_more": movie.MORE,
    "tv": tv.MEDIA,
    "tv_more": tv.MORE,
    "person": person.MEDIA,
    "person_more": person.MORE,
    "search": search.SEARCH,
    "find": find.FIND,
}


def get_endpoint_table(group: str) -> dict[str, RestEndpointSpec]:
    """Get the endpoint table for a group.

    Raises:
        KeyError: If the group is unknown
    """
    return _ENDPOINT_REGISTRY[group]


def get_endpoint_spec(group: str, name: str) -> RestEndpointSpec | None:
    """Get endpoint specification by group and name.

    Returns:
        RestEndpointSpec if found, None otherwise
    """
    return _ENDPOINT_REGISTRY.get(group, {}).get(name)


def list_endpoints(group: str) -> list[str]:
    """List endpoint names of a group."""
    return list(_ENDPOINT_REGISTRY.get(group, {}).keys())


__all__ = [
    "get_endpoint_table",
    "get_endpoint_spec",
    "list_endpoints",
]
