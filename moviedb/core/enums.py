"""Core enumerations shared by resources and the paging layer."""

from enum import Enum


class EndpointKind(str, Enum):
    """How a resource dispatches a request for an endpoint.

    RAW endpoints are sent as-is. APPENDS endpoints accept
    ``append_to_response`` and may embed paginated sub-resources. RESULTS
    endpoints are paginated by the backing API and are re-windowed. LIST
    endpoints return complete lists that can be windowed locally.
    """

    RAW = "raw"
    APPENDS = "appends"
    RESULTS = "results"
    LIST = "list"


class ResultType(str, Enum):
    """Result groups returned by the find endpoint."""

    MOVIE = "movie_results"
    TV = "tv_results"
    PERSON = "person_results"
