"""moviedb - Async client for the TMDb v3 API with page re-windowing."""

from .client import MovieDB
from .core import (
    REMOTE_PAGE_LIMIT,
    REMOTE_PAGE_SIZE,
    ClientConfig,
    ConfigurationError,
    EndpointKind,
    InvalidRequestError,
    MovieDBError,
    NoResponseError,
    NoResultsError,
    PageOutOfRangeError,
    ResultType,
    ServerError,
    TransportError,
    UnknownTransportError,
)
from .models import VirtualPage
from .resources import TV, Find, Movie, MovieMore, Person, PersonMore, Search, TVMore
from .runtime import PagePlan, PagePolicy, Paginator

__version__ = "0.1.0"

__all__ = [
    "MovieDB",
    "ClientConfig",
    "VirtualPage",
    "PagePolicy",
    "PagePlan",
    "Paginator",
    "Find",
    "Search",
    "Movie",
    "MovieMore",
    "TV",
    "TVMore",
    "Person",
    "PersonMore",
    "EndpointKind",
    "ResultType",
    "REMOTE_PAGE_SIZE",
    "REMOTE_PAGE_LIMIT",
    "MovieDBError",
    "ConfigurationError",
    "InvalidRequestError",
    "PageOutOfRangeError",
    "TransportError",
    "ServerError",
    "NoResponseError",
    "UnknownTransportError",
    "NoResultsError",
]
