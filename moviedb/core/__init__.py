"""Core components."""

from .config import ClientConfig, validate_page_size
from .constants import (
    API_VERSION,
    BASE_URL,
    REMOTE_PAGE_LIMIT,
    REMOTE_PAGE_SIZE,
)
from .enums import EndpointKind, ResultType
from .exceptions import (
    ConfigurationError,
    InvalidRequestError,
    MovieDBError,
    NoResponseError,
    NoResultsError,
    PageOutOfRangeError,
    ServerError,
    TransportError,
    UnknownTransportError,
)

__all__ = [
    "ClientConfig",
    "validate_page_size",
    "API_VERSION",
    "BASE_URL",
    "REMOTE_PAGE_LIMIT",
    "REMOTE_PAGE_SIZE",
    "EndpointKind",
    "ResultType",
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
