"""Custom exception hierarchy."""

from __future__ import annotations

from typing import Any


class MovieDBError(Exception):
    """Base exception for all library errors."""

    pass


class ConfigurationError(MovieDBError):
    """Client configuration is missing or invalid."""

    pass


class InvalidRequestError(MovieDBError):
    """Request was rejected before anything was sent."""

    pass


class PageOutOfRangeError(InvalidRequestError):
    """Requested page lies outside the pages the client can address."""

    def __init__(self, page: Any, limit: int) -> None:
        super().__init__(f"Page must be between 1 and {limit}, got {page!r}")
        self.page = page
        self.limit = limit


class TransportError(MovieDBError):
    """Base exception for failures while talking to the API."""

    pass


class ServerError(TransportError):
    """API answered with a non-success status."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        payload: Any = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class NoResponseError(TransportError):
    """Request was made but no response was received."""

    pass


class UnknownTransportError(TransportError):
    """Unclassified failure while sending a request."""

    pass


class NoResultsError(MovieDBError):
    """Request succeeded but there is nothing to return."""

    pass
