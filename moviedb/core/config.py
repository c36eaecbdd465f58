"""Immutable client configuration.

A single ``ClientConfig`` value is built when the client is constructed and
handed to every component that needs it. Nothing reads configuration from
module state after that point.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Any

from .constants import API_VERSION, BASE_URL, DEFAULT_TIMEOUT, REMOTE_PAGE_SIZE
from .exceptions import ConfigurationError

# Fields sent as query parameters on every request
_API_OPTION_FIELDS = (
    "api_key",
    "session_id",
    "guest_session_id",
    "include_image_language",
    "language",
    "region",
)


def validate_page_size(page_size: Any, remote_page_size: int = REMOTE_PAGE_SIZE) -> int:
    """Check that a virtual page size evenly divides the remote page size.

    A size that does not divide the remote page would make some virtual
    pages straddle two remote pages, so such sizes are rejected.

    Args:
        page_size: Requested virtual page size
        remote_page_size: Page size served by the API

    Returns:
        The validated page size

    Raises:
        ConfigurationError: If the size is not a positive divisor
    """
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ConfigurationError(
            f"results_per_page must be a positive integer, got {page_size!r}"
        )
    if remote_page_size % page_size:
        raise ConfigurationError(
            f"results_per_page must evenly divide {remote_page_size}, got {page_size}"
        )
    return page_size


@dataclass(frozen=True)
class ClientConfig:
    """Client configuration.

    Attributes:
        api_key: TMDb API key (required)
        session_id: Optional user session ID
        guest_session_id: Optional guest session ID
        include_image_language: Optional image language fallbacks
        language: Optional default ISO 639-1 language
        region: Optional default ISO 3166-1 region
        results_per_page: Virtual page size used for paginated endpoints
        always_use_results: Window plain lists (credits etc.) into pages
        custom_id: Accept ``t<digits>`` as a literal TMDb ID in external ID lookups
        base_url: API root URL
        version: API version
        timeout: Total request timeout in seconds
    """

    api_key: str | None = None
    session_id: str | None = None
    guest_session_id: str | None = None
    include_image_language: str | None = None
    language: str | None = None
    region: str | None = None
    results_per_page: int = REMOTE_PAGE_SIZE
    always_use_results: bool = False
    custom_id: bool = False
    base_url: str = BASE_URL
    version: int = API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        """Validate configuration."""
        if not self.api_key:
            raise ConfigurationError("API key required.")
        if (
            isinstance(self.timeout, bool)
            or not isinstance(self.timeout, (int, float))
            or self.timeout <= 0
        ):
            raise ConfigurationError(f"timeout must be a positive number, got {self.timeout!r}")
        validate_page_size(self.results_per_page)

    @property
    def api_url(self) -> str:
        """Versioned API root, e.g. ``https://api.themoviedb.org/3``."""
        return f"{self.base_url.rstrip('/')}/{self.version}"

    def api_options(self) -> dict[str, Any]:
        """Static query parameters attached to every request."""
        options = {}
        for name in _API_OPTION_FIELDS:
            value = getattr(self, name)
            if value is not None:
                options[name] = value
        return options

    @classmethod
    def from_env(cls, **overrides: Any) -> ClientConfig:
        """Build configuration from ``TMDB_*`` environment variables.

        Keyword overrides take precedence over the environment.
        """
        values: dict[str, Any] = {
            "api_key": os.getenv("TMDB_API_KEY"),
            "session_id": os.getenv("TMDB_SESSION_ID"),
            "guest_session_id": os.getenv("TMDB_GUEST_SESSION_ID"),
            "language": os.getenv("TMDB_LANGUAGE"),
            "region": os.getenv("TMDB_REGION"),
        }
        results_per_page = os.getenv("TMDB_RESULTS_PER_PAGE")
        if results_per_page:
            try:
                values["results_per_page"] = int(results_per_page)
            except ValueError as e:
                raise ConfigurationError(
                    f"TMDB_RESULTS_PER_PAGE must be an integer, got {results_per_page!r}"
                ) from e
        values.update(overrides)
        return cls(**values)
