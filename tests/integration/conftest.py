"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_MOVIEDB_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_MOVIEDB_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_MOVIEDB_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def api_key():
    key = os.environ.get("TMDB_API_KEY")
    if not key:
        pytest.skip("TMDB_API_KEY is not set")
    return key
