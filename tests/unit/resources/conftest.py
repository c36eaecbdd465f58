"""Shared fixtures for resource tests."""

from unittest.mock import AsyncMock, MagicMock

import pytest

from moviedb.core import ClientConfig
from moviedb.resources import ResourceContext
from moviedb.runtime import PagePolicy, Paginator, RestRunner


@pytest.fixture
def runner():
    mock_runner = MagicMock(spec=RestRunner)
    mock_runner.run = AsyncMock(return_value={})
    return mock_runner


@pytest.fixture
def make_context(runner):
    """Build a ResourceContext around the mocked runner."""

    def _make(**config_options):
        config = ClientConfig(api_key="key", **config_options)
        paginator = Paginator(runner, PagePolicy(virtual_page_size=config.results_per_page))
        return ResourceContext(config=config, runner=runner, paginator=paginator)

    return _make
