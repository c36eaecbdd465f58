"""Precise unit tests for RESTTransport.

Tests focus on HTTPClient delegation.
"""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest

from moviedb.runtime.rest import RESTTransport


class TestRESTTransport:
    """Test RESTTransport wrapper."""

    def test_init(self):
        transport = RESTTransport(base_url="https://api.themoviedb.org/3", timeout=5.0)
        assert transport._http.base_url == "https://api.themoviedb.org/3"
        assert transport._http.timeout.total == 5.0

    def test_add_response_hook(self):
        transport = RESTTransport(base_url="https://api.themoviedb.org/3")
        hook = MagicMock()

        transport.add_response_hook(hook)

        assert hook in transport._http._response_hooks

    @pytest.mark.asyncio
    async def test_send_delegates_to_request(self):
        transport = RESTTransport(base_url="https://api.themoviedb.org/3")
        transport._http.request = AsyncMock(return_value={"id": 1})

        result = await transport.send(
            "DELETE", "/movie/1/rating", params={"session_id": "s"}, headers={"X": "1"}
        )

        assert result == {"id": 1}
        transport._http.request.assert_called_once_with(
            "DELETE", "/movie/1/rating", params={"session_id": "s"}, json=None, headers={"X": "1"}
        )

    @pytest.mark.asyncio
    async def test_close_delegates_to_http_client(self):
        transport = RESTTransport(base_url="https://api.themoviedb.org/3")
        transport._http.close = AsyncMock()

        await transport.close()

        transport._http.close.assert_called_once()
