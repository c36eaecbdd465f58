"""Async HTTP client wrapper.

One ``aiohttp.ClientSession`` is created lazily and reused for every request.
Responses are decoded as JSON; failures are classified into the transport
error hierarchy. Nothing is retried.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import Any

import aiohttp

from ...core.constants import DEFAULT_TIMEOUT
from ...core.exceptions import NoResponseError, ServerError, UnknownTransportError

logger = logging.getLogger(__name__)

ResponseHook = Callable[[aiohttp.ClientResponse], Awaitable[None] | None]


def _encode_params(params: dict[str, Any] | None) -> dict[str, str | int | float] | None:
    """Drop unset values and render booleans the way the API expects."""
    if params is None:
        return None
    encoded: dict[str, str | int | float] = {}
    for key, value in params.items():
        if value is None:
            continue
        if isinstance(value, bool):
            encoded[key] = "true" if value else "false"
        elif isinstance(value, (str, int, float)):
            encoded[key] = value
        else:
            encoded[key] = str(value)
    return encoded


class HTTPClient:
    """Async HTTP client wrapper."""

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None
        self._response_hooks: list[ResponseHook] = []

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    def add_response_hook(self, hook: ResponseHook) -> None:
        """Register a callable invoked with every response.

        Hooks may be sync or async. A hook that raises is logged and skipped.
        """
        self._response_hooks.append(hook)

    def _resolve_url(self, url: str) -> str:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            return f"{self.base_url}{url}"
        return url

    async def _run_hooks(self, response: aiohttp.ClientResponse) -> None:
        for hook in self._response_hooks:
            try:
                result = hook(response)
                if inspect.isawaitable(result):
                    await result
            except Exception as e:  # noqa: BLE001
                logger.warning(
                    "response_hook_failed",
                    extra={"hook": repr(hook), "error_type": type(e).__name__},
                )

    async def request(
        self,
        method: str,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """Send one request and return the decoded JSON body.

        Raises:
            ServerError: Non-2xx response; carries status and decoded error payload
            NoResponseError: Connection failure or timeout
            UnknownTransportError: Any other client-side failure
        """
        url = self._resolve_url(url)
        method = method.upper()
        try:
            async with self.session.request(
                method, url, params=_encode_params(params), json=json, headers=headers
            ) as response:
                await self._run_hooks(response)
                if response.status >= 400:
                    payload = await self._read_error_payload(response)
                    raise ServerError("API error.", status_code=response.status, payload=payload)
                return await self._read_body(response)
        except (aiohttp.ClientConnectionError, asyncio.TimeoutError) as e:
            raise NoResponseError("Request made but no response received.") from e
        except aiohttp.ClientError as e:
            raise UnknownTransportError("Unknown error when sending request.") from e

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self.request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request."""
        return await self.request("POST", url, params=params, json=json, headers=headers)

    async def delete(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """DELETE request."""
        return await self.request("DELETE", url, params=params, headers=headers)

    @staticmethod
    async def _read_body(response: aiohttp.ClientResponse) -> Any:
        text = await response.text()
        if not text:
            return None
        try:
            return await response.json(content_type=None)
        except ValueError as e:
            raise UnknownTransportError("Response body is not valid JSON.") from e

    @staticmethod
    async def _read_error_payload(response: aiohttp.ClientResponse) -> Any:
        try:
            return await response.json(content_type=None)
        except (ValueError, aiohttp.ClientError):
            return None

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()
