"""REST transport delegating to HTTPClient."""

from __future__ import annotations

from typing import Any

from ...core.constants import DEFAULT_TIMEOUT
from .http_client import HTTPClient, ResponseHook


class RESTTransport:
    def __init__(self, base_url: str, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._http = HTTPClient(base_url=base_url, timeout=timeout)

    def add_response_hook(self, hook: ResponseHook) -> None:
        self._http.add_response_hook(hook)

    async def send(
        self,
        method: str,
        path: str,
        *,
        params: dict[str, Any] | None = None,
        json_body: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        return await self._http.request(
            method, path, params=params, json=json_body, headers=headers
        )

    async def close(self) -> None:
        await self._http.close()
