"""REST request runner using endpoint specs."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Any

from ...core.constants import DEFAULT_HEADERS
from ...core.enums import EndpointKind
from ...core.exceptions import InvalidRequestError
from .transport import RESTTransport

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


@dataclass(frozen=True)
class RestEndpointSpec:
    id: str
    path: str  # template, e.g. "/movie/{id}/similar"
    kind: EndpointKind = EndpointKind.RAW
    method: str = "GET"
    # Fields of a LIST response that hold the windowable lists
    list_fields: tuple[str, ...] = ()

    def build_path(self, params: dict[str, Any] | None = None) -> str:
        """Fill path placeholders from ``params``.

        Raises:
            InvalidRequestError: If a placeholder has no value
        """
        params = params or {}

        def _fill(match: re.Match[str]) -> str:
            value = params.get(match.group(1))
            if value is None or value == "":
                raise InvalidRequestError(
                    f"Missing path parameter '{match.group(1)}' for endpoint '{self.id}'"
                )
            return str(value)

        return _PLACEHOLDER.sub(_fill, self.path)


class RestRunner:
    """Sends endpoint requests through a transport.

    The runner owns the static query parameters (API key, session IDs,
    default language) and default headers. Caller options are layered on top
    of the static query.
    """

    def __init__(
        self,
        transport: RESTTransport,
        *,
        base_query: dict[str, Any] | None = None,
        base_headers: dict[str, str] | None = None,
    ) -> None:
        self._t = transport
        self._base_query = dict(base_query or {})
        self._base_headers = {**DEFAULT_HEADERS, **(base_headers or {})}

    async def run(
        self,
        *,
        spec: RestEndpointSpec,
        path_params: dict[str, Any] | None = None,
        query: dict[str, Any] | None = None,
        body: Any = None,
        method: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        method = (method or spec.method or "").upper()
        if not method:
            raise InvalidRequestError("Method required.")

        path = spec.build_path(path_params)
        if not path:
            raise InvalidRequestError("Path required.")

        return await self._t.send(
            method,
            path,
            params={**self._base_query, **(query or {})},
            json_body=body,
            headers={**self._base_headers, **(headers or {})},
        )
