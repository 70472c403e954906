"""HTTP transport for the admin JSON API."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from adminstore._redact import redact_for_log
from adminstore.config import AdminConfig
from adminstore.exceptions import AdminPayloadError, AdminTransportError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while keeping
    the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(self, endpoint: str) -> Any:
        ...

    async def post_json(self, endpoint: str, body: Mapping[str, Any]) -> Any:
        ...


class HttpTransport:
    """aiohttp transport that speaks JSON and maps failures to `AdminTransportError`."""

    def __init__(
        self,
        config: AdminConfig,
        http_session: aiohttp.ClientSession,
    ) -> None:
        self._config = config
        self._http = http_session
        self._timeout = aiohttp.ClientTimeout(total=config.request_timeout)

    def _headers(self, *, with_body: bool) -> dict[str, str]:
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        if with_body:
            headers["content-type"] = "application/json"
        return headers

    async def get_json(self, endpoint: str) -> Any:
        return await self._request("GET", endpoint)

    async def post_json(self, endpoint: str, body: Mapping[str, Any]) -> Any:
        return await self._request("POST", endpoint, body)

    async def _request(
        self,
        method: str,
        endpoint: str,
        body: Mapping[str, Any] | None = None,
    ) -> Any:
        url = f"{self._config.base_url}{endpoint}"
        data = json.dumps(body, separators=(",", ":")) if body is not None else None

        _logger.debug("%s %s", method, url)
        if self._config.api_trace_enabled and body is not None:
            _logger.debug("%s %s body=%s", method, endpoint, redact_for_log(body))

        try:
            async with self._http.request(
                method,
                url,
                data=data,
                headers=self._headers(with_body=data is not None),
                timeout=self._timeout,
            ) as resp:
                raw = await resp.read()
                if not 200 <= resp.status < 300:
                    reason = resp.reason or f"HTTP {resp.status}"
                    raise AdminTransportError(
                        f"HTTP {resp.status} {reason} from {endpoint}",
                        status_code=resp.status,
                        endpoint=endpoint,
                        reason=reason,
                    )
        except AdminTransportError:
            raise
        except (aiohttp.ClientError, TimeoutError) as exc:
            raise AdminTransportError(
                f"Request to {endpoint} failed: {exc!r}",
                endpoint=endpoint,
            ) from exc

        if not raw.strip():
            return None

        try:
            result = json.loads(raw.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as exc:
            raise AdminPayloadError(
                f"Invalid JSON from {endpoint}: {raw[:200]!r}",
                endpoint=endpoint,
            ) from exc

        if self._config.api_trace_enabled:
            _logger.debug("%s %s response=%s", method, endpoint, redact_for_log(result))
        return result
