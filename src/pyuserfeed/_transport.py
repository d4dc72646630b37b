"""HTTP transport for the feed API."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any, Protocol

import aiohttp

from pyuserfeed._redact import redact_for_log
from pyuserfeed.config import FeedConfig
from pyuserfeed.exceptions import FetchDecodeError, FetchError

_logger = logging.getLogger(__name__)


class Transport(Protocol):
    """Structural transport interface used by endpoint modules.

    Having a protocol here makes it easy to pass test doubles while
    keeping the production implementation (`HttpTransport`) concrete.
    """

    async def get_json(
        self,
        operation: str,
        path: str,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        ...


class HttpTransport:
    """aiohttp-backed transport issuing JSON GET requests against ``config.base_url``."""

    def __init__(self, config: FeedConfig, http_session: aiohttp.ClientSession) -> None:
        self._config = config
        self._http = http_session
        self._timeout = (
            aiohttp.ClientTimeout(total=config.request_timeout) if config.request_timeout is not None else None
        )

    async def get_json(
        self,
        operation: str,
        path: str,
        params: Mapping[str, str] | None = None,
    ) -> Any:
        """GET ``path`` and return the decoded JSON body.

        An empty body decodes to ``None``. Raises :class:`FetchError` for
        transport failures and non-2xx statuses, :class:`FetchDecodeError`
        when the body is not valid text or not JSON.
        """
        url = f"{self._config.base_url}{path}"
        headers = {
            "accept": "application/json",
            "user-agent": self._config.user_agent,
        }
        request_kwargs: dict[str, Any] = {"headers": headers}
        if params:
            request_kwargs["params"] = dict(params)
        if self._timeout is not None:
            request_kwargs["timeout"] = self._timeout

        _logger.debug("GET %s params=%s", url, dict(params) if params else {})

        try:
            async with self._http.get(url, **request_kwargs) as resp:
                raw = await resp.read()
                status = resp.status
                charset = resp.charset or "utf-8"
        except (aiohttp.ClientError, asyncio.TimeoutError) as exc:
            raise FetchError(
                f"{operation}: request to {path} failed: {exc!r}",
                operation=operation,
                cause=exc,
            ) from exc

        if not 200 <= status < 300:
            preview = raw[:200].decode("utf-8", errors="replace")
            raise FetchError(
                f"{operation}: HTTP {status} from {path}: {preview}",
                operation=operation,
                status_code=status,
            )

        try:
            text = raw.decode(charset)
        except (UnicodeDecodeError, LookupError) as exc:
            raise FetchDecodeError(
                f"{operation}: undecodable {charset} body from {path}",
                operation=operation,
                status_code=status,
                cause=exc,
            ) from exc

        if not text.strip():
            return None

        try:
            body = json.loads(text)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise FetchDecodeError(
                f"{operation}: invalid JSON from {path}: {text[:200]}",
                operation=operation,
                status_code=status,
                cause=exc,
            ) from exc

        if self._config.debug_payloads:
            _logger.debug("%s response: %s", operation, redact_for_log(body))
        return body
