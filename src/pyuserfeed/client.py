"""High-level async client for the feed API."""

from __future__ import annotations

import logging
from typing import Any

import aiohttp

from pyuserfeed._api.posts import fetch_posts_by_user
from pyuserfeed._api.users import fetch_users
from pyuserfeed._transport import HttpTransport, Transport
from pyuserfeed.config import FeedConfig
from pyuserfeed.models.post import Post
from pyuserfeed.models.user import User

_logger = logging.getLogger(__name__)


class FeedClient:
    """Async client for the users/posts feed API.

    The HTTP transport is created lazily on first use (or on entering the
    context manager) and reused for every later request.

    Usage::

        async with FeedClient() as client:
            users = await client.list_users()
            posts = await client.list_posts_by_user(users[0].id)
    """

    def __init__(
        self,
        config: FeedConfig | None = None,
        *,
        session: aiohttp.ClientSession | None = None,
        transport: Transport | None = None,
    ) -> None:
        self._config = config or FeedConfig()
        self._external_session = session is not None
        self._http_session = session
        self._transport: Transport | None = transport

    @property
    def config(self) -> FeedConfig:
        return self._config

    # ------------------------------------------------------------------
    # Context manager lifecycle
    # ------------------------------------------------------------------

    async def __aenter__(self) -> FeedClient:
        self._require_transport()
        return self

    async def __aexit__(self, *exc: Any) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the owned HTTP session, if any.

        A session passed in by the caller is left open. The next request
        after ``close()`` builds a fresh transport.
        """
        if not self._external_session and self._http_session is not None:
            await self._http_session.close()
            self._http_session = None
            self._transport = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_transport(self) -> Transport:
        if self._transport is None:
            if self._http_session is None:
                _logger.debug("Creating HTTP session for %s", self._config.base_url)
                self._http_session = aiohttp.ClientSession()
            self._transport = HttpTransport(self._config, self._http_session)
        return self._transport

    # ------------------------------------------------------------------
    # Resources
    # ------------------------------------------------------------------

    async def list_users(self) -> list[User]:
        """Fetch all users in server response order.

        Raises
        ------
        FetchError
            On transport failure, non-2xx status or an undecodable body.
        """
        return await fetch_users(self._require_transport())

    async def list_posts_by_user(self, user_id: int) -> list[Post]:
        """Fetch the posts owned by ``user_id``.

        Raises
        ------
        FetchError
            On transport failure, non-2xx status or an undecodable body.
        """
        return await fetch_posts_by_user(self._require_transport(), user_id)
