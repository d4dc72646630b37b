"""Fetch orchestration between the feed client and the view state store."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Coroutine
from typing import Any

from pyuserfeed.client import FeedClient
from pyuserfeed.exceptions import FetchError
from pyuserfeed.state.store import ViewStateStore

_logger = logging.getLogger(__name__)

ErrorObserver = Callable[[FetchError], None]


class FeedOrchestrator:
    """Runs the two screen loads and writes their results into the store.

    Each load performs exactly one request and, only once it succeeds,
    replaces the relevant part of the store in a single swap. A failed load
    leaves the store untouched and is reported to ``on_error`` instead of
    being raised.

    There is no cancellation: when two loads overlap, whichever response
    arrives last wins.
    """

    def __init__(
        self,
        client: FeedClient,
        store: ViewStateStore,
        *,
        on_error: ErrorObserver | None = None,
    ) -> None:
        self._client = client
        self._store = store
        self._on_error = on_error
        self._tasks: set[asyncio.Task[None]] = set()

    @property
    def store(self) -> ViewStateStore:
        return self._store

    async def load_users(self) -> None:
        """Fetch the users list and replace ``store.users``."""
        try:
            users = await self._client.list_users()
        except FetchError as exc:
            _logger.debug("load_users failed", exc_info=True)
            self._report(exc)
            return
        self._store.replace_users(users)

    async def load_posts(self, user_id: int) -> None:
        """Fetch ``user_id``'s posts and make that user the active one."""
        try:
            posts = await self._client.list_posts_by_user(user_id)
        except FetchError as exc:
            _logger.warning("Error fetching posts for user %s: %s", user_id, exc)
            _logger.debug("load_posts failed", exc_info=True)
            self._report(exc)
            return

        foreign = sum(1 for post in posts if post.user_id != user_id)
        if foreign:
            _logger.warning(
                "Upstream returned %d of %d posts not owned by user %s",
                foreign,
                len(posts),
                user_id,
            )
        self._store.replace_posts(user_id, posts)

    # ------------------------------------------------------------------
    # Fire-and-forget entry points
    # ------------------------------------------------------------------

    def spawn_load_users(self) -> asyncio.Task[None]:
        """Schedule :meth:`load_users` on the running loop."""
        return self._spawn(self.load_users(), name="load_users")

    def spawn_load_posts(self, user_id: int) -> asyncio.Task[None]:
        """Schedule :meth:`load_posts` on the running loop."""
        return self._spawn(self.load_posts(user_id), name=f"load_posts:{user_id}")

    async def wait_idle(self) -> None:
        """Wait until every spawned load has finished."""
        while self._tasks:
            await asyncio.wait(set(self._tasks))

    def _spawn(self, coro: Coroutine[Any, Any, None], *, name: str) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(coro, name=name)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)
        return task

    def _on_task_done(self, task: asyncio.Task[None]) -> None:
        self._tasks.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            _logger.error("Task %s crashed", task.get_name(), exc_info=exc)

    def _report(self, exc: FetchError) -> None:
        if self._on_error is None:
            return
        try:
            self._on_error(exc)
        except Exception:
            _logger.exception("Fetch error observer failed")
