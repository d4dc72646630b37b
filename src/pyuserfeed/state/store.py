"""Observable in-memory view state.

Every mutation builds a new frozen :class:`ViewState` and swaps it in with a
single attribute assignment, so a reader never observes a half-applied
update. Subscribers are notified synchronously after the swap.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable

from pyuserfeed.models.post import Post
from pyuserfeed.models.user import User
from pyuserfeed.state.events import StateChange, StateSection
from pyuserfeed.state.view import ViewState

_logger = logging.getLogger(__name__)

StateListener = Callable[[StateChange], None]


class ViewStateStore:
    """Holds the users list, the active user's posts and the active user id.

    Reads are open to anyone; writes are reserved for
    :class:`~pyuserfeed.orchestrator.FeedOrchestrator`.
    """

    def __init__(self, initial: ViewState | None = None) -> None:
        self._state = initial if initial is not None else ViewState()
        self._listeners: list[StateListener] = []

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    def snapshot(self) -> ViewState:
        return self._state

    @property
    def users(self) -> tuple[User, ...]:
        return self._state.users

    @property
    def posts(self) -> tuple[Post, ...]:
        return self._state.posts

    @property
    def active_user_id(self) -> int | None:
        return self._state.active_user_id

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Register ``listener`` and return a callable that removes it."""
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            try:
                self._listeners.remove(listener)
            except ValueError:
                pass

        return _unsubscribe

    def _commit(self, section: StateSection, new_state: ViewState) -> None:
        previous = self._state
        self._state = new_state
        change = StateChange(section=section, previous=previous, current=new_state)
        for listener in list(self._listeners):
            try:
                listener(change)
            except Exception:
                _logger.exception("State listener %r failed for %s change", listener, section)

    # ------------------------------------------------------------------
    # Write access (orchestrator only)
    # ------------------------------------------------------------------

    def replace_users(self, users: Iterable[User]) -> None:
        """Replace the users sequence wholesale."""
        current = self._state
        self._commit(
            StateSection.USERS,
            current.model_copy(update={"users": tuple(users), "revision": current.revision + 1}),
        )

    def replace_posts(self, user_id: int, posts: Iterable[Post]) -> None:
        """Replace the posts sequence and the active user id in one swap."""
        current = self._state
        self._commit(
            StateSection.POSTS,
            current.model_copy(
                update={
                    "posts": tuple(posts),
                    "active_user_id": user_id,
                    "revision": current.revision + 1,
                }
            ),
        )

    def clear(self) -> None:
        """Drop every record and the active user id."""
        self._commit(StateSection.ALL, ViewState(revision=self._state.revision + 1))
