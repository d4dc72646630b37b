"""Immutable view state snapshot."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from pyuserfeed.models.post import Post
from pyuserfeed.models.user import User


class ViewState(BaseModel):
    """Everything the two screens render.

    ``posts`` always belongs to ``active_user_id``: the store swaps both in
    the same mutation.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    users: tuple[User, ...] = ()
    """Users in server response order."""
    posts: tuple[Post, ...] = ()
    """Posts of the most recently loaded user."""
    active_user_id: int | None = None
    """User whose posts are loaded, ``None`` before the first load."""
    revision: int = Field(default=0, ge=0)
    """Incremented by every mutation."""
