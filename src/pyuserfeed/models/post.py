"""Post model."""

from __future__ import annotations

from pydantic import StrictInt

from pyuserfeed.models._base import FeedBaseModel


class Post(FeedBaseModel):
    """A post returned by ``GET /posts``.

    ``user_id`` references the owning :class:`~pyuserfeed.models.user.User`
    but is not checked against any known user at decode time.
    """

    user_id: StrictInt
    """Owning user identifier (``userId`` on the wire)."""
    id: StrictInt
    """Unique post identifier."""
    title: str
    body: str
