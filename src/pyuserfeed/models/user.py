"""User model."""

from __future__ import annotations

from pydantic import StrictInt

from pyuserfeed.models._base import FeedBaseModel


class User(FeedBaseModel):
    """A user returned by ``GET /users``."""

    id: StrictInt
    """Unique user identifier."""
    name: str
    """Display name."""
    username: str
    """Login handle."""
    email: str
    """Contact e-mail address."""
