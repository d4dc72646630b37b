"""Data models for feed API responses."""

from pyuserfeed.models._base import FeedBaseModel
from pyuserfeed.models.post import Post
from pyuserfeed.models.user import User

__all__ = [
    "FeedBaseModel",
    "Post",
    "User",
]
