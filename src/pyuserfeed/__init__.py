"""pyuserfeed - Async Python client and view state for a users/posts feed API."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyuserfeed")
except PackageNotFoundError:
    __version__ = "0+local"
from pyuserfeed.client import FeedClient
from pyuserfeed.config import FeedConfig
from pyuserfeed.exceptions import (
    FeedConfigError,
    FeedError,
    FetchDecodeError,
    FetchError,
)
from pyuserfeed.models import Post, User
from pyuserfeed.orchestrator import FeedOrchestrator
from pyuserfeed.state import StateChange, StateSection, ViewState, ViewStateStore

__all__ = [
    "__version__",
    "FeedClient",
    "FeedConfig",
    "FeedConfigError",
    "FeedError",
    "FeedOrchestrator",
    "FetchDecodeError",
    "FetchError",
    "Post",
    "StateChange",
    "StateSection",
    "User",
    "ViewState",
    "ViewStateStore",
]
