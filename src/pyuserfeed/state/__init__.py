"""View state layer.

This package holds the observable snapshot the presentation layer binds
to. Only the fetch orchestrator writes to it.
"""

from pyuserfeed.state.events import StateChange, StateSection
from pyuserfeed.state.store import StateListener, ViewStateStore
from pyuserfeed.state.view import ViewState

__all__ = [
    "StateChange",
    "StateListener",
    "StateSection",
    "ViewState",
    "ViewStateStore",
]
