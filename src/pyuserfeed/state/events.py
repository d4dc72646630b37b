"""Change notifications emitted by the view state store."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict

from pyuserfeed.state.view import ViewState


class StateSection(StrEnum):
    USERS = "users"
    POSTS = "posts"
    ALL = "all"


class StateChange(BaseModel):
    """A single store mutation, delivered to subscribers."""

    model_config = ConfigDict(frozen=True)

    section: StateSection
    previous: ViewState
    current: ViewState
