from __future__ import annotations

import asyncio
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import pytest

from pyuserfeed.exceptions import FetchError

USERS_PAYLOAD: list[dict[str, Any]] = [
    {"id": 1, "name": "Ann", "username": "ann", "email": "a@x.com"},
    {"id": 2, "name": "Bob", "username": "bob", "email": "b@x.com"},
]

POSTS_PAYLOAD: dict[int, list[dict[str, Any]]] = {
    1: [{"userId": 1, "id": 10, "title": "Hi", "body": "Hello"}],
    2: [
        {"userId": 2, "id": 20, "title": "First", "body": "one"},
        {"userId": 2, "id": 21, "title": "Second", "body": "two"},
    ],
}


@dataclass
class FakeTransport:
    """In-memory stand-in for :class:`pyuserfeed._transport.HttpTransport`.

    ``responses`` maps a path to a body (or a callable of the params).
    ``failures`` maps a path to the :class:`FetchError` to raise.
    ``gates`` maps ``(path, userId)`` to an event the request waits on.
    """

    responses: dict[str, Any] = field(default_factory=dict)
    failures: dict[str, FetchError] = field(default_factory=dict)
    gates: dict[tuple[str, str | None], asyncio.Event] = field(default_factory=dict)
    calls: list[tuple[str, str, dict[str, str]]] = field(default_factory=list)

    async def get_json(self, operation: str, path: str, params: Mapping[str, str] | None = None) -> Any:
        query = dict(params or {})
        self.calls.append((operation, path, query))

        gate = self.gates.get((path, query.get("userId")))
        if gate is not None:
            await gate.wait()

        if path in self.failures:
            raise self.failures[path]
        body = self.responses[path]
        if callable(body):
            return body(query)
        return body


def _posts_for(query: dict[str, str]) -> list[dict[str, Any]]:
    return POSTS_PAYLOAD.get(int(query["userId"]), [])


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(responses={"/users": USERS_PAYLOAD, "/posts": _posts_for})


@pytest.fixture
def users_payload() -> list[dict[str, Any]]:
    return [dict(item) for item in USERS_PAYLOAD]


@pytest.fixture
def posts_payload() -> dict[int, list[dict[str, Any]]]:
    return {user_id: [dict(item) for item in items] for user_id, items in POSTS_PAYLOAD.items()}
