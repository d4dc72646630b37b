"""HTTP-level tests for :class:`pyuserfeed.client.FeedClient`."""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import AsyncIterator
from typing import Any

import aiohttp
import pytest
from aiohttp import web
from aiohttp.test_utils import TestServer

from pyuserfeed.client import FeedClient
from pyuserfeed.config import FeedConfig
from pyuserfeed.exceptions import FetchDecodeError, FetchError
from pyuserfeed.models import Post, User
from pyuserfeed.orchestrator import FeedOrchestrator
from pyuserfeed.state import ViewStateStore


@contextlib.asynccontextmanager
async def _serve(routes: list[web.RouteDef]) -> AsyncIterator[FeedConfig]:
    app = web.Application()
    app.add_routes(routes)
    server = TestServer(app)
    await server.start_server()
    try:
        yield FeedConfig(base_url=str(server.make_url("/")))
    finally:
        await server.close()


def _json_route(path: str, body: Any, *, status: int = 200, seen: list[web.Request] | None = None) -> web.RouteDef:
    async def handler(request: web.Request) -> web.Response:
        if seen is not None:
            seen.append(request)
        return web.json_response(body, status=status)

    return web.get(path, handler)


def _text_route(path: str, text: str, *, status: int = 200) -> web.RouteDef:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(text=text, status=status, content_type="application/json")

    return web.get(path, handler)


def _bytes_route(path: str, body: bytes, *, status: int = 200) -> web.RouteDef:
    async def handler(_request: web.Request) -> web.Response:
        return web.Response(body=body, status=status, content_type="application/json")

    return web.get(path, handler)


@pytest.mark.asyncio
async def test_list_users_decodes_in_response_order(users_payload: list[dict[str, Any]]) -> None:
    seen: list[web.Request] = []
    async with _serve([_json_route("/users", users_payload, seen=seen)]) as config:
        async with FeedClient(config) as client:
            users = await client.list_users()

    assert users == [User.model_validate(item) for item in users_payload]
    assert [user.id for user in users] == [1, 2]
    assert len(seen) == 1
    assert not seen[0].query
    assert seen[0].headers["User-Agent"] == config.user_agent


@pytest.mark.asyncio
async def test_list_posts_by_user_sends_user_id_query(posts_payload: dict[int, list[dict[str, Any]]]) -> None:
    seen: list[web.Request] = []

    async def handler(request: web.Request) -> web.Response:
        seen.append(request)
        return web.json_response(posts_payload[int(request.query["userId"])])

    async with _serve([web.get("/posts", handler)]) as config:
        async with FeedClient(config) as client:
            posts = await client.list_posts_by_user(2)

    assert [post.id for post in posts] == [20, 21]
    assert all(isinstance(post, Post) and post.user_id == 2 for post in posts)
    assert dict(seen[0].query) == {"userId": "2"}


@pytest.mark.asyncio
async def test_non_2xx_raises_fetch_error_with_status() -> None:
    async with _serve([_json_route("/users", {"error": "boom"}, status=503)]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchError) as exc_info:
                await client.list_users()

    exc = exc_info.value
    assert not isinstance(exc, FetchDecodeError)
    assert exc.operation == "list_users"
    assert exc.status_code == 503
    assert exc.cause is None


@pytest.mark.asyncio
async def test_not_found_on_posts_names_operation() -> None:
    async with _serve([_json_route("/posts", {}, status=404)]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchError) as exc_info:
                await client.list_posts_by_user(1)

    assert exc_info.value.operation == "list_posts_by_user"
    assert exc_info.value.status_code == 404


@pytest.mark.asyncio
async def test_malformed_json_raises_decode_error() -> None:
    async with _serve([_text_route("/users", "[{not json")]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchDecodeError) as exc_info:
                await client.list_users()

    assert exc_info.value.operation == "list_users"
    assert exc_info.value.cause is not None


@pytest.mark.asyncio
async def test_schema_mismatch_raises_decode_error() -> None:
    async with _serve([_json_route("/users", [{"id": "not-a-number"}])]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchDecodeError, match="list_users"):
                await client.list_users()


@pytest.mark.asyncio
async def test_object_body_raises_decode_error() -> None:
    async with _serve([_json_route("/users", {"id": 1})]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchDecodeError, match="expected a JSON array"):
                await client.list_users()


@pytest.mark.asyncio
@pytest.mark.parametrize("text", ["null", ""])
async def test_missing_body_decodes_to_empty_list(text: str) -> None:
    async with _serve([_text_route("/users", text)]) as config:
        async with FeedClient(config) as client:
            assert await client.list_users() == []


@pytest.mark.asyncio
async def test_unreachable_host_raises_fetch_error_with_cause() -> None:
    app = web.Application()
    server = TestServer(app)
    await server.start_server()
    config = FeedConfig(base_url=str(server.make_url("/")))
    await server.close()

    async with FeedClient(config) as client:
        with pytest.raises(FetchError) as exc_info:
            await client.list_users()

    exc = exc_info.value
    assert exc.status_code is None
    assert isinstance(exc.cause, aiohttp.ClientError)
    assert exc.__cause__ is exc.cause


@pytest.mark.asyncio
async def test_timeout_raises_fetch_error() -> None:
    async def slow(_request: web.Request) -> web.Response:
        await asyncio.sleep(1)
        return web.json_response([])

    async with _serve([web.get("/users", slow)]) as base_config:
        config = FeedConfig(base_url=base_config.base_url, request_timeout=0.05)
        async with FeedClient(config) as client:
            with pytest.raises(FetchError) as exc_info:
                await client.list_users()

    assert isinstance(exc_info.value.cause, asyncio.TimeoutError)


@pytest.mark.asyncio
async def test_transport_is_created_once_and_reused(users_payload: list[dict[str, Any]]) -> None:
    async with _serve([_json_route("/users", users_payload)]) as config:
        client = FeedClient(config)
        await client.list_users()
        first = client._require_transport()  # noqa: SLF001
        await client.list_users()
        assert client._require_transport() is first  # noqa: SLF001
        await client.close()


@pytest.mark.asyncio
async def test_external_session_is_not_closed(users_payload: list[dict[str, Any]]) -> None:
    async with _serve([_json_route("/users", users_payload)]) as config:
        async with aiohttp.ClientSession() as session:
            async with FeedClient(config, session=session) as client:
                await client.list_users()
            assert not session.closed


@pytest.mark.asyncio
async def test_injected_transport_is_used(transport: Any) -> None:
    client = FeedClient(transport=transport)
    users = await client.list_users()

    assert [user.name for user in users] == ["Ann", "Bob"]
    assert transport.calls == [("list_users", "/users", {})]


@pytest.mark.asyncio
async def test_invalid_utf8_success_body_raises_decode_error() -> None:
    async with _serve([_bytes_route("/users", b'[{"id":1,"name":"\xff"}]')]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchDecodeError) as exc_info:
                await client.list_users()

    assert exc_info.value.operation == "list_users"
    assert isinstance(exc_info.value.cause, UnicodeDecodeError)


@pytest.mark.asyncio
async def test_invalid_utf8_error_body_keeps_status() -> None:
    async with _serve([_bytes_route("/users", b"\xff\xfe oops", status=500)]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchError) as exc_info:
                await client.list_users()

    assert exc_info.value.status_code == 500
    assert "oops" in str(exc_info.value)


@pytest.mark.asyncio
async def test_deeply_nested_json_raises_decode_error() -> None:
    body = b"[" * 100_000 + b"]" * 100_000
    async with _serve([_bytes_route("/users", body)]) as config:
        async with FeedClient(config) as client:
            with pytest.raises(FetchDecodeError) as exc_info:
                await client.list_users()

    assert isinstance(exc_info.value.cause, RecursionError)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("body", "status"),
    [
        (b'[{"id":1,"name":"\xff"}]', 200),
        (b"\xff\xfe oops", 500),
        (b"[" * 100_000 + b"]" * 100_000, 200),
        (b'[{"id":true,"name":"A","username":"a","email":"e"}]', 200),
    ],
)
async def test_malformed_bodies_are_absorbed_by_orchestrator(body: bytes, status: int) -> None:
    errors: list[FetchError] = []
    store = ViewStateStore()
    async with _serve([_bytes_route("/users", body, status=status)]) as config:
        async with FeedClient(config) as client:
            await FeedOrchestrator(client, store, on_error=errors.append).load_users()

    assert store.users == ()
    assert len(errors) == 1
    assert errors[0].operation == "list_users"
