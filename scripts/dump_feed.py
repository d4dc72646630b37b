#!/usr/bin/env python3
"""Dump the users list and each user's posts.

Drives the same path a UI would: a :class:`FeedOrchestrator` loads users,
then posts per user, and the script prints what lands in the store.

Usage
-----
::

    python scripts/dump_feed.py
    python scripts/dump_feed.py --user 3 --json

Options::

    --user ID            Only load posts for this user id (default: all users)
    --json               Output as machine-readable JSON
    --output FILE        Write output to FILE instead of stdout
    -v, --verbose        Enable DEBUG logging

Environment variables ``FEED_BASE_URL``, ``FEED_REQUEST_TIMEOUT`` and
``FEED_DEBUG_PAYLOADS`` are honoured.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path
from typing import Any

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from pyuserfeed import FeedClient, FeedConfig, FeedOrchestrator, FetchError, ViewStateStore  # noqa: E402


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


async def _dump(args: argparse.Namespace) -> tuple[dict[str, Any], list[str]]:
    errors: list[str] = []

    def _on_error(exc: FetchError) -> None:
        errors.append(f"{exc.operation}: {exc}")

    result: dict[str, Any] = {"users": [], "posts": {}}
    async with FeedClient(FeedConfig.from_env()) as client:
        orchestrator = FeedOrchestrator(client, ViewStateStore(), on_error=_on_error)
        store = orchestrator.store

        await orchestrator.load_users()
        result["users"] = [user.model_dump() for user in store.users]

        user_ids = [args.user] if args.user is not None else [user.id for user in store.users]
        for user_id in user_ids:
            await orchestrator.load_posts(user_id)
            if store.active_user_id == user_id:
                result["posts"][str(user_id)] = [post.model_dump() for post in store.posts]

    return result, errors


def _format_text(result: dict[str, Any], errors: list[str]) -> str:
    lines = [_section(f"Users ({len(result['users'])})")]
    for user in result["users"]:
        lines.append(f"  [{user['id']}] {user['name']} (@{user['username']}) <{user['email']}>")
    for user_id, posts in result["posts"].items():
        lines.append(_section(f"Posts for user {user_id} ({len(posts)})"))
        for post in posts:
            lines.append(f"  #{post['id']} {post['title']}")
    if errors:
        lines.append(_section("Errors"))
        lines.extend(f"  {error}" for error in errors)
    return "\n".join(lines) + "\n"


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--user", type=int, default=None, help="Only load posts for this user id")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    parser.add_argument("--output", type=Path, default=None, help="Write output to FILE")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable DEBUG logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    result, errors = asyncio.run(_dump(args))
    if args.json:
        text = json.dumps({**result, "errors": errors}, indent=2, ensure_ascii=False) + "\n"
    else:
        text = _format_text(result, errors)

    if args.output is not None:
        args.output.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
    return 1 if errors else 0


if __name__ == "__main__":
    raise SystemExit(main())
