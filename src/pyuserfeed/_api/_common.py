"""Shared helpers for feed API endpoint modules.

It is internal to pyuserfeed and may change at any time.
"""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from pyuserfeed.exceptions import FetchDecodeError

T = TypeVar("T")


def decode_list(operation: str, body: Any, adapter: TypeAdapter[list[T]]) -> list[T]:
    """Validate a decoded JSON body as a list of records.

    A missing body (``None``) is treated as an empty list.
    """
    if body is None:
        return []
    if not isinstance(body, list):
        raise FetchDecodeError(
            f"{operation}: expected a JSON array, got {type(body).__name__}",
            operation=operation,
        )
    try:
        return adapter.validate_python(body)
    except ValidationError as exc:
        raise FetchDecodeError(
            f"{operation}: response does not match the expected schema ({exc.error_count()} errors)",
            operation=operation,
            cause=exc,
        ) from exc
