"""Custom exception hierarchy for pyuserfeed."""

from __future__ import annotations


class FeedError(Exception):
    """Base exception for all pyuserfeed errors."""


class FeedConfigError(FeedError):
    """Invalid or missing configuration."""


class FetchError(FeedError):
    """A resource fetch failed (network, non-2xx status, invalid body).

    Parameters
    ----------
    message : str
        Human-readable description.
    operation : str
        Name of the client operation that failed (e.g. ``"list_users"``).
    status_code : int or None
        HTTP status when the server answered with a non-2xx code.
    cause : BaseException or None
        Underlying exception (transport error, JSON error, validation error).
    """

    def __init__(
        self,
        message: str,
        *,
        operation: str,
        status_code: int | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.operation = operation
        self.status_code = status_code
        self.cause = cause
        super().__init__(message)


class FetchDecodeError(FetchError):
    """The response arrived but its body is not JSON or fails validation."""
