"""Client configuration for pyuserfeed."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyuserfeed._constants import BASE_URL, USER_AGENT
from pyuserfeed.exceptions import FeedConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _env_timeout(value: str) -> float | None:
    stripped = value.strip().lower()
    if stripped in {"", "none", "default"}:
        return None
    try:
        timeout = float(stripped)
    except ValueError as exc:
        raise FeedConfigError(f"FEED_REQUEST_TIMEOUT must be a number, got {value!r}") from exc
    return timeout


@dataclasses.dataclass(frozen=True)
class FeedConfig:
    """Client configuration.

    Parameters
    ----------
    base_url : str
        API origin. Defaults to the public JSONPlaceholder demo API.
        A trailing slash is stripped.
    request_timeout : float or None
        Total per-request timeout in seconds. ``None`` keeps the aiohttp
        default.
    user_agent : str
        ``User-Agent`` header sent with every request.
    debug_payloads : bool
        Log redacted response bodies at DEBUG level.
    """

    base_url: str = BASE_URL
    request_timeout: float | None = None
    user_agent: str = USER_AGENT
    debug_payloads: bool = False

    def __post_init__(self) -> None:
        base_url = self.base_url.strip().rstrip("/")
        if not base_url:
            raise FeedConfigError("base_url must be non-empty")
        if not base_url.startswith(("http://", "https://")):
            raise FeedConfigError(f"base_url must be an http(s) URL, got {self.base_url!r}")
        if self.request_timeout is not None and self.request_timeout <= 0:
            raise FeedConfigError(f"request_timeout must be positive, got {self.request_timeout}")
        object.__setattr__(self, "base_url", base_url)

    @classmethod
    def from_env(cls, **overrides: Any) -> FeedConfig:
        """Create configuration from environment variables.

        Reads ``FEED_BASE_URL``, ``FEED_REQUEST_TIMEOUT``,
        ``FEED_USER_AGENT`` and ``FEED_DEBUG_PAYLOADS``. Explicit keyword
        arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        base_url = env.get("FEED_BASE_URL")
        if base_url is not None:
            config_kwargs["base_url"] = base_url

        user_agent = env.get("FEED_USER_AGENT")
        if user_agent is not None:
            config_kwargs["user_agent"] = user_agent

        timeout_env = env.get("FEED_REQUEST_TIMEOUT")
        if timeout_env is not None and "request_timeout" not in overrides:
            config_kwargs["request_timeout"] = _env_timeout(timeout_env)

        if "debug_payloads" not in overrides:
            config_kwargs["debug_payloads"] = _env_bool(env.get("FEED_DEBUG_PAYLOADS"), False)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
