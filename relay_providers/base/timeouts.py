"""Unified timeout configuration for the relay provider layer.

Centralizes the timeout values used when opening the remote streaming
connection and while waiting for further bytes of its body.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use and whenever the relevant variables change. Supported
    environment variables (all optional):
        RELAY_TIMEOUT_START_SECONDS
        RELAY_TIMEOUT_STREAM_SECONDS
        RELAY_TIMEOUT_HTTP_SECONDS

to_httpx_timeout(cfg)
    Translates the config into an ``httpx.Timeout``: connect and pool waits use
    the start timeout, body reads use the stream (idle) timeout.

Design Constraints
------------------
1. No hard-coded ad-hoc timeouts outside this module.
2. Avoid per-call env parsing (cache after first read).
"""
from __future__ import annotations

from dataclasses import dataclass
import os

import httpx


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        start_timeout_seconds: Timeout for establishing the remote streaming
            connection (connect + status line + headers).
        stream_timeout_seconds: Idle timeout while waiting for the next body
            chunk during streaming.
        http_timeout_seconds: Timeout for writing the request body.
    """

    start_timeout_seconds: float = 30.0
    stream_timeout_seconds: float = 60.0
    http_timeout_seconds: float = 30.0


_ENV_NAMES = (
    "RELAY_TIMEOUT_START_SECONDS",
    "RELAY_TIMEOUT_STREAM_SECONDS",
    "RELAY_TIMEOUT_HTTP_SECONDS",
)

_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Parse a positive float from the environment, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        start_timeout_seconds=_parse_env_float("RELAY_TIMEOUT_START_SECONDS", defaults.start_timeout_seconds),
        stream_timeout_seconds=_parse_env_float("RELAY_TIMEOUT_STREAM_SECONDS", defaults.stream_timeout_seconds),
        http_timeout_seconds=_parse_env_float("RELAY_TIMEOUT_HTTP_SECONDS", defaults.http_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


def to_httpx_timeout(cfg: TimeoutConfig | None = None) -> httpx.Timeout:
    """Build the ``httpx.Timeout`` used for streaming chat requests."""
    cfg = cfg or get_timeout_config()
    return httpx.Timeout(
        connect=cfg.start_timeout_seconds,
        read=cfg.stream_timeout_seconds,
        write=cfg.http_timeout_seconds,
        pool=cfg.start_timeout_seconds,
    )


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
    "to_httpx_timeout",
]
