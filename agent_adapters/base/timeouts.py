"""Timeout configuration for adapter HTTP calls.

Timeouts are delegated to the transport; this module only centralizes the
values so no call site hard-codes them. Values are read from the environment
on first use and cached until the relevant variables change.

Supported environment variables (positive floats, all optional):
    ADAPTERS_TIMEOUT_CONNECT_SECONDS
    ADAPTERS_TIMEOUT_READ_SECONDS
    ADAPTERS_TIMEOUT_HTTP_SECONDS
"""
from __future__ import annotations

import os
from dataclasses import dataclass

import httpx

_ENV_NAMES = (
    "ADAPTERS_TIMEOUT_CONNECT_SECONDS",
    "ADAPTERS_TIMEOUT_READ_SECONDS",
    "ADAPTERS_TIMEOUT_HTTP_SECONDS",
)


@dataclass(frozen=True)
class TimeoutConfig:
    """Normalized timeout values in seconds.

    Attributes:
        connect_timeout_seconds: Time allowed to establish the connection.
        read_timeout_seconds: Idle time allowed between two streamed chunks.
        http_timeout_seconds: Baseline for write and pool acquisition.
    """

    connect_timeout_seconds: float = 30.0
    read_timeout_seconds: float = 60.0
    http_timeout_seconds: float = 30.0

    def to_httpx(self) -> httpx.Timeout:
        return httpx.Timeout(
            self.http_timeout_seconds,
            connect=self.connect_timeout_seconds,
            read=self.read_timeout_seconds,
        )


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None


def _parse_env_float(name: str, default: float) -> float:
    """Read ``name`` as a positive float, falling back to ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
    except ValueError:
        return default
    return val if val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig`, refreshed on env changes."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(n, "") for n in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED
    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float(_ENV_NAMES[0], defaults.connect_timeout_seconds),
        read_timeout_seconds=_parse_env_float(_ENV_NAMES[1], defaults.read_timeout_seconds),
        http_timeout_seconds=_parse_env_float(_ENV_NAMES[2], defaults.http_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = ["TimeoutConfig", "get_timeout_config"]
