"""Unified timeout settings for completion providers.

This module centralizes the timeout values used by the streaming transport so
no ad-hoc numeric timeouts appear elsewhere.

Key Components
--------------
TimeoutConfig
    Dataclass capturing normalized timeout values.

get_timeout_config()
    Returns a process-cached configuration, parsing environment overrides on
    first use (and again whenever one of the overrides changes). Supported
    environment variables (all optional):
        PT_TIMEOUT_CONNECT_SECONDS
        PT_TIMEOUT_HTTP_SECONDS

Low-speed semantics
-------------------
The low-speed window is not a process default. It belongs to each provider's
``low_speed_timeout``; ``None`` means the stream has no read timeout and no
throughput floor.
"""
from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        connect_timeout_seconds: Timeout for establishing the TCP/TLS session.
        http_timeout_seconds: Timeout for sending the request body.
    """

    connect_timeout_seconds: float = 10.0
    http_timeout_seconds: float = 30.0


_CACHED: TimeoutConfig | None = None
_ENV_GUARD: str | None = None
_ENV_NAMES = (
    "PT_TIMEOUT_CONNECT_SECONDS",
    "PT_TIMEOUT_HTTP_SECONDS",
)


def _parse_env_float(name: str, default: float) -> float:
    """Parse an environment variable as a positive float, else ``default``."""
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        val = float(raw)
        return val if val > 0 else default
    except ValueError:
        return default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    guard = "/".join(os.getenv(name, "") for name in _ENV_NAMES)
    if _CACHED is not None and _ENV_GUARD == guard:
        return _CACHED

    defaults = TimeoutConfig()
    _CACHED = TimeoutConfig(
        connect_timeout_seconds=_parse_env_float("PT_TIMEOUT_CONNECT_SECONDS", defaults.connect_timeout_seconds),
        http_timeout_seconds=_parse_env_float("PT_TIMEOUT_HTTP_SECONDS", defaults.http_timeout_seconds),
    )
    _ENV_GUARD = guard
    return _CACHED


__all__ = [
    "TimeoutConfig",
    "get_timeout_config",
]
