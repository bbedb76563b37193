"""Timeout configuration for the deepspeak client.

All HTTP timeouts derive from :func:`get_timeout_config`; no other module
hard-codes a number of seconds. The decoder enforces no timeout of its own:
a streaming read is bounded only by the transport timeout configured here
(or later changed with ``DeepseekClient.set_timeout``).

Environment
-----------
DEEPSEEK_TIMEOUT_SECONDS
    Request timeout in seconds. Non-numeric or non-positive values are
    ignored and the default applies.
"""
from __future__ import annotations

import math
import os
from dataclasses import dataclass

from ..config.defaults import DEEPSEEK_DEFAULT_TIMEOUT_SECONDS

TIMEOUT_ENV = "DEEPSEEK_TIMEOUT_SECONDS"


@dataclass(frozen=True)
class TimeoutConfig:
    """Container for normalized timeout values (seconds).

    Attributes:
        http_timeout_seconds: Per-request transport timeout (connect, read,
            write and pool acquisition each get this budget).
    """

    http_timeout_seconds: float = DEEPSEEK_DEFAULT_TIMEOUT_SECONDS


_CACHED: TimeoutConfig | None = None
# Raw env value the cache was computed from; a change invalidates the cache.
_ENV_GUARD: str | None = None


def parse_positive_float(raw: object, default: float) -> float:
    """Return ``raw`` as a positive finite float, else ``default``."""
    if raw is None or raw == "":
        return default
    try:
        val = float(raw)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return default
    return val if math.isfinite(val) and val > 0 else default


def get_timeout_config() -> TimeoutConfig:
    """Return the process-cached `TimeoutConfig` instance."""
    global _CACHED, _ENV_GUARD  # noqa: PLW0603 - documented module cache
    raw = os.getenv(TIMEOUT_ENV, "")
    if _CACHED is not None and _ENV_GUARD == raw:
        return _CACHED
    _CACHED = TimeoutConfig(http_timeout_seconds=parse_positive_float(raw, DEEPSEEK_DEFAULT_TIMEOUT_SECONDS))
    _ENV_GUARD = raw
    return _CACHED


__all__ = [
    "TIMEOUT_ENV",
    "TimeoutConfig",
    "get_timeout_config",
    "parse_positive_float",
]
