"""deepspeak.config.env
====================

Environment variable names and placeholder detection for the DeepSeek client.

Purpose
-------
- Single source of truth for the environment variables the client reads.
- Helpers to read the mapped variables and to recognise placeholder values
  copied from sample ``.env`` files.

Failure Modes
-------------
- Unset variables are skipped, never raised on; the client raises
  ``ProviderError`` for a missing key.
"""

from __future__ import annotations

import os
from typing import Dict, Iterable, Optional, Tuple

# Config field -> environment variable name
ENV_MAP: Dict[str, str] = {
    "api_key": "DEEPSEEK_API_KEY",  # pragma: allowlist secret - env var name, not a secret
    "base_url": "DEEPSEEK_BASE_URL",
    "model": "DEEPSEEK_MODEL",
    "timeout_seconds": "DEEPSEEK_TIMEOUT_SECONDS",
}

CONFIG_FILE_ENV = "DEEPSPEAK_CONFIG_FILE"
DOTENV_FILE_ENV = "DOTENV_FILE"


def is_placeholder(val: Optional[str]) -> bool:
    """Return True if the provided string looks like a placeholder/test value.

    Heuristics: contains 'placeholder', 'changeme', 'example', or starts with
    'test_'. The check is case-insensitive and ignores surrounding spaces.
    """
    if val is None:
        return False
    v = str(val).strip().lower()
    return (
        "placeholder" in v
        or "changeme" in v
        or "example" in v
        or v.startswith("test_")
    )


def iter_env_values() -> Iterable[Tuple[str, str]]:
    """Yield ``(field, value)`` for every mapped variable that is set."""
    for field, name in ENV_MAP.items():
        val = os.environ.get(name)
        if val is not None:
            yield field, val


__all__ = [
    "ENV_MAP",
    "CONFIG_FILE_ENV",
    "DOTENV_FILE_ENV",
    "is_placeholder",
    "iter_env_values",
]
