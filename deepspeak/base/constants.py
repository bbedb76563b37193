"""Shared sentinel strings for the deepspeak client.

Security
--------
Only generic sentinel strings live here; there are no credentials. The pragma
below silences secret scanners that flag names like "missing_api_key".

# pragma: allowlist secret
"""
from __future__ import annotations

PROVIDER_NAME = "deepseek"

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Generic surface failure prefix; the transport diagnostic is appended after ": ".
FAILED_RESPONSE_MESSAGE = "Failed to get response"

__all__ = [
    "PROVIDER_NAME",
    "MISSING_API_KEY_ERROR",
    "FAILED_RESPONSE_MESSAGE",
]
