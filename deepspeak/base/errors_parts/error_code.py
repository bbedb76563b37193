"""
Normalized client error codes (taxonomy).

Defines the `ErrorCode` enumeration raised with :class:`ProviderError` by the
generic chat surface. Values are lowercase snake_case and are considered a
stable public contract for logging and analytics.
"""
from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    """Enumerated normalized error codes representing failure categories."""

    AUTH = "auth"
    RATE_LIMIT = "rate_limit"
    TIMEOUT = "timeout"
    CANCELLED = "cancelled"
    TRANSIENT = "transient"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    SERVER_ERROR = "server_error"
    UNAVAILABLE = "unavailable"
    INSUFFICIENT_BALANCE = "insufficient_balance"
    UNKNOWN = "unknown"


__all__ = ["ErrorCode"]
