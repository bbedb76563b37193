"""Finish reason enumeration."""
from __future__ import annotations

from enum import Enum


class FinishReason(str, Enum):
    """Why generation of a choice stopped."""

    STOP = "stop"
    LENGTH = "length"
    CONTENT_FILTER = "content_filter"
    TOOL_CALLS = "tool_calls"


__all__ = ["FinishReason"]
