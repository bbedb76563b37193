"""
Structured provider error exception type.

Raised at the one boundary where an absent result must become a failure: the
generic chat surface (``complete`` / ``complete_streaming``). Carries the
normalized `ErrorCode` plus the captured HTTP diagnostic text.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .error_code import ErrorCode


@dataclass
class ProviderError(Exception):
    """Represents a structured provider error with a normalized error code.

    Attributes:
        code: Normalized :class:`ErrorCode` classification for the failure.
        message: Human-readable error message, including any captured
            ``HTTP <status>: <body>`` diagnostic.
        provider: Provider key where the error originated (``"deepseek"``).
        model: Optional model name associated with the failure.
        http_status: HTTP status code of the failed call, when there was one.
        retryable: Hint for caller retry logic (not authoritative).
        raw: Optional original exception for diagnostics.
    """

    code: ErrorCode
    message: str
    provider: str
    model: Optional[str] = None
    http_status: Optional[int] = None
    retryable: bool = False
    raw: Optional[Exception] = None

    def __str__(self) -> str:  # pragma: no cover - trivial
        """Return a compact string combining provider, model, code, and message."""
        return f"{self.provider}:{self.model or '-'} {self.code.value}: {self.message}"


__all__ = ["ProviderError"]
