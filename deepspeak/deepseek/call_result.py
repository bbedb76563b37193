"""Tagged outcome of one HTTP call made by ``DeepseekClient``."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class CallResult(Generic[T]):
    """Either a decoded ``value`` or an ``error`` diagnostic, never both.

    ``error`` holds ``HTTP <status>: <raw body>`` for non-success responses.
    ``status`` is the HTTP status code of the call.
    """

    value: Optional[T] = None
    error: Optional[str] = None
    status: Optional[int] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T, status: Optional[int] = None) -> "CallResult[T]":
        return cls(value=value, status=status)

    @classmethod
    def failure(cls, error: str, status: Optional[int] = None) -> "CallResult[T]":
        return cls(error=error, status=status)


__all__ = ["CallResult"]
