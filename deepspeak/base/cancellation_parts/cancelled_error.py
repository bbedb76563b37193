"""Cancellation error type.

Defines the public ``CancelledError`` raised when a client call or a choice
stream observes a cancelled :class:`CancellationToken`.
"""

from __future__ import annotations


class CancelledError(RuntimeError):
    """Raised when an operation is cancelled cooperatively.

    Subclasses ``RuntimeError`` rather than ``asyncio.CancelledError`` so that
    token cancellation never gets mistaken for cancellation of the caller's
    own task.
    """

__all__ = ["CancelledError"]
