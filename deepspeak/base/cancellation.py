"""Cooperative cancellation primitives (public API facade).

Purpose
-------
Expose stable cancellation constructs via the canonical
``deepspeak.base.cancellation`` import path while the concrete
implementations live under ``cancellation_parts``.

Notes
-----
- ``CancellationToken`` signals cancellation to client calls and to the
	background reader of a streaming response.
- ``CancelledError`` is raised by operations that observe a cancellation
	request. It is distinct from ``asyncio.CancelledError``, which keeps its
	task-cancellation meaning.
- ``await_cancellable`` lets any awaitable be aborted by a token.
"""

from .cancellation_parts.cancelled_error import CancelledError
from .cancellation_parts.cancellation_token import CancellationToken
from .cancellation_parts.awaitables import await_cancellable

__all__ = ["CancellationToken", "CancelledError", "await_cancellable"]
