"""Bridge between ``CancellationToken`` and asyncio awaitables.

``await_cancellable`` runs an awaitable as its own task and cancels that task
when the token fires, translating the resulting ``asyncio.CancelledError``
into the library's :class:`CancelledError`. Token callbacks may fire on any
thread, so the task is cancelled through ``loop.call_soon_threadsafe``.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Optional, TypeVar

from .cancellation_token import CancellationToken
from .cancelled_error import CancelledError

T = TypeVar("T")


async def await_cancellable(awaitable: Awaitable[T], token: Optional[CancellationToken]) -> T:
    """Await ``awaitable``, aborting it if ``token`` is cancelled first.

    Raises:
        CancelledError: when the token was cancelled before or during the wait.
    """
    if token is None:
        return await awaitable
    if token.cancelled:
        # Close an un-awaited coroutine to avoid "never awaited" warnings.
        close = getattr(awaitable, "close", None)
        if close is not None:
            close()
        token.raise_if_cancelled()

    loop = asyncio.get_running_loop()
    task = asyncio.ensure_future(awaitable)
    unregister = token.register(lambda: loop.call_soon_threadsafe(task.cancel))
    try:
        return await task
    except asyncio.CancelledError:
        if token.cancelled:
            raise CancelledError(token.reason or "operation cancelled") from None
        raise
    finally:
        unregister()


__all__ = ["await_cancellable"]
