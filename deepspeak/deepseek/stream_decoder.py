"""Server-sent event decoding for streamed chat completions.

Purpose
-------
Turn the text lines of an event-stream body into wire ``Choice`` values.

Line protocol
-------------
- A leading ``data:`` prefix is removed, then surrounding whitespace.
- ``[DONE]`` ends the stream; end of input without it ends the stream too.
- Blank lines are skipped.
- Anything else must be a ``ChatResponse`` JSON fragment; its first choice is
  emitted and a fragment without choices emits nothing. A line that does not
  validate (including SSE comments and ``event:`` lines) aborts the stream
  with the pydantic ``ValidationError``.

Concurrency
-----------
``ChoiceStream`` drains the lines in its own ``asyncio`` task into an
unbounded queue, so reading the network never waits on the consumer. It has
exactly one consumer and cannot be restarted. Cancelling the token, calling
``aclose()`` or cancelling the consuming task stops the reader and closes the
response; the consumer's next step then raises ``CancelledError`` and any
buffered choices are discarded.
"""
from __future__ import annotations

import asyncio
import logging
from typing import AsyncIterator, Awaitable, Callable, Optional, Tuple

from ..base.cancellation import CancellationToken, CancelledError
from ..base.errors import ErrorCode, classify_exception
from ..base.logging import LogContext, get_logger, log_event
from ..base.streaming import StreamMetrics, finalize_stream
from ..config.defaults import STREAM_DATA_PREFIX, STREAM_DONE_SIGN
from .models import ChatResponse, Choice

_CHOICE = "choice"
_ERROR = "error"
_END = "end"
_WAKE = "wake"

_Item = Tuple[str, object]


def decode_line(raw: str) -> Optional[str]:
    """Return the JSON payload of one event line, ``""`` to skip, ``None`` at the sentinel."""
    line = raw.strip()
    if line.startswith(STREAM_DATA_PREFIX):
        line = line[len(STREAM_DATA_PREFIX):].strip()
    if line == STREAM_DONE_SIGN:
        return None
    return line


async def iter_choices(lines: AsyncIterator[str]) -> AsyncIterator[Choice]:
    """Yield the first choice of every JSON fragment in ``lines``."""
    async for raw in lines:
        payload = decode_line(raw)
        if payload is None:
            return
        if not payload:
            continue
        fragment = ChatResponse.model_validate_json(payload)
        if fragment.choices:
            yield fragment.choices[0]


class ChoiceStream:
    """Single-consumer async iterator of streamed ``Choice`` values.

    Must be created inside a running event loop; the reader task starts
    immediately.

    Args:
        lines: Async iterator over the event-stream text lines.
        on_close: Coroutine function releasing the underlying response.
            Awaited exactly once when reading stops for any reason.
        cancellation: Caller token. The stream cancels a child of it, so
            ``aclose()`` never cancels the caller's token.
        logger: Logger for stream events.
        ctx: Log context merged into stream events.
    """

    def __init__(
        self,
        lines: AsyncIterator[str],
        *,
        on_close: Optional[Callable[[], Awaitable[None]]] = None,
        cancellation: Optional[CancellationToken] = None,
        logger: Optional[logging.Logger] = None,
        ctx: Optional[LogContext] = None,
    ) -> None:
        self._lines = lines
        self._on_close = on_close
        self._logger = logger or get_logger("deepspeak.deepseek.stream")
        self._ctx = ctx or LogContext()
        self._metrics = StreamMetrics()
        self._queue: asyncio.Queue[_Item] = asyncio.Queue()
        self._consumer_attached = False
        self._finished = False
        self._cancel_observed = False
        self._token = cancellation.child() if cancellation is not None else CancellationToken()
        self._loop = asyncio.get_running_loop()
        self._close_task: Optional[asyncio.Task] = None
        self._task = self._loop.create_task(self._produce())
        self._task.add_done_callback(self._on_task_done)
        self._unregister = self._token.register(self._schedule_cancel)

    @property
    def metrics(self) -> StreamMetrics:
        return self._metrics

    @property
    def cancelled(self) -> bool:
        return self._token.cancelled

    async def _close_source(self) -> None:
        on_close, self._on_close = self._on_close, None
        if on_close is not None:
            await on_close()

    async def _produce(self) -> None:
        error_code: Optional[str] = None
        error: Optional[str] = None
        try:
            async for choice in iter_choices(self._lines):
                self._metrics.record_emit()
                self._queue.put_nowait((_CHOICE, choice))
        except asyncio.CancelledError:
            error_code = ErrorCode.CANCELLED.value
            raise
        except Exception as exc:  # handed to the consumer, which re-raises it
            error_code = classify_exception(exc).value
            error = str(exc)
            log_event(self._logger, "stream.error", self._ctx, level=logging.WARNING, error=error)
            self._queue.put_nowait((_ERROR, exc))
        else:
            self._queue.put_nowait((_END, None))
        finally:
            await self._close_source()
            finalize_stream(
                logger=self._logger,
                ctx=self._ctx,
                metrics=self._metrics,
                error_code=error_code,
                error=error,
            )

    def _on_task_done(self, task: asyncio.Task) -> None:
        # A reader cancelled before its first step never runs its finally block.
        if self._on_close is not None and not self._loop.is_closed():
            self._close_task = self._loop.create_task(self._close_source())

    def _schedule_cancel(self) -> None:
        # Token callbacks may run on any thread.
        if self._loop.is_closed():
            return
        self._loop.call_soon_threadsafe(self._cancel_now)

    def _cancel_now(self) -> None:
        if self._cancel_observed:
            return
        self._cancel_observed = True
        if not self._task.done():
            self._task.cancel()
        log_event(self._logger, "stream.cancelled", self._ctx, reason=self._token.reason)
        self._queue.put_nowait((_WAKE, None))

    def _release_token(self) -> None:
        self._unregister()
        self._token.detach()

    def _raise_cancelled(self) -> None:
        self._cancel_now()
        self._finished = True
        self._release_token()
        while not self._queue.empty():
            self._queue.get_nowait()
        raise CancelledError(self._token.reason or "stream cancelled")

    def __aiter__(self) -> "ChoiceStream":
        if self._consumer_attached:
            raise RuntimeError("ChoiceStream supports a single consumer")
        self._consumer_attached = True
        return self

    async def __anext__(self) -> Choice:
        if self._token.cancelled:
            self._raise_cancelled()
        if self._finished:
            raise StopAsyncIteration
        try:
            kind, payload = await self._queue.get()
        except asyncio.CancelledError:
            self._token.cancel("consumer task cancelled")
            self._cancel_now()
            raise
        if self._token.cancelled:
            self._raise_cancelled()
        if kind == _CHOICE:
            return payload  # type: ignore[return-value]
        self._finished = True
        self._release_token()
        if kind == _ERROR:
            raise payload  # type: ignore[misc]
        raise StopAsyncIteration

    async def aclose(self) -> None:
        """Stop reading and release the response; no-op once fully consumed."""
        if not self._finished:
            self._token.cancel("stream closed")
            self._cancel_now()
        await asyncio.wait({self._task})
        self._release_token()
        if self._close_task is not None:
            await self._close_task
        await self._close_source()

    async def __aenter__(self) -> "ChoiceStream":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["ChoiceStream", "decode_line", "iter_choices"]
