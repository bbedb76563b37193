"""Unit tests for cooperative cancellation primitives.

Covers idempotent cancel, cascade to children, late link of a child after
parent cancel, callback registration and the asyncio bridge.
"""
from __future__ import annotations

import asyncio

import pytest

from deepspeak.base.cancellation import (
    CancellationToken,
    CancelledError,
    await_cancellable,
)


def test_cancel_cascades_to_children_and_is_idempotent():
    parent = CancellationToken()
    child1 = parent.child()
    child2 = parent.child()

    parent.cancel(reason="stop")
    # idempotent second call
    parent.cancel(reason="ignored")

    assert parent.cancelled is True and parent.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child1.cancelled is True and child1.reason == "stop"  # nosec B101 - pytest assert in tests
    assert child2.cancelled is True and child2.reason == "stop"  # nosec B101 - pytest assert in tests


def test_cancelling_child_leaves_parent_untouched():
    parent = CancellationToken()
    child = parent.child()
    child.cancel("local")
    assert child.cancelled is True and parent.cancelled is False  # nosec B101 - pytest assert in tests


def test_detached_child_no_longer_follows_parent():
    parent = CancellationToken()
    child = parent.child()
    kept = parent.child()
    child.detach()
    child.detach()
    parent.cancel("stop")
    assert parent.child_count == 1  # nosec B101 - pytest assert in tests
    assert child.cancelled is False and kept.cancelled is True  # nosec B101 - pytest assert in tests


def test_link_child_after_parent_cancel_immediately_cancels_child():
    parent = CancellationToken()
    parent.cancel("done")
    late_child = CancellationToken(parent=parent)
    assert late_child.cancelled is True and late_child.reason == "done"  # nosec B101 - pytest assert in tests


def test_raise_if_cancelled_raises_custom_error():
    token = CancellationToken()
    token.raise_if_cancelled()
    token.cancel("terminate")
    with pytest.raises(CancelledError, match="terminate"):
        token.raise_if_cancelled()


def test_register_runs_once_and_unregister_prevents_call():
    token = CancellationToken()
    calls = []
    token.register(lambda: calls.append("a"))
    unregister = token.register(lambda: calls.append("b"))
    unregister()
    token.cancel()
    token.cancel()
    assert calls == ["a"]  # nosec B101 - pytest assert in tests


def test_register_after_cancel_runs_immediately():
    token = CancellationToken()
    token.cancel()
    calls = []
    token.register(lambda: calls.append(1))
    assert calls == [1]  # nosec B101 - pytest assert in tests


def test_await_cancellable_passes_result_through():
    async def work():
        await asyncio.sleep(0)
        return 42

    async def run():
        return await await_cancellable(work(), CancellationToken()), await await_cancellable(work(), None)

    assert asyncio.run(run()) == (42, 42)  # nosec B101 - pytest assert in tests


def test_await_cancellable_interrupts_pending_wait():
    async def run():
        token = CancellationToken()
        loop = asyncio.get_running_loop()
        loop.call_later(0.01, token.cancel, "deadline")
        await await_cancellable(asyncio.sleep(10), token)

    with pytest.raises(CancelledError, match="deadline"):
        asyncio.run(run())


def test_await_cancellable_with_cancelled_token_does_not_start_work():
    started = []

    async def work():
        started.append(True)

    async def run():
        token = CancellationToken()
        token.cancel()
        await await_cancellable(work(), token)

    with pytest.raises(CancelledError):
        asyncio.run(run())
    assert started == []  # nosec B101 - pytest assert in tests
