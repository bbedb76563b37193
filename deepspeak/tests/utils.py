"""Shared testing helpers for client and stream tests.

Exports:
    - sse_body(fragments, done=True) -> bytes
    - chunk(content, index=0, role=None, finish=None) -> dict
    - mock_http_client(handler) -> httpx.AsyncClient
    - lines_from(items) -> async iterator of str
"""
from __future__ import annotations

import asyncio
import json
from typing import AsyncIterator, Callable, Iterable, List, Optional

import httpx

Handler = Callable[[httpx.Request], httpx.Response]


def sse_body(fragments: Iterable[object], *, done: bool = True) -> bytes:
    """Encode fragments as ``data: <json>`` event lines."""
    lines: List[str] = []
    for fragment in fragments:
        payload = fragment if isinstance(fragment, str) else json.dumps(fragment)
        lines.append(f"data: {payload}\n\n")
    if done:
        lines.append("data: [DONE]\n\n")
    return "".join(lines).encode("utf-8")


def chunk(
    content: Optional[str] = None,
    *,
    index: int = 0,
    role: Optional[str] = None,
    finish: Optional[str] = None,
) -> dict:
    """One streamed ``chat.completion.chunk`` fragment with a single choice."""
    delta = {}
    if role is not None:
        delta["role"] = role
    if content is not None:
        delta["content"] = content
    return {
        "id": "chatcmpl-1",
        "object": "chat.completion.chunk",
        "model": "deepseek-chat",
        "created": 1700000000,
        "choices": [{"index": index, "delta": delta, "finish_reason": finish}],
    }


def mock_http_client(handler: Handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


async def lines_from(items: Iterable[str], *, delay: float = 0.0) -> AsyncIterator[str]:
    """Async line source; ``delay`` yields to the loop between lines."""
    for item in items:
        if delay:
            await asyncio.sleep(delay)
        yield item
