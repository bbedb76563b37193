"""One completion alternative within a chat response."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from .logprobs import Logprobs
from .message import Message


class Choice(BaseModel):
    """A single choice.

    Single-shot responses fill ``message``; streamed fragments fill ``delta``.
    ``finish_reason`` is ``None`` until the service reports one.
    """

    index: int = 0
    finish_reason: Optional[str] = None
    message: Optional[Message] = None
    delta: Optional[Message] = None
    logprobs: Optional[Logprobs] = None


__all__ = ["Choice"]
