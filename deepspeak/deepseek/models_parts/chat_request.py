"""
Wire request model for ``POST /chat/completions``.

Purpose
-------
Holds the request body exactly as the service expects it (snake_case field
names). Serialize with :meth:`ChatRequest.to_json`, which omits unset
optional fields (``model``, ``top_logprobs``).

Notes
-----
``stream`` belongs to the call path: the client sends a copy with ``stream``
forced to ``False`` for single-shot calls and ``True`` for streaming calls,
whatever the caller set here.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from ...config.defaults import (
    DEFAULT_FREQUENCY_PENALTY,
    DEFAULT_MAX_TOKENS,
    DEFAULT_PRESENCE_PENALTY,
    DEFAULT_TEMPERATURE,
    DEFAULT_TOP_P,
)
from .message import Message


class ChatRequest(BaseModel):
    """Chat completion request body.

    No range validation is applied; out-of-range values are left for the
    service to reject.
    """

    messages: List[Message] = Field(default_factory=list)
    model: Optional[str] = None
    frequency_penalty: float = DEFAULT_FREQUENCY_PENALTY
    max_tokens: int = DEFAULT_MAX_TOKENS
    presence_penalty: float = DEFAULT_PRESENCE_PENALTY
    stop: List[str] = Field(default_factory=list)
    stream: bool = False
    temperature: float = DEFAULT_TEMPERATURE
    top_p: float = DEFAULT_TOP_P
    logprobs: bool = False
    top_logprobs: Optional[int] = None

    def to_json(self) -> str:
        """Serialize to the JSON request body, dropping ``None`` fields."""
        return self.model_dump_json(exclude_none=True)


__all__ = ["ChatRequest"]
