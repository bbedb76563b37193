"""
Wire message model for the DeepSeek chat API.

External dependencies: Pydantic v2 (validation and JSON round-trip).
"""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict


class Message(BaseModel):
    """One chat message as it appears on the wire.

    Immutable once built. Request messages carry ``role`` + ``content``;
    response messages (and streaming deltas) may omit either, and reasoning
    models add ``reasoning_content``.
    """

    model_config = ConfigDict(frozen=True)

    role: Optional[str] = None
    content: Optional[str] = None
    reasoning_content: Optional[str] = None

    @classmethod
    def user(cls, content: str) -> "Message":
        return cls(role="user", content=content)

    @classmethod
    def system(cls, content: str) -> "Message":
        return cls(role="system", content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        return cls(role="assistant", content=content)


__all__ = ["Message"]
