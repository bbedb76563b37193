"""
Wire response model for ``POST /chat/completions``.

The same shape is used for a single-shot JSON body and for each JSON fragment
of an event stream. Unknown fields are ignored.
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .choice import Choice
from .usage import Usage


class ChatResponse(BaseModel):
    """Chat completion response (or one streamed fragment).

    Attributes:
        id: Response identifier.
        object: Object tag (``chat.completion`` / ``chat.completion.chunk``).
        model: Model that produced the response.
        created: Creation time as Unix epoch seconds.
        choices: Choices in service order.
        usage: Token counters (usually absent on streamed fragments).
        system_fingerprint: Backend configuration fingerprint.
    """

    id: Optional[str] = None
    object: Optional[str] = None
    model: Optional[str] = None
    created: int = 0
    choices: List[Choice] = Field(default_factory=list)
    usage: Optional[Usage] = None
    system_fingerprint: Optional[str] = None


__all__ = ["ChatResponse"]
