"""
Generic chat completion result.

`ChatCompletion` is what a `ChatClient` returns for a single-shot request: one
`ChatMessage` per choice plus response identifiers and usage.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, List, Optional

from .chat_message import ChatMessage
from .finish_reason import FinishReason
from .usage_details import UsageDetails


@dataclass
class ChatCompletion:
    """Completed (non-streaming) chat response.

    Attributes:
        choices: One message per returned choice, in service order.
        completion_id: Service-assigned response id.
        model_id: Model that produced the response.
        created_at: Creation time (UTC).
        finish_reason: First non-``None`` finish reason among the choices.
        usage: Token accounting, when reported.
        raw_representation: The provider response object.
    """

    choices: List[ChatMessage] = field(default_factory=list)
    completion_id: Optional[str] = None
    model_id: Optional[str] = None
    created_at: Optional[datetime] = None
    finish_reason: Optional[FinishReason] = None
    usage: Optional[UsageDetails] = None
    raw_representation: Any = None

    @property
    def message(self) -> Optional[ChatMessage]:
        """The first choice, or ``None`` when the response had no choices."""
        return self.choices[0] if self.choices else None

    @property
    def text(self) -> Optional[str]:
        """Text of the first choice."""
        msg = self.message
        return msg.text if msg is not None else None


__all__ = ["ChatCompletion"]
