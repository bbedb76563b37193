"""Incremental update emitted by a streaming completion."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .chat_role import ChatRole
from .finish_reason import FinishReason


@dataclass
class StreamingChatUpdate:
    """One decoded streaming fragment for a single choice.

    ``text`` holds the delta text for this fragment (``None`` when the fragment
    carried no message). ``raw_representation`` is the provider choice object.
    """

    choice_index: int = 0
    finish_reason: Optional[FinishReason] = None
    role: Optional[ChatRole] = None
    text: Optional[str] = None
    raw_representation: Any = None
    additional_properties: Optional[Dict[str, Any]] = None


__all__ = ["StreamingChatUpdate"]
