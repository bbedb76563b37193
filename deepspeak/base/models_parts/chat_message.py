"""
Generic chat message DTO.

Defines `ChatMessage`, the provider-agnostic message used both as request input
and as the per-choice output of a completion. Content may be plain text or a
list of `ContentPart` objects.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Union

from .chat_role import ChatRole
from .content_part import ContentPart


@dataclass
class ChatMessage:
    """A chat message in the generic contract.

    Attributes:
        role: Author role; a `ChatRole` or an equal plain string.
        content: Plain text, a list of content parts, or ``None``.
        raw_representation: The provider object this message was built from
            (set on completion output, ``None`` on caller input).
        additional_properties: Free-form extras (e.g. ``"logprobs"``).
    """

    role: Union[ChatRole, str]
    content: Union[str, List[ContentPart], None] = None
    raw_representation: Any = None
    additional_properties: Optional[Dict[str, Any]] = None

    @classmethod
    def from_text(cls, role: Union[ChatRole, str], text: Optional[str]) -> "ChatMessage":
        """Build a message holding a single text value (``None`` keeps it empty)."""
        return cls(role=role, content=text)

    def text_parts(self) -> List[str]:
        """Return the text of every text part in order (plain content is one part)."""
        if self.content is None:
            return []
        if isinstance(self.content, str):
            return [self.content]
        return [p.text for p in self.content if p.type == "text" and p.text is not None]

    @property
    def text(self) -> Optional[str]:
        """Concatenated text parts, or ``None`` when the message has no text."""
        parts = self.text_parts()
        return "".join(parts) if parts else None


__all__ = ["ChatMessage"]
