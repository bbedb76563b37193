"""
Structured content part model for generic chat messages.

A message's content may be split into several parts. Only ``text`` parts carry
text that is sent to the service; other part types are ignored by the request
translator.
"""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Literal, Optional


ContentPartType = Literal[
    "text",          # Plain text content
    "json",          # JSON content as string
    "image",         # Image reference (path/URL/base64)
    "other",         # Catch-all
]


@dataclass
class ContentPart:
    """A single piece of message content.

    Attributes:
        type: The semantic kind of the part, e.g. ``"text"``.
        text: Textual content (meaningful for ``"text"`` parts).
        data: Optional payload for non-text parts.
    """

    type: ContentPartType
    text: Optional[str] = None
    data: Optional[Dict[str, Any]] = None

    @classmethod
    def of_text(cls, text: str) -> "ContentPart":
        return cls(type="text", text=text)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the object."""
        return asdict(self)


__all__ = [
    "ContentPart",
    "ContentPartType",
]
