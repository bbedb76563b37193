"""Descriptive metadata about a chat client."""
from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class ChatClientMetadata:
    """Provider name, endpoint and default model of a `ChatClient`."""

    provider_name: str
    provider_uri: Optional[str] = None
    model_id: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


__all__ = ["ChatClientMetadata"]
