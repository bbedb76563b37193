"""Generic completion options."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional


@dataclass
class ChatOptions:
    """Caller-supplied generation options.

    Every field is optional; ``None`` means "keep the provider default".
    Provider-specific switches travel in ``additional_properties``.
    """

    model_id: Optional[str] = None
    frequency_penalty: Optional[float] = None
    max_output_tokens: Optional[int] = None
    presence_penalty: Optional[float] = None
    stop_sequences: Optional[List[str]] = None
    temperature: Optional[float] = None
    top_p: Optional[float] = None
    additional_properties: Optional[Dict[str, Any]] = None


__all__ = ["ChatOptions"]
