"""Token usage DTO for the generic contract."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass
class UsageDetails:
    """Token accounting for one completion.

    Attributes:
        input_token_count: Prompt tokens.
        output_token_count: Completion tokens.
        total_token_count: Total tokens as reported by the service.
        additional_counts: Provider-specific counters keyed by name
            (e.g. ``prompt_cache_hit_tokens``).
    """

    input_token_count: Optional[int] = None
    output_token_count: Optional[int] = None
    total_token_count: Optional[int] = None
    additional_counts: Dict[str, int] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Optional[int]]:
        """Token mapping in the shape the structured logger expects."""
        return {
            "prompt": self.input_token_count,
            "completion": self.output_token_count,
            "total": self.total_token_count,
        }


__all__ = ["UsageDetails"]
