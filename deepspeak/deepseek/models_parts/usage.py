"""Token usage counters reported with a chat response."""
from __future__ import annotations

from pydantic import BaseModel


class Usage(BaseModel):
    """Usage counters; every field defaults to 0 when absent.

    ``total_tokens == prompt_tokens + completion_tokens`` is expected but not
    enforced.
    """

    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0
    prompt_cache_hit_tokens: int = 0
    prompt_cache_miss_tokens: int = 0


__all__ = ["Usage"]
