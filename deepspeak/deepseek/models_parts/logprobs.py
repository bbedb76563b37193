"""
Log probability models attached to a choice when ``logprobs`` was requested.

The client passes these through untouched (see ``additional_properties``
on the generic output).
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field


class TopLogprob(BaseModel):
    """One alternative token at a position."""

    token: str = ""
    logprob: float = 0.0
    bytes: Optional[List[int]] = None


class LogprobContent(BaseModel):
    """Log probability of one output token plus its top alternatives."""

    token: str = ""
    logprob: float = 0.0
    bytes: Optional[List[int]] = None
    top_logprobs: List[TopLogprob] = Field(default_factory=list)


class Logprobs(BaseModel):
    """Per-token log probability information for a choice."""

    content: List[LogprobContent] = Field(default_factory=list)


__all__ = ["TopLogprob", "LogprobContent", "Logprobs"]
