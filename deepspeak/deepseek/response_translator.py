"""DeepSeek wire responses -> generic chat contract.

Covers single-shot responses (``to_chat_completion``) and streamed choices
(``to_streaming_update``). Integer counters are narrowed into the signed
32-bit range with saturation, never wrap-around.
"""
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from ..base.models import (
    ChatCompletion,
    ChatMessage,
    ChatRole,
    FinishReason,
    StreamingChatUpdate,
    UsageDetails,
)
from .models import ChatResponse, Choice, Message, Usage

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

LOGPROBS_KEY = "logprobs"

_FINISH_REASONS: Dict[str, FinishReason] = {r.value: r for r in FinishReason}


def saturate_int32(value: int) -> int:
    """Clamp ``value`` into ``[-2**31, 2**31 - 1]``."""
    if value > INT32_MAX:
        return INT32_MAX
    if value < INT32_MIN:
        return INT32_MIN
    return value


def to_finish_reason(value: Optional[str]) -> Optional[FinishReason]:
    """Map a wire finish reason; unknown, empty and ``None`` map to ``None``."""
    return _FINISH_REASONS.get(value) if value else None


def to_chat_role(message: Optional[Message]) -> ChatRole:
    """``user`` and ``system`` map through; anything else is ``ASSISTANT``."""
    role = message.role if message is not None else None
    if role == "user":
        return ChatRole.USER
    if role == "system":
        return ChatRole.SYSTEM
    return ChatRole.ASSISTANT


def to_usage_details(usage: Usage) -> UsageDetails:
    return UsageDetails(
        input_token_count=saturate_int32(usage.prompt_tokens),
        output_token_count=saturate_int32(usage.completion_tokens),
        total_token_count=saturate_int32(usage.total_tokens),
        additional_counts={
            "prompt_cache_hit_tokens": saturate_int32(usage.prompt_cache_hit_tokens),
            "prompt_cache_miss_tokens": saturate_int32(usage.prompt_cache_miss_tokens),
        },
    )


def _source_message(choice: Choice) -> Optional[Message]:
    return choice.delta if choice.delta is not None else choice.message


def _logprob_properties(choice: Choice) -> Optional[Dict[str, Any]]:
    if choice.logprobs is None:
        return None
    return {LOGPROBS_KEY: choice.logprobs}


def to_chat_message(choice: Choice) -> ChatMessage:
    source = _source_message(choice)
    return ChatMessage(
        role=to_chat_role(source),
        content=source.content if source is not None else None,
        raw_representation=choice,
        additional_properties=_logprob_properties(choice),
    )


def to_chat_completion(response: ChatResponse) -> ChatCompletion:
    """Build a ``ChatCompletion``; the first non-``None`` finish reason wins."""
    completion = ChatCompletion(
        completion_id=response.id,
        model_id=response.model,
        created_at=datetime.fromtimestamp(response.created, tz=timezone.utc),
        raw_representation=response,
    )
    for choice in response.choices:
        if completion.finish_reason is None:
            completion.finish_reason = to_finish_reason(choice.finish_reason)
        completion.choices.append(to_chat_message(choice))
    if response.usage is not None:
        completion.usage = to_usage_details(response.usage)
    return completion


def to_streaming_update(choice: Choice) -> StreamingChatUpdate:
    source = _source_message(choice)
    return StreamingChatUpdate(
        choice_index=saturate_int32(choice.index),
        finish_reason=to_finish_reason(choice.finish_reason),
        role=to_chat_role(source),
        text=source.content if source is not None else None,
        raw_representation=choice,
        additional_properties=_logprob_properties(choice),
    )


__all__ = [
    "INT32_MIN",
    "INT32_MAX",
    "LOGPROBS_KEY",
    "saturate_int32",
    "to_finish_reason",
    "to_chat_role",
    "to_usage_details",
    "to_chat_message",
    "to_chat_completion",
    "to_streaming_update",
]
