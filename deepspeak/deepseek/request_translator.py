"""Generic chat contract -> DeepSeek ``ChatRequest``.

Messages keep their order. Roles other than user/assistant/system are
dropped, as are messages whose concatenated text is empty or whitespace.
Options only overwrite a wire field when they are set; ``stream`` is never
touched here.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence

from ..base.models import ChatMessage, ChatOptions, ChatRole
from .models import ChatRequest, Message

_ROLE_MAP: Dict[str, str] = {
    ChatRole.USER.value: "user",
    ChatRole.ASSISTANT.value: "assistant",
    ChatRole.SYSTEM.value: "system",
}


def _wire_role(role: Any) -> Optional[str]:
    value = role.value if isinstance(role, ChatRole) else role
    return _ROLE_MAP.get(value) if isinstance(value, str) else None


def _to_wire_messages(messages: Sequence[ChatMessage]) -> List[Message]:
    out: List[Message] = []
    for message in messages:
        role = _wire_role(message.role)
        if role is None:
            continue
        text = "".join(message.text_parts())
        if not text.strip():
            continue
        out.append(Message(role=role, content=text))
    return out


def _option_fields(options: ChatOptions) -> Dict[str, Any]:
    fields: Dict[str, Any] = {
        "model": options.model_id,
        "frequency_penalty": options.frequency_penalty,
        "max_tokens": options.max_output_tokens,
        "presence_penalty": options.presence_penalty,
        "stop": list(options.stop_sequences) if options.stop_sequences is not None else None,
        "temperature": options.temperature,
        "top_p": options.top_p,
    }
    extra = options.additional_properties or {}
    logprobs = extra.get("logprobs")
    if isinstance(logprobs, bool):
        fields["logprobs"] = logprobs
    top_logprobs = extra.get("top_logprobs")
    # bool is an int subclass; True must not become top_logprobs=1
    if isinstance(top_logprobs, int) and not isinstance(top_logprobs, bool):
        fields["top_logprobs"] = top_logprobs
    return {k: v for k, v in fields.items() if v is not None}


def build_chat_request(messages: Sequence[ChatMessage], options: Optional[ChatOptions] = None) -> ChatRequest:
    """Translate generic messages and options into a wire ``ChatRequest``."""
    fields = _option_fields(options) if options is not None else {}
    return ChatRequest(messages=_to_wire_messages(messages), **fields)


__all__ = ["build_chat_request"]
