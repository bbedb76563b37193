"""
Provider-agnostic chat contract (DTOs) public surface.

Re-exports the one-class-per-file implementations under
``deepspeak.base.models_parts``.
"""

from .models_parts.chat_role import ChatRole
from .models_parts.content_part import ContentPart, ContentPartType
from .models_parts.chat_message import ChatMessage
from .models_parts.chat_options import ChatOptions
from .models_parts.finish_reason import FinishReason
from .models_parts.usage_details import UsageDetails
from .models_parts.chat_completion import ChatCompletion
from .models_parts.streaming_chat_update import StreamingChatUpdate
from .models_parts.chat_client_metadata import ChatClientMetadata

__all__ = [
    "ChatRole",
    "ContentPart",
    "ContentPartType",
    "ChatMessage",
    "ChatOptions",
    "FinishReason",
    "UsageDetails",
    "ChatCompletion",
    "StreamingChatUpdate",
    "ChatClientMetadata",
]
