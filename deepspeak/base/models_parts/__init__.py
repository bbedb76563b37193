"""Models parts package public surface.

Re-exports the individual generic-contract DTOs; `deepspeak.base.models`
remains the primary import path.
"""

from .chat_role import ChatRole
from .content_part import ContentPart, ContentPartType
from .chat_message import ChatMessage
from .chat_options import ChatOptions
from .finish_reason import FinishReason
from .usage_details import UsageDetails
from .chat_completion import ChatCompletion
from .streaming_chat_update import StreamingChatUpdate
from .chat_client_metadata import ChatClientMetadata

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
