"""DeepSeek adapter: wire models, translators, stream decoder and client."""

from .call_result import CallResult
from .client import DeepseekClient
from .models import (
    ChatRequest,
    ChatResponse,
    Choice,
    LogprobContent,
    Logprobs,
    Message,
    ModelInfo,
    ModelResponse,
    TopLogprob,
    Usage,
)
from .request_translator import build_chat_request
from .response_translator import (
    saturate_int32,
    to_chat_completion,
    to_chat_role,
    to_finish_reason,
    to_streaming_update,
    to_usage_details,
)
from .stream_decoder import ChoiceStream, iter_choices

__all__ = [
    "DeepseekClient",
    "CallResult",
    "ChoiceStream",
    "iter_choices",
    "build_chat_request",
    "to_chat_completion",
    "to_chat_role",
    "to_finish_reason",
    "to_streaming_update",
    "to_usage_details",
    "saturate_int32",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "Message",
    "Usage",
    "Logprobs",
    "LogprobContent",
    "TopLogprob",
    "ModelInfo",
    "ModelResponse",
]
