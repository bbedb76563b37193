"""DeepSeek wire model parts; ``deepspeak.deepseek.models`` re-exports them."""

from .message import Message
from .chat_request import ChatRequest
from .usage import Usage
from .logprobs import Logprobs, LogprobContent, TopLogprob
from .choice import Choice
from .chat_response import ChatResponse
from .model_response import ModelInfo, ModelResponse

__all__ = [
    "Message",
    "ChatRequest",
    "Usage",
    "Logprobs",
    "LogprobContent",
    "TopLogprob",
    "Choice",
    "ChatResponse",
    "ModelInfo",
    "ModelResponse",
]
