"""
DeepSeek wire models public surface.

Pydantic v2 models mirroring the service's JSON (snake_case). One class (or a
small family) per file under ``deepspeak.deepseek.models_parts``.
"""

from .models_parts.message import Message
from .models_parts.chat_request import ChatRequest
from .models_parts.usage import Usage
from .models_parts.logprobs import Logprobs, LogprobContent, TopLogprob
from .models_parts.choice import Choice
from .models_parts.chat_response import ChatResponse
from .models_parts.model_response import ModelInfo, ModelResponse

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
