"""deepspeak package

Asynchronous client for the DeepSeek chat-completion API.

Purpose:
    Let code written against the provider-agnostic chat contract
    (``deepspeak.base``) talk to DeepSeek, and expose the native wire-level
    client for callers that want DeepSeek's own request/response shapes.

Public API (re-exported):
    - Version: ``__version__``
    - Client: :class:`DeepseekClient`, :class:`ChoiceStream`
    - Wire models: :class:`ChatRequest`, :class:`ChatResponse`, :class:`Message`
    - Generic contract: :class:`ChatMessage`, :class:`ChatOptions`,
      :class:`ChatRole`, :class:`ChatCompletion`, :class:`StreamingChatUpdate`,
      :class:`ChatClient`
    - Errors & cancellation: :class:`ProviderError`, :class:`ErrorCode`,
      :class:`CancellationToken`, :class:`CancelledError`
"""

from .base.cancellation import CancellationToken, CancelledError
from .base.errors import ErrorCode, ProviderError
from .base.interfaces import ChatClient
from .base.models import (
    ChatClientMetadata,
    ChatCompletion,
    ChatMessage,
    ChatOptions,
    ChatRole,
    ContentPart,
    FinishReason,
    StreamingChatUpdate,
    UsageDetails,
)
from .deepseek import (
    CallResult,
    ChatRequest,
    ChatResponse,
    Choice,
    ChoiceStream,
    DeepseekClient,
    Message,
    ModelResponse,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "DeepseekClient",
    "ChoiceStream",
    "CallResult",
    "ChatRequest",
    "ChatResponse",
    "Choice",
    "Message",
    "ModelResponse",
    "ChatClient",
    "ChatClientMetadata",
    "ChatCompletion",
    "ChatMessage",
    "ChatOptions",
    "ChatRole",
    "ContentPart",
    "FinishReason",
    "StreamingChatUpdate",
    "UsageDetails",
    "ProviderError",
    "ErrorCode",
    "CancellationToken",
    "CancelledError",
]
