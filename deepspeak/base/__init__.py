"""
Base package of the deepspeak client.

Provider-agnostic pieces shared by adapters:
- Models: the generic chat contract (messages, options, completions, updates)
- Interfaces: the ``ChatClient`` Protocol
- Errors, cancellation, timeouts and structured logging
"""

from .cancellation import CancellationToken, CancelledError
from .errors import ErrorCode, ProviderError, classify_exception, classify_status
from .interfaces import ChatClient
from .models import (
    ChatClientMetadata,
    ChatCompletion,
    ChatMessage,
    ChatOptions,
    ChatRole,
    ContentPart,
    ContentPartType,
    FinishReason,
    StreamingChatUpdate,
    UsageDetails,
)
from .streaming import StreamMetrics, finalize_stream
from .timeouts import TimeoutConfig, get_timeout_config

__all__ = [
    # Models
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
    # Interfaces
    "ChatClient",
    # Errors
    "ErrorCode",
    "ProviderError",
    "classify_exception",
    "classify_status",
    # Timeouts & Cancellation
    "TimeoutConfig",
    "get_timeout_config",
    "CancellationToken",
    "CancelledError",
    # Streaming
    "StreamMetrics",
    "finalize_stream",
]
