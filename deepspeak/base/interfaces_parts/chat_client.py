"""ChatClient Protocol (single-class module).

Defines the provider-agnostic chat interface that adapters satisfy.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Optional, Protocol, Sequence, runtime_checkable

from ..cancellation import CancellationToken
from ..models import ChatClientMetadata, ChatCompletion, ChatMessage, ChatOptions, StreamingChatUpdate


@runtime_checkable
class ChatClient(Protocol):
    """Minimal interface for chat-completion clients.

    Implementations translate ``ChatMessage`` / ``ChatOptions`` into their
    wire format and normalize results into ``ChatCompletion`` or a sequence of
    ``StreamingChatUpdate`` values. Failures surface as exceptions
    (``ProviderError`` for service errors, ``CancelledError`` on cancellation).
    """

    @property
    def metadata(self) -> ChatClientMetadata:
        """Provider name, endpoint and default model."""
        ...

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> ChatCompletion:
        """Execute a single-shot completion."""
        ...

    def complete_streaming(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamingChatUpdate]:
        """Return an async iterator of incremental updates."""
        ...

    def get_service(self, service_type: type, service_key: Any = None) -> Any:
        """Return ``self`` (or a component) when it provides ``service_type``."""
        ...


__all__ = ["ChatClient"]
