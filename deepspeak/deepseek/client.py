"""DeepSeek chat-completion client.

Purpose
-------
Single facade over the DeepSeek HTTP API with two thin surfaces over one
transport core:

- Native surface (``list_models``, ``chat``, ``chat_stream``): wire models in
  and out. A non-success HTTP status returns ``None`` and records
  ``error_message`` (``HTTP <status>: <raw body>``); it never raises.
- Generic surface (``complete``, ``complete_streaming``): satisfies the
  ``ChatClient`` Protocol by translating the generic contract to and from the
  wire models, and raises ``ProviderError`` on failure.

The ``*_result`` methods return a tagged ``CallResult`` and leave
``error_message`` untouched, so one client can be shared by concurrent tasks.

External dependencies
---------------------
- ``httpx.AsyncClient`` for transport and streamed bodies.
- Pydantic wire models for JSON encoding and decoding.

Failure modes
-------------
- Transport errors (connect failures, timeouts) and malformed JSON bodies
  propagate as raised by ``httpx`` / pydantic.
- A cancelled ``CancellationToken`` raises ``CancelledError``.
- Missing credential at construction raises ``ProviderError(code=AUTH)``.
"""

from __future__ import annotations

import logging
import math
from typing import Any, AsyncIterator, Optional, Sequence

import httpx

from ..base.cancellation import CancellationToken, await_cancellable
from ..base.constants import FAILED_RESPONSE_MESSAGE, MISSING_API_KEY_ERROR, PROVIDER_NAME
from ..base.errors import ErrorCode, ProviderError, classify_exception, classify_status, is_retryable
from ..base.http import build_timeout, configure_httpx_client, create_httpx_client
from ..base.logging import LogContext, get_logger, log_event, normalized_log_event
from ..base.models import ChatClientMetadata, ChatCompletion, ChatMessage, ChatOptions, StreamingChatUpdate
from ..base.timeouts import get_timeout_config, parse_positive_float
from ..config import get_provider_config
from ..config.defaults import CHAT_COMPLETIONS_PATH, DEEPSEEK_DEFAULT_MODEL, MODELS_PATH
from .call_result import CallResult
from .models import ChatRequest, ChatResponse, ModelResponse
from .request_translator import build_chat_request
from .response_translator import to_chat_completion, to_streaming_update
from .stream_decoder import ChoiceStream

_JSON_HEADERS = {"Content-Type": "application/json"}


class DeepseekClient:
    """Asynchronous DeepSeek client implementing the ``ChatClient`` Protocol.

    Args:
        api_key: Bearer credential. Falls back to configuration
            (``DEEPSEEK_API_KEY``, ``.env``, config file).
        base_url: API root; defaults to ``https://api.deepseek.com``.
        model: Model used when a request does not name one.
        timeout_seconds: Transport timeout; defaults to 60 seconds.
        http_client: Optional pre-built ``httpx.AsyncClient``. It is
            reconfigured with the base URL, auth header and timeout, and the
            facade owns (and eventually closes) it.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout_seconds: Optional[float] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        cfg = get_provider_config(
            PROVIDER_NAME,
            {"api_key": api_key, "base_url": base_url, "model": model, "timeout_seconds": timeout_seconds},
        )
        key = cfg.get("api_key")
        if not key:
            raise ProviderError(code=ErrorCode.AUTH, message=MISSING_API_KEY_ERROR, provider=PROVIDER_NAME)
        self._base_url: str = str(cfg["base_url"])
        self._default_model: str = str(cfg.get("model") or DEEPSEEK_DEFAULT_MODEL)
        self._timeout = parse_positive_float(cfg.get("timeout_seconds"), get_timeout_config().http_timeout_seconds)
        if http_client is not None:
            self._http = configure_httpx_client(
                http_client, base_url=self._base_url, api_key=key, timeout_seconds=self._timeout
            )
        else:
            self._http = create_httpx_client(base_url=self._base_url, api_key=key, timeout_seconds=self._timeout)
        self._closed = False
        self._logger = get_logger("deepspeak.deepseek")
        self.error_message: Optional[str] = None

    # ------------------------------------------------------------------ props

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    @property
    def default_model(self) -> str:
        return self._default_model

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def metadata(self) -> ChatClientMetadata:
        return ChatClientMetadata(
            provider_name=PROVIDER_NAME,
            provider_uri=self._base_url,
            model_id=self._default_model,
        )

    @property
    def timeout(self) -> float:
        """Current transport timeout in seconds."""
        return self._timeout

    @property
    def closed(self) -> bool:
        return self._closed

    def set_timeout(self, seconds: float) -> None:
        """Change the transport timeout for subsequent calls.

        Raises:
            ValueError: ``seconds`` is not a positive finite number; the previous
                timeout stays.
        """
        if not math.isfinite(seconds) or seconds <= 0:
            raise ValueError(f"timeout must be a positive finite number, got {seconds!r}")
        self._timeout = float(seconds)
        self._http.timeout = build_timeout(self._timeout)

    def get_service(self, service_type: Optional[type], service_key: Any = None) -> Any:
        """Return this client when unkeyed and an instance of ``service_type``."""
        if service_key is None and service_type is not None and isinstance(self, service_type):
            return self
        return None

    # -------------------------------------------------------------- transport

    def _ctx(self, endpoint: str, model: Optional[str] = None) -> LogContext:
        return LogContext(provider=PROVIDER_NAME, model=model, endpoint=endpoint)

    def _ensure_open(self) -> None:
        if self._closed:
            raise RuntimeError("DeepseekClient is closed")

    def _prepare(self, request: ChatRequest, *, stream: bool) -> ChatRequest:
        update: dict[str, Any] = {"stream": stream}
        if request.model is None:
            update["model"] = self._default_model
        return request.model_copy(update=update)

    async def _send(
        self,
        request: httpx.Request,
        ctx: LogContext,
        cancellation: Optional[CancellationToken],
        *,
        stream: bool = False,
    ) -> httpx.Response:
        self._ensure_open()
        try:
            return await await_cancellable(self._http.send(request, stream=stream), cancellation)
        except httpx.HTTPError as exc:
            normalized_log_event(
                self._logger,
                "transport.error",
                ctx,
                phase="request",
                attempt=1,
                error_code=classify_exception(exc).value,
                emitted=False,
                tokens=None,
                error=str(exc),
            )
            raise

    async def _failure(self, response: httpx.Response, ctx: LogContext, event: str) -> CallResult[Any]:
        body = (await response.aread()).decode("utf-8", errors="replace")
        diagnostic = f"HTTP {response.status_code}: {body}"
        normalized_log_event(
            self._logger,
            event,
            ctx,
            phase="response",
            attempt=1,
            error_code=classify_status(response.status_code).value,
            emitted=False,
            tokens=None,
            http_status=response.status_code,
        )
        return CallResult.failure(diagnostic, response.status_code)

    # ---------------------------------------------------------- tagged calls

    async def list_models_result(self, cancellation: Optional[CancellationToken] = None) -> CallResult[ModelResponse]:
        """``GET /models`` returning a tagged result."""
        ctx = self._ctx(MODELS_PATH)
        log_event(self._logger, "models.start", ctx)
        response = await self._send(self._http.build_request("GET", MODELS_PATH), ctx, cancellation)
        if not response.is_success:
            return await self._failure(response, ctx, "models.error")
        models = ModelResponse.model_validate_json(response.content)
        log_event(self._logger, "models.end", ctx, count=len(models.data))
        return CallResult.success(models, response.status_code)

    async def chat_result(
        self, request: ChatRequest, cancellation: Optional[CancellationToken] = None
    ) -> CallResult[ChatResponse]:
        """Single-shot ``POST /chat/completions`` (``stream`` forced off)."""
        wire = self._prepare(request, stream=False)
        ctx = self._ctx(CHAT_COMPLETIONS_PATH, wire.model)
        normalized_log_event(
            self._logger, "chat.start", ctx, phase="start", attempt=1, emitted=False, tokens=None,
            messages=len(wire.messages),
        )
        http_request = self._http.build_request(
            "POST", CHAT_COMPLETIONS_PATH, content=wire.to_json(), headers=_JSON_HEADERS
        )
        response = await self._send(http_request, ctx, cancellation)
        if not response.is_success:
            return await self._failure(response, ctx, "chat.error")
        parsed = ChatResponse.model_validate_json(response.content)
        ctx.response_id = parsed.id
        normalized_log_event(
            self._logger,
            "chat.end",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=bool(parsed.choices),
            tokens=parsed.usage.model_dump() if parsed.usage is not None else None,
        )
        return CallResult.success(parsed, response.status_code)

    async def chat_stream_result(
        self, request: ChatRequest, cancellation: Optional[CancellationToken] = None
    ) -> CallResult[ChoiceStream]:
        """Streaming ``POST /chat/completions`` (``stream`` forced on).

        Returns once response headers arrive; the body is read by the
        returned ``ChoiceStream``.
        """
        wire = self._prepare(request, stream=True)
        ctx = self._ctx(CHAT_COMPLETIONS_PATH, wire.model)
        normalized_log_event(
            self._logger, "stream.start", ctx, phase="start", attempt=1, emitted=False, tokens=None,
            messages=len(wire.messages),
        )
        http_request = self._http.build_request(
            "POST",
            CHAT_COMPLETIONS_PATH,
            content=wire.to_json(),
            headers={**_JSON_HEADERS, "Accept": "text/event-stream"},
        )
        response = await self._send(http_request, ctx, cancellation, stream=True)
        if not response.is_success:
            try:
                return await self._failure(response, ctx, "stream.error")
            finally:
                await response.aclose()
        log_event(self._logger, "stream.open", ctx, http_status=response.status_code)
        stream = ChoiceStream(
            response.aiter_lines(),
            on_close=response.aclose,
            cancellation=cancellation,
            logger=self._logger,
            ctx=ctx,
        )
        return CallResult.success(stream, response.status_code)

    # --------------------------------------------------------- native surface

    def _unwrap(self, result: CallResult[Any]) -> Any:
        if not result.ok:
            self.error_message = result.error
            return None
        return result.value

    async def list_models(self, cancellation: Optional[CancellationToken] = None) -> Optional[ModelResponse]:
        """Models available to the credential, or ``None`` (see ``error_message``)."""
        return self._unwrap(await self.list_models_result(cancellation))

    async def chat(
        self, request: ChatRequest, cancellation: Optional[CancellationToken] = None
    ) -> Optional[ChatResponse]:
        """Single-shot completion, or ``None`` on a non-success status."""
        return self._unwrap(await self.chat_result(request, cancellation))

    async def chat_stream(
        self, request: ChatRequest, cancellation: Optional[CancellationToken] = None
    ) -> Optional[ChoiceStream]:
        """Streamed completion as a ``ChoiceStream``, or ``None`` on a non-success status."""
        return self._unwrap(await self.chat_stream_result(request, cancellation))

    # -------------------------------------------------------- generic surface

    def _raise_failed(self, result: CallResult[Any], model: Optional[str]) -> None:
        message = FAILED_RESPONSE_MESSAGE
        if result.error and result.error.strip():
            message = f"{FAILED_RESPONSE_MESSAGE}: {result.error}"
        code = classify_status(result.status)
        raise ProviderError(
            code=code,
            message=message,
            provider=PROVIDER_NAME,
            model=model,
            http_status=result.status,
            retryable=is_retryable(code),
        )

    async def complete(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> ChatCompletion:
        """Generic single-shot completion.

        Raises:
            ProviderError: the service answered with a non-success status.
        """
        request = build_chat_request(messages, options)
        result = await self.chat_result(request, cancellation)
        if not result.ok or result.value is None:
            self._raise_failed(result, request.model or self._default_model)
        return to_chat_completion(result.value)  # type: ignore[arg-type]

    async def complete_streaming(
        self,
        messages: Sequence[ChatMessage],
        options: Optional[ChatOptions] = None,
        cancellation: Optional[CancellationToken] = None,
    ) -> AsyncIterator[StreamingChatUpdate]:
        """Generic streamed completion yielding one update per decoded choice.

        Leaving the iteration early closes the underlying stream.
        """
        request = build_chat_request(messages, options)
        result = await self.chat_stream_result(request, cancellation)
        if not result.ok or result.value is None:
            self._raise_failed(result, request.model or self._default_model)
        stream: ChoiceStream = result.value  # type: ignore[assignment]
        try:
            async for choice in stream:
                yield to_streaming_update(choice)
        finally:
            await stream.aclose()

    # -------------------------------------------------------------- lifecycle

    async def aclose(self) -> None:
        """Release the HTTP client; safe to call more than once."""
        if self._closed:
            return
        self._closed = True
        await self._http.aclose()
        log_event(self._logger, "client.closed", LogContext(provider=PROVIDER_NAME), level=logging.DEBUG)

    async def __aenter__(self) -> "DeepseekClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()


__all__ = ["DeepseekClient"]
