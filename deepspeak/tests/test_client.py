"""Tests for ``DeepseekClient`` over ``httpx.MockTransport`` (no live network)."""
from __future__ import annotations

import asyncio
import json
from typing import List

import httpx
import pytest

from deepspeak.base.cancellation import CancellationToken, CancelledError
from deepspeak.base.errors import ErrorCode, ProviderError
from deepspeak.base.interfaces import ChatClient
from deepspeak.base.models import ChatMessage, ChatOptions, ChatRole, FinishReason
from deepspeak.deepseek.client import DeepseekClient
from deepspeak.deepseek.models import ChatRequest, Message
from deepspeak.tests.utils import chunk, mock_http_client, sse_body

COMPLETION = {
    "id": "chatcmpl-42",
    "object": "chat.completion",
    "model": "deepseek-chat",
    "created": 1700000000,
    "choices": [
        {"index": 0, "message": {"role": "assistant", "content": "Hello!"}, "finish_reason": "stop"}
    ],
    "usage": {
        "prompt_tokens": 9,
        "completion_tokens": 3,
        "total_tokens": 12,
        "prompt_cache_hit_tokens": 0,
        "prompt_cache_miss_tokens": 9,
    },
    "system_fingerprint": "fp_1",
}


def _client(handler, **kwargs) -> DeepseekClient:
    return DeepseekClient("sk-live-123", http_client=mock_http_client(handler), **kwargs)


def _request(**kwargs) -> ChatRequest:
    return ChatRequest(messages=[Message.user("Hi")], **kwargs)


def test_missing_api_key_raises_auth_error():
    with pytest.raises(ProviderError) as info:
        DeepseekClient()
    assert info.value.code is ErrorCode.AUTH  # nosec B101 - pytest assert in tests
    assert info.value.message == "missing_api_key"  # nosec B101 - pytest assert in tests


def test_api_key_and_model_from_environment(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_API_KEY", "sk-env")
    monkeypatch.setenv("DEEPSEEK_MODEL", "deepseek-reasoner")
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=COMPLETION)

    async def run():
        async with DeepseekClient(http_client=mock_http_client(handler)) as client:
            await client.chat(_request())

    asyncio.run(run())
    assert seen[0].headers["Authorization"] == "Bearer sk-env"  # nosec B101 - pytest assert in tests
    assert json.loads(seen[0].content)["model"] == "deepseek-reasoner"  # nosec B101 - pytest assert in tests


def test_chat_sends_bearer_default_model_and_forces_stream_off():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=COMPLETION)

    async def run():
        client = _client(handler)
        try:
            return await client.chat(_request(stream=True))
        finally:
            await client.aclose()

    response = asyncio.run(run())
    req = seen[0]
    body = json.loads(req.content)
    assert req.method == "POST"  # nosec B101 - pytest assert in tests
    assert str(req.url) == "https://api.deepseek.com/chat/completions"  # nosec B101 - pytest assert in tests
    assert req.headers["Authorization"] == "Bearer sk-live-123"  # nosec B101 - pytest assert in tests
    assert req.headers["Content-Type"] == "application/json"  # nosec B101 - pytest assert in tests
    assert body["stream"] is False and body["model"] == "deepseek-chat"  # nosec B101 - pytest assert in tests
    assert response.choices[0].message.content == "Hello!"  # nosec B101 - pytest assert in tests
    assert response.usage.total_tokens == 12  # nosec B101 - pytest assert in tests


def test_chat_does_not_mutate_caller_request():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=COMPLETION)

    request = _request(stream=True)

    async def run():
        async with _client(handler) as client:
            await client.chat(request)

    asyncio.run(run())
    assert request.stream is True and request.model is None  # nosec B101 - pytest assert in tests


def test_chat_error_status_sets_diagnostic_and_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, content=b'{"error":"bad key"}')

    async def run():
        async with _client(handler) as client:
            result = await client.chat(_request())
            return result, client.error_message

    result, diagnostic = asyncio.run(run())
    assert result is None  # nosec B101 - pytest assert in tests
    assert diagnostic == 'HTTP 401: {"error":"bad key"}'  # nosec B101 - pytest assert in tests


def test_chat_result_is_tagged_and_leaves_error_message_alone():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(503, content=b"busy")

    async def run():
        async with _client(handler) as client:
            result = await client.chat_result(_request())
            return result, client.error_message

    result, diagnostic = asyncio.run(run())
    assert not result.ok and result.value is None  # nosec B101 - pytest assert in tests
    assert result.error == "HTTP 503: busy" and result.status == 503  # nosec B101 - pytest assert in tests
    assert diagnostic is None  # nosec B101 - pytest assert in tests


def test_malformed_success_body_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=b"not json")

    async def run():
        async with _client(handler) as client:
            await client.chat(_request())

    with pytest.raises(ValueError):
        asyncio.run(run())


def test_transport_error_propagates():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    async def run():
        async with _client(handler) as client:
            await client.chat(_request())

    with pytest.raises(httpx.ConnectError):
        asyncio.run(run())


def test_list_models():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(
            200,
            json={
                "object": "list",
                "data": [
                    {"id": "deepseek-chat", "object": "model", "owned_by": "deepseek"},
                    {"id": "deepseek-reasoner", "object": "model", "owned_by": "deepseek", "context": 65536},
                ],
            },
        )

    async def run():
        async with _client(handler) as client:
            return await client.list_models()

    models = asyncio.run(run())
    assert seen[0].method == "GET" and seen[0].url.path == "/models"  # nosec B101 - pytest assert in tests
    assert models.ids() == ["deepseek-chat", "deepseek-reasoner"]  # nosec B101 - pytest assert in tests
    assert models.data[1].model_extra == {"context": 65536}  # nosec B101 - pytest assert in tests


def test_list_models_error_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(402, content=b"Insufficient Balance")

    async def run():
        async with _client(handler) as client:
            return await client.list_models(), client.error_message

    models, diagnostic = asyncio.run(run())
    assert models is None and diagnostic == "HTTP 402: Insufficient Balance"  # nosec B101 - pytest assert in tests


def test_chat_stream_forces_stream_on_and_decodes_choices():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        body = sse_body([chunk(role="assistant"), chunk("Hel"), chunk("lo", finish="stop")])
        return httpx.Response(200, content=body, headers={"Content-Type": "text/event-stream"})

    async def run():
        async with _client(handler) as client:
            stream = await client.chat_stream(_request(stream=False))
            return [c.delta.content async for c in stream]

    contents = asyncio.run(run())
    assert json.loads(seen[0].content)["stream"] is True  # nosec B101 - pytest assert in tests
    assert contents == [None, "Hel", "lo"]  # nosec B101 - pytest assert in tests


def test_chat_stream_error_status_returns_none():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(429, content=b"slow down")

    async def run():
        async with _client(handler) as client:
            return await client.chat_stream(_request()), client.error_message

    stream, diagnostic = asyncio.run(run())
    assert stream is None and diagnostic == "HTTP 429: slow down"  # nosec B101 - pytest assert in tests


def test_complete_translates_both_directions():
    seen: List[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json=COMPLETION)

    async def run():
        async with _client(handler) as client:
            return await client.complete(
                [ChatMessage.from_text(ChatRole.SYSTEM, "terse"), ChatMessage.from_text(ChatRole.USER, "Hi")],
                ChatOptions(temperature=0.0, additional_properties={"logprobs": True}),
            )

    completion = asyncio.run(run())
    body = json.loads(seen[0].content)
    assert body["messages"] == [  # nosec B101 - pytest assert in tests
        {"role": "system", "content": "terse"},
        {"role": "user", "content": "Hi"},
    ]
    assert body["temperature"] == 0.0 and body["logprobs"] is True  # nosec B101 - pytest assert in tests
    assert completion.text == "Hello!"  # nosec B101 - pytest assert in tests
    assert completion.finish_reason is FinishReason.STOP  # nosec B101 - pytest assert in tests
    assert completion.usage.additional_counts["prompt_cache_miss_tokens"] == 9  # nosec B101 - pytest assert in tests


def test_complete_raises_with_diagnostic():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(401, content=b'{"error":"bad key"}')

    async def run():
        async with _client(handler) as client:
            await client.complete([ChatMessage.from_text(ChatRole.USER, "Hi")])

    with pytest.raises(ProviderError) as info:
        asyncio.run(run())
    err = info.value
    assert err.message == 'Failed to get response: HTTP 401: {"error":"bad key"}'  # nosec B101 - pytest assert in tests
    assert err.code is ErrorCode.AUTH and err.http_status == 401  # nosec B101 - pytest assert in tests
    assert 'HTTP 401: {"error":"bad key"}' in str(err)  # nosec B101 - pytest assert in tests


def test_complete_streaming_yields_updates():
    def handler(request: httpx.Request) -> httpx.Response:
        body = sse_body([chunk("A", role="assistant"), chunk("B", finish="length")])
        return httpx.Response(200, content=body)

    async def run():
        async with _client(handler) as client:
            return [u async for u in client.complete_streaming([ChatMessage.from_text(ChatRole.USER, "Hi")])]

    updates = asyncio.run(run())
    assert [u.text for u in updates] == ["A", "B"]  # nosec B101 - pytest assert in tests
    assert updates[0].role is ChatRole.ASSISTANT  # nosec B101 - pytest assert in tests
    assert updates[1].finish_reason is FinishReason.LENGTH  # nosec B101 - pytest assert in tests


def test_complete_streaming_raises_on_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(500, content=b"boom")

    async def run():
        async with _client(handler) as client:
            async for _ in client.complete_streaming([ChatMessage.from_text(ChatRole.USER, "Hi")]):
                pass

    with pytest.raises(ProviderError) as info:
        asyncio.run(run())
    assert info.value.code is ErrorCode.SERVER_ERROR  # nosec B101 - pytest assert in tests
    assert info.value.retryable is True  # nosec B101 - pytest assert in tests


def test_cancelled_token_aborts_call():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=COMPLETION)

    async def run():
        token = CancellationToken()
        token.cancel("not needed")
        async with _client(handler) as client:
            await client.chat(_request(), cancellation=token)

    with pytest.raises(CancelledError):
        asyncio.run(run())


def test_cancel_interrupts_in_flight_request():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, json=COMPLETION)

    async def run():
        token = CancellationToken()
        asyncio.get_running_loop().call_later(0.05, token.cancel, "user abort")
        async with _client(handler) as client:
            await client.chat(_request(), cancellation=token)

    with pytest.raises(CancelledError, match="user abort"):
        asyncio.run(run())


def test_cancel_interrupts_stream_waiting_for_headers():
    async def handler(request: httpx.Request) -> httpx.Response:
        await asyncio.sleep(5)
        return httpx.Response(200, content=sse_body([chunk("late")]))

    async def run():
        token = CancellationToken()
        asyncio.get_running_loop().call_later(0.05, token.cancel, "user abort")
        async with _client(handler) as client:
            await client.chat_stream(_request(), cancellation=token)

    with pytest.raises(CancelledError, match="user abort"):
        asyncio.run(run())


def test_reused_token_keeps_no_children_from_finished_streams():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, content=sse_body([chunk("a"), chunk("b", finish="stop")]))

    async def run():
        token = CancellationToken()
        async with _client(handler) as client:
            for _ in range(20):
                stream = await client.chat_stream(_request(), cancellation=token)
                assert [c.delta.content async for c in stream] == ["a", "b"]  # nosec B101 - pytest assert in tests
                await stream.aclose()
            updates = client.complete_streaming([ChatMessage.from_text(ChatRole.USER, "Hi")], cancellation=token)
            await updates.__anext__()
            await updates.aclose()
        return token

    token = asyncio.run(run())
    assert token.child_count == 0 and token.cancelled is False  # nosec B101 - pytest assert in tests


def test_set_timeout_rejects_invalid_values_and_keeps_previous():
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=COMPLETION)

    async def run():
        async with _client(handler) as client:
            default = client.timeout
            with pytest.raises(ValueError):
                client.set_timeout(0)
            with pytest.raises(ValueError):
                client.set_timeout(-5)
            with pytest.raises(ValueError):
                client.set_timeout(float("nan"))
            with pytest.raises(ValueError):
                client.set_timeout(float("inf"))
            kept = client.timeout
            client.set_timeout(5)
            return default, kept, client.timeout

    default, kept, updated = asyncio.run(run())
    assert default == 60.0 and kept == 60.0 and updated == 5.0  # nosec B101 - pytest assert in tests


def test_timeout_from_environment(monkeypatch):
    monkeypatch.setenv("DEEPSEEK_TIMEOUT_SECONDS", "15")

    async def run():
        async with _client(lambda r: httpx.Response(200, json=COMPLETION)) as client:
            return client.timeout

    assert asyncio.run(run()) == 15.0  # nosec B101 - pytest assert in tests


def test_aclose_is_idempotent_and_blocks_further_calls():
    async def run():
        client = _client(lambda r: httpx.Response(200, json=COMPLETION))
        await client.aclose()
        await client.aclose()
        with pytest.raises(RuntimeError):
            await client.chat(_request())
        return client.closed

    assert asyncio.run(run()) is True  # nosec B101 - pytest assert in tests


def test_metadata_and_get_service():
    async def run():
        async with _client(lambda r: httpx.Response(200, json=COMPLETION), model="deepseek-reasoner") as client:
            return client, client.metadata

    client, meta = asyncio.run(run())
    assert meta.provider_name == "deepseek"  # nosec B101 - pytest assert in tests
    assert meta.provider_uri == "https://api.deepseek.com"  # nosec B101 - pytest assert in tests
    assert meta.model_id == "deepseek-reasoner"  # nosec B101 - pytest assert in tests
    assert isinstance(client, ChatClient)  # nosec B101 - pytest assert in tests
    assert client.get_service(DeepseekClient) is client  # nosec B101 - pytest assert in tests
    assert client.get_service(ChatClient) is client  # nosec B101 - pytest assert in tests
    assert client.get_service(DeepseekClient, "keyed") is None  # nosec B101 - pytest assert in tests
    assert client.get_service(str) is None  # nosec B101 - pytest assert in tests
