"""Streaming pipeline behaviour against a scripted transport."""

import httpx
import pytest

from completion_providers.base.errors import (
    ErrorCode,
    MissingCredentialError,
    ProtocolError,
    TransportError,
)
from completion_providers.base.models import ChatMessage, ChatRequest, OpenAiModel
from completion_providers.base.streaming import LowSpeedAbort, collect_stream
from completion_providers.openai import OpenAiCompletionProvider
from completion_providers.openai.adapter import to_open_ai_request
from completion_providers.openai.streaming import completions_url, stream_completion

from fakes import FakeTransport, chunk, sse

API_URL = "https://api.openai.com/v1"


def _wire(model=OpenAiModel.GPT_4):
    req = ChatRequest.build(model, [ChatMessage.user("hi")], temperature=0.3)
    return to_open_ai_request(req, OpenAiModel.GPT_4O)


async def _drain(stream):
    return [d async for d in stream]


@pytest.mark.asyncio
async def test_text_fragments_yield_in_order():
    transport = FakeTransport(
        [sse(chunk(role="assistant")), sse(chunk("Hello")), ": keep-alive", "", sse(chunk(" world")), sse("[DONE]")]
    )
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert [d.text for d in items] == ["Hello", " world"]  # nosec B101
    assert all(d.error is None and d.provider == "openai" and d.model == "gpt-4" for d in items)  # nosec B101
    assert transport.closed  # nosec B101


@pytest.mark.asyncio
async def test_request_shape_and_headers():
    transport = FakeTransport([sse("[DONE]")])
    await _drain(stream_completion(transport, API_URL + "/", "sk-test", _wire(), 12.5))
    sent = transport.requests[0]
    assert sent["url"] == "https://api.openai.com/v1/chat/completions"  # nosec B101
    assert sent["headers"]["Authorization"] == "Bearer sk-test"  # nosec B101
    assert sent["headers"]["Content-Type"] == "application/json"  # nosec B101
    assert sent["body"]["stream"] is True  # nosec B101
    assert sent["body"]["temperature"] == 0.3  # nosec B101
    assert sent["low_speed_timeout"] == 12.5  # nosec B101


def test_completions_url_joins_path():
    assert completions_url("http://localhost:8080/v1") == "http://localhost:8080/v1/chat/completions"  # nosec B101


@pytest.mark.asyncio
async def test_malformed_fragment_terminates_with_protocol_error():
    transport = FakeTransport(
        [sse(chunk("Hello")), sse({"choices": [{"delta": {}}]}), "data: {not json", sse(chunk("late"))]
    )
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert [d.text for d in items[:-1]] == ["Hello"]  # nosec B101
    assert isinstance(items[-1].error, ProtocolError)  # nosec B101
    assert items[-1].error.code is ErrorCode.VALIDATION  # nosec B101
    assert transport.lines_served == 3  # nosec B101


@pytest.mark.asyncio
async def test_error_after_several_fragments_keeps_their_text():
    transport = FakeTransport([sse(chunk("Hello")), sse(chunk(" world")), "data: {not json"])
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert [d.text for d in items[:-1]] == ["Hello", " world"]  # nosec B101
    assert isinstance(items[-1].error, ProtocolError)  # nosec B101


@pytest.mark.asyncio
async def test_non_object_fragment_is_protocol_error():
    transport = FakeTransport([sse("[1, 2]")])
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert len(items) == 1 and isinstance(items[0].error, ProtocolError)  # nosec B101


def test_missing_credential_raises_before_io():
    transport = FakeTransport([sse(chunk("never"))])
    with pytest.raises(MissingCredentialError) as ei:
        stream_completion(transport, API_URL, None, _wire())
    assert ei.value.code is ErrorCode.AUTH  # nosec B101
    assert transport.calls == 0  # nosec B101


@pytest.mark.asyncio
async def test_iterator_is_lazy():
    transport = FakeTransport([sse(chunk("a"))])
    stream = stream_completion(transport, API_URL, "sk-test", _wire())
    assert transport.calls == 0  # nosec B101
    await _drain(stream)
    assert transport.calls == 1  # nosec B101


@pytest.mark.asyncio
async def test_http_status_error_becomes_transport_error():
    request = httpx.Request("POST", completions_url(API_URL))
    response = httpx.Response(401, request=request)
    failure = httpx.HTTPStatusError("request failed (401): Incorrect API key", request=request, response=response)
    transport = FakeTransport(enter_error=failure)
    items = await _drain(stream_completion(transport, API_URL, "sk-bad", _wire()))
    assert len(items) == 1  # nosec B101
    err = items[0].error
    assert isinstance(err, TransportError)  # nosec B101
    assert err.code is ErrorCode.AUTH and err.status_code == 401  # nosec B101
    assert "Incorrect API key" in err.message  # nosec B101


@pytest.mark.asyncio
async def test_mid_stream_disconnect_keeps_partial_text():
    transport = FakeTransport([sse(chunk("Hel")), httpx.RemoteProtocolError("peer closed connection")])
    text, err = await collect_stream(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert text == "Hel"  # nosec B101
    assert isinstance(err, TransportError) and err.code is ErrorCode.UNAVAILABLE  # nosec B101
    assert transport.closed  # nosec B101


@pytest.mark.asyncio
async def test_low_speed_abort_is_timeout():
    transport = FakeTransport([sse(chunk("a")), LowSpeedAbort(3.0, 5.0)])
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert items[-1].error.code is ErrorCode.TIMEOUT  # nosec B101
    assert "too slow" in items[-1].error.message  # nosec B101


@pytest.mark.asyncio
async def test_error_fragment_is_server_error():
    transport = FakeTransport([sse(chunk("a")), sse({"error": {"message": "overloaded", "type": "server_error"}})])
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert items[0].text == "a"  # nosec B101
    assert isinstance(items[1].error, TransportError)  # nosec B101
    assert items[1].error.code is ErrorCode.SERVER_ERROR  # nosec B101
    assert items[1].error.message == "overloaded"  # nosec B101


@pytest.mark.asyncio
async def test_no_items_after_error():
    transport = FakeTransport([httpx.ReadError("reset"), sse(chunk("never"))])
    items = await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert len(items) == 1 and items[0].is_error()  # nosec B101


@pytest.mark.asyncio
async def test_early_close_releases_transport():
    transport = FakeTransport([sse(chunk("a")), sse(chunk("b")), sse(chunk("c"))])
    stream = stream_completion(transport, API_URL, "sk-test", _wire())
    first = await stream.__anext__()
    assert first.text == "a"  # nosec B101
    await stream.aclose()
    assert transport.closed  # nosec B101
    assert transport.lines_served == 1  # nosec B101


@pytest.mark.asyncio
async def test_stream_logs_start_and_end(log_events):
    transport = FakeTransport([sse(chunk("a")), sse("[DONE]")])
    await _drain(stream_completion(transport, API_URL, "sk-secret-value", _wire()))
    names = [e["event"] for e in log_events]
    assert names == ["stream.start", "stream.end"]  # nosec B101
    assert log_events[-1]["emitted_count"] == 1  # nosec B101
    assert all("sk-secret-value" not in str(e) for e in log_events)  # nosec B101


@pytest.mark.asyncio
async def test_stream_error_event_carries_code(log_events):
    transport = FakeTransport(["data: nope"])
    await _drain(stream_completion(transport, API_URL, "sk-test", _wire()))
    err = [e for e in log_events if e["event"] == "stream.error"]
    assert err and err[0]["error_code"] == "validation"  # nosec B101


@pytest.mark.asyncio
async def test_provider_stream_requires_authentication(provider, transport):
    with pytest.raises(MissingCredentialError):
        await provider.stream_completion(ChatRequest.build(OpenAiModel.GPT_4, [ChatMessage.user("x")]))
    assert transport.calls == 0  # nosec B101


@pytest.mark.asyncio
async def test_provider_stream_end_to_end(store):
    transport = FakeTransport([sse(chunk("Hello")), sse(chunk(" world")), sse("[DONE]")])
    provider = OpenAiCompletionProvider(OpenAiModel.GPT_4O, API_URL, transport, store, low_speed_timeout=7.0)
    await provider.set_credential("sk-test")
    stream = await provider.stream_completion(ChatRequest.build(OpenAiModel.GPT_4, [ChatMessage.user("x")]))
    text, err = await collect_stream(stream)
    assert (text, err) == ("Hello world", None)  # nosec B101
    assert transport.requests[0]["low_speed_timeout"] == 7.0  # nosec B101
    assert transport.requests[0]["body"]["model"] == "gpt-4"  # nosec B101
