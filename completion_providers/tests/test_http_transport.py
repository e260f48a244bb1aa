"""HttpxStreamingTransport against a mocked HTTP layer (respx)."""

import httpx
import pytest
import respx

from completion_providers.base.http import HttpxStreamingTransport, extract_error_message
from completion_providers.base.http import client as client_module
from completion_providers.base.models import ChatMessage, ChatRequest, OpenAiModel
from completion_providers.base.streaming import collect_stream
from completion_providers.base.errors import ErrorCode
from completion_providers.base.timeouts import get_timeout_config
from completion_providers.openai.adapter import to_open_ai_request
from completion_providers.openai.streaming import stream_completion

API_URL = "https://api.openai.com/v1"
URL = API_URL + "/chat/completions"

SSE_BODY = (
    'data: {"choices":[{"index":0,"delta":{"role":"assistant"}}]}\n\n'
    'data: {"choices":[{"index":0,"delta":{"content":"Hello"}}]}\n\n'
    ": keep-alive\n\n"
    'data: {"choices":[{"index":0,"delta":{"content":" world"}}]}\n\n'
    "data: [DONE]\n\n"
)


def _wire():
    return to_open_ai_request(ChatRequest.build(OpenAiModel.GPT_4, [ChatMessage.user("hi")]), OpenAiModel.GPT_4)


@pytest.mark.asyncio
@respx.mock
async def test_streams_sse_body_through_pipeline():
    route = respx.post(URL).mock(
        return_value=httpx.Response(200, text=SSE_BODY, headers={"Content-Type": "text/event-stream"})
    )
    async with httpx.AsyncClient() as client:
        transport = HttpxStreamingTransport(client)
        text, err = await collect_stream(stream_completion(transport, API_URL, "sk-test", _wire()))
    assert (text, err) == ("Hello world", None)  # nosec B101
    sent = route.calls.last.request
    assert sent.headers["Authorization"] == "Bearer sk-test"  # nosec B101
    assert b'"stream":true' in sent.content  # nosec B101


@pytest.mark.asyncio
@respx.mock
async def test_non_success_status_carries_backend_message():
    respx.post(URL).mock(
        return_value=httpx.Response(401, json={"error": {"message": "Incorrect API key provided", "type": "auth"}})
    )
    transport = HttpxStreamingTransport()
    try:
        text, err = await collect_stream(stream_completion(transport, API_URL, "sk-bad", _wire()))
    finally:
        await transport.aclose()
    assert text == ""  # nosec B101
    assert err.code is ErrorCode.AUTH and err.status_code == 401  # nosec B101
    assert err.message == "request failed (401): Incorrect API key provided"  # nosec B101


@pytest.mark.asyncio
@respx.mock
async def test_connect_error_is_unavailable():
    respx.post(URL).mock(side_effect=httpx.ConnectError("connection refused"))
    transport = HttpxStreamingTransport()
    try:
        _, err = await collect_stream(stream_completion(transport, API_URL, "sk-test", _wire()))
    finally:
        await transport.aclose()
    assert err.code is ErrorCode.UNAVAILABLE  # nosec B101


@pytest.mark.asyncio
@respx.mock
async def test_open_stream_yields_lines():
    respx.post(URL).mock(return_value=httpx.Response(200, text="data: a\n\ndata: b\n"))
    transport = HttpxStreamingTransport()
    try:
        async with transport.open_stream(URL, headers={}, body=b"{}", low_speed_timeout=None) as lines:
            got = [line async for line in lines]
    finally:
        await transport.aclose()
    assert [line for line in got if line] == ["data: a", "data: b"]  # nosec B101


def test_timeout_uses_low_speed_window():
    transport = HttpxStreamingTransport()
    cfg = get_timeout_config()
    assert transport._timeout(7.0).read == 7.0  # nosec B101
    unbounded = transport._timeout(None)
    assert unbounded.read is None  # nosec B101
    assert unbounded.connect == cfg.connect_timeout_seconds  # nosec B101
    assert transport._timeout(0).read is None  # nosec B101
    assert not transport.is_open  # nosec B101


@pytest.mark.asyncio
@respx.mock
@pytest.mark.parametrize("window, monitored", [(None, []), (0, []), (5.0, [5.0])])
async def test_throughput_floor_only_with_a_window(monkeypatch, window, monitored):
    seen = []

    def recording_monitor(lines, monitor):
        seen.append(monitor.window_seconds)
        return lines

    monkeypatch.setattr(client_module, "monitor_lines", recording_monitor)
    respx.post(URL).mock(return_value=httpx.Response(200, text="data: a\n"))
    transport = HttpxStreamingTransport()
    try:
        async with transport.open_stream(URL, headers={}, body=b"{}", low_speed_timeout=window) as lines:
            got = [line async for line in lines]
    finally:
        await transport.aclose()
    assert got == ["data: a"]  # nosec B101
    assert seen == monitored  # nosec B101
    assert not transport.is_open  # nosec B101


@pytest.mark.parametrize(
    "status, body, expected",
    [
        (500, b'{"error": {"message": "boom"}}', "request failed (500): boom"),
        (502, b"bad gateway", "request failed (502): bad gateway"),
        (503, b"", "request failed (503)"),
    ],
)
def test_extract_error_message(status, body, expected):
    assert extract_error_message(status, body) == expected  # nosec B101
