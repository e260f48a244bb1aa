import asyncio

import httpx
import pytest

from completion_providers.base.errors import (
    ErrorCode,
    ProviderError,
    TransportError,
    classify_exception,
    code_for_status,
    to_transport_error,
)
from completion_providers.base.streaming import LowSpeedAbort


class StatusErr(Exception):
    def __init__(self, status_code):
        super().__init__(f"status {status_code}")
        self.status_code = status_code


@pytest.mark.parametrize(
    "status, code",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (507, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_status_mapping(status, code):
    assert code_for_status(status) is code  # nosec B101
    assert classify_exception(StatusErr(status)) is code  # nosec B101


def test_exception_types():
    assert classify_exception(asyncio.TimeoutError()) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ReadTimeout("slow")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(LowSpeedAbort(1.0, 5.0)) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(httpx.ConnectError("refused")) is ErrorCode.UNAVAILABLE  # nosec B101


def test_message_heuristics():
    assert classify_exception(RuntimeError("Request timed out")) is ErrorCode.TIMEOUT  # nosec B101
    assert classify_exception(RuntimeError("Invalid API key")) is ErrorCode.AUTH  # nosec B101
    assert classify_exception(RuntimeError("Service Unavailable")) is ErrorCode.UNAVAILABLE  # nosec B101
    assert classify_exception(RuntimeError("something odd")) is ErrorCode.UNKNOWN  # nosec B101


def test_http_status_error_uses_response_status():
    request = httpx.Request("POST", "https://x/v1/chat/completions")
    exc = httpx.HTTPStatusError("boom", request=request, response=httpx.Response(429, request=request))
    assert classify_exception(exc) is ErrorCode.RATE_LIMIT  # nosec B101


def test_to_transport_error_wraps_and_passes_through():
    wrapped = to_transport_error(StatusErr(503), provider="openai", model="gpt-4")
    assert isinstance(wrapped, TransportError)  # nosec B101
    assert (wrapped.code, wrapped.status_code, wrapped.model) == (ErrorCode.UNAVAILABLE, 503, "gpt-4")  # nosec B101
    typed = ProviderError(code=ErrorCode.AUTH, message="m", provider="openai")
    assert to_transport_error(typed, provider="openai") is typed  # nosec B101
    assert classify_exception(typed) is ErrorCode.AUTH  # nosec B101


def test_provider_error_str():
    err = ProviderError(code=ErrorCode.TIMEOUT, message="slow", provider="openai", model="gpt-4")
    assert "openai" in str(err) and "timeout" in str(err) and "slow" in str(err)  # nosec B101
