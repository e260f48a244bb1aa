"""Streaming chat completions over an OpenAI-style SSE endpoint.

``stream_completion`` validates the credential eagerly (raising
``MissingCredentialError`` before any I/O) and returns a lazy async iterator.
The HTTP call starts on first iteration. Each SSE fragment contributes the
last choice's ``delta.content``; fragments without text are dropped. The
first failure ends the stream with exactly one error item:

- malformed fragment                         -> ``ProtocolError``
- connection failure, non-2xx, low-speed abort -> ``TransportError``
- ``{"error": ...}`` fragment                -> ``TransportError`` (``SERVER_ERROR``)

Closing the iterator early closes the HTTP response.
"""

from __future__ import annotations

import logging
from typing import AsyncIterator, Optional

from pydantic import ValidationError

from ..base.errors import (
    ErrorCode,
    MissingCredentialError,
    ProtocolError,
    ProviderError,
    TransportError,
    to_transport_error,
)
from ..base.interfaces import StreamingTransport
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.streaming import StreamDelta, iter_sse_data
from .wire import Request, ResponseStreamEvent

PROVIDER_NAME = "openai"

_logger = get_logger("providers.openai.stream")


def completions_url(api_url: str) -> str:
    return f"{api_url.rstrip('/')}/chat/completions"


def parse_fragment(data: str, *, model: Optional[str] = None) -> ResponseStreamEvent:
    """Parse one SSE payload.

    Raises:
        ProtocolError: when the payload is not a JSON object of the expected shape.
    """
    try:
        return ResponseStreamEvent.model_validate_json(data)
    except ValidationError as exc:
        raise ProtocolError(
            f"malformed stream fragment: {exc.errors()[0].get('msg', 'invalid payload')}",
            provider=PROVIDER_NAME,
            model=model,
            raw=exc,
        ) from exc


def stream_completion(
    transport: StreamingTransport,
    api_url: str,
    api_key: Optional[str],
    request: Request,
    low_speed_timeout: Optional[float] = None,
    *,
    ctx: Optional[LogContext] = None,
    logger: Optional[logging.Logger] = None,
) -> AsyncIterator[StreamDelta]:
    """Return the lazy delta stream for ``request``.

    Raises:
        MissingCredentialError: when ``api_key`` is empty; no I/O is performed.
    """
    if not api_key:
        raise MissingCredentialError(PROVIDER_NAME, request.model)
    return _deltas(
        transport,
        completions_url(api_url),
        {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
            "Accept": "text/event-stream",
        },
        request,
        low_speed_timeout,
        ctx or LogContext(provider=PROVIDER_NAME, model=request.model, api_url=api_url),
        logger or _logger,
    )


async def _deltas(
    transport: StreamingTransport,
    url: str,
    headers: dict,
    request: Request,
    low_speed_timeout: Optional[float],
    ctx: LogContext,
    logger: logging.Logger,
) -> AsyncIterator[StreamDelta]:
    model = request.model
    normalized_log_event(
        logger,
        "stream.start",
        ctx,
        phase="start",
        emitted=None,
        tokens=None,
        messages=len(request.messages),
        temperature=request.temperature,
    )
    emitted = 0
    error: Optional[ProviderError] = None
    try:
        async with transport.open_stream(
            url, headers=headers, body=request.to_json_bytes(), low_speed_timeout=low_speed_timeout
        ) as lines:
            async for data in iter_sse_data(lines):
                event = parse_fragment(data, model=model)
                if event.error is not None:
                    raise TransportError(
                        event.error.message,
                        provider=PROVIDER_NAME,
                        model=model,
                        code=ErrorCode.SERVER_ERROR,
                    )
                text = event.delta_text()
                if text is None:
                    continue
                emitted += 1
                yield StreamDelta(provider=PROVIDER_NAME, model=model, text=text)
    except ProviderError as exc:
        error = exc
    except Exception as exc:
        error = to_transport_error(exc, provider=PROVIDER_NAME, model=model)

    if error is not None:
        normalized_log_event(
            logger,
            "stream.error",
            ctx,
            phase="finalize",
            error_code=error.code.value,
            emitted=emitted > 0,
            tokens=None,
            level=logging.WARNING,
            emitted_count=emitted,
            error=error.message,
        )
        yield StreamDelta(provider=PROVIDER_NAME, model=model, error=error)
        return

    normalized_log_event(
        logger,
        "stream.end",
        ctx,
        phase="finalize",
        emitted=emitted > 0,
        tokens=None,
        emitted_count=emitted,
    )


__all__ = ["stream_completion", "parse_fragment", "completions_url", "PROVIDER_NAME"]
