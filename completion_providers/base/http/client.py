"""Streaming HTTP transport for providers.

Purpose:
    Provide the ``StreamingTransport`` implementation used by adapters: one
    POST whose response body is consumed line by line. Timeouts derive from
    :func:`get_timeout_config` and the caller's low-speed window; no ad-hoc
    numeric literals are introduced here.

External dependencies:
    - ``httpx`` for the underlying asynchronous HTTP client.

Timeout strategy:
    - Connect and pool timeouts come from ``connect_timeout_seconds``.
    - The read timeout equals the low-speed window, so a window with no bytes
      at all aborts; :class:`LowSpeedMonitor` covers trickling streams.
    - Without a window (``None`` or non-positive) there is no read timeout
      and no throughput floor.

Error surface:
    - Non-2xx responses raise ``httpx.HTTPStatusError`` whose message carries
      the backend's ``{"error": {"message": ...}}`` text when present.
    - Every other failure is an ``httpx`` exception or :class:`LowSpeedAbort`;
      the streaming pipeline classifies them into ``TransportError``.

Lifecycle & cleanup:
    - A client passed in by the caller is never closed here. Otherwise the
      transport creates its client on the first request and closes it in
      :meth:`HttpxStreamingTransport.aclose`; a transport that never streamed
      holds no connection pool.
"""

from __future__ import annotations

import json
from contextlib import asynccontextmanager
from typing import AsyncIterator, Mapping, Optional

import httpx

from ..streaming.low_speed import LowSpeedMonitor, monitor_lines
from ..timeouts import get_timeout_config


def extract_error_message(status_code: int, body: bytes) -> str:
    """Build a readable message for a failed response.

    Uses ``error.message`` from an OpenAI-style JSON error body when present,
    otherwise the status code and the raw body text.
    """
    text = body.decode("utf-8", errors="replace").strip()
    try:
        payload = json.loads(text) if text else None
    except ValueError:
        payload = None
    if isinstance(payload, dict):
        err = payload.get("error")
        if isinstance(err, dict) and isinstance(err.get("message"), str):
            return f"request failed ({status_code}): {err['message']}"
    return f"request failed ({status_code}): {text}" if text else f"request failed ({status_code})"


class HttpxStreamingTransport:
    """``StreamingTransport`` backed by ``httpx.AsyncClient``."""

    def __init__(self, client: Optional[httpx.AsyncClient] = None) -> None:
        self._owns_client = client is None
        self._client = client

    @property
    def is_open(self) -> bool:
        """True once an ``httpx.AsyncClient`` is attached and not yet closed."""
        return self._client is not None and not self._client.is_closed

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient()
        return self._client

    def _timeout(self, low_speed_timeout: Optional[float]) -> httpx.Timeout:
        """Build the request timeout; no low-speed window means no read timeout."""
        cfg = get_timeout_config()
        window = low_speed_timeout if low_speed_timeout is not None and low_speed_timeout > 0 else None
        return httpx.Timeout(
            connect=cfg.connect_timeout_seconds,
            read=window,
            write=cfg.http_timeout_seconds,
            pool=cfg.connect_timeout_seconds,
        )

    @asynccontextmanager
    async def open_stream(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        low_speed_timeout: Optional[float] = None,
    ) -> AsyncIterator[AsyncIterator[str]]:
        """POST ``body`` to ``url`` and yield an async iterator over response lines.

        Leaving the context (including early ``aclose`` of a consumer) closes
        the response.
        """
        timeout = self._timeout(low_speed_timeout)
        async with self._get_client().stream(
            "POST", url, headers=dict(headers), content=body, timeout=timeout
        ) as response:
            if not response.is_success:
                raw = await response.aread()
                raise httpx.HTTPStatusError(
                    extract_error_message(response.status_code, raw),
                    request=response.request,
                    response=response,
                )
            lines: AsyncIterator[str] = response.aiter_lines()
            if timeout.read is not None:
                lines = monitor_lines(lines, LowSpeedMonitor(timeout.read))
            yield lines

    async def aclose(self) -> None:
        if self._owns_client and self._client is not None:
            client, self._client = self._client, None
            await client.aclose()


__all__ = ["HttpxStreamingTransport", "extract_error_message"]
