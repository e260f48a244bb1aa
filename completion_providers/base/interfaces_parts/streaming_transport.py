"""StreamingTransport Protocol (single-class module).

Interface to the raw HTTP layer used by streaming adapters.
"""

from __future__ import annotations

from typing import AsyncContextManager, AsyncIterator, Mapping, Optional, Protocol, runtime_checkable


@runtime_checkable
class StreamingTransport(Protocol):
    """Issues one streaming POST and exposes the response body as lines.

    Entering the returned context manager performs the request; leaving it
    closes the response. Failures (connection, non-2xx status, low-speed
    abort) are raised either on entry or while iterating.
    """

    def open_stream(
        self,
        url: str,
        *,
        headers: Mapping[str, str],
        body: bytes,
        low_speed_timeout: Optional[float] = None,
    ) -> AsyncContextManager[AsyncIterator[str]]:
        ...
