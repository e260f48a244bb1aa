"""Streaming primitives for provider layer.

Keeps streaming concerns separate from core request/response DTOs. A stream is
a lazy, forward-only sequence of :class:`StreamDelta` items; a failure is
delivered in-band as the final item so text already received stays usable.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import AsyncIterator, Iterable, List, Optional, Tuple

from ..errors import ProviderError


@dataclass(frozen=True)
class StreamDelta:
    """Represents one incremental item of a streaming completion.

    Fields:
      provider: canonical provider name
      model: model id the request was sent with
      text: textual delta (``None`` on the terminal error item)
      error: typed failure; when set this is the last item of the stream
    """

    provider: str
    model: str
    text: Optional[str] = None
    error: Optional[ProviderError] = None

    def is_error(self) -> bool:
        return self.error is not None


def accumulate_deltas(deltas: Iterable[StreamDelta]) -> Tuple[str, Optional[ProviderError]]:
    """Join a finished stream into ``(text, error)``.

    - Concatenates text deltas in arrival order.
    - Returns the terminal error (if any) alongside the partial text received
      before it.
    """
    parts: List[str] = []
    error: Optional[ProviderError] = None
    for delta in deltas:
        if delta.error is not None:
            error = delta.error
            break
        if delta.text:
            parts.append(delta.text)
    return "".join(parts), error


async def collect_stream(stream: AsyncIterator[StreamDelta]) -> Tuple[str, Optional[ProviderError]]:
    """Drain an async delta stream and accumulate it (see :func:`accumulate_deltas`)."""
    items: List[StreamDelta] = [delta async for delta in stream]
    return accumulate_deltas(items)


__all__ = [
    "StreamDelta",
    "accumulate_deltas",
    "collect_stream",
]
