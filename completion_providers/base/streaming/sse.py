"""Server-sent events framing for OpenAI-style streaming endpoints.

Only ``data:`` lines carry payloads. Blank lines, comments (``:keep-alive``)
and other field lines (``event:``, ``id:``) are ignored. A ``[DONE]`` payload
ends the stream even if the server keeps the connection open.
"""

from __future__ import annotations

from typing import AsyncIterator

from ..constants import SSE_DATA_PREFIX, SSE_DONE_SENTINEL

_FIELD = SSE_DATA_PREFIX.rstrip()


def parse_data_line(line: str) -> str | None:
    """Return the payload of a ``data:`` line, or ``None`` for any other line."""
    line = line.rstrip("\r\n")
    if not line.startswith(_FIELD):
        return None
    payload = line[len(_FIELD):]
    # A single space after the colon is part of the framing, not the payload.
    if payload.startswith(" "):
        payload = payload[1:]
    return payload


async def iter_sse_data(lines: AsyncIterator[str]) -> AsyncIterator[str]:
    """Yield ``data:`` payloads from a line stream until ``[DONE]`` or exhaustion."""
    async for line in lines:
        payload = parse_data_line(line)
        if payload is None or not payload.strip():
            continue
        if payload.strip() == SSE_DONE_SENTINEL:
            return
        yield payload


__all__ = ["parse_data_line", "iter_sse_data"]
