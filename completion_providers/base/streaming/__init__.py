"""Streaming package for provider layer.

Exposes the stream item type, SSE framing and the low-speed monitor under a
single namespace.
"""

from .streaming import StreamDelta, accumulate_deltas, collect_stream
from .sse import iter_sse_data, parse_data_line
from .low_speed import LowSpeedAbort, LowSpeedMonitor, monitor_lines

__all__ = [
    "StreamDelta",
    "accumulate_deltas",
    "collect_stream",
    "iter_sse_data",
    "parse_data_line",
    "LowSpeedAbort",
    "LowSpeedMonitor",
    "monitor_lines",
]
