"""Low-speed abort for streaming reads.

A stream is aborted when the bytes received over a full observation window
average less than ``LOW_SPEED_LIMIT_BYTES_PER_SEC``. A window in which no line
arrives at all is covered by the transport's read timeout, which is set to the
same duration.
"""

from __future__ import annotations

import time
from typing import AsyncIterator, Callable

from ..constants import LOW_SPEED_LIMIT_BYTES_PER_SEC


class LowSpeedAbort(TimeoutError):
    """Raised when throughput stays below the floor for a whole window."""

    def __init__(self, observed_bps: float, window_seconds: float) -> None:
        super().__init__(
            f"stream too slow: {observed_bps:.1f} B/s over {window_seconds:g}s "
            f"(floor {LOW_SPEED_LIMIT_BYTES_PER_SEC} B/s)"
        )
        self.observed_bps = observed_bps
        self.window_seconds = window_seconds


class LowSpeedMonitor:
    """Tracks received bytes per window and raises :class:`LowSpeedAbort`."""

    def __init__(
        self,
        window_seconds: float,
        *,
        limit_bytes_per_sec: int = LOW_SPEED_LIMIT_BYTES_PER_SEC,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")
        self.window_seconds = window_seconds
        self.limit_bytes_per_sec = limit_bytes_per_sec
        self._clock = clock
        self._window_start = clock()
        self._window_bytes = 0

    def observe(self, nbytes: int) -> None:
        """Record ``nbytes`` received now; raise when the closed window was too slow."""
        self._window_bytes += nbytes
        now = self._clock()
        elapsed = now - self._window_start
        if elapsed < self.window_seconds:
            return
        rate = self._window_bytes / elapsed
        if rate < self.limit_bytes_per_sec:
            raise LowSpeedAbort(rate, self.window_seconds)
        self._window_start = now
        self._window_bytes = 0


async def monitor_lines(lines: AsyncIterator[str], monitor: LowSpeedMonitor) -> AsyncIterator[str]:
    """Pass lines through while feeding their size (plus newline) to ``monitor``."""
    async for line in lines:
        monitor.observe(len(line.encode("utf-8")) + 1)
        yield line


__all__ = ["LowSpeedAbort", "LowSpeedMonitor", "monitor_lines"]
