"""Explicitly owned holder for the host's current completion provider.

The host creates one :class:`ProviderSlot` at startup, hands it to the
components that need the active provider, and calls :meth:`ProviderSlot.close`
at shutdown. Replacement and in-place updates are serialized by an
``asyncio.Lock``; :meth:`get` is a plain read.
"""

from __future__ import annotations

import asyncio
from typing import Awaitable, Callable, Optional, Union

from .interfaces import CompletionProvider


class ProviderSlot:
    def __init__(self, provider: Optional[CompletionProvider] = None) -> None:
        self._provider = provider
        self._lock = asyncio.Lock()

    def get(self) -> CompletionProvider:
        if self._provider is None:
            raise LookupError("no completion provider installed")
        return self._provider

    async def replace(self, provider: CompletionProvider) -> Optional[CompletionProvider]:
        """Install ``provider`` and close the previous one; returns the previous one."""
        async with self._lock:
            previous, self._provider = self._provider, provider
        if previous is not None and previous is not provider:
            await previous.aclose()
        return previous

    async def update_current(
        self, fn: Callable[[CompletionProvider], Union[None, Awaitable[None]]]
    ) -> None:
        """Apply ``fn`` to the current provider while holding the slot lock."""
        async with self._lock:
            result = fn(self.get())
            if asyncio.iscoroutine(result):
                await result

    async def close(self) -> None:
        async with self._lock:
            previous, self._provider = self._provider, None
        if previous is not None:
            await previous.aclose()


__all__ = ["ProviderSlot"]
