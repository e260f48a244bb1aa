"""In-process ``CredentialStore`` for tests and ephemeral sessions.

Entries live in a dict guarded by an ``asyncio.Lock``; nothing is persisted.
"""

from __future__ import annotations

import asyncio
from typing import Dict, Optional, Tuple


class InMemoryCredentialStore:
    def __init__(self, entries: Optional[Dict[str, Tuple[str, bytes]]] = None) -> None:
        self._entries: Dict[str, Tuple[str, bytes]] = dict(entries or {})
        self._lock = asyncio.Lock()

    async def read(self, url: str) -> Optional[Tuple[str, bytes]]:
        async with self._lock:
            return self._entries.get(url)

    async def write(self, url: str, username: str, secret: bytes) -> None:
        async with self._lock:
            self._entries[url] = (username, bytes(secret))

    async def delete(self, url: str) -> None:
        async with self._lock:
            self._entries.pop(url, None)

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["InMemoryCredentialStore"]
