"""CredentialStore Protocol (single-class module).

Narrow interface to a secure credential store keyed by endpoint URL.
"""

from __future__ import annotations

from typing import Optional, Protocol, Tuple, runtime_checkable


@runtime_checkable
class CredentialStore(Protocol):
    """Async key/value store for ``(username, secret bytes)`` pairs.

    Implementations raise on backend failures; absence of an entry is
    reported as ``None`` by :meth:`read` and is not an error for
    :meth:`delete`.
    """

    async def read(self, url: str) -> Optional[Tuple[str, bytes]]:
        """Return the stored pair for ``url`` or ``None``."""
        ...

    async def write(self, url: str, username: str, secret: bytes) -> None:
        """Create or replace the entry for ``url``."""
        ...

    async def delete(self, url: str) -> None:
        """Remove the entry for ``url`` if present."""
        ...
