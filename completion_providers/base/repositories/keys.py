"""
Keys Repository

Purpose
- Centralize API key resolution for providers.
- Prefer environment variables; fall back to the credential store keyed by the
  provider's endpoint URL.
- Read only: writes and deletes belong to the credential lifecycle.

Design
- ``resolve`` never raises for a missing key; it reports ``source="none"``.
- A stored secret that is not valid UTF-8 is a protocol violation of the
  store contract and raises :class:`ProtocolError`.

Usage
- repo = KeysRepository(store)
- resolution = await repo.resolve("openai", "https://api.openai.com/v1")
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from ...config.env import resolve_provider_key
from ..errors import ProtocolError
from ..interfaces import CredentialStore


@dataclass
class KeyResolution:
    provider: str
    api_key: Optional[str] = field(repr=False)
    source: str  # "env", "store", "none"
    extra: Dict[str, Any] = field(default_factory=dict)


class KeysRepository:
    """
    Resolve provider credentials with a strict priority order:

    1) Environment variables (authoritative; the store is not queried)
    2) Credential store entry for the endpoint URL
    3) None
    """

    def __init__(self, store: CredentialStore) -> None:
        self._store = store

    async def get_api_key(self, provider: str, api_url: str) -> Optional[str]:
        return (await self.resolve(provider, api_url)).api_key

    async def resolve(self, provider: str, api_url: str) -> KeyResolution:
        p = (provider or "").lower().strip()
        val, used = resolve_provider_key(p)
        if val:
            return KeyResolution(provider=p, api_key=val, source="env", extra={"env_var": used})

        entry = await self._store.read(api_url)
        if entry is not None:
            username, secret = entry
            try:
                key = bytes(secret).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise ProtocolError(
                    "stored credential is not valid UTF-8", provider=p, raw=exc
                ) from exc
            if key:
                return KeyResolution(
                    provider=p, api_key=key, source="store", extra={"username": username}
                )

        return KeyResolution(provider=p, api_key=None, source="none")


__all__ = ["KeyResolution", "KeysRepository"]
