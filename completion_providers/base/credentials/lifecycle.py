"""Credential lifecycle for one provider instance.

States: *unauthenticated* and *authenticated*, where authenticated means the
config snapshot holds an ``api_key``.

- ``authenticate``: no-op when authenticated. Otherwise resolves the key from
  the environment, then from the credential store keyed by ``api_url``; raises
  :class:`CredentialsNotFoundError` when both are empty.
- ``reset``: best-effort delete from the store (failures are logged at WARNING
  and never raised), then clears the in-memory key.
- ``set_credential``: writes ``(CREDENTIAL_USERNAME, key bytes)`` to the store
  and, once the write succeeds, holds the key in memory. An empty key is
  ignored.

A concurrent ``authenticate`` racing a ``reset`` has no defined ordering; the
last config update wins.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..constants import CREDENTIAL_USERNAME
from ..errors import CredentialsNotFoundError, classify_exception
from ..interfaces import CredentialStore
from ..logging import LogContext, get_logger, normalized_log_event
from ..repositories.keys import KeysRepository
from .config_cell import ProviderConfigCell


class CredentialLifecycle:
    def __init__(
        self,
        provider: str,
        cell: ProviderConfigCell,
        store: CredentialStore,
        *,
        keys: Optional[KeysRepository] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.provider = provider
        self._cell = cell
        self._store = store
        self._keys = keys or KeysRepository(store)
        self._logger = logger or get_logger(f"providers.{provider}.auth")

    def _ctx(self) -> LogContext:
        cfg = self._cell.snapshot()
        return LogContext(
            provider=self.provider,
            model=cfg.model.id,
            api_url=cfg.api_url,
            settings_version=cfg.settings_version,
        )

    def is_authenticated(self) -> bool:
        return self._cell.snapshot().api_key is not None

    async def authenticate(self) -> None:
        cfg = self._cell.snapshot()
        if cfg.api_key is not None:
            return
        ctx = self._ctx()
        normalized_log_event(self._logger, "auth.start", ctx, phase="start", attempt=1, emitted=False)
        resolution = await self._keys.resolve(self.provider, cfg.api_url)
        if resolution.api_key is None:
            err = CredentialsNotFoundError(self.provider, cfg.api_url)
            normalized_log_event(
                self._logger,
                "auth.not_found",
                ctx,
                phase="finalize",
                attempt=1,
                error_code=err.code.value,
                emitted=False,
                level=logging.WARNING,
            )
            raise err
        self._cell.update(api_key=resolution.api_key)
        normalized_log_event(
            self._logger,
            "auth.resolved",
            ctx,
            phase="finalize",
            attempt=1,
            emitted=True,
            source=resolution.source,
        )

    async def reset(self) -> None:
        api_url = self._cell.snapshot().api_url
        ctx = self._ctx()
        try:
            await self._store.delete(api_url)
        except Exception as exc:  # logged, not raised
            normalized_log_event(
                self._logger,
                "auth.reset.store_error",
                ctx,
                phase="finalize",
                error_code=classify_exception(exc).value,
                emitted=False,
                level=logging.WARNING,
                error=str(exc) or exc.__class__.__name__,
            )
        finally:
            self._cell.update(api_key=None)
        normalized_log_event(self._logger, "auth.reset", ctx, phase="finalize", emitted=True)

    async def set_credential(self, api_key: str) -> None:
        if not api_key:
            return
        api_url = self._cell.snapshot().api_url
        await self._store.write(api_url, CREDENTIAL_USERNAME, api_key.encode("utf-8"))
        self._cell.update(api_key=api_key)
        normalized_log_event(self._logger, "credential.saved", self._ctx(), phase="finalize", emitted=True)


__all__ = ["CredentialLifecycle"]
