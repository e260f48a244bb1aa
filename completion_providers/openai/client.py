"""OpenAI completion provider.

Composes the pieces of the completion core for the OpenAI-style backend:

- configuration snapshot owned by a :class:`ProviderConfigCell`
- credential lifecycle (environment, then credential store)
- request translation (:mod:`.adapter`)
- SSE streaming pipeline (:mod:`.streaming`)
- token counting off the event loop (:mod:`.tokens`)

Every public call reads one config snapshot up front, so ``update`` never
affects a stream that has already started.
"""

from __future__ import annotations

from concurrent.futures import Executor
from typing import Any, AsyncIterator, Iterable, List, Mapping, Optional

from ..base.credentials import CredentialLifecycle, ProviderConfigCell
from ..base.interfaces import CompletionProvider, CredentialStore, StreamingTransport
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    ChatRequest,
    CustomOpenAiModel,
    LanguageModel,
    OpenAiModel,
    OpenAiModelSelector,
    ProviderConfig,
    parse_open_ai_model,
)
from ..base.streaming import StreamDelta
from ..config.defaults import OPENAI_DEFAULT_BASE_URL, OPENAI_DEFAULT_MODEL
from .adapter import to_open_ai_request
from .streaming import PROVIDER_NAME, stream_completion
from .tokens import count_open_ai_tokens
from .wire import Request


class OpenAiCompletionProvider(CompletionProvider):
    """``CompletionProvider`` for OpenAI and OpenAI-compatible endpoints."""

    def __init__(
        self,
        model: OpenAiModelSelector,
        api_url: str,
        transport: StreamingTransport,
        store: CredentialStore,
        *,
        low_speed_timeout: Optional[float] = None,
        settings_version: int = 0,
        available_models_from_settings: Iterable[OpenAiModelSelector] = (),
        executor: Optional[Executor] = None,
        owns_transport: bool = False,
    ) -> None:
        self._cell = ProviderConfigCell(
            ProviderConfig(
                api_url=api_url,
                model=model,
                low_speed_timeout=low_speed_timeout,
                settings_version=settings_version,
                available_models_from_settings=tuple(available_models_from_settings),
            )
        )
        self._transport = transport
        self._owns_transport = owns_transport
        self._executor = executor
        self._credentials = CredentialLifecycle(PROVIDER_NAME, self._cell, store)
        self._logger = get_logger("providers.openai")

    @classmethod
    def from_config(
        cls,
        cfg: Mapping[str, Any],
        *,
        transport: StreamingTransport,
        store: CredentialStore,
        **kwargs: Any,
    ) -> "OpenAiCompletionProvider":
        """Build a provider from a merged ``get_provider_config("openai")`` mapping.

        Raises:
            ValueError: when ``model`` or an ``available_models`` entry is invalid.
        """
        return cls(
            parse_open_ai_model(cfg.get("model") or OPENAI_DEFAULT_MODEL),
            str(cfg.get("base_url") or OPENAI_DEFAULT_BASE_URL),
            transport,
            store,
            low_speed_timeout=cfg.get("low_speed_timeout"),
            settings_version=int(cfg.get("settings_version") or 0),
            available_models_from_settings=[parse_open_ai_model(m) for m in cfg.get("available_models") or ()],
            **kwargs,
        )

    @property
    def provider_name(self) -> str:
        return PROVIDER_NAME

    def config(self) -> ProviderConfig:
        """Return the current configuration snapshot."""
        return self._cell.snapshot()

    def update(
        self,
        model: OpenAiModelSelector,
        api_url: str,
        low_speed_timeout: Optional[float],
        settings_version: int,
    ) -> None:
        """Atomically replace model, endpoint, low-speed timeout and settings generation.

        The in-memory credential and the catalog override are kept.
        """
        cfg = self._cell.update(
            model=model,
            api_url=api_url,
            low_speed_timeout=low_speed_timeout,
            settings_version=settings_version,
        )
        normalized_log_event(
            self._logger,
            "config.update",
            LogContext(
                provider=PROVIDER_NAME,
                model=cfg.model.id,
                api_url=cfg.api_url,
                settings_version=cfg.settings_version,
            ),
            phase="finalize",
            emitted=True,
            low_speed_timeout=cfg.low_speed_timeout,
        )

    def available_models(self) -> List[LanguageModel]:
        cfg = self._cell.snapshot()
        if cfg.available_models_from_settings:
            return list(cfg.available_models_from_settings)
        if isinstance(cfg.model, CustomOpenAiModel):
            return [cfg.model]
        return list(OpenAiModel)

    def settings_version(self) -> int:
        return self._cell.snapshot().settings_version

    def is_authenticated(self) -> bool:
        return self._credentials.is_authenticated()

    async def authenticate(self) -> None:
        await self._credentials.authenticate()

    async def reset_credentials(self) -> None:
        await self._credentials.reset()

    async def set_credential(self, api_key: str) -> None:
        await self._credentials.set_credential(api_key)

    def model(self) -> LanguageModel:
        return self._cell.snapshot().model

    def to_open_ai_request(self, request: ChatRequest) -> Request:
        return to_open_ai_request(request, self._cell.snapshot().model)

    async def count_tokens(self, request: ChatRequest) -> int:
        return await count_open_ai_tokens(request, executor=self._executor)

    async def stream_completion(self, request: ChatRequest) -> AsyncIterator[StreamDelta]:
        cfg = self._cell.snapshot()
        wire = to_open_ai_request(request, cfg.model)
        ctx = LogContext(
            provider=PROVIDER_NAME,
            model=wire.model,
            api_url=cfg.api_url,
            settings_version=cfg.settings_version,
        )
        return stream_completion(
            self._transport,
            cfg.api_url,
            cfg.api_key,
            wire,
            cfg.low_speed_timeout,
            ctx=ctx,
            logger=self._logger,
        )

    async def aclose(self) -> None:
        if self._owns_transport:
            closer = getattr(self._transport, "aclose", None)
            if closer is not None:
                await closer()


__all__ = ["OpenAiCompletionProvider"]
