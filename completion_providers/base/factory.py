"""Provider Factory utilities.

Purpose
-------
Centralize creation of ``CompletionProvider`` instances by canonical name.
Adapters are imported lazily using ``importlib`` so importing the base layer
never pulls in a backend package.

Configuration
-------------
The factory merges configuration with :func:`get_provider_config` and hands
the mapping to the adapter's ``from_config`` classmethod. When the caller
supplies no collaborators, a :class:`SqliteCredentialStore` and an
:class:`HttpxStreamingTransport` owned by the provider are created. The
transport opens its HTTP client on the first request, so a provider that fails
to construct leaves no connection pool behind.

Timeout and fallback semantics
------------------------------
- No timeouts are introduced here. The factory performs no retries or
  fallbacks; it either returns an instance or raises a clear error.

Scope
-----
Supported providers: ``openai``.
"""

from __future__ import annotations

from importlib import import_module
from typing import Any, Dict, Mapping, Optional, Tuple, Type

from ..config import get_provider_config
from ..config.defaults import DEFAULT_PROVIDER
from .interfaces import CompletionProvider, CredentialStore, StreamingTransport


class UnknownProviderError(Exception):
    """Raised when a provider cannot be resolved or initialized.

    Failure modes include:
    - The provider name is not registered in the factory mapping.
    - The provider module cannot be imported or the adapter class is missing.
    - The configuration is invalid or the adapter constructor raised.
    """


def create_provider(provider: str = DEFAULT_PROVIDER, **kwargs: Any) -> CompletionProvider:
    """Compatibility helper that delegates to :meth:`ProviderFactory.create`."""
    return ProviderFactory.create(provider, **kwargs)


class ProviderFactory:
    """Create completion providers based on a canonical name (e.g., ``"openai"``).

    Design notes
    ------------
    - Uses ``importlib.import_module`` for explicit import semantics.
    - Raises :class:`UnknownProviderError` with precise, actionable messages
      for unknown providers, import failures, missing classes, and
      configuration or constructor errors.
    """

    # Map canonical provider names to import paths and class names
    _PROVIDERS: Dict[str, Dict[str, str]] = {
        "openai": {"module": "completion_providers.openai.client", "class": "OpenAiCompletionProvider"},
    }

    @classmethod
    def create(
        cls,
        provider: str,
        *,
        store: Optional[CredentialStore] = None,
        transport: Optional[StreamingTransport] = None,
        overrides: Optional[Mapping[str, Any]] = None,
        **kwargs: Any,
    ) -> CompletionProvider:
        """Create a provider instance.

        Parameters
        ----------
        provider:
            Canonical provider name (e.g., ``"openai"``).
        store:
            Credential store; defaults to the SQLite store.
        transport:
            Streaming transport; defaults to a provider-owned httpx transport.
        overrides:
            Highest-precedence configuration values.
        **kwargs:
            Extra adapter constructor kwargs (e.g., ``executor``).

        Raises
        ------
        UnknownProviderError
            If provider is unknown, the adapter module fails to import, the
            adapter class is missing, or configuration/construction fails.
        """
        name = (provider or "").lower().strip()
        entry = cls._PROVIDERS.get(name)
        if not entry:
            raise UnknownProviderError(f"Unknown provider '{provider}'")

        module_path, class_name = entry["module"], entry["class"]
        try:
            mod = import_module(module_path)
        except Exception as exc:  # pragma: no cover - import failure path
            raise UnknownProviderError(
                f"Failed to import module '{module_path}' for provider '{provider}': {exc}"
            ) from exc

        try:
            klass: Type = getattr(mod, class_name)
        except AttributeError as exc:
            raise UnknownProviderError(
                f"Adapter class '{class_name}' not found in '{module_path}' for provider '{provider}'"
            ) from exc

        cfg = get_provider_config(name, dict(overrides) if overrides else None)
        if store is None:
            from ..persistence.sqlite import SqliteCredentialStore

            store = SqliteCredentialStore()
        if transport is None:
            from .http import HttpxStreamingTransport

            transport = HttpxStreamingTransport()
            kwargs.setdefault("owns_transport", True)

        try:
            return klass.from_config(cfg, transport=transport, store=store, **kwargs)
        except (TypeError, ValueError) as exc:
            raise UnknownProviderError(
                f"Invalid configuration for '{provider}' adapter: {exc}"
            ) from exc

    @classmethod
    def supported(cls) -> Tuple[str, ...]:
        """Return the tuple of supported canonical provider names."""
        return tuple(cls._PROVIDERS.keys())


__all__ = ["ProviderFactory", "UnknownProviderError", "create_provider"]
