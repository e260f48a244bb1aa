"""completion_providers package

Uniform completion-provider abstraction over chat LLM backends.

Purpose:
    Provide a minimal, stable API for external consumption (packaging is
    configured via the repository root ``pyproject.toml``). Hosts create a
    provider, keep it in a :class:`ProviderSlot`, authenticate it and stream
    completions from it.

Public API (re-exported):
    - Version: ``__version__``
    - Exceptions: :class:`ProviderError`, :class:`ErrorCode` and the typed
      subclasses raised or yielded by the core
    - Contracts: :class:`CompletionProvider`, :class:`CredentialStore`,
      :class:`StreamingTransport`
    - Models: :class:`ChatRequest`, :class:`ChatMessage`, :class:`Role`, the
      model selectors
    - Factory: :func:`create`, :class:`ProviderFactory`
"""

import logging
from typing import Any

from .base.errors import (
    CredentialsNotFoundError,
    ErrorCode,
    MissingCredentialError,
    ProtocolError,
    ProviderError,
    TokenizerError,
    TransportError,
)
from .base.factory import ProviderFactory, UnknownProviderError
from .base.interfaces import CompletionProvider, CredentialStore, StreamingTransport
from .base.models import (
    AnthropicModel,
    ChatMessage,
    ChatRequest,
    CloudModel,
    CustomOpenAiModel,
    LanguageModel,
    OpenAiModel,
    Role,
)
from .base.provider_slot import ProviderSlot
from .base.streaming import StreamDelta, accumulate_deltas, collect_stream

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Exceptions
    "ProviderError",
    "ErrorCode",
    "MissingCredentialError",
    "CredentialsNotFoundError",
    "TransportError",
    "ProtocolError",
    "TokenizerError",
    # Contracts
    "CompletionProvider",
    "CredentialStore",
    "StreamingTransport",
    # Models
    "ChatMessage",
    "ChatRequest",
    "Role",
    "LanguageModel",
    "OpenAiModel",
    "CustomOpenAiModel",
    "AnthropicModel",
    "CloudModel",
    # Streaming
    "StreamDelta",
    "accumulate_deltas",
    "collect_stream",
    # Host surface
    "ProviderSlot",
    "ProviderFactory",
    "create",
]

logger = logging.getLogger(__name__)


def create(provider_name: str = "openai", **kwargs: Any) -> CompletionProvider:
    """Instantiate a provider via :class:`ProviderFactory`.

    Parameters
    ----------
    provider_name:
        Canonical provider name (for example, ``"openai"``).
    **kwargs:
        Forwarded to :meth:`ProviderFactory.create` (``store``, ``transport``,
        ``overrides`` and adapter constructor kwargs).

    Raises
    ------
    ProviderError
        ``UNSUPPORTED`` for unknown providers or invalid configuration.
    """
    try:
        return ProviderFactory.create(provider_name, **kwargs)
    except UnknownProviderError as e:
        raise ProviderError(
            code=ErrorCode.UNSUPPORTED,
            message=f"Failed to create provider '{provider_name}': {e}",
            provider=provider_name,
            raw=e,
        ) from e
