"""
Providers Base Package

Exports provider-agnostic contracts, DTOs, repositories, and the provider
factory used by backend adapters and hosts.

Layout:
- Interfaces: the completion-provider contract and its collaborators
- Models (DTOs): chat request/message value objects and model selectors
- Streaming: stream items, SSE framing, low-speed abort
- Credentials: config snapshot ownership and the credential lifecycle
- Repositories: key resolution
- Factory: lazy creation of provider adapters by canonical name
"""

from .factory import ProviderFactory, UnknownProviderError, create_provider
from .interfaces import CompletionProvider, CredentialStore, StreamingTransport
from .models import (
    AnthropicModel,
    ChatMessage,
    ChatRequest,
    CloudModel,
    CustomOpenAiModel,
    LanguageModel,
    ModelFamily,
    OpenAiModel,
    ProviderConfig,
    Role,
    model_family,
)
from .credentials import CredentialLifecycle, ProviderConfigCell
from .provider_slot import ProviderSlot
from .repositories.keys import KeyResolution, KeysRepository
from .timeouts import TimeoutConfig, get_timeout_config
from .streaming import StreamDelta, accumulate_deltas, collect_stream

__all__ = [
    # Models
    "Role",
    "ChatMessage",
    "ChatRequest",
    "LanguageModel",
    "ModelFamily",
    "model_family",
    "OpenAiModel",
    "CustomOpenAiModel",
    "AnthropicModel",
    "CloudModel",
    "ProviderConfig",
    # Interfaces
    "CompletionProvider",
    "CredentialStore",
    "StreamingTransport",
    # Credentials
    "ProviderConfigCell",
    "CredentialLifecycle",
    "KeysRepository",
    "KeyResolution",
    # Host surface
    "ProviderSlot",
    "ProviderFactory",
    "UnknownProviderError",
    "create_provider",
    # Timeouts
    "TimeoutConfig",
    "get_timeout_config",
    # Streaming
    "StreamDelta",
    "accumulate_deltas",
    "collect_stream",
]
