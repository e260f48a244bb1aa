"""CompletionProvider abstract base (single-class module).

Defines the polymorphic contract every backend implements. Hosts depend on
this type only; concrete adapters live in their own provider packages.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import AsyncIterator, List

from ..models import ChatRequest, LanguageModel
from ..streaming import StreamDelta


class CompletionProvider(ABC):
    """Uniform interface for chat-completion backends.

    Credential state moves only between *unauthenticated* and *authenticated*:
    ``authenticate`` and ``set_credential`` enter it, ``reset_credentials``
    leaves it. ``stream_completion`` snapshots the provider's configuration at
    call start, so a concurrent reconfiguration never affects a stream already
    in flight.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Canonical provider identifier, e.g. ``"openai"``."""

    @abstractmethod
    def available_models(self) -> List[LanguageModel]:
        """Return the model catalog derived from the current configuration."""

    @abstractmethod
    def settings_version(self) -> int:
        """Return the settings generation the provider was last configured with."""

    @abstractmethod
    def is_authenticated(self) -> bool:
        """Return True iff a credential is currently held in memory."""

    @abstractmethod
    async def authenticate(self) -> None:
        """Acquire a credential; a no-op when already authenticated.

        Raises:
            CredentialsNotFoundError: when no source yields a credential.
        """

    @abstractmethod
    async def reset_credentials(self) -> None:
        """Forget the credential locally and best-effort delete it from the store."""

    @abstractmethod
    async def set_credential(self, api_key: str) -> None:
        """Persist a user-supplied credential and hold it in memory."""

    @abstractmethod
    def model(self) -> LanguageModel:
        """Return the active model."""

    @abstractmethod
    async def count_tokens(self, request: ChatRequest) -> int:
        """Estimate the prompt token count of ``request`` off the event loop.

        Raises:
            TokenizerError: when no count can be produced.
        """

    @abstractmethod
    async def stream_completion(self, request: ChatRequest) -> AsyncIterator[StreamDelta]:
        """Start a completion and return its lazy delta stream.

        Raises:
            MissingCredentialError: before any network I/O when unauthenticated.
        """

    async def aclose(self) -> None:
        """Release transport resources owned by the provider."""
        return None


__all__ = ["CompletionProvider"]
