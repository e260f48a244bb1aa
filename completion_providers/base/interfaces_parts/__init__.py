"""Interfaces split into single-class modules.

This package provides one contract per file while allowing
``completion_providers.base.interfaces`` to re-export a stable API.
"""

from .completion_provider import CompletionProvider
from .credential_store import CredentialStore
from .streaming_transport import StreamingTransport

__all__ = [
    "CompletionProvider",
    "CredentialStore",
    "StreamingTransport",
]
