"""
Provider-agnostic interfaces (ABCs/Protocols) for the providers layer.

This module re-exports contracts split into single-class modules under
``completion_providers.base.interfaces_parts`` while keeping imports stable for
upstream code.
"""

from __future__ import annotations

from .interfaces_parts import (
    CompletionProvider,
    CredentialStore,
    StreamingTransport,
)

__all__ = [
    "CompletionProvider",
    "CredentialStore",
    "StreamingTransport",
]
