"""Credential store implementations."""

from .memory_store import InMemoryCredentialStore
from .sqlite import SqliteCredentialStore

__all__ = ["InMemoryCredentialStore", "SqliteCredentialStore"]
