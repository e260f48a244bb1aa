"""Credential and configuration ownership for provider instances."""

from .config_cell import ProviderConfigCell
from .lifecycle import CredentialLifecycle

__all__ = ["ProviderConfigCell", "CredentialLifecycle"]
