"""Unified provider error taxonomy public surface.

This module re-exports the one-class-per-file implementations under
``completion_providers.base.errors_parts`` to maintain a stable import path.
"""

from .errors_parts.error_code import ErrorCode
from .errors_parts.provider_error import ProviderError
from .errors_parts.completion_errors import (
    CredentialsNotFoundError,
    MissingCredentialError,
    ProtocolError,
    TokenizerError,
    TransportError,
)
from .errors_parts.classification import classify_exception, code_for_status, to_transport_error

__all__ = [
    "ErrorCode",
    "ProviderError",
    "MissingCredentialError",
    "CredentialsNotFoundError",
    "TransportError",
    "ProtocolError",
    "TokenizerError",
    "classify_exception",
    "code_for_status",
    "to_transport_error",
]
