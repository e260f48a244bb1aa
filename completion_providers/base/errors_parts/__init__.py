"""Errors parts package public surface.

Re-exports individual error taxonomy components for optional direct imports.
Prefer importing from `completion_providers.base.errors` for the stable surface.
"""

from .error_code import ErrorCode
from .provider_error import ProviderError
from .completion_errors import (
    CredentialsNotFoundError,
    MissingCredentialError,
    ProtocolError,
    TokenizerError,
    TransportError,
)
from .classification import classify_exception, code_for_status, to_transport_error

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
