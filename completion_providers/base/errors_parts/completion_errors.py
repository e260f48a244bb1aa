"""
Typed failure kinds raised or yielded by the completion core.

Each kind is a :class:`ProviderError` with a fixed default ``ErrorCode`` so
callers can either catch the concrete type or branch on ``code``:

- ``MissingCredentialError``: a stream was attempted while unauthenticated.
- ``CredentialsNotFoundError``: authentication exhausted every source.
- ``TransportError``: network, HTTP status, or low-speed abort.
- ``ProtocolError``: malformed or unexpected wire payload.
- ``TokenizerError``: token counting failed.
"""
from __future__ import annotations

from typing import Optional

from ..constants import MISSING_API_KEY_ERROR
from .error_code import ErrorCode
from .provider_error import ProviderError


class MissingCredentialError(ProviderError):
    """Raised before any I/O when a stream is requested without an API key."""

    def __init__(self, provider: str, model: Optional[str] = None) -> None:
        super().__init__(
            code=ErrorCode.AUTH,
            message=MISSING_API_KEY_ERROR,
            provider=provider,
            model=model,
        )


class CredentialsNotFoundError(ProviderError):
    """Raised when neither the environment nor the credential store has a key."""

    def __init__(self, provider: str, api_url: str) -> None:
        super().__init__(
            code=ErrorCode.NOT_FOUND,
            message=f"credentials not found for {api_url}",
            provider=provider,
        )
        self.api_url = api_url


class TransportError(ProviderError):
    """Network-level failure, non-success HTTP status, or low-speed abort."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        code: ErrorCode = ErrorCode.TRANSIENT,
        status_code: Optional[int] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            provider=provider,
            model=model,
            status_code=status_code,
            raw=raw,
        )


class ProtocolError(ProviderError):
    """The backend sent something that does not match its wire format."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.VALIDATION,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


class TokenizerError(ProviderError):
    """Tokenizer lookup or encoding failed; no partial count is returned."""

    def __init__(
        self,
        message: str,
        *,
        provider: str,
        model: Optional[str] = None,
        raw: Optional[BaseException] = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.UNSUPPORTED,
            message=message,
            provider=provider,
            model=model,
            raw=raw,
        )


__all__ = [
    "MissingCredentialError",
    "CredentialsNotFoundError",
    "TransportError",
    "ProtocolError",
    "TokenizerError",
]
