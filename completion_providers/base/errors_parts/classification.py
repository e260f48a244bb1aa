"""
Error classification helpers mapping exceptions to normalized ErrorCode values.

Implements HTTP status extraction, status-to-code mapping, ``httpx`` exception
mapping, and message-based heuristics as a fallback. ``to_transport_error``
wraps arbitrary transport failures into a :class:`TransportError` so the
streaming pipeline can surface them as a single terminal item.
"""
from __future__ import annotations

import asyncio
from typing import Dict, Optional

import httpx

from .completion_errors import TransportError
from .error_code import ErrorCode
from .provider_error import ProviderError


def _extract_status(exc: BaseException) -> Optional[int]:
    """Attempt to extract an HTTP status code from an exception.

    Supported attribute shapes (checked in order):
    - ``exc.status_code``
    - ``exc.status``
    - ``exc.response.status_code``
    Returns ``None`` if no valid status can be found.
    """
    for attr in ("status_code", "status"):
        val = getattr(exc, attr, None)
        if isinstance(val, int) and 100 <= val < 600:
            return val
    resp = getattr(exc, "response", None)
    if resp is not None:
        sc = getattr(resp, "status_code", None)
        if isinstance(sc, int) and 100 <= sc < 600:
            return sc
    return None


_HTTP_STATUS_MAP: Dict[int, ErrorCode] = {
    400: ErrorCode.VALIDATION,
    401: ErrorCode.AUTH,
    403: ErrorCode.AUTH,
    404: ErrorCode.NOT_FOUND,
    408: ErrorCode.TIMEOUT,
    409: ErrorCode.CONFLICT,
    422: ErrorCode.VALIDATION,
    429: ErrorCode.RATE_LIMIT,
    500: ErrorCode.SERVER_ERROR,
    502: ErrorCode.TRANSIENT,
    503: ErrorCode.UNAVAILABLE,
    504: ErrorCode.TIMEOUT,
}


def code_for_status(status: int) -> ErrorCode:
    """Map an HTTP status to an ``ErrorCode`` (5xx default to ``SERVER_ERROR``)."""
    if status in _HTTP_STATUS_MAP:
        return _HTTP_STATUS_MAP[status]
    if status >= 500:
        return ErrorCode.SERVER_ERROR
    return ErrorCode.UNKNOWN


def _heuristic_from_message(msg: str) -> Optional[ErrorCode]:  # pragma: no cover - simple mapping
    """Substring heuristic mapping for exceptions without a status."""
    PATTERN_GROUPS = (
        (ErrorCode.TIMEOUT, ("timeout",)),
        (ErrorCode.TIMEOUT, ("timed out",)),
        (ErrorCode.TIMEOUT, ("too slow",)),
        (ErrorCode.AUTH, ("unauthorized",)),
        (ErrorCode.AUTH, ("api key",)),
        (ErrorCode.UNAVAILABLE, ("connection refused",)),
        (ErrorCode.UNAVAILABLE, ("unavailable",)),
        (ErrorCode.SERVER_ERROR, ("server error",)),
    )
    for code, patterns in PATTERN_GROUPS:
        if any(p in msg for p in patterns):
            return code
    return None


def classify_exception(exc: BaseException) -> ErrorCode:
    """Classify an exception into a normalized :class:`ErrorCode`.

    Precedence:
        1. ProviderError passthrough.
        2. Timeout exceptions (builtin, asyncio, httpx).
        3. httpx connection failures.
        4. HTTP status mapping.
        5. Message heuristics.
        6. ``UNKNOWN`` fallback.
    """
    if isinstance(exc, ProviderError):
        return exc.code
    if isinstance(exc, (TimeoutError, asyncio.TimeoutError, httpx.TimeoutException)):
        return ErrorCode.TIMEOUT
    if isinstance(exc, (httpx.ConnectError, httpx.RemoteProtocolError)):
        return ErrorCode.UNAVAILABLE
    status = _extract_status(exc)
    if status is not None:
        return code_for_status(status)
    code = _heuristic_from_message(str(exc).lower())
    return code if code is not None else ErrorCode.UNKNOWN


def to_transport_error(exc: BaseException, *, provider: str, model: Optional[str] = None) -> ProviderError:
    """Return ``exc`` unchanged when already typed, else wrap it as a ``TransportError``."""
    if isinstance(exc, ProviderError):
        return exc
    return TransportError(
        str(exc) or exc.__class__.__name__,
        provider=provider,
        model=model,
        code=classify_exception(exc),
        status_code=_extract_status(exc),
        raw=exc,
    )


__all__ = [
    "classify_exception",
    "code_for_status",
    "to_transport_error",
    "_extract_status",
    "_HTTP_STATUS_MAP",
]
