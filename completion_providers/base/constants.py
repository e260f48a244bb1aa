"""Base shared constants for completion providers.

Central location to avoid scattering magic strings and default numbers.

Security
--------
This module contains only generic sentinel strings and numeric defaults.
There are no credentials or tokens embedded.

# pragma: allowlist secret
"""
from __future__ import annotations

# Missing credential sentinel
MISSING_API_KEY_ERROR = "missing_api_key"  # pragma: allowlist secret - generic placeholder string, not a real secret

# Username written next to the secret in the credential store.
CREDENTIAL_USERNAME = "Bearer"

# Server-sent events framing used by OpenAI-style streaming endpoints.
SSE_DATA_PREFIX = "data: "
SSE_DONE_SENTINEL = "[DONE]"

# Throughput floor (bytes/second) used by the low-speed abort.
LOW_SPEED_LIMIT_BYTES_PER_SEC = 100

# Reference model whose tokenizer approximates models without tiktoken support.
FALLBACK_TOKENIZER_MODEL = "gpt-4"

# Context window assumed for custom models declared without one.
CUSTOM_MODEL_DEFAULT_MAX_TOKENS = 4096

__all__ = [
    "MISSING_API_KEY_ERROR",
    "CREDENTIAL_USERNAME",
    "SSE_DATA_PREFIX",
    "SSE_DONE_SENTINEL",
    "LOW_SPEED_LIMIT_BYTES_PER_SEC",
    "FALLBACK_TOKENIZER_MODEL",
    "CUSTOM_MODEL_DEFAULT_MAX_TOKENS",
]
