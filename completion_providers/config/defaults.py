"""completion_providers.config.defaults
====================================

Central place for small, stable default values used across the
completion_providers package. These defaults can be overridden via
environment variables or an external configuration file, but provide sensible
fallbacks for local development and tests.

This module imports nothing from other provider packages; only plain
constants live here.
"""

from __future__ import annotations

# ---- Provider-specific sane defaults ----
# Model ids must be members of the built-in OpenAI catalog or the config
# loader falls back to a custom model.
OPENAI_DEFAULT_MODEL = "gpt-4o"
OPENAI_DEFAULT_BASE_URL = "https://api.openai.com/v1"
# Seconds below the throughput floor before a stream is aborted.
OPENAI_DEFAULT_LOW_SPEED_TIMEOUT = None

# Provider used by the factory when none is specified.
DEFAULT_PROVIDER = "openai"


# ---- SQLite credential store (infrastructure) ----
# Standard busy timeout to mitigate lock contention (milliseconds).
SQLITE_BUSY_TIMEOUT_MS = 5000
# Journal and sync mode optimized for local development and light concurrency.
SQLITE_JOURNAL_MODE = "WAL"
SQLITE_SYNCHRONOUS = "NORMAL"


__all__ = [
    "OPENAI_DEFAULT_MODEL",
    "OPENAI_DEFAULT_BASE_URL",
    "OPENAI_DEFAULT_LOW_SPEED_TIMEOUT",
    "DEFAULT_PROVIDER",
    "SQLITE_BUSY_TIMEOUT_MS",
    "SQLITE_JOURNAL_MODE",
    "SQLITE_SYNCHRONOUS",
]
