"""Unified configuration layer for completion providers.

Goals
-----
* Centralize defaults (model, base URL, low-speed timeout).
* Merge sources in a predictable order (later wins):
    1. Built-in defaults
    2. Optional external config file (JSON or YAML) pointed to by PROVIDERS_CONFIG_FILE
    3. Environment variables (e.g. OPENAI_MODEL, OPENAI_BASE_URL)
    4. In-code overrides passed to the helper
* Provide a single call site: ``get_provider_config(provider: str)``.

The API key is *not* part of this merge. Credentials are owned
by the provider's credential lifecycle (environment variable first, then the
credential store) and never travel through settings.

Environment Variable Conventions
--------------------------------
<PROVIDER>_MODEL, <PROVIDER>_BASE_URL, <PROVIDER>_LOW_SPEED_TIMEOUT,
e.g. OPENAI_MODEL, OPENAI_BASE_URL.

External Config File (Optional)
-------------------------------
If PROVIDERS_CONFIG_FILE is set to a path, JSON is attempted first, then YAML.
Structure example:

```
openai:
  model: gpt-4
  base_url: https://api.openai.com/v1
  low_speed_timeout: 30
  available_models:
    - gpt-4o
    - name: my-finetune
      max_tokens: 32000
```

Public API
----------
* get_provider_config(provider: str, overrides: dict | None = None) -> dict
* get_model(provider: str) -> str | None
* reset_config_cache() -> None
"""
from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .defaults import (
    OPENAI_DEFAULT_BASE_URL,
    OPENAI_DEFAULT_LOW_SPEED_TIMEOUT,
    OPENAI_DEFAULT_MODEL,
)


DEFAULTS: Dict[str, Dict[str, Any]] = {
    "openai": {
        "model": OPENAI_DEFAULT_MODEL,
        "base_url": OPENAI_DEFAULT_BASE_URL,
        "low_speed_timeout": OPENAI_DEFAULT_LOW_SPEED_TIMEOUT,
        "available_models": [],
    },
}


ENV_FIELD_MAP = {
    "model": "MODEL",
    "base_url": "BASE_URL",
    "low_speed_timeout": "LOW_SPEED_TIMEOUT",
}

# Keys that must never be accepted from settings sources.
_SECRET_KEYS = ("api_key", "key", "token")

_FILE_CACHE: Optional[Dict[str, Any]] = None


def reset_config_cache() -> None:
    """Forget the parsed external config file so the next lookup re-reads it."""
    global _FILE_CACHE
    _FILE_CACHE = None


def _load_external_config() -> Dict[str, Any]:
    global _FILE_CACHE
    if _FILE_CACHE is not None:
        return _FILE_CACHE
    path = os.getenv("PROVIDERS_CONFIG_FILE")
    if not path or not Path(path).exists():
        _FILE_CACHE = {}
        return _FILE_CACHE
    text = Path(path).read_text(encoding="utf-8")
    data: Any
    try:
        data = json.loads(text)
    except ValueError:
        try:
            data = yaml.safe_load(text) or {}
        except yaml.YAMLError:
            data = {}
    _FILE_CACHE = data if isinstance(data, dict) else {}
    return _FILE_CACHE


def _env_overrides(provider: str) -> Dict[str, Any]:
    out: Dict[str, Any] = {}
    prefix = provider.upper()
    for field, suffix in ENV_FIELD_MAP.items():
        val = os.getenv(f"{prefix}_{suffix}")
        if val is not None:
            out[field] = val
    return out


def _coerce_timeout(value: Any) -> Optional[float]:
    """Normalize a low-speed timeout value; non-positive or unparsable means disabled."""
    if value is None or value == "":
        return None
    try:
        seconds = float(value)
    except (TypeError, ValueError):
        return None
    return seconds if seconds > 0 else None


def get_provider_config(provider: str, overrides: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """Return merged configuration for a provider.

    Merge order (later wins): defaults -> external config -> env vars -> overrides.
    Secret-looking keys are dropped from every source.
    """
    name = (provider or "").lower().strip()
    cfg: Dict[str, Any] = dict(DEFAULTS.get(name, {}))

    file_cfg = _load_external_config().get(name)
    if isinstance(file_cfg, dict):
        cfg |= file_cfg

    cfg |= _env_overrides(name)

    if overrides:
        cfg |= {k: v for k, v in overrides.items() if v is not None}

    for secret in _SECRET_KEYS:
        cfg.pop(secret, None)
    if "low_speed_timeout" in cfg:
        cfg["low_speed_timeout"] = _coerce_timeout(cfg["low_speed_timeout"])
    if not isinstance(cfg.get("available_models"), list):
        cfg["available_models"] = []
    return cfg


def get_model(provider: str) -> Optional[str]:
    return get_provider_config(provider).get("model")


__all__ = [
    "get_provider_config",
    "get_model",
    "reset_config_cache",
    "DEFAULTS",
]
