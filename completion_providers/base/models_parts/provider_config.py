"""
ProviderConfig snapshot.

A frozen view of everything one provider instance needs to issue a call. It is
never mutated in place: the owning :class:`ProviderConfigCell` swaps in a new
snapshot, so a reader always sees a consistent combination of fields.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple

from .open_ai_model import OpenAiModelSelector


@dataclass(frozen=True)
class ProviderConfig:
    """Immutable provider settings plus the in-memory credential.

    Attributes:
        api_url: Endpoint base URL; also the credential store key.
        model: Active (default) model for this provider.
        api_key: Credential held in memory. Excluded from ``repr`` and from
            :meth:`to_dict`; it is never logged or written to settings.
        low_speed_timeout: Seconds of sub-floor throughput tolerated before a
            stream is aborted; ``None`` falls back to the timeout config.
        settings_version: Generation counter bumped by the host on
            reconfiguration.
        available_models_from_settings: Catalog override; empty means the
            built-in catalog applies.
    """

    api_url: str
    model: OpenAiModelSelector
    api_key: Optional[str] = field(default=None, repr=False, compare=False)
    low_speed_timeout: Optional[float] = None
    settings_version: int = 0
    available_models_from_settings: Tuple[OpenAiModelSelector, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "available_models_from_settings", tuple(self.available_models_from_settings)
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable view without the credential."""
        return {
            "api_url": self.api_url,
            "model": self.model.id,
            "low_speed_timeout": self.low_speed_timeout,
            "settings_version": self.settings_version,
            "available_models_from_settings": [m.id for m in self.available_models_from_settings],
        }


__all__ = ["ProviderConfig"]
