"""OpenAI model selectors.

``OpenAiModel`` enumerates the built-in catalog; ``CustomOpenAiModel`` carries a
user-defined identifier together with an explicit context window, since such
models cannot be looked up in the catalog.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Tuple, Union

from ..constants import CUSTOM_MODEL_DEFAULT_MAX_TOKENS


class OpenAiModel(Enum):
    """Built-in OpenAI chat models keyed by their canonical API identifier."""

    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_4 = "gpt-4"
    GPT_4_TURBO_PREVIEW = "gpt-4-turbo-preview"
    GPT_4O = "gpt-4o"

    @property
    def id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _CATALOG[self][0]

    @property
    def max_token_count(self) -> int:
        return _CATALOG[self][1]

    @classmethod
    def from_id(cls, model_id: str) -> "OpenAiModel":
        """Return the catalog member for ``model_id``.

        Raises:
            ValueError: when the identifier is not part of the built-in catalog.
        """
        for member in cls:
            if member.value == model_id:
                return member
        raise ValueError(f"unknown OpenAI model id: {model_id!r}")


# member -> (display name, context window)
_CATALOG: Dict[OpenAiModel, Tuple[str, int]] = {
    OpenAiModel.GPT_3_5_TURBO: ("gpt-3.5-turbo", 4096),
    OpenAiModel.GPT_4: ("gpt-4", 8192),
    OpenAiModel.GPT_4_TURBO_PREVIEW: ("gpt-4-turbo", 128000),
    OpenAiModel.GPT_4O: ("gpt-4o", 128000),
}


@dataclass(frozen=True)
class CustomOpenAiModel:
    """User-defined model served by an OpenAI-compatible endpoint.

    Attributes:
        name: Identifier sent on the wire as ``model``.
        max_tokens: Context window size declared by the user.
    """

    name: str
    max_tokens: int = CUSTOM_MODEL_DEFAULT_MAX_TOKENS

    @property
    def id(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def max_token_count(self) -> int:
        return self.max_tokens


OpenAiModelSelector = Union[OpenAiModel, CustomOpenAiModel]


def parse_open_ai_model(entry: Any) -> OpenAiModelSelector:
    """Parse a settings entry into an OpenAI model selector.

    Accepted shapes:
        * an existing selector (returned unchanged)
        * a catalog id string such as ``"gpt-4o"``
        * any other string, treated as a custom model with the default window
        * a mapping ``{"name": ..., "max_tokens": ...}`` (``id`` is accepted
          as an alias for ``name``)

    Raises:
        ValueError: for empty identifiers, non-positive ``max_tokens`` or
            unsupported entry types.
    """
    if isinstance(entry, (OpenAiModel, CustomOpenAiModel)):
        return entry
    if isinstance(entry, str):
        name = entry.strip()
        if not name:
            raise ValueError("model id must not be empty")
        try:
            return OpenAiModel.from_id(name)
        except ValueError:
            return CustomOpenAiModel(name=name)
    if isinstance(entry, dict):
        name = str(entry.get("name") or entry.get("id") or "").strip()
        if not name:
            raise ValueError(f"model entry is missing a name: {entry!r}")
        max_tokens = entry.get("max_tokens")
        if max_tokens is None:
            return parse_open_ai_model(name)
        max_tokens = int(max_tokens)
        if max_tokens <= 0:
            raise ValueError(f"max_tokens must be positive for model {name!r}")
        return CustomOpenAiModel(name=name, max_tokens=max_tokens)
    raise ValueError(f"unsupported model entry: {entry!r}")


__all__ = [
    "OpenAiModel",
    "CustomOpenAiModel",
    "OpenAiModelSelector",
    "parse_open_ai_model",
]
