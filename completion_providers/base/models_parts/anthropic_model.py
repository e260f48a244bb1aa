"""Anthropic model selectors.

Only used for routing and token accounting; no Anthropic wire adapter exists
in this package.
"""
from __future__ import annotations

from enum import Enum


class AnthropicModel(Enum):
    CLAUDE_3_5_SONNET = "claude-3-5-sonnet-20240620"
    CLAUDE_3_OPUS = "claude-3-opus-20240229"
    CLAUDE_3_SONNET = "claude-3-sonnet-20240229"
    CLAUDE_3_HAIKU = "claude-3-haiku-20240307"

    @property
    def id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def max_token_count(self) -> int:
        return 200000


_DISPLAY_NAMES = {
    AnthropicModel.CLAUDE_3_5_SONNET: "Claude 3.5 Sonnet",
    AnthropicModel.CLAUDE_3_OPUS: "Claude 3 Opus",
    AnthropicModel.CLAUDE_3_SONNET: "Claude 3 Sonnet",
    AnthropicModel.CLAUDE_3_HAIKU: "Claude 3 Haiku",
}


__all__ = ["AnthropicModel"]
