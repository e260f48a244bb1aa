"""Hosted ("cloud") model selectors.

Cloud models are served through a hosted gateway that fronts both OpenAI and
Anthropic models. ``is_claude`` tells the token counter which tokenizer family
applies.
"""
from __future__ import annotations

from enum import Enum


class CloudModel(Enum):
    GPT_3_5_TURBO = "gpt-3.5-turbo"
    GPT_4 = "gpt-4"
    GPT_4_TURBO = "gpt-4-turbo-preview"
    GPT_4O = "gpt-4o"
    CLAUDE_3_5_SONNET = "claude-3-5-sonnet"
    CLAUDE_3_OPUS = "claude-3-opus"
    CLAUDE_3_SONNET = "claude-3-sonnet"
    CLAUDE_3_HAIKU = "claude-3-haiku"

    @property
    def id(self) -> str:
        return self.value

    @property
    def display_name(self) -> str:
        return _LIMITS[self][0]

    @property
    def max_token_count(self) -> int:
        return _LIMITS[self][1]

    @property
    def is_claude(self) -> bool:
        return self.value.startswith("claude-")


_LIMITS = {
    CloudModel.GPT_3_5_TURBO: ("GPT 3.5 Turbo", 4096),
    CloudModel.GPT_4: ("GPT 4", 8192),
    CloudModel.GPT_4_TURBO: ("GPT 4 Turbo", 128000),
    CloudModel.GPT_4O: ("GPT 4 Omni", 128000),
    CloudModel.CLAUDE_3_5_SONNET: ("Claude 3.5 Sonnet", 200000),
    CloudModel.CLAUDE_3_OPUS: ("Claude 3 Opus", 200000),
    CloudModel.CLAUDE_3_SONNET: ("Claude 3 Sonnet", 200000),
    CloudModel.CLAUDE_3_HAIKU: ("Claude 3 Haiku", 200000),
}


__all__ = ["CloudModel"]
