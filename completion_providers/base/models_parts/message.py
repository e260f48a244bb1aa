"""
Message DTO used across providers.

Defines the immutable `ChatMessage` dataclass and the `Role` enum representing
the sender role. Adapters map roles to their wire-level shapes; the role a
caller supplies is never rewritten on the way out.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Role(str, Enum):
    """Chat message author role."""

    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    """A single conversation turn.

    Attributes:
        role: The author of the message (``Role.SYSTEM``, ``Role.USER`` or
            ``Role.ASSISTANT``). Plain strings are accepted and coerced.
        content: Plain text content of the turn.
    """

    role: Role
    content: str

    def __post_init__(self) -> None:
        if not isinstance(self.role, Role):
            object.__setattr__(self, "role", Role(self.role))

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(Role.SYSTEM, content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(Role.USER, content)

    @classmethod
    def assistant(cls, content: str) -> "ChatMessage":
        return cls(Role.ASSISTANT, content)


__all__ = [
    "ChatMessage",
    "Role",
]
