"""
ChatRequest DTO for provider-agnostic chat invocations.

Adapters map this normalized request shape to their wire payloads. The request
carries the model selector, the ordered conversation and sampling parameters.
Instances are immutable value objects created per call.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional, Tuple

from .language_model import LanguageModel
from .message import ChatMessage


@dataclass(frozen=True)
class ChatRequest:
    """Normalized chat request sent to provider adapters.

    Attributes:
        model: Target model selector; may belong to another backend family, in
            which case the provider substitutes its configured model.
        messages: Ordered conversation; order is preserved verbatim.
        stop: Optional stop sequences, passed through untouched.
        temperature: Sampling temperature when supported by the provider.
        stream: Always ``True`` for interactive use.

    Methods:
        to_dict: Return a JSON-serializable dictionary of the request.
    """

    model: LanguageModel
    messages: Tuple[ChatMessage, ...]
    stop: Optional[Tuple[str, ...]] = None
    temperature: Optional[float] = None
    stream: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "messages", tuple(self.messages))
        if self.stop is not None:
            object.__setattr__(self, "stop", tuple(self.stop))

    @classmethod
    def build(
        cls,
        model: LanguageModel,
        messages: Iterable[ChatMessage],
        *,
        stop: Optional[Iterable[str]] = None,
        temperature: Optional[float] = None,
    ) -> "ChatRequest":
        return cls(
            model=model,
            messages=tuple(messages),
            stop=tuple(stop) if stop is not None else None,
            temperature=temperature,
        )

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable dictionary representation of the request."""
        return {
            "model": self.model.id,
            "messages": [{"role": m.role.value, "content": m.content} for m in self.messages],
            "stop": list(self.stop) if self.stop is not None else None,
            "temperature": self.temperature,
            "stream": self.stream,
        }


__all__ = [
    "ChatRequest",
]
