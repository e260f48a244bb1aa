"""Translate backend-neutral chat requests into OpenAI wire requests.

The translation is total and pure: it never mutates provider state and never
raises for a well-formed :class:`ChatRequest`.
"""

from __future__ import annotations

from ..base.models import (
    ChatMessage,
    ChatRequest,
    ModelFamily,
    OpenAiModelSelector,
    Role,
    model_family,
)
from .wire import AssistantMessage, Request, RequestMessage, SystemMessage, UserMessage


def to_request_message(message: ChatMessage) -> RequestMessage:
    if message.role is Role.USER:
        return UserMessage(content=message.content)
    if message.role is Role.ASSISTANT:
        return AssistantMessage(content=message.content, tool_calls=[])
    return SystemMessage(content=message.content)


def resolve_model(request: ChatRequest, default_model: OpenAiModelSelector) -> OpenAiModelSelector:
    """Use the request's model when it is an OpenAI model, else ``default_model``."""
    if model_family(request.model) is ModelFamily.OPENAI:
        return request.model  # type: ignore[return-value]
    return default_model


def to_open_ai_request(request: ChatRequest, default_model: OpenAiModelSelector) -> Request:
    """Build the streaming ``Request`` for ``request``.

    ``stream`` is always true; ``stop`` and ``temperature`` pass through
    unchanged; tool fields are reserved empty.
    """
    return Request(
        model=resolve_model(request, default_model).id,
        messages=[to_request_message(m) for m in request.messages],
        stream=True,
        stop=list(request.stop) if request.stop is not None else None,
        temperature=request.temperature,
        tools=[],
        tool_choice=None,
    )


__all__ = ["to_open_ai_request", "to_request_message", "resolve_model"]
