"""OpenAI chat-completions wire models (pydantic).

Request side
------------
``Request`` is the payload POSTed to ``/chat/completions``. Messages are a
role-tagged union; assistant messages always carry a ``tool_calls`` list and
the request reserves ``tools``/``tool_choice`` so tool support can be added
without changing the shape. Serialization drops ``None`` values and empty
tool lists, which the API rejects.

Response side
-------------
``ResponseStreamEvent`` is one SSE ``data:`` fragment. Every field is
optional: keep-alive and role-only fragments validate fine and simply carry no
text. A fragment may instead be an ``{"error": {...}}`` object.
"""

from __future__ import annotations

from typing import Any, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_serializer


class FunctionCall(BaseModel):
    name: str
    arguments: str


class ToolCall(BaseModel):
    id: str
    type: Literal["function"] = "function"
    function: FunctionCall


class UserMessage(BaseModel):
    role: Literal["user"] = "user"
    content: str


class SystemMessage(BaseModel):
    role: Literal["system"] = "system"
    content: str


class AssistantMessage(BaseModel):
    role: Literal["assistant"] = "assistant"
    content: Optional[str] = None
    tool_calls: List[ToolCall] = Field(default_factory=list)

    @model_serializer(mode="wrap")
    def _drop_empty_tool_calls(self, handler):
        data = handler(self)
        if not data.get("tool_calls"):
            data.pop("tool_calls", None)
        return data


RequestMessage = Union[UserMessage, SystemMessage, AssistantMessage]


class Request(BaseModel):
    model: str
    messages: List[RequestMessage]
    stream: bool = True
    stop: Optional[List[str]] = None
    temperature: Optional[float] = None
    tools: List[dict] = Field(default_factory=list)
    tool_choice: Optional[str] = None

    @model_serializer(mode="wrap")
    def _drop_empty_tools(self, handler):
        data = handler(self)
        if not data.get("tools"):
            data.pop("tools", None)
        return data

    def to_json_bytes(self) -> bytes:
        """Serialize for the wire: ``None`` fields and empty tool lists omitted."""
        return self.model_dump_json(exclude_none=True).encode("utf-8")


class ResponseDelta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    role: Optional[str] = None
    content: Optional[str] = None


class ChoiceDelta(BaseModel):
    model_config = ConfigDict(extra="ignore")

    index: int = 0
    delta: ResponseDelta = Field(default_factory=ResponseDelta)
    finish_reason: Optional[str] = None


class Usage(BaseModel):
    prompt_tokens: Optional[int] = None
    completion_tokens: Optional[int] = None
    total_tokens: Optional[int] = None


class ApiError(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: str
    type: Optional[str] = None
    code: Optional[Union[str, int]] = None


class ResponseStreamEvent(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Optional[str] = None
    created: Optional[int] = None
    model: Optional[str] = None
    choices: List[ChoiceDelta] = Field(default_factory=list)
    usage: Optional[Usage] = None
    error: Optional[ApiError] = None

    def delta_text(self) -> Optional[str]:
        """Return the last choice's ``delta.content``; ``None`` when absent or empty."""
        if not self.choices:
            return None
        return self.choices[-1].delta.content or None


def request_dict(request: Request) -> dict[str, Any]:
    """Return the JSON-compatible dict that :meth:`Request.to_json_bytes` encodes."""
    return request.model_dump(mode="json", exclude_none=True)


__all__ = [
    "FunctionCall",
    "ToolCall",
    "UserMessage",
    "SystemMessage",
    "AssistantMessage",
    "RequestMessage",
    "Request",
    "ResponseDelta",
    "ChoiceDelta",
    "Usage",
    "ApiError",
    "ResponseStreamEvent",
    "request_dict",
]
