"""
OpenAI provider package.

Exports:
- OpenAiCompletionProvider: ``CompletionProvider`` for OpenAI-style endpoints
- to_open_ai_request: chat request -> wire request translation
- stream_completion: SSE streaming pipeline
- count_open_ai_tokens: tiktoken-based prompt token counting
"""

from .adapter import to_open_ai_request
from .client import OpenAiCompletionProvider
from .streaming import stream_completion
from .tokens import count_open_ai_tokens
from .wire import Request, ResponseStreamEvent

__all__ = [
    "OpenAiCompletionProvider",
    "to_open_ai_request",
    "stream_completion",
    "count_open_ai_tokens",
    "Request",
    "ResponseStreamEvent",
]
