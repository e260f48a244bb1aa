"""Chat transcript token counting with tiktoken.

``num_tokens_from_messages`` follows the OpenAI cookbook accounting for chat
models: every message costs ``tokens_per_message`` on top of its encoded
fields, a ``name`` field costs ``tokens_per_name``, and every reply is primed
with three tokens. ``gpt-3.5-turbo-0301`` used 4 and -1 respectively.

Counting is CPU work; :func:`run_in_executor` moves it off the event loop.
"""

from __future__ import annotations

import asyncio
import functools
from concurrent.futures import Executor
from typing import Callable, Mapping, Optional, Sequence, TypeVar

import tiktoken

T = TypeVar("T")

_REPLY_PRIMING_TOKENS = 3
_LEGACY_0301 = "gpt-3.5-turbo-0301"


def _encoding_for_model(model_id: str) -> "tiktoken.Encoding":
    """Return the tiktoken encoding registered for ``model_id`` (KeyError when unknown)."""
    return tiktoken.encoding_for_model(model_id)


def num_tokens_from_messages(model_id: str, messages: Sequence[Mapping[str, Optional[str]]]) -> int:
    """Count prompt tokens for a role/content transcript using ``model_id``'s tokenizer.

    Raises:
        KeyError: when tiktoken has no tokenizer for ``model_id``.
    """
    encoding = _encoding_for_model(model_id)
    if model_id == _LEGACY_0301:
        tokens_per_message, tokens_per_name = 4, -1
    else:
        tokens_per_message, tokens_per_name = 3, 1

    total = 0
    for message in messages:
        total += tokens_per_message
        for key, value in message.items():
            if value is None:
                continue
            total += len(encoding.encode(value))
            if key == "name":
                total += tokens_per_name
    return total + _REPLY_PRIMING_TOKENS


async def run_in_executor(fn: Callable[..., T], *args, executor: Optional[Executor] = None) -> T:
    """Run ``fn(*args)`` on ``executor`` (default: the loop's thread pool)."""
    loop = asyncio.get_running_loop()
    return await loop.run_in_executor(executor, functools.partial(fn, *args))


__all__ = ["num_tokens_from_messages", "run_in_executor"]
