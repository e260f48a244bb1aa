"""Token counting for OpenAI-family requests.

tiktoken has no tokenizer for Anthropic models, for Claude models served
through the hosted gateway, or for user-defined custom models. Those are
counted with the ``gpt-4`` tokenizer (``FALLBACK_TOKENIZER_MODEL``). The
result is an approximation, not an exact count, and is reported as a normal
count rather than an error.
"""

from __future__ import annotations

import logging
from concurrent.futures import Executor
from typing import Dict, List, Optional

from ..base.constants import FALLBACK_TOKENIZER_MODEL
from ..base.errors import TokenizerError
from ..base.logging import LogContext, get_logger, normalized_log_event
from ..base.models import (
    ChatRequest,
    CustomOpenAiModel,
    LanguageModel,
    ModelFamily,
    model_family,
)
from ..base.tokens import counter
from ..base.tokens.counter import run_in_executor

PROVIDER_NAME = "openai"

_logger = get_logger("providers.openai.tokens")


def tokenizer_model_for(model: LanguageModel) -> str:
    """Return the model id whose tokenizer is used to count ``model``'s prompts."""
    family = model_family(model)
    if family is ModelFamily.ANTHROPIC:
        return FALLBACK_TOKENIZER_MODEL
    if family is ModelFamily.CLOUD and model.is_claude:  # type: ignore[union-attr]
        return FALLBACK_TOKENIZER_MODEL
    if isinstance(model, CustomOpenAiModel):
        return FALLBACK_TOKENIZER_MODEL
    return model.id


def transcript(request: ChatRequest) -> List[Dict[str, str]]:
    """Role/content list shaped like the wire ``messages`` array."""
    return [{"role": m.role.value, "content": m.content} for m in request.messages]


def count_request_tokens(request: ChatRequest, *, logger: Optional[logging.Logger] = None) -> int:
    """Synchronous token count for ``request`` (see :func:`count_open_ai_tokens`).

    Raises:
        TokenizerError: when the tokenizer cannot be loaded or fails to encode.
    """
    log = logger or _logger
    tokenizer_model = tokenizer_model_for(request.model)
    ctx = LogContext(provider=PROVIDER_NAME, model=request.model.id)
    if tokenizer_model != request.model.id:
        normalized_log_event(
            log,
            "tokens.fallback",
            ctx,
            phase="start",
            emitted=None,
            tokens=None,
            level=logging.DEBUG,
            tokenizer_model=tokenizer_model,
        )
    try:
        total = counter.num_tokens_from_messages(tokenizer_model, transcript(request))
    except Exception as exc:
        raise TokenizerError(
            f"tokenizer unavailable for {tokenizer_model}: {exc}",
            provider=PROVIDER_NAME,
            model=request.model.id,
            raw=exc,
        ) from exc
    normalized_log_event(
        log,
        "tokens.count",
        ctx,
        phase="finalize",
        emitted=True,
        tokens=total,
        level=logging.DEBUG,
        tokenizer_model=tokenizer_model,
    )
    return total


async def count_open_ai_tokens(request: ChatRequest, *, executor: Optional[Executor] = None) -> int:
    """Count prompt tokens for ``request`` on a worker thread.

    Raises:
        TokenizerError: on any tokenizer failure; no partial count is returned.
    """
    return await run_in_executor(count_request_tokens, request, executor=executor)


__all__ = ["count_open_ai_tokens", "count_request_tokens", "tokenizer_model_for", "transcript"]
