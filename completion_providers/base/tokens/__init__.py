"""Token counting helpers package."""

from .counter import num_tokens_from_messages, run_in_executor

__all__ = [
    "num_tokens_from_messages",
    "run_in_executor",
]
