"""Single-writer owner of a provider's configuration snapshot.

Readers call :meth:`ProviderConfigCell.snapshot` and keep the returned frozen
object for the duration of their work. Writers go through
:meth:`ProviderConfigCell.update`, which swaps in a new snapshot under a lock,
so no reader ever observes a torn combination of fields.
"""

from __future__ import annotations

import dataclasses
import threading
from typing import Any, Callable

from ..models import ProviderConfig


class ProviderConfigCell:
    def __init__(self, initial: ProviderConfig) -> None:
        self._lock = threading.RLock()
        self._current = initial

    def snapshot(self) -> ProviderConfig:
        with self._lock:
            return self._current

    def update(self, **changes: Any) -> ProviderConfig:
        """Replace the named fields atomically and return the new snapshot."""
        with self._lock:
            self._current = dataclasses.replace(self._current, **changes)
            return self._current

    def update_with(self, fn: Callable[[ProviderConfig], ProviderConfig]) -> ProviderConfig:
        """Derive the next snapshot from the current one under the lock."""
        with self._lock:
            nxt = fn(self._current)
            if not isinstance(nxt, ProviderConfig):
                raise TypeError("update_with callback must return a ProviderConfig")
            self._current = nxt
            return nxt


__all__ = ["ProviderConfigCell"]
