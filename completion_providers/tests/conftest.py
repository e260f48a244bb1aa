"""Pytest configuration for the completion providers test suite.

Fixtures keep tests hermetic: no real credentials leak in from the developer
environment, config file caches are reset, tiktoken lookups are replaced by a
deterministic encoding, and log events are captured from the shared
``providers`` logger (which does not propagate to root).
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Iterator, List

import pytest

from completion_providers.base.models import ChatMessage, ChatRequest, OpenAiModel
from completion_providers.base.tokens import counter
from completion_providers.config import reset_config_cache
from completion_providers.openai import OpenAiCompletionProvider

from fakes import CountingStore, FakeTransport, WordEncoding

API_URL = "https://api.openai.com/v1"


@pytest.fixture(autouse=True)
def hermetic_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Strip provider env vars and reset the config file cache around each test."""

    for name in (
        "OPENAI_API_KEY",
        "OPENAI_MODEL",
        "OPENAI_BASE_URL",
        "OPENAI_LOW_SPEED_TIMEOUT",
        "PROVIDERS_CONFIG_FILE",
        "PROVIDERS_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)
    reset_config_cache()
    yield
    reset_config_cache()


@pytest.fixture()
def fake_encoding(monkeypatch: pytest.MonkeyPatch) -> List[str]:
    """Replace tiktoken lookup; returns the list of model ids requested."""

    requested: List[str] = []

    def _lookup(model_id: str) -> WordEncoding:
        requested.append(model_id)
        return WordEncoding()

    monkeypatch.setattr(counter, "_encoding_for_model", _lookup)
    return requested


@pytest.fixture()
def log_events(monkeypatch: pytest.MonkeyPatch) -> Iterator[List[Dict[str, Any]]]:
    """Capture structured events emitted through the ``providers`` logger."""

    monkeypatch.setenv("PROVIDERS_LOG_LEVEL", "DEBUG")
    events: List[Dict[str, Any]] = []
    handler = logging.Handler(level=logging.DEBUG)

    def _emit(record: logging.LogRecord) -> None:
        try:
            payload = json.loads(record.getMessage())
        except ValueError:
            return
        if isinstance(payload, dict):
            payload["_level"] = record.levelno
            events.append(payload)

    handler.emit = _emit  # type: ignore[method-assign]
    base = logging.getLogger("providers")
    previous_level = base.level
    base.addHandler(handler)
    base.setLevel(logging.DEBUG)
    try:
        yield events
    finally:
        base.removeHandler(handler)
        base.setLevel(previous_level)


@pytest.fixture()
def store() -> CountingStore:
    return CountingStore()


@pytest.fixture()
def transport() -> FakeTransport:
    return FakeTransport()


@pytest.fixture()
def provider(transport: FakeTransport, store: CountingStore) -> OpenAiCompletionProvider:
    return OpenAiCompletionProvider(OpenAiModel.GPT_4O, API_URL, transport, store)


@pytest.fixture()
def hello_request() -> ChatRequest:
    return ChatRequest.build(
        OpenAiModel.GPT_4,
        [ChatMessage.system("be brief"), ChatMessage.user("hello world")],
    )
