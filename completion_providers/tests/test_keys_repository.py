import pytest

from completion_providers.base.repositories.keys import KeysRepository
from completion_providers.config.env import get_env_var_candidates, get_env_var_name, resolve_provider_key

from fakes import CountingStore

API_URL = "https://api.openai.com/v1"


def test_env_var_names():
    assert get_env_var_name("OpenAI") == "OPENAI_API_KEY"  # nosec B101
    assert get_env_var_name("unknown") is None  # nosec B101
    assert list(get_env_var_candidates("openai")) == ["OPENAI_API_KEY"]  # nosec B101


def test_resolve_provider_key_reports_variable(monkeypatch):
    assert resolve_provider_key("openai") == (None, None)  # nosec B101
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    assert resolve_provider_key("openai") == ("sk-env", "OPENAI_API_KEY")  # nosec B101


@pytest.mark.asyncio
async def test_resolve_prefers_env(monkeypatch):
    monkeypatch.setenv("OPENAI_API_KEY", "sk-env")
    store = CountingStore({API_URL: ("Bearer", b"sk-store")})
    res = await KeysRepository(store).resolve("openai", API_URL)
    assert (res.api_key, res.source) == ("sk-env", "env")  # nosec B101
    assert res.extra == {"env_var": "OPENAI_API_KEY"}  # nosec B101
    assert store.reads == 0  # nosec B101


@pytest.mark.asyncio
async def test_resolve_reads_store_by_url():
    store = CountingStore({API_URL: ("Bearer", b"sk-store"), "http://other/v1": ("Bearer", b"sk-other")})
    res = await KeysRepository(store).resolve("openai", API_URL)
    assert (res.api_key, res.source, res.extra["username"]) == ("sk-store", "store", "Bearer")  # nosec B101
    assert "sk-store" not in repr(res)  # nosec B101


@pytest.mark.asyncio
async def test_resolve_none():
    repo = KeysRepository(CountingStore())
    res = await repo.resolve("openai", API_URL)
    assert (res.api_key, res.source) == (None, "none")  # nosec B101
    assert await repo.get_api_key("openai", API_URL) is None  # nosec B101
