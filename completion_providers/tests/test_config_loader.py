import json

from completion_providers.config import get_model, get_provider_config, reset_config_cache


def test_defaults():
    cfg = get_provider_config("openai")
    assert cfg["model"] == "gpt-4o"  # nosec B101
    assert cfg["base_url"] == "https://api.openai.com/v1"  # nosec B101
    assert cfg["low_speed_timeout"] is None  # nosec B101
    assert cfg["available_models"] == []  # nosec B101


def test_yaml_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "providers.yaml"
    path.write_text(
        "openai:\n"
        "  model: gpt-4\n"
        "  base_url: http://file/v1\n"
        "  low_speed_timeout: 30\n"
        "  available_models:\n"
        "    - gpt-4o\n"
        "    - name: ft\n"
        "      max_tokens: 2048\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    cfg = get_provider_config("openai")
    assert (cfg["model"], cfg["base_url"], cfg["low_speed_timeout"]) == ("gpt-4", "http://file/v1", 30.0)  # nosec B101
    assert cfg["available_models"][1] == {"name": "ft", "max_tokens": 2048}  # nosec B101

    monkeypatch.setenv("OPENAI_BASE_URL", "http://env/v1")
    assert get_provider_config("openai")["base_url"] == "http://env/v1"  # nosec B101

    cfg = get_provider_config("openai", {"base_url": "http://override/v1", "model": None})
    assert cfg["base_url"] == "http://override/v1"  # nosec B101
    assert cfg["model"] == "gpt-4"  # nosec B101


def test_json_file_is_read(tmp_path, monkeypatch):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai": {"model": "gpt-3.5-turbo"}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    assert get_model("openai") == "gpt-3.5-turbo"  # nosec B101


def test_file_is_cached_until_reset(tmp_path, monkeypatch):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai": {"model": "gpt-4"}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    assert get_model("openai") == "gpt-4"  # nosec B101
    path.write_text(json.dumps({"openai": {"model": "gpt-3.5-turbo"}}), encoding="utf-8")
    assert get_model("openai") == "gpt-4"  # nosec B101
    reset_config_cache()
    assert get_model("openai") == "gpt-3.5-turbo"  # nosec B101


def test_secrets_never_enter_config(tmp_path, monkeypatch):
    path = tmp_path / "providers.json"
    path.write_text(json.dumps({"openai": {"api_key": "sk-file", "token": "t"}}), encoding="utf-8")
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(path))
    cfg = get_provider_config("openai", {"key": "sk-override"})
    assert not {"api_key", "key", "token"} & set(cfg)  # nosec B101


def test_low_speed_timeout_coercion(monkeypatch):
    monkeypatch.setenv("OPENAI_LOW_SPEED_TIMEOUT", "12.5")
    assert get_provider_config("openai")["low_speed_timeout"] == 12.5  # nosec B101
    monkeypatch.setenv("OPENAI_LOW_SPEED_TIMEOUT", "0")
    assert get_provider_config("openai")["low_speed_timeout"] is None  # nosec B101
    monkeypatch.setenv("OPENAI_LOW_SPEED_TIMEOUT", "soon")
    assert get_provider_config("openai")["low_speed_timeout"] is None  # nosec B101


def test_missing_file_and_unknown_provider(monkeypatch, tmp_path):
    monkeypatch.setenv("PROVIDERS_CONFIG_FILE", str(tmp_path / "absent.yaml"))
    assert get_provider_config("nope") == {"available_models": []}  # nosec B101
