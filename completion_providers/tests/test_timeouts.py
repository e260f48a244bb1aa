from completion_providers.base.timeouts import TimeoutConfig, get_timeout_config


def test_defaults(monkeypatch):
    for name in ("PT_TIMEOUT_CONNECT_SECONDS", "PT_TIMEOUT_HTTP_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    assert get_timeout_config() == TimeoutConfig()  # nosec B101


def test_env_overrides_refresh_cache(monkeypatch):
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "15")
    monkeypatch.setenv("PT_TIMEOUT_CONNECT_SECONDS", "-1")
    cfg = get_timeout_config()
    assert cfg.http_timeout_seconds == 15.0  # nosec B101
    assert cfg.connect_timeout_seconds == 10.0  # nosec B101
    monkeypatch.setenv("PT_TIMEOUT_HTTP_SECONDS", "20")
    assert get_timeout_config().http_timeout_seconds == 20.0  # nosec B101

