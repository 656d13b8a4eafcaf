"""Settings tests."""

from jobo.config import DEFAULT_BASE_URL, JoboSettings, get_settings


def test_defaults():
    settings = JoboSettings()
    assert settings.api_key == ""
    assert not settings.is_configured
    assert settings.base_url == DEFAULT_BASE_URL
    assert settings.timeout_s == 30
    assert settings.user_agent.startswith("jobo-python/")


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("JOBO_API_KEY", "  secret \n")
    monkeypatch.setenv("JOBO_BASE_URL", "http://localhost:8080/")
    monkeypatch.setenv("JOBO_TIMEOUT_S", "12.5")

    settings = JoboSettings()

    assert settings.api_key == "secret"
    assert settings.is_configured
    assert settings.base_url == "http://localhost:8080"
    assert settings.timeout_s == 12.5


def test_get_settings_is_cached(monkeypatch):
    monkeypatch.setenv("JOBO_API_KEY", "first")
    first = get_settings()
    monkeypatch.setenv("JOBO_API_KEY", "second")
    assert get_settings() is first
    assert get_settings().api_key == "first"
