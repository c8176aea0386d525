from app.config import DEFAULT_POKEAPI_BASE_URL, DEFAULT_REDIS_URL, load_settings


def test_defaults_when_environment_is_empty(monkeypatch):
    for var in ("POKEAPI_BASE_URL", "REDIS_URL", "POKEAPI_TIMEOUT", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)

    settings = load_settings()

    assert settings.pokeapi_base_url == DEFAULT_POKEAPI_BASE_URL
    assert settings.redis_url == DEFAULT_REDIS_URL
    assert settings.http_timeout == 5.0
    assert settings.log_level == "INFO"


def test_values_come_from_environment(monkeypatch):
    monkeypatch.setenv("POKEAPI_BASE_URL", "http://pokeapi.internal/api/v2/")
    monkeypatch.setenv("REDIS_URL", "redis://cache:6379/1")
    monkeypatch.setenv("POKEAPI_TIMEOUT", "2.5")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    settings = load_settings()

    # Trailing slash is dropped so "/pokemon/{name}" joins cleanly
    assert settings.pokeapi_base_url == "http://pokeapi.internal/api/v2"
    assert settings.redis_url == "redis://cache:6379/1"
    assert settings.http_timeout == 2.5
    assert settings.log_level == "DEBUG"
