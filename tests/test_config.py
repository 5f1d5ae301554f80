import logging

from work_api.config import DEFAULT_PORT, Settings, configure_logging


def test_defaults():
    settings = Settings()
    assert settings.port == DEFAULT_PORT == 8090
    assert settings.cors_origins == ["*"]
    assert settings.docs_path == "/documentation"
    assert settings.strict_status_codes is False


def test_from_env(monkeypatch):
    monkeypatch.setenv("WORK_API_PORT", "9000")
    monkeypatch.setenv("WORK_API_CORS_ORIGINS", "https://a.example, https://b.example")
    monkeypatch.setenv("WORK_API_STRICT_STATUS_CODES", "true")

    settings = Settings.from_env()

    assert settings.port == 9000
    assert settings.cors_origins == ["https://a.example", "https://b.example"]
    assert settings.strict_status_codes is True


def test_configure_logging_unknown_level_falls_back_to_info(monkeypatch):
    calls = {}
    monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.update(kwargs))
    configure_logging(Settings(log_level="chatty"))
    assert calls["level"] == logging.INFO
