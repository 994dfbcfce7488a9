from __future__ import annotations

import contextvars
import logging

from backend.app.config import DEFAULT_CORS_ORIGINS, load_settings
from backend.app.log_setup import KeyValueFormatter, RequestContextFilter, set_request_id


def test_defaults_when_env_is_empty(monkeypatch):
    monkeypatch.setenv("APP_ENV", "")
    monkeypatch.setenv("LOG_LEVEL", "  ")
    monkeypatch.setenv("CORS_ORIGINS", "")

    settings = load_settings()

    assert settings.env == "dev"
    assert settings.log_level == "INFO"
    assert settings.cors_origins == DEFAULT_CORS_ORIGINS
    assert not settings.testing


def test_settings_read_from_environment(monkeypatch):
    monkeypatch.setenv("APP_ENV", "test")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("CORS_ORIGINS", "http://a.example, http://b.example ,")

    settings = load_settings()

    assert settings.testing
    assert settings.log_level == "DEBUG"
    assert settings.cors_origins == ("http://a.example", "http://b.example")


def test_log_lines_carry_request_id():
    record = logging.LogRecord("backend.test", logging.INFO, __file__, 1, "hello %s", ("world",), None)

    def _format() -> str:
        set_request_id("req-42")
        RequestContextFilter().filter(record)
        return KeyValueFormatter().format(record)

    line = contextvars.copy_context().run(_format)

    assert "level=INFO" in line
    assert "logger=backend.test" in line
    assert "request_id=req-42" in line
    assert line.endswith("msg=hello world")
