from __future__ import annotations

import json
import logging

import pytest

from heloc.branding import get_brand, next_brand
from heloc.config import Settings, reload_settings
from heloc.logging_config import JSONFormatter, setup_logging


@pytest.fixture()
def restore_settings(monkeypatch):
    yield
    monkeypatch.undo()
    reload_settings()


def test_settings_read_environment(monkeypatch, restore_settings):
    monkeypatch.setenv("HELOC_PORT", "8081")
    monkeypatch.setenv("HELOC_DEFAULT_LANGUAGE", "fr")
    monkeypatch.setenv("HELOC_CORS_ORIGINS", '["https://calc.example.com"]')

    settings = reload_settings()

    assert settings.port == 8081
    assert settings.default_language == "fr"
    assert settings.cors_origins == ["https://calc.example.com"]


def test_default_language_from_settings():
    from heloc.app import create_app

    app = create_app(Settings(default_language="fr", log_format="text"))
    with app.test_client() as client:
        html = client.get("/").get_data(as_text=True)

    assert '<html lang="fr">' in html


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("heloc.test", logging.INFO, __file__, 1, "calculation completed", (), None)
    record.action = "calculate"
    record.days_elapsed = 10

    entry = json.loads(JSONFormatter().format(record))

    assert entry["message"] == "calculation completed"
    assert entry["level"] == "INFO"
    assert entry["action"] == "calculate"
    assert entry["days_elapsed"] == 10


def test_setup_logging_replaces_handlers():
    logger = setup_logging("DEBUG", "json", logger_name="heloc.test_setup")
    setup_logging("WARNING", "text", logger_name="heloc.test_setup")

    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
    assert not isinstance(logger.handlers[0].formatter, JSONFormatter)


def test_unknown_brand_falls_back_to_default():
    assert get_brand("missing").key == "nesto"
    assert next_brand("missing") == "plain"


def test_reloaded_settings_do_not_leak_into_later_apps():
    from heloc.app import create_app
    from heloc.config import get_settings

    assert get_settings().default_language == "en"
    with create_app().test_client() as client:
        html = client.get("/").get_data(as_text=True)

    assert '<html lang="en">' in html
