import logging

import pytest
from pydantic import ValidationError

from campaign_validator.config import Settings, get_settings, reset_settings_cache
from campaign_validator.logging import configure_logging


def test_defaults_without_environment():
    settings = get_settings()

    assert settings.app_timezone == "America/Bogota"
    assert settings.log_level == "INFO"


def test_settings_are_cached_until_reset(monkeypatch):
    first = get_settings()
    monkeypatch.setenv("LOG_LEVEL", "debug")

    assert get_settings() is first

    reset_settings_cache()
    assert get_settings().log_level == "DEBUG"


def test_unknown_log_level_is_rejected(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")

    with pytest.raises(ValidationError):
        Settings()


def test_configure_logging_applies_level():
    package_logger = configure_logging(Settings(log_level="WARNING"))

    assert package_logger.name == "campaign_validator"
    assert package_logger.level == logging.WARNING
    assert package_logger.handlers
