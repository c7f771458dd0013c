from datetime import datetime, timezone

import pytest

from campaign_validator import Config, ConfigurationError, InvalidConfigurationError
from campaign_validator.application.use_cases.configs import (
    build_csv_template,
    load_config,
    revise_config,
)


def test_load_config_returns_complete_configuration(document):
    config = load_config(document)

    assert config.validate_config() is True
    assert config.column_names == ("Country", "State", "Campaign")


def test_load_config_rejects_incomplete_configuration(make_document):
    with pytest.raises(InvalidConfigurationError):
        load_config(make_document({"separator": None}))


def test_load_config_propagates_malformed_documents(document):
    del document["columns"]

    with pytest.raises(ConfigurationError):
        load_config(document)


def test_revise_config_starts_at_version_one(make_document):
    now = datetime(2024, 5, 2, 15, 30, tzinfo=timezone.utc)

    config = revise_config(make_document({"version": None, "insertTime": None}), now=now)

    assert config.version == 1
    assert config.insert_time == "2024-05-02T10:30:00-05:00"


def test_revise_config_increments_previous_version(document):
    previous = Config(document)

    config = revise_config(document, previous=previous)

    assert config.version == previous.version + 1
    assert config.insert_time
    assert config.to_json()["version"] == 4


def test_revise_config_uses_configured_timezone(document, monkeypatch):
    from campaign_validator.config import reset_settings_cache
    from campaign_validator.utils.datetime import get_app_timezone

    monkeypatch.setenv("APP_TIMEZONE", "UTC+02:00")
    reset_settings_cache()
    get_app_timezone.cache_clear()
    now = datetime(2024, 5, 2, 15, 30, tzinfo=timezone.utc)

    config = revise_config(document, now=now)

    assert config.insert_time == "2024-05-02T17:30:00+02:00"


def test_build_csv_template(document):
    assert build_csv_template(Config(document)) == "Url,Country,State,Campaign"


def test_revise_config_falls_back_for_unknown_timezone(document, monkeypatch):
    from campaign_validator.config import reset_settings_cache
    from campaign_validator.utils.datetime import get_app_timezone

    monkeypatch.setenv("APP_TIMEZONE", "Mars/Olympus_Mons")
    reset_settings_cache()
    get_app_timezone.cache_clear()

    config = revise_config(document, now=datetime(2024, 5, 2, 15, 30))

    assert config.insert_time == "2024-05-02T15:30:00-05:00"
