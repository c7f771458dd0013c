import logging
import pathlib
import sys

import pytest

PROJECT_ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from campaign_validator.config import reset_settings_cache  # noqa: E402
from campaign_validator.utils.datetime import get_app_timezone  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep every test independent from the caller's environment."""

    monkeypatch.delenv("APP_TIMEZONE", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    reset_settings_cache()
    get_app_timezone.cache_clear()
    yield
    reset_settings_cache()
    get_app_timezone.cache_clear()
    package_logger = logging.getLogger("campaign_validator")
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


def build_document(overrides=None):
    base = {
        "separator": "_",
        "spaceSeparator": "-",
        "insertTime": "2024-03-01T10:00:00-05:00",
        "version": 3,
        "analyticsTools": {
            "ga": {"utm_source": ["Country"], "utm_campaign": ["Campaign"]},
        },
        "columns": {
            "Country": ["US", "CA", "FR"],
            "State": [],
            "Campaign": ["*promo*", "launch*"],
        },
    }
    if overrides:
        base = {
            **base,
            **overrides,
        }
    return base


@pytest.fixture()
def document():
    return build_document()


@pytest.fixture()
def make_document():
    return build_document
