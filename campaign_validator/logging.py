"""Logging setup for scripts embedding the engine."""

from __future__ import annotations

import logging

from campaign_validator.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings | None = None) -> logging.Logger:
    """Attach a stream handler to the package logger using ``settings.log_level``."""

    settings = settings or get_settings()
    package_logger = logging.getLogger("campaign_validator")
    package_logger.setLevel(settings.log_level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        package_logger.addHandler(handler)
    return package_logger


__all__ = ["LOG_FORMAT", "configure_logging"]
