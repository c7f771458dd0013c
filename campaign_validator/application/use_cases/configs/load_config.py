"""Use case for turning a stored document into a usable configuration."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from campaign_validator.domain.entities import Config
from campaign_validator.exceptions import InvalidConfigurationError

logger = logging.getLogger(__name__)


def ensure_valid_config(config: Config) -> Config:
    """Return ``config`` or raise when it lacks required values."""

    if not config.validate_config():
        logger.warning("Rejected incomplete configuration version %s", config.version)
        raise InvalidConfigurationError("Configuration is missing required fields")
    return config


def load_config(document: Mapping[str, Any]) -> Config:
    """Build a ``Config`` from ``document`` and require it to be complete."""

    return ensure_valid_config(Config(document))
