"""Use case for preparing a new configuration revision for storage."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime
from typing import Any

from campaign_validator.domain.entities import Config
from campaign_validator.utils import format_insert_time

from .load_config import ensure_valid_config

logger = logging.getLogger(__name__)


def revise_config(
    document: Mapping[str, Any],
    *,
    previous: Config | None = None,
    now: datetime | None = None,
) -> Config:
    """Build the next revision of a tenant configuration.

    The revision gets ``previous.version + 1`` (``1`` for the first one) and an
    ``insertTime`` stamped in the application timezone. The result is ready to
    be persisted through ``Config.to_json``.
    """

    config = Config(document)
    config.version = int(previous.version or 0) + 1 if previous is not None else 1
    config.insert_time = format_insert_time(now)
    logger.info("Prepared configuration revision %s at %s", config.version, config.insert_time)
    return ensure_valid_config(config)
