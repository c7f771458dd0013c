"""Timestamps stamped on configuration revisions."""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from campaign_validator.config import get_settings

_FALLBACK_TIMEZONE: Final[str] = "America/Bogota"
_UTC_OFFSET: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)([+-])(\d{1,2})(?::?(\d{2}))?$", re.IGNORECASE
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the timezone named by ``APP_TIMEZONE``.

    Accepts IANA names and ``UTC+HH[:MM]`` offsets; anything else falls back
    to ``America/Bogota``.
    """

    name = (get_settings().app_timezone or "").strip() or _FALLBACK_TIMEZONE
    offset = _UTC_OFFSET.match(name)
    if offset:
        sign, hours, minutes = offset.groups()
        delta = timedelta(hours=int(hours), minutes=int(minutes or 0))
        return timezone(-delta if sign == "-" else delta)
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return ZoneInfo(_FALLBACK_TIMEZONE)


def format_insert_time(value: datetime | None = None) -> str:
    """Return ``value`` (default: now) as the ISO-8601 stamp stored in ``insertTime``."""

    app_timezone = get_app_timezone()
    if value is None:
        value = datetime.now(tz=app_timezone)
    elif value.tzinfo is None:
        value = value.replace(tzinfo=app_timezone)
    return value.astimezone(app_timezone).isoformat(timespec="seconds")
