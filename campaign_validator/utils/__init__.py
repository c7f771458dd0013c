"""Utility helpers for reusable functionality."""

from .datetime import format_insert_time, get_app_timezone
from .matching import (
    WILDCARD,
    matches_any,
    matches_pattern,
    normalize_column_name,
    normalize_row,
    normalize_value,
)

__all__ = [
    "WILDCARD",
    "format_insert_time",
    "get_app_timezone",
    "matches_any",
    "matches_pattern",
    "normalize_column_name",
    "normalize_row",
    "normalize_value",
]
