"""Pattern matching shared by column rules and dependency rules.

A pattern is compared against a cell value after both are stripped and
case-folded. Evaluation order for a single pattern:

1. an absent value (``None``) never matches;
2. exact equality matches;
3. the wildcard token ``*`` matches any present value;
4. a pattern containing ``*`` is a glob where ``*`` stands for any run of
   characters, so ``*foo*`` is a substring test, ``foo*`` a prefix test and
   ``*foo`` a suffix test;
5. anything else does not match.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from functools import lru_cache
from typing import Final

WILDCARD: Final[str] = "*"


def normalize_value(value: str) -> str:
    """Return ``value`` stripped and case-folded for comparisons."""

    return str(value).strip().casefold()


def normalize_column_name(name: str) -> str:
    """Return the canonical form used to look up CSV column names."""

    return " ".join(str(name).split()).lower()


def normalize_row(row: Mapping[str, str | None]) -> dict[str, str | None]:
    """Re-key ``row`` with :func:`normalize_column_name`.

    When two raw headers collapse to the same canonical name the last one wins.
    """

    return {normalize_column_name(column): value for column, value in row.items()}


@lru_cache(maxsize=1024)
def _compile_glob(pattern: str) -> re.Pattern[str]:
    parts = (re.escape(part) for part in pattern.split(WILDCARD))
    return re.compile(".*".join(parts), re.DOTALL)


def matches_pattern(value: str | None, pattern: str) -> bool:
    """Return whether ``value`` is accepted by ``pattern``."""

    if value is None:
        return False

    candidate = normalize_value(value)
    expected = normalize_value(pattern)
    if candidate == expected:
        return True
    if expected == WILDCARD:
        return True
    if WILDCARD in expected:
        return _compile_glob(expected).fullmatch(candidate) is not None
    return False


def matches_any(value: str | None, patterns: Iterable[str]) -> bool:
    """Return whether ``value`` is accepted by at least one of ``patterns``."""

    return any(matches_pattern(value, pattern) for pattern in patterns)


__all__ = [
    "WILDCARD",
    "matches_any",
    "matches_pattern",
    "normalize_column_name",
    "normalize_row",
    "normalize_value",
]
