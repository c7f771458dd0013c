"""Use case validating tokenized CSV rows against a tenant configuration."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Final

from campaign_validator.application.use_cases.configs import ensure_valid_config
from campaign_validator.domain.entities import URL_COLUMN, Config
from campaign_validator.utils import normalize_column_name, normalize_row

logger = logging.getLogger(__name__)

REASON_UNKNOWN_COLUMN: Final[str] = "unknown_column"
REASON_RULE_MISMATCH: Final[str] = "rule_mismatch"
REASON_DEPENDENCY_MISMATCH: Final[str] = "dependency_mismatch"

_SKIPPED_COLUMNS: Final[frozenset[str]] = frozenset({normalize_column_name(URL_COLUMN)})


@dataclass(frozen=True)
class ValidationIssue:
    """One rejected cell. ``row`` is 1-based and excludes the header line."""

    row: int
    column: str
    value: str | None
    reason: str


@dataclass(frozen=True)
class RowValidationReport:
    """Outcome of validating a batch of rows."""

    total_rows: int
    issues: tuple[ValidationIssue, ...] = field(default_factory=tuple)

    @property
    def error_rows(self) -> int:
        return len({issue.row for issue in self.issues})

    @property
    def is_valid(self) -> bool:
        return not self.issues


def validate_row(
    config: Config, row: Mapping[str, str | None], *, row_number: int
) -> list[ValidationIssue]:
    """Return the issues found in a single row."""

    normalized = normalize_row(row)
    issues: list[ValidationIssue] = []
    for column, value in normalized.items():
        if column in _SKIPPED_COLUMNS:
            continue
        if not config.exists_column(column):
            issues.append(ValidationIssue(row_number, column, value, REASON_UNKNOWN_COLUMN))
            continue
        if not config.validate_rules_for(column, value):
            issues.append(ValidationIssue(row_number, column, value, REASON_RULE_MISMATCH))
        if not config.validate_dependency_rules_for(normalized, column, value):
            issues.append(
                ValidationIssue(row_number, column, value, REASON_DEPENDENCY_MISMATCH)
            )
    return issues


def validate_rows(
    config: Config, rows: Iterable[Mapping[str, str | None]]
) -> RowValidationReport:
    """Validate every row and collect the rejected cells.

    Raises ``InvalidConfigurationError`` before touching any row when the
    configuration is incomplete.
    """

    ensure_valid_config(config)

    issues: list[ValidationIssue] = []
    total_rows = 0
    for total_rows, row in enumerate(rows, start=1):
        row_issues = validate_row(config, row, row_number=total_rows)
        for issue in row_issues:
            logger.debug(
                "Row %d column '%s' rejected (%s): %r",
                issue.row,
                issue.column,
                issue.reason,
                issue.value,
            )
        issues.extend(row_issues)

    report = RowValidationReport(total_rows=total_rows, issues=tuple(issues))
    logger.info(
        "Validated %d rows against configuration version %s: %d with errors",
        report.total_rows,
        config.version,
        report.error_rows,
    )
    return report
