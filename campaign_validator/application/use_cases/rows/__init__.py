"""Use cases for validating campaign rows."""

from .validate_rows import (
    REASON_DEPENDENCY_MISMATCH,
    REASON_RULE_MISMATCH,
    REASON_UNKNOWN_COLUMN,
    RowValidationReport,
    ValidationIssue,
    validate_row,
    validate_rows,
)

__all__ = [
    "REASON_DEPENDENCY_MISMATCH",
    "REASON_RULE_MISMATCH",
    "REASON_UNKNOWN_COLUMN",
    "RowValidationReport",
    "ValidationIssue",
    "validate_row",
    "validate_rows",
]
