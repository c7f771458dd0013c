"""Domain entity representing a cross-column dependency rule."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from campaign_validator.schemas import DependencyRuleDocument
from campaign_validator.utils import matches_any, normalize_column_name


@dataclass(frozen=True)
class DependencyRule:
    """Constraint on ``column_destiny`` gated by the value of ``column_reference``.

    The rule applies to a row only when the row's ``column_reference`` value
    matches one of ``values_reference``. When it applies, the destination value
    must match one of ``matches`` if ``has_match`` is true, and must match none
    of them otherwise.
    """

    column_reference: str
    values_reference: tuple[str, ...]
    column_destiny: str
    has_match: bool
    matches: tuple[str, ...]

    @classmethod
    def from_document(cls, document: DependencyRuleDocument) -> "DependencyRule":
        return cls(
            column_reference=document.column_reference,
            values_reference=tuple(document.values_reference),
            column_destiny=document.column_destiny,
            has_match=document.has_match,
            matches=tuple(document.matches),
        )

    @property
    def normalized_reference(self) -> str:
        return normalize_column_name(self.column_reference)

    @property
    def normalized_destiny(self) -> str:
        return normalize_column_name(self.column_destiny)

    def applies_to(self, row: Mapping[str, str | None]) -> bool:
        """Return whether the row's reference value engages this rule.

        ``row`` must be keyed by normalized column names.
        """

        return matches_any(row.get(self.normalized_reference), self.values_reference)

    def accepts(self, value: str | None) -> bool:
        matched = matches_any(value, self.matches)
        return matched if self.has_match else not matched

    def to_json(self) -> dict[str, Any]:
        return {
            "columnReference": self.column_reference,
            "valuesReference": list(self.values_reference),
            "hasMatch": self.has_match,
            "columnDestiny": self.column_destiny,
            "matches": list(self.matches),
        }


__all__ = ["DependencyRule"]
