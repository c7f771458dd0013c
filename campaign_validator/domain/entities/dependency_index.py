"""Cross-column dependency rules indexed by destination column."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from campaign_validator.utils import normalize_column_name

from .dependency_rule import DependencyRule


class DependencyIndex:
    """Immutable collection of :class:`DependencyRule` grouped by destination."""

    def __init__(self, rules: Iterable[DependencyRule] | None = None) -> None:
        self._rules: tuple[DependencyRule, ...] = tuple(rules or ())
        grouped: dict[str, list[DependencyRule]] = {}
        for rule in self._rules:
            grouped.setdefault(rule.normalized_destiny, []).append(rule)
        self._by_destiny: Mapping[str, tuple[DependencyRule, ...]] = MappingProxyType(
            {destiny: tuple(entries) for destiny, entries in grouped.items()}
        )

    @property
    def rules(self) -> tuple[DependencyRule, ...]:
        return self._rules

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def dependencies_for(self, destination_column: str) -> tuple[DependencyRule, ...]:
        """Return the rules constraining ``destination_column`` in declared order."""

        return self._by_destiny.get(normalize_column_name(destination_column), ())

    def validate_dependency_rules_for(
        self,
        row: Mapping[str, str | None],
        destination_column: str,
        value: str | None,
    ) -> bool:
        """Return whether ``value`` satisfies every rule that applies to ``row``.

        ``row`` must be keyed by normalized column names. A rule applies only
        when the row's reference value matches its reference patterns; when no
        rule applies the value is accepted.
        """

        candidates = self.dependencies_for(destination_column)
        if not candidates:
            return True

        applicable = [rule for rule in candidates if rule.applies_to(row)]
        return all(rule.accepts(value) for rule in applicable)

    def to_json(self) -> list[dict[str, Any]]:
        return [rule.to_json() for rule in self._rules]


__all__ = ["DependencyIndex"]
