"""Per-column rules declared by a tenant configuration."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from types import MappingProxyType

from campaign_validator.exceptions import UnknownColumnError
from campaign_validator.utils import matches_any, normalize_column_name


class RuleSet:
    """Immutable mapping from column name to its acceptable value patterns.

    Columns keep their declaration order. Lookups by column name are
    case-insensitive; values are accepted when they match at least one pattern
    of the column, and columns without patterns accept anything.
    """

    def __init__(self, columns: Mapping[str, Sequence[str] | None]) -> None:
        rules = {column: tuple(patterns or ()) for column, patterns in columns.items()}
        self._null_columns: frozenset[str] = frozenset(
            column for column, patterns in columns.items() if patterns is None
        )
        self._rules: Mapping[str, tuple[str, ...]] = MappingProxyType(rules)
        self._column_names: tuple[str, ...] = tuple(rules)
        self._index: Mapping[str, str] = MappingProxyType(
            {normalize_column_name(column): column for column in self._column_names}
        )

    @property
    def rules(self) -> Mapping[str, tuple[str, ...]]:
        return self._rules

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._column_names

    def __len__(self) -> int:
        return len(self._rules)

    def __bool__(self) -> bool:
        return bool(self._rules)

    def exists_column(self, column: str) -> bool:
        """Return whether ``column`` is declared, ignoring case and spacing."""

        return normalize_column_name(column) in self._index

    def resolve_column(self, column: str) -> str:
        """Return the declared spelling of ``column`` or raise ``UnknownColumnError``."""

        try:
            return self._index[normalize_column_name(column)]
        except KeyError:
            raise UnknownColumnError(column) from None

    def patterns_for(self, column: str) -> tuple[str, ...]:
        return self._rules[self.resolve_column(column)]

    def validate_rules_for(self, column: str, value: str | None) -> bool:
        """Return whether ``value`` is acceptable for ``column``.

        Raises ``UnknownColumnError`` when the column is not declared; callers
        are expected to check :meth:`exists_column` first.
        """

        patterns = self.patterns_for(column)
        if not patterns:
            return True
        return matches_any(value, patterns)

    def to_json(self) -> dict[str, list[str] | None]:
        """Return the rules as declared; columns declared as ``null`` stay ``None``."""

        return {
            column: None if column in self._null_columns else list(patterns)
            for column, patterns in self._rules.items()
        }


__all__ = ["RuleSet"]
