"""Domain entity representing a tenant's validation configuration."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping
from typing import Any, Final

from pydantic import ValidationError

from campaign_validator.exceptions import ConfigurationError, UnknownColumnError
from campaign_validator.schemas import ConfigDocument

from .dependency_index import DependencyIndex
from .dependency_rule import DependencyRule
from .rule_set import RuleSet

logger = logging.getLogger(__name__)

URL_COLUMN: Final[str] = "Url"
DEFAULT_CSV_SEPARATOR: Final[str] = ","
ANALYTICS_TOOL_IDS: Final[tuple[str, ...]] = ("ga", "adobe")


class Config:
    """Parsed validation contract of one tenant configuration version.

    Every attribute is fixed at construction except ``insert_time`` and
    ``version``, which the persistence layer stamps on each revision.
    """

    def __init__(self, document: Mapping[str, Any]) -> None:
        try:
            parsed = ConfigDocument.model_validate(document)
        except ValidationError as exc:
            raise ConfigurationError(f"Malformed configuration document: {exc}") from exc

        self._separator = parsed.separator
        self._space_separator = parsed.space_separator
        self._csv_separator = tuple(parsed.csv_separator) if parsed.csv_separator else None
        self._insert_time = parsed.insert_time
        self._version = parsed.version
        self._analytics_tools = self._build_analytics_tools(parsed)
        self._analytics_tool_names = tuple(self._analytics_tools or ())
        self._media_taxonomy = (
            copy.deepcopy(parsed.media_taxonomy) if parsed.media_taxonomy else None
        )
        self._rule_set = RuleSet(parsed.columns)
        self._dependencies = DependencyIndex(
            DependencyRule.from_document(entry)
            for entry in parsed.dependencies_config or ()
        )
        logger.debug(
            "Built configuration version %s with %d columns and %d dependency rules",
            self._version,
            len(self._rule_set),
            len(self._dependencies),
        )

    @classmethod
    def from_json(cls, raw: str) -> "Config":
        """Build a configuration from its serialized JSON text."""

        try:
            document = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Configuration is not valid JSON: {exc}") from exc
        if not isinstance(document, Mapping):
            raise ConfigurationError("Configuration JSON must be an object")
        return cls(document)

    @staticmethod
    def _build_analytics_tools(
        parsed: ConfigDocument,
    ) -> dict[str, dict[str, list[str]]] | None:
        tools: dict[str, dict[str, list[str]]] = {}
        for tool_id in ANALYTICS_TOOL_IDS:
            section = getattr(parsed.analytics_tools, tool_id)
            if section is not None:
                tools[tool_id] = copy.deepcopy(section)
        return tools or None

    def validate_config(self) -> bool:
        """Return whether every required field is present.

        Scalar fields must be non-empty; analytics tools and columns only need
        to be declared, even with an empty section.
        """

        return all(
            (
                self._separator,
                self._space_separator,
                self._insert_time,
                self._version,
                self._analytics_tools,
                self._rule_set is not None,
            )
        )

    def exists_column(self, csv_column: str) -> bool:
        """Return whether ``csv_column`` is declared, ignoring case."""

        return self._rule_set.exists_column(csv_column)

    def validate_rules_for(self, csv_column: str, value: str | None) -> bool:
        """Return whether ``value`` satisfies the rules of ``csv_column``."""

        return self._rule_set.validate_rules_for(csv_column, value)

    def dependencies_for(self, csv_column: str) -> tuple[DependencyRule, ...]:
        return self._dependencies.dependencies_for(csv_column)

    def validate_dependency_rules_for(
        self,
        csv_line: Mapping[str, str | None],
        csv_column: str,
        value: str | None,
    ) -> bool:
        """Return whether ``value`` satisfies the dependency rules of ``csv_column``.

        ``csv_line`` is the whole row keyed by normalized column names.
        """

        if not self._rule_set.exists_column(csv_column):
            raise UnknownColumnError(csv_column)
        return self._dependencies.validate_dependency_rules_for(csv_line, csv_column, value)

    def to_csv_template(self) -> str:
        """Return the CSV header line expected for uploads of this configuration."""

        separator = self._csv_separator[0] if self._csv_separator else DEFAULT_CSV_SEPARATOR
        return separator.join((URL_COLUMN, *self._rule_set.column_names))

    def to_json(self) -> dict[str, Any]:
        """Return the document stored by the persistence layer."""

        optional_fields: tuple[tuple[str, Any], ...] = (
            ("separator", self._separator),
            ("spaceSeparator", self._space_separator),
            ("csvSeparator", list(self._csv_separator) if self._csv_separator else None),
            ("insertTime", self._insert_time),
            ("version", self._version),
            ("analyticsTools", copy.deepcopy(self._analytics_tools)),
            ("mediaTaxonomy", copy.deepcopy(self._media_taxonomy)),
        )
        document = {key: value for key, value in optional_fields if value}
        document["columns"] = self._rule_set.to_json()
        if self._dependencies:
            document["dependenciesConfig"] = self._dependencies.to_json()
        return document

    def to_string(self) -> str:
        return json.dumps(self.to_json())

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return (
            f"Config(version={self._version!r}, insert_time={self._insert_time!r}, "
            f"columns={len(self._rule_set)}, dependencies={len(self._dependencies)})"
        )

    @property
    def separator(self) -> str | None:
        return self._separator

    @property
    def space_separator(self) -> str | None:
        return self._space_separator

    @property
    def csv_separator(self) -> tuple[str, ...] | None:
        return self._csv_separator

    @property
    def insert_time(self) -> str | None:
        return self._insert_time

    @insert_time.setter
    def insert_time(self, insert_time: str) -> None:
        self._insert_time = insert_time

    @property
    def version(self) -> int | float | None:
        return self._version

    @version.setter
    def version(self, version: int) -> None:
        self._version = version

    @property
    def analytics_tools(self) -> dict[str, dict[str, list[str]]] | None:
        return self._analytics_tools

    @property
    def analytics_tool_names(self) -> tuple[str, ...]:
        return self._analytics_tool_names

    @property
    def media_taxonomy(self) -> Any:
        return self._media_taxonomy

    @property
    def validation_rules(self) -> Mapping[str, tuple[str, ...]]:
        return self._rule_set.rules

    @property
    def column_names(self) -> tuple[str, ...]:
        return self._rule_set.column_names

    @property
    def dependencies_config(self) -> tuple[DependencyRule, ...]:
        return self._dependencies.rules


__all__ = ["ANALYTICS_TOOL_IDS", "Config", "DEFAULT_CSV_SEPARATOR", "URL_COLUMN"]
