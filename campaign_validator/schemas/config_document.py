"""Pydantic models describing the raw tenant configuration document."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

PatternList = list[str]


class DependencyRuleDocument(BaseModel):
    """Raw shape of one entry of ``dependenciesConfig``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    column_reference: str = Field(..., alias="columnReference")
    values_reference: PatternList = Field(default_factory=list, alias="valuesReference")
    has_match: bool = Field(..., alias="hasMatch")
    column_destiny: str = Field(..., alias="columnDestiny")
    matches: PatternList = Field(default_factory=list)


class AnalyticsToolsDocument(BaseModel):
    """Analytics tool sections; only ``ga`` and ``adobe`` are recognized."""

    model_config = ConfigDict(extra="ignore")

    ga: dict[str, PatternList] | None = None
    adobe: dict[str, PatternList] | None = None


class ConfigDocument(BaseModel):
    """Raw configuration document as stored by the persistence layer.

    ``columns`` and ``analyticsTools`` are structurally required; every other
    field may be missing and is checked later by ``Config.validate_config``.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    separator: str | None = None
    space_separator: str | None = Field(default=None, alias="spaceSeparator")
    csv_separator: PatternList | None = Field(default=None, alias="csvSeparator")
    insert_time: str | None = Field(default=None, alias="insertTime")
    version: int | float | None = None
    analytics_tools: AnalyticsToolsDocument = Field(..., alias="analyticsTools")
    columns: dict[str, PatternList | None]
    media_taxonomy: Any = Field(default=None, alias="mediaTaxonomy")
    dependencies_config: list[DependencyRuleDocument] | None = Field(
        default=None, alias="dependenciesConfig"
    )


__all__ = ["AnalyticsToolsDocument", "ConfigDocument", "DependencyRuleDocument"]
