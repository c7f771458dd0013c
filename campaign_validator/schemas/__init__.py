"""Schemas for the documents exchanged with the persistence layer."""

from .config_document import (
    AnalyticsToolsDocument,
    ConfigDocument,
    DependencyRuleDocument,
)

__all__ = ["AnalyticsToolsDocument", "ConfigDocument", "DependencyRuleDocument"]
