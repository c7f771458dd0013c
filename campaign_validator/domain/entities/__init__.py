"""Domain entities exposed by the validation engine."""

from .config import ANALYTICS_TOOL_IDS, DEFAULT_CSV_SEPARATOR, URL_COLUMN, Config
from .dependency_index import DependencyIndex
from .dependency_rule import DependencyRule
from .rule_set import RuleSet

__all__ = [
    "ANALYTICS_TOOL_IDS",
    "Config",
    "DEFAULT_CSV_SEPARATOR",
    "DependencyIndex",
    "DependencyRule",
    "RuleSet",
    "URL_COLUMN",
]
