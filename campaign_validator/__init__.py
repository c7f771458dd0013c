"""Configuration-driven validation of campaign CSV rows."""

from campaign_validator.domain.entities import Config, DependencyRule
from campaign_validator.exceptions import (
    CampaignValidatorError,
    ConfigurationError,
    InvalidConfigurationError,
    UnknownColumnError,
)

__all__ = [
    "CampaignValidatorError",
    "Config",
    "ConfigurationError",
    "DependencyRule",
    "InvalidConfigurationError",
    "UnknownColumnError",
]
