"""Errors raised by the validation engine."""


class CampaignValidatorError(Exception):
    """Base class for every error raised by the package."""


class ConfigurationError(CampaignValidatorError, ValueError):
    """The raw configuration document cannot be turned into a ``Config``."""


class InvalidConfigurationError(CampaignValidatorError, ValueError):
    """The configuration is missing required values and cannot validate rows."""


class UnknownColumnError(CampaignValidatorError, KeyError):
    """A column was looked up that the configuration does not declare."""

    def __init__(self, column: str) -> None:
        super().__init__(column)
        self.column = column

    def __str__(self) -> str:
        return f"Column '{self.column}' is not declared in the configuration"


__all__ = [
    "CampaignValidatorError",
    "ConfigurationError",
    "InvalidConfigurationError",
    "UnknownColumnError",
]
