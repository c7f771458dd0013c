"""Use case for rendering the CSV header template of a configuration."""

from campaign_validator.domain.entities import Config


def build_csv_template(config: Config) -> str:
    """Return the header line users must fill in for ``config``."""

    return config.to_csv_template()
