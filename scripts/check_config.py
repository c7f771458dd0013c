"""Utility script to check a tenant configuration document stored on disk."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from campaign_validator.application.use_cases.configs import (
    build_csv_template,
    ensure_valid_config,
)
from campaign_validator.domain.entities import Config
from campaign_validator.exceptions import CampaignValidatorError
from campaign_validator.logging import configure_logging

logger = logging.getLogger("campaign_validator.scripts.check_config")


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for the configuration check."""

    parser = argparse.ArgumentParser(
        description="Check a tenant configuration JSON document and print its CSV template.",
    )
    parser.add_argument("path", type=Path, help="Path to the configuration JSON file")
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding of the configuration file (default: utf-8)",
    )
    return parser.parse_args()


def main() -> None:
    """Load the configuration named on the command line and report on it."""

    args = parse_args()
    configure_logging()

    try:
        raw = args.path.read_text(encoding=args.encoding)
    except OSError as exc:
        raise SystemExit(f"Could not read {args.path}: {exc}") from exc

    try:
        config = ensure_valid_config(Config.from_json(raw))
    except CampaignValidatorError as exc:
        raise SystemExit(f"Invalid configuration: {exc}") from exc

    logger.info(
        "Configuration version %s declares %d columns and %d dependency rules",
        config.version,
        len(config.column_names),
        len(config.dependencies_config),
    )
    print(build_csv_template(config))


if __name__ == "__main__":
    main()
