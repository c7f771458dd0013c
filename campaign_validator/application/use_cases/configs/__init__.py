"""Use cases for managing tenant configurations."""

from .build_csv_template import build_csv_template
from .load_config import ensure_valid_config, load_config
from .revise_config import revise_config

__all__ = [
    "build_csv_template",
    "ensure_valid_config",
    "load_config",
    "revise_config",
]
