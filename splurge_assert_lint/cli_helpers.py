"""CLI helper functions for the assertion linter.

This module contains utility functions used by the CLI commands,
separated from the main CLI module for better organization.
"""

import logging
from typing import Any

from .context import LintConfig

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def setup_logging_with_level(log_level: str) -> None:
    """Set up logging with a specific level."""
    numeric_level = getattr(logging, log_level.upper(), logging.WARNING)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")
    logging.getLogger().setLevel(numeric_level)


def collect_overrides(**cli_values: Any) -> dict[str, Any]:
    """Keep only the CLI values the user actually supplied.

    ``None`` and empty sequences mean "not given", so configuration file
    values survive unless overridden on the command line.
    """
    overrides: dict[str, Any] = {}
    for key, value in cli_values.items():
        if value is None:
            continue
        if isinstance(value, list | tuple):
            if not value:
                continue
            value = list(value)
        overrides[key] = value
    return overrides


def build_config(base_config: LintConfig | None = None, overrides: dict[str, Any] | None = None) -> LintConfig:
    """Apply CLI overrides to a base configuration and return the validated result.

    Raises:
        ConfigurationError: If the combined configuration is invalid.
    """
    config = base_config or LintConfig()
    if overrides:
        config = config.with_override(**overrides)
    return config.validate()
