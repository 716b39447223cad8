"""Lint configuration and configuration loading.

This module defines the immutable ``LintConfig`` dataclass carrying rule
options, file discovery and output settings, and ``ConfigManager`` for
loading it from YAML files.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

import yaml

from .config_validation import validate_lint_config_object
from .exceptions import ConfigurationError
from .result import Result

logger = logging.getLogger(__name__)

# camelCase option names accepted in configuration files.
CONFIG_KEY_ALIASES = {"skipSkipped": "skip_skipped"}


@dataclass(frozen=True)
class LintConfig:
    """Lint behavior configuration.

    Serializable so callers can construct it from dictionaries or YAML
    configuration files.
    """

    # Rule options
    skip_skipped: bool = False
    """Ignore assertions inside skipped tests (``it.skip``/``xit``) and skipped suites"""
    test_names: list[str] = field(default_factory=lambda: ["it", "specify", "test"])
    suite_names: list[str] = field(default_factory=lambda: ["describe", "context", "suite"])

    # File discovery
    file_patterns: list[str] = field(default_factory=lambda: ["*.js", "*.mjs", "*.cjs"])
    recurse_directories: bool = True
    exclude_dirs: list[str] = field(default_factory=lambda: ["node_modules", ".git"])

    # Output and logging
    output_format: str = "text"
    log_level: str = "WARNING"

    # Processing
    max_file_size_mb: int = 10
    """Maximum file size in MB to lint"""
    fail_fast: bool = False
    """Stop at the first file that cannot be read"""

    def with_override(self, **kwargs: Any) -> "LintConfig":
        """Return a new ``LintConfig`` with the given fields replaced."""
        return dataclasses.replace(self, **kwargs)

    def validate(self) -> "LintConfig":
        """Validate the configuration.

        Returns:
            A ``LintConfig`` holding the validated values, coerced to their
            declared types (``"false"`` becomes ``False``, ``"5"`` becomes
            ``5``, log levels are upper-cased).

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        try:
            validated = validate_lint_config_object(self)
        except Exception as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e
        return type(self)(**validated.model_dump())

    @classmethod
    def from_dict(cls, config_dict: dict[str, Any]) -> "LintConfig":
        """Create config from dictionary.

        Unknown keys are ignored; ``skipSkipped`` is accepted as an alias
        of ``skip_skipped``.

        Raises:
            ConfigurationError: If configuration is invalid.
        """
        normalized = {CONFIG_KEY_ALIASES.get(k, k): v for k, v in config_dict.items()}
        ignored = sorted(k for k in normalized if k not in cls.__dataclass_fields__)
        if ignored:
            logger.debug("Ignoring unknown configuration keys: %s", ", ".join(ignored))
        filtered = {k: v for k, v in normalized.items() if k in cls.__dataclass_fields__}
        return cls(**filtered).validate()

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


class ConfigManager:
    """Helpers for loading and checking lint configuration.

    Methods return ``Result`` instances so the CLI can report failures
    without handling exceptions itself.
    """

    @staticmethod
    def load_config_from_file(config_file: str) -> Result[LintConfig]:
        """Load a ``LintConfig`` from a YAML file.

        Args:
            config_file: Path to the YAML configuration file.

        Returns:
            A ``Result`` containing the constructed ``LintConfig`` on
            success or an error describing the problem.
        """
        try:
            with open(config_file, encoding="utf-8") as f:
                config_data = yaml.safe_load(f)
        except FileNotFoundError:
            return Result.failure(
                ConfigurationError(f"Configuration file not found: {config_file}"), {"config_file": config_file}
            )
        except (OSError, yaml.YAMLError) as e:
            return Result.failure(
                ConfigurationError(f"Error reading configuration: {e}"), {"config_file": config_file}
            )

        if config_data is None:
            config_data = {}
        if not isinstance(config_data, dict):
            return Result.failure(
                ConfigurationError("Configuration file must contain a mapping"), {"config_file": config_file}
            )

        try:
            config = LintConfig.from_dict(config_data)
        except (ConfigurationError, TypeError) as e:
            return Result.failure(ConfigurationError(str(e)), {"config_file": config_file})
        return Result.success(config, {"config_file": config_file})
