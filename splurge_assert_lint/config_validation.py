"""Configuration validation using pydantic schemas.

``LintConfig`` is a plain frozen dataclass; this module validates its
values at runtime by round-tripping them through the pydantic model
:class:`ValidatedLintConfig`.
"""

from __future__ import annotations

import re
from typing import Any, Self

from pydantic import BaseModel, Field, field_validator, model_validator

from .reporting import OUTPUT_FORMATS

_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class ValidatedLintConfig(BaseModel):
    """Validated version of LintConfig with runtime validation."""

    # Rule options
    skip_skipped: bool = Field(default=False, description="Ignore assertions in skipped tests and suites")
    test_names: list[str] = Field(
        default_factory=lambda: ["it", "specify", "test"], description="Names of test functions"
    )
    suite_names: list[str] = Field(
        default_factory=lambda: ["describe", "context", "suite"], description="Names of suite functions"
    )

    # File discovery
    file_patterns: list[str] = Field(
        default_factory=lambda: ["*.js", "*.mjs", "*.cjs"], description="File patterns to match in directories"
    )
    recurse_directories: bool = Field(default=True, description="Whether to recurse into subdirectories")
    exclude_dirs: list[str] = Field(
        default_factory=lambda: ["node_modules", ".git"], description="Directory names never searched"
    )

    # Processing and output
    output_format: str = Field(default="text", description="Diagnostic output format (text or json)")
    log_level: str = Field(default="WARNING", description="Default logging level")
    max_file_size_mb: int = Field(default=10, ge=1, le=100, description="Maximum file size in MB")
    fail_fast: bool = Field(default=False, description="Whether to stop at the first unreadable file")

    @field_validator("file_patterns")
    @classmethod
    def validate_file_patterns(cls, v):
        if not v:
            raise ValueError(
                "At least one file pattern must be specified. Use glob patterns like '*.js' or '*.spec.js'."
            )
        for i, pattern in enumerate(v):
            if not isinstance(pattern, str) or not pattern.strip():
                raise ValueError(f"File pattern at index {i} cannot be empty or whitespace-only.")
        return v

    @field_validator("test_names", "suite_names")
    @classmethod
    def validate_names(cls, v, info):
        if not v:
            raise ValueError(f"At least one name must be given for {info.field_name}.")
        for i, name in enumerate(v):
            if not isinstance(name, str) or not _IDENTIFIER.match(name):
                raise ValueError(
                    f"{info.field_name} entry {name!r} at index {i} is not a JavaScript identifier. "
                    "Examples: 'it', 'specify', 'describe'."
                )
        return v

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v):
        if v not in OUTPUT_FORMATS:
            raise ValueError(f"output_format must be one of: {', '.join(OUTPUT_FORMATS)}, got '{v}'")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        if not isinstance(v, str):
            raise ValueError("log_level must be a string (DEBUG, INFO, WARNING, ERROR)")

        upper_v = v.upper()
        if upper_v not in VALID_LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of: {', '.join(VALID_LOG_LEVELS)}, got '{v}'. "
                "Choose DEBUG for detailed troubleshooting or WARNING for normal operation."
            )
        return upper_v

    @model_validator(mode="after")
    def validate_name_overlap(self) -> Self:
        """A name cannot be both a test function and a suite function."""
        overlap = sorted(set(self.test_names) & set(self.suite_names))
        if overlap:
            raise ValueError(f"Names used as both test and suite functions: {', '.join(overlap)}")
        return self


def validate_lint_config(config_dict: dict[str, Any]) -> ValidatedLintConfig:
    """Validate a configuration mapping.

    Raises:
        pydantic.ValidationError: If any value is invalid.
    """
    return ValidatedLintConfig(**config_dict)


def validate_lint_config_object(config) -> ValidatedLintConfig:
    """Validate an existing LintConfig object by converting to dict and back."""
    return validate_lint_config(dict(config.__dict__))
