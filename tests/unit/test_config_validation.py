"""Unit tests for pydantic configuration validation."""

import pytest
from pydantic import ValidationError

from splurge_assert_lint.config_validation import ValidatedLintConfig, validate_lint_config
from splurge_assert_lint.context import LintConfig
from splurge_assert_lint.config_validation import validate_lint_config_object


def test_defaults_match_lint_config():
    validated = validate_lint_config_object(LintConfig())
    assert validated.model_dump() == LintConfig().to_dict()


def test_log_level_is_normalized():
    assert validate_lint_config({"log_level": "debug"}).log_level == "DEBUG"


@pytest.mark.parametrize(
    "values",
    [
        {"log_level": "TRACE"},
        {"output_format": "xml"},
        {"file_patterns": []},
        {"file_patterns": ["*.js", "  "]},
        {"test_names": []},
        {"test_names": ["it", "not-valid"]},
        {"suite_names": ["1describe"]},
        {"test_names": ["it"], "suite_names": ["it", "describe"]},
        {"max_file_size_mb": 0},
        {"max_file_size_mb": 101},
    ],
)
def test_invalid_values_rejected(values):
    with pytest.raises(ValidationError):
        validate_lint_config(values)


def test_dollar_and_underscore_names_allowed():
    validated = ValidatedLintConfig(test_names=["$it", "_check"])
    assert validated.test_names == ["$it", "_check"]


def test_error_message_names_field():
    with pytest.raises(ValidationError, match="test_names entry 'a b'"):
        validate_lint_config({"test_names": ["a b"]})
