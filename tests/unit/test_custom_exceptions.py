"""Unit tests for the exception hierarchy."""

from splurge_assert_lint.exceptions import ConfigurationError, LintError, ParseError, ValidationError
from splurge_assert_lint.helpers.path_utils import PathValidationError


def test_lint_error_details_default_to_empty():
    error = LintError("failed")
    assert str(error) == "failed"
    assert error.message == "failed"
    assert error.details == {}


def test_parse_error_details():
    error = ParseError("bad token", "a.js", line=3, column=7)
    assert isinstance(error, LintError)
    assert error.details == {"source_file": "a.js", "line": 3, "column": 7}


def test_parse_error_without_location():
    assert ParseError("unreadable", "a.js").details == {"source_file": "a.js"}


def test_validation_error_details():
    error = ValidationError("bad", "range", field="max_file_size_mb")
    assert error.details == {"validation_type": "range", "field": "max_file_size_mb"}


def test_configuration_error_details():
    assert ConfigurationError("bad").details == {}
    assert ConfigurationError("bad", config_key="output_format").details == {"config_key": "output_format"}


def test_path_validation_error_is_validation_error():
    error = PathValidationError("missing", "x.js", "not_found")
    assert isinstance(error, ValidationError)
    assert error.path == "x.js"
    assert error.details == {"validation_type": "not_found", "field": "x.js"}
