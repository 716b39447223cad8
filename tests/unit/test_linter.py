"""Unit tests for AssertionLinter."""

from splurge_assert_lint.context import LintConfig
from splurge_assert_lint.exceptions import ParseError
from splurge_assert_lint.helpers.path_utils import PathValidationError
from splurge_assert_lint.linter import AssertionLinter
from tests.test_utils import in_test

CODE = in_test("expect(a > b).to.be.true;")


def test_lint_source_accepts_bytes():
    diagnostics = AssertionLinter().lint_source(CODE.encode("utf-8"), "mem.js")
    assert [d.source_file for d in diagnostics] == ["mem.js"]


def test_lint_file(tmp_path):
    path = tmp_path / "a.spec.js"
    path.write_text(CODE, encoding="utf-8")

    result = AssertionLinter().lint_file(str(path))

    assert result.is_success()
    assert len(result.data) == 1
    assert result.metadata == {"source_file": str(path)}


def test_lint_file_with_bom(tmp_path):
    path = tmp_path / "bom.js"
    path.write_bytes(b"\xef\xbb\xbf" + CODE.encode("utf-8"))
    (diagnostic,) = AssertionLinter().lint_file(str(path)).unwrap()
    assert diagnostic.line == 2


def test_missing_file_is_failure(tmp_path):
    result = AssertionLinter().lint_file(str(tmp_path / "missing.js"))
    assert result.is_error()
    assert isinstance(result.error, PathValidationError)


def test_undecodable_file_is_failure(tmp_path):
    path = tmp_path / "latin1.js"
    path.write_bytes(b"// caf\xe9\n")
    result = AssertionLinter().lint_file(str(path))
    assert isinstance(result.error, ParseError)
    assert "UTF-8" in str(result.error)
    assert result.error.details == {"source_file": str(path), "line": 1, "column": 7}


def test_oversized_file_is_failure(tmp_path, mocker):
    path = tmp_path / "big.js"
    path.write_text(CODE, encoding="utf-8")
    linter = AssertionLinter(LintConfig(max_file_size_mb=1))
    mocker.patch.object(LintConfig, "max_file_size_bytes", new_callable=mocker.PropertyMock, return_value=10)

    result = linter.lint_file(str(path))

    assert result.is_error()
    assert "larger than" in str(result.error)


def test_read_error_is_failure(tmp_path, mocker):
    path = tmp_path / "a.js"
    path.write_text(CODE, encoding="utf-8")
    mocker.patch("pathlib.Path.read_bytes", side_effect=PermissionError("denied"))

    result = AssertionLinter().lint_file(str(path))

    assert isinstance(result.error, ParseError)
    assert "Cannot read file" in str(result.error)


def test_skip_skipped_config_applies(tmp_path):
    path = tmp_path / "skip.js"
    path.write_text(in_test("expect(a > b).to.be.true;", test="xit"), encoding="utf-8")
    assert AssertionLinter(LintConfig(skip_skipped=True)).lint_file(str(path)).unwrap() == []


def test_undecodable_byte_position_on_later_line(tmp_path):
    path = tmp_path / "later.js"
    path.write_bytes(b"const a = 1;\nconst b = '\xff';\n")
    error = AssertionLinter().lint_file(str(path)).error
    assert (error.details["line"], error.details["column"]) == (2, 12)
    assert "at line 2" in str(error)
