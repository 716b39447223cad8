"""Unit tests for the programmatic lint API."""

from splurge_assert_lint import main
from splurge_assert_lint.context import LintConfig
from tests.test_utils import in_test


def _write(tmp_path, name, body):
    path = tmp_path / name
    path.write_text(in_test(body), encoding="utf-8")
    return str(path)


def test_lint_collects_all_files(tmp_path):
    first = _write(tmp_path, "a.js", "expect(a > b).to.be.true;")
    second = _write(tmp_path, "b.js", "assert.ok(!a);")

    result = main.lint([first, second])

    assert result.is_success()
    assert [d.source_file for d in result.data] == [first, second]
    assert result.metadata == {"files_checked": 2, "failed_files": []}


def test_lint_single_path_string(tmp_path):
    path = _write(tmp_path, "a.js", "expect(a).to.equal(b);")
    assert main.lint(path).unwrap_or(None) == []


def test_unreadable_file_becomes_warning(tmp_path, caplog):
    good = _write(tmp_path, "a.js", "expect(a > b).to.be.true;")
    missing = str(tmp_path / "missing.js")

    result = main.lint([missing, good])

    assert result.is_warning()
    assert len(result.data) == 1
    assert result.metadata["failed_files"] == [missing]
    assert result.warnings[0].startswith(missing)
    assert "Skipping" in caplog.text


def test_fail_fast_stops_at_first_failure(tmp_path, mocker):
    good = _write(tmp_path, "a.js", "expect(a > b).to.be.true;")
    missing = str(tmp_path / "missing.js")
    lint_file = mocker.spy(main.AssertionLinter, "lint_file")

    result = main.lint([missing, good], LintConfig(fail_fast=True))

    assert result.is_error()
    assert result.metadata == {"source_file": missing}
    assert lint_file.call_count == 1


def test_discover_files_reexported():
    from splurge_assert_lint.helpers.path_utils import discover_files

    assert main.discover_files is discover_files
