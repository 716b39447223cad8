"""Per-file lint orchestration.

``AssertionLinter`` reads a JavaScript test file, parses it and runs the
no-expressions-in-assertions rule over the tree. File problems are
returned as failure ``Result`` values so one bad file never stops a run.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

import logging

from .context import LintConfig
from .detectors.test_structure import TestStructureDetector
from .exceptions import ParseError
from .helpers.path_utils import PathValidationError, validate_source_path
from .reporting import Diagnostic, DiagnosticReporter
from .result import Result
from .rules.no_expressions_in_assertions import RULE_ID, NoExpressionsInAssertionsRule
from .syntax.parser import parse_source


def _decode_error_position(error: UnicodeDecodeError) -> tuple[int, int]:
    """Return the 1-based line and byte column of the first undecodable byte."""
    consumed = bytes(error.object[: error.start])
    return consumed.count(b"\n") + 1, error.start - (consumed.rfind(b"\n") + 1) + 1


class AssertionLinter:
    """Lints JavaScript sources for raw expressions in chai assertions.

    Args:
        config: Optional ``LintConfig``; defaults are used when omitted.
    """

    def __init__(self, config: LintConfig | None = None) -> None:
        self.config = config or LintConfig()
        self.detector = TestStructureDetector(self.config.test_names, self.config.suite_names)
        self._logger = logging.getLogger(__name__)

    def lint_source(self, source: str | bytes, source_file: str = "<string>") -> list[Diagnostic]:
        """Lint in-memory source text and return its diagnostics."""
        tree = parse_source(source, source_file)
        reporter = DiagnosticReporter(source_file, RULE_ID)
        rule = NoExpressionsInAssertionsRule(reporter, skip_skipped=self.config.skip_skipped, detector=self.detector)
        diagnostics = rule.check(tree)
        self._logger.debug("%s: %d diagnostic(s)", source_file, len(diagnostics))
        return diagnostics

    def lint_file(self, source_file: str) -> Result[list[Diagnostic]]:
        """Lint one file.

        Returns:
            ``Result`` with the file's diagnostics, or a failure carrying a
            ``PathValidationError`` or ``ParseError``.
        """
        try:
            path = validate_source_path(source_file)
        except PathValidationError as e:
            return Result.failure(e, {"source_file": source_file})

        try:
            size = path.stat().st_size
            if size > self.config.max_file_size_bytes:
                return Result.failure(
                    ParseError(
                        f"File is {size} bytes, larger than the {self.config.max_file_size_mb} MB limit",
                        source_file,
                    ),
                    {"source_file": source_file},
                )
            source = path.read_bytes().decode("utf-8-sig")
        except UnicodeDecodeError as e:
            line, column = _decode_error_position(e)
            return Result.failure(
                ParseError(f"Cannot decode file as UTF-8: {e.reason} at line {line}", source_file, line, column),
                {"source_file": source_file},
            )
        except OSError as e:
            return Result.failure(ParseError(f"Cannot read file: {e}", source_file), {"source_file": source_file})

        self._logger.info("Linting %s", source_file)
        return Result.success(self.lint_source(source, source_file), {"source_file": source_file})
