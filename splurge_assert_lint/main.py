"""Programmatic API for splurge_assert_lint.

This module exposes ``lint``, used by the CLI and tests. It delegates
per-file work to ``AssertionLinter`` and returns a ``Result`` holding
every diagnostic found.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .context import LintConfig
from .helpers.path_utils import discover_files
from .linter import AssertionLinter
from .reporting import Diagnostic
from .result import Result

logger = logging.getLogger(__name__)

__all__ = ["discover_files", "lint"]


def lint(source_files: Iterable[str] | str, config: LintConfig | None = None) -> Result[list[Diagnostic]]:
    """Lint one or more source files.

    Args:
        source_files: Iterable of file paths (or single path string).
        config: Optional ``LintConfig`` to control lint behavior.

    Returns:
        ``Result`` containing the diagnostics of all files. Files that
        could not be linted are listed in ``warnings`` and in
        ``metadata["failed_files"]``; with ``config.fail_fast`` the first
        such file turns the whole run into a failure ``Result``.
    """
    files = [source_files] if isinstance(source_files, str) else list(source_files)
    if config is None:
        config = LintConfig()

    linter = AssertionLinter(config)
    diagnostics: list[Diagnostic] = []
    warnings: list[str] = []
    failed: list[str] = []

    for src in files:
        res = linter.lint_file(src)
        if res.is_error():
            if config.fail_fast:
                return Result.failure(res.error or RuntimeError(f"Failed to lint {src}"), {"source_file": src})
            logger.warning("Skipping %s: %s", src, res.error)
            warnings.append(f"{src}: {res.error}")
            failed.append(src)
            continue
        diagnostics.extend(res.unwrap_or([]))

    metadata = {"files_checked": len(files) - len(failed), "failed_files": failed}
    if warnings:
        return Result.warning(diagnostics, warnings, metadata)
    return Result.success(diagnostics, metadata)
