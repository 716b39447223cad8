"""Diagnostics sink and output formatters.

Rules report through a :class:`DiagnosticReporter`, which renders the
message template with its parameters and records a :class:`Diagnostic`
at the node's source location. The formatters turn collected
diagnostics into CLI output.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any

from .syntax.nodes import node_text

OUTPUT_FORMATS = ("text", "json")


@dataclass(frozen=True)
class Diagnostic:
    """One reported problem. Lines and columns are 1-based."""

    source_file: str
    line: int
    column: int
    rule_id: str
    message: str
    params: dict[str, str] = field(default_factory=dict)
    end_line: int | None = None
    end_column: int | None = None
    source: str = ""

    def to_dict(self) -> dict[str, Any]:
        return dataclasses.asdict(self)

    def __str__(self) -> str:
        return f"{self.source_file}:{self.line}:{self.column}: {self.message} [{self.rule_id}]"


class DiagnosticReporter:
    """Collects diagnostics for one source file.

    Args:
        source_file: Path recorded on every diagnostic.
        rule_id: Identifier of the reporting rule.
    """

    def __init__(self, source_file: str, rule_id: str) -> None:
        self.source_file = source_file
        self.rule_id = rule_id
        self.diagnostics: list[Diagnostic] = []

    def report(self, node: Any, message: str, params: dict[str, str] | None = None) -> Diagnostic:
        """Record a diagnostic for ``node``.

        Args:
            node: tree-sitter node whose start position locates the problem.
            message: Message template using ``str.format`` placeholders.
            params: Values for the template placeholders.

        Returns:
            The recorded :class:`Diagnostic`.
        """
        params = dict(params or {})
        start_row, start_col = node.start_point[0], node.start_point[1]
        end_row, end_col = node.end_point[0], node.end_point[1]
        diagnostic = Diagnostic(
            source_file=self.source_file,
            line=start_row + 1,
            column=start_col + 1,
            rule_id=self.rule_id,
            message=message.format(**params),
            params=params,
            end_line=end_row + 1,
            end_column=end_col + 1,
            source=node_text(node),
        )
        self.diagnostics.append(diagnostic)
        return diagnostic


def format_text(diagnostics: Iterable[Diagnostic]) -> str:
    """Render diagnostics one per line, followed by a summary line."""
    items = list(diagnostics)
    if not items:
        return "No problems found."
    lines = [str(d) for d in items]
    files = len({d.source_file for d in items})
    noun = "problem" if len(items) == 1 else "problems"
    lines.append(f"Found {len(items)} {noun} in {files} file{'' if files == 1 else 's'}.")
    return "\n".join(lines)


def format_json(diagnostics: Iterable[Diagnostic]) -> str:
    """Render diagnostics as a JSON array."""
    return json.dumps([d.to_dict() for d in diagnostics], indent=2)


def format_diagnostics(diagnostics: Iterable[Diagnostic], output_format: str = "text") -> str:
    """Render diagnostics in ``output_format`` (``text`` or ``json``)."""
    if output_format == "json":
        return format_json(diagnostics)
    if output_format == "text":
        return format_text(diagnostics)
    raise ValueError(f"Unsupported output format: {output_format!r}. Use one of: {', '.join(OUTPUT_FORMATS)}")
