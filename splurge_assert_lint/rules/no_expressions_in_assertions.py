"""Rule: no-expressions-in-assertions.

Flags chai assertions whose tested value is a raw expression, for
example ``expect(a === b)`` or ``assert.ok(a > 1)``, and suggests the
chai method that states the same check (``.to.be.equal``, ``.isAbove``).
A failing ``expect(a === b)`` only reports that ``false`` was not
truthy; the chai method reports both values.

Only assertions inside test bodies (``it``, ``specify``, ``test``) are
checked. With ``skip_skipped`` enabled, assertions in skipped tests or
inside skipped suites are ignored.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging

import tree_sitter

from ..detectors.assertion_entry import recognize_assertion
from ..detectors.test_structure import TestStructureDetector
from ..reporting import Diagnostic, DiagnosticReporter
from ..syntax.visitor import JsVisitor
from .classifier import classify
from .gate import TraversalGate

logger = logging.getLogger(__name__)

RULE_ID = "no-expressions-in-assertions"


class NoExpressionsInAssertionsRule(JsVisitor):
    """Visitor reporting raw expressions passed to ``expect`` and ``assert.*``.

    Args:
        reporter: Sink receiving one report per flagged assertion.
        skip_skipped: Ignore assertions in skipped tests and suites.
        detector: Test-structure detector; defaults to mocha names.
    """

    RULE_ID = RULE_ID

    def __init__(
        self,
        reporter: DiagnosticReporter,
        skip_skipped: bool = False,
        detector: TestStructureDetector | None = None,
    ) -> None:
        self.reporter = reporter
        self.detector = detector or TestStructureDetector()
        self.gate = TraversalGate(skip_skipped, self.detector.is_skipped_ancestor)

    def check(self, tree: tree_sitter.Tree | tree_sitter.Node) -> list[Diagnostic]:
        """Walk ``tree`` once and return the diagnostics reported so far."""
        self.walk(tree)
        return self.reporter.diagnostics

    def _enter_function(self, node: tree_sitter.Node) -> None:
        if self.detector.is_test_body(node):
            logger.debug("Entering test body %r", self.detector.test_title(node))
            self.gate.enter_test_body(node)

    def _leave_function(self, node: tree_sitter.Node) -> None:
        if self.detector.is_test_body(node):
            self.gate.exit_test_body(node)

    visit_function_expression = _enter_function
    visit_function = _enter_function
    visit_generator_function = _enter_function
    visit_arrow_function = _enter_function
    leave_function_expression = _leave_function
    leave_function = _leave_function
    leave_generator_function = _leave_function
    leave_arrow_function = _leave_function

    def visit_call_expression(self, node: tree_sitter.Node) -> None:
        self._check_site(node)

    def visit_member_expression(self, node: tree_sitter.Node) -> None:
        self._check_site(node)

    def _check_site(self, node: tree_sitter.Node) -> None:
        if not self.gate.is_open:
            return
        try:
            site = recognize_assertion(node)
            if site is None:
                return
            decision = classify(site)
        except (AttributeError, TypeError, ValueError, IndexError) as e:
            logger.debug("Could not classify assertion at line %d: %s", node.start_point[0] + 1, e)
            return

        if decision.message is not None:
            self.reporter.report(site.node, decision.message, decision.params)
