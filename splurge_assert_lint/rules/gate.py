"""Per-traversal test-body gate.

The gate records whether the walker is inside a test body and whether
that test, or a suite around it, is skipped. One gate is created per
traversal and owned by the rule instance driving it.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)


class TraversalGate:
    """Two-state machine (outside test / inside test) with a skip flag.

    Nested test bodies are not tracked separately: leaving any test body
    closes the gate.

    Args:
        skip_skipped: When True, entering a test body computes whether it
            is suppressed by a skip marker on it or an enclosing suite.
        is_skipped: Predicate reporting a skip marker on an ancestor of
            the given test body.
    """

    def __init__(self, skip_skipped: bool, is_skipped: Callable[[Any], bool]) -> None:
        self.skip_skipped = skip_skipped
        self._is_skipped = is_skipped
        self.active = False
        self.suppressed = False

    @property
    def is_open(self) -> bool:
        """True when assertions at the current position should be classified."""
        return self.active and not self.suppressed

    def enter_test_body(self, node: Any) -> None:
        self.active = True
        if self.skip_skipped:
            self.suppressed = self._is_skipped(node)
            if self.suppressed:
                logger.debug("Skipped test body at line %d; assertions suppressed", node.start_point[0] + 1)

    def exit_test_body(self, node: Any) -> None:
        self.active = False
        self.suppressed = False
