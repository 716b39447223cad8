"""Lint rules for chai assertions in mocha test files."""

from .classifier import Decision, DecisionKind, classify
from .gate import TraversalGate
from .no_expressions_in_assertions import RULE_ID, NoExpressionsInAssertionsRule

__all__ = [
    "RULE_ID",
    "Decision",
    "DecisionKind",
    "NoExpressionsInAssertionsRule",
    "TraversalGate",
    "classify",
]
