"""Classification of tested expressions in chai assertions.

Given an assertion site, decide whether the tested argument is a raw
expression that should be replaced by a chai method, and if so which
method to suggest. The decision is a pure function of the site's IR:

1. Conditional, unary, logical and update expressions get the generic
   message; any other non-binary shape is accepted.
2. Binary expressions are looked up in the dialect's operator table. An
   unmapped operator gets the generic message, a relational or
   ``instanceof`` operator gets the table idiom directly.
3. Equality operators are refined, first match wins: a ``null``,
   ``true`` or ``false`` literal operand (checked in that order), then
   an ``undefined`` operand, then the plain equality idiom.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ..ir import AssertionSite, Dialect, ExpressionKind, TestedExpression

DEFAULT_MESSAGE = "Expression should not be used here."
DETAILED_MESSAGE = "`{should_use}` should be used."

DEFAULT_REPORT_KINDS = frozenset(
    {ExpressionKind.CONDITIONAL, ExpressionKind.UNARY, ExpressionKind.LOGICAL, ExpressionKind.UPDATE}
)

EQUALITY_OPERATORS = frozenset({"===", "==", "!==", "!="})
NEGATED_EQUALITY_OPERATORS = frozenset({"!==", "!="})

EXPECT_IDIOMS: dict[str, str] = {
    "===": ".to.be.equal",
    "!==": ".to.be.not.equal",
    "==": ".to.be.equal",
    "!=": ".to.be.not.equal",
    ">=": ".to.be.at.least",
    ">": ".to.be.above",
    "<=": ".to.be.at.most",
    "<": ".to.be.below",
    "instanceof": ".to.be.instanceof",
}

ASSERT_IDIOMS: dict[str, str] = {
    "===": ".strictEqual",
    "!==": ".notStrictEqual",
    "==": ".equal",
    "!=": ".notEqual",
    ">=": ".isAtLeast",
    ">": ".isAbove",
    "<=": ".isAtMost",
    "<": ".isBelow",
}


class EqualityMatch(Enum):
    """Special operand found in an equality comparison; values are the JavaScript spellings."""

    NULL = "null"
    TRUE = "true"
    FALSE = "false"
    UNDEFINED = "undefined"


# Checked in this order; the first literal match wins.
PRIMITIVE_MATCHES: tuple[tuple[Any, EqualityMatch], ...] = (
    (None, EqualityMatch.NULL),
    (True, EqualityMatch.TRUE),
    (False, EqualityMatch.FALSE),
)


def match_equality_special(expr: TestedExpression) -> EqualityMatch | None:
    """Return the special operand of an equality comparison, if any.

    Literal ``null``, ``true`` and ``false`` operands take precedence over
    an ``undefined`` identifier, whichever side they are on.
    """
    operands = expr.operands()
    for value, match in PRIMITIVE_MATCHES:
        if any(operand.value is value for operand in operands):
            return match
    if any(operand.name == "undefined" for operand in operands):
        return EqualityMatch.UNDEFINED
    return None


def expect_idiom(operator: str, match: EqualityMatch | None = None) -> str | None:
    """Spell the ``expect`` idiom for ``operator``.

    Returns ``None`` for unmapped operators. ``match`` only refines
    equality operators: ``a !== null`` becomes ``.to.not.be.null``.
    """
    base = EXPECT_IDIOMS.get(operator)
    if base is None or match is None or operator not in EQUALITY_OPERATORS:
        return base
    negation = "not." if operator in NEGATED_EQUALITY_OPERATORS else ""
    return f".to.{negation}be.{match.value}"


def assert_idiom(operator: str, match: EqualityMatch | None = None) -> str | None:
    """Spell the ``assert`` idiom for ``operator``.

    Returns ``None`` for unmapped operators (``instanceof`` included).
    Primitives spell as ``.isNull`` / ``.isNotNull``. For ``undefined``
    the negated operator maps to ``.isUndefined`` and the plain one to
    ``.isDefined``, the reverse of the ``expect`` polarity.
    """
    base = ASSERT_IDIOMS.get(operator)
    if base is None or match is None or operator not in EQUALITY_OPERATORS:
        return base
    negated = operator in NEGATED_EQUALITY_OPERATORS
    if match is EqualityMatch.UNDEFINED:
        return ".isUndefined" if negated else ".isDefined"
    return f".is{'Not' if negated else ''}{match.value.capitalize()}"


IDIOM_SPELLERS = {
    Dialect.EXPECT: expect_idiom,
    Dialect.ASSERT: assert_idiom,
}


class DecisionKind(Enum):
    """Outcome of classifying one assertion site."""

    NO_REPORT = "no_report"
    REPORT_DEFAULT = "report_default"
    REPORT_DETAILED = "report_detailed"


@dataclass(frozen=True)
class Decision:
    """Classification result and the message it implies."""

    kind: DecisionKind
    idiom: str | None = None

    @classmethod
    def no_report(cls) -> Decision:
        return cls(DecisionKind.NO_REPORT)

    @classmethod
    def default(cls) -> Decision:
        return cls(DecisionKind.REPORT_DEFAULT)

    @classmethod
    def detailed(cls, idiom: str) -> Decision:
        return cls(DecisionKind.REPORT_DETAILED, idiom)

    @property
    def should_report(self) -> bool:
        return self.kind is not DecisionKind.NO_REPORT

    @property
    def message(self) -> str | None:
        """Message template for the reporter, ``None`` for ``NO_REPORT``."""
        if self.kind is DecisionKind.REPORT_DETAILED:
            return DETAILED_MESSAGE
        if self.kind is DecisionKind.REPORT_DEFAULT:
            return DEFAULT_MESSAGE
        return None

    @property
    def params(self) -> dict[str, str]:
        if self.kind is DecisionKind.REPORT_DETAILED and self.idiom is not None:
            return {"should_use": self.idiom}
        return {}

    def render(self) -> str | None:
        template = self.message
        return template.format(**self.params) if template is not None else None


def classify(site: AssertionSite) -> Decision:
    """Classify the tested expression of ``site``.

    A site without a tested argument is never reported.
    """
    tested = site.tested
    if tested is None:
        return Decision.no_report()

    if tested.kind is not ExpressionKind.BINARY:
        if tested.kind in DEFAULT_REPORT_KINDS:
            return Decision.default()
        return Decision.no_report()

    operator = tested.operator or ""
    spell = IDIOM_SPELLERS[site.dialect]
    base = spell(operator)
    if base is None:
        return Decision.default()
    if operator not in EQUALITY_OPERATORS:
        return Decision.detailed(base)

    idiom = spell(operator, match_equality_special(tested))
    return Decision.detailed(idiom or base)
