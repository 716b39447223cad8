"""Intermediate Representation (IR) for assertion analysis.

These data structures describe an assertion site and the shape of the
expression it tests independently of tree-sitter, so the classifier can
be exercised directly in tests without parsing any JavaScript.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any


class Dialect(Enum):
    """The two supported assertion-library entry styles.

    ``EXPECT`` is ``expect(value)...``; ``ASSERT`` is ``assert.<method>(value, ...)``.
    """

    EXPECT = "expect"
    ASSERT = "assert"


class ExpressionKind(Enum):
    """Syntactic kind of a tested expression, named after ESTree node types."""

    BINARY = "BinaryExpression"
    CONDITIONAL = "ConditionalExpression"
    UNARY = "UnaryExpression"
    LOGICAL = "LogicalExpression"
    UPDATE = "UpdateExpression"
    OTHER = "Other"


class _NoValue:
    """Marker for operands that are not literals."""

    _instance: "_NoValue | None" = None

    def __new__(cls) -> "_NoValue":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "NO_VALUE"

    def __bool__(self) -> bool:
        return False


NO_VALUE: Any = _NoValue()


@dataclass(frozen=True)
class Operand:
    """One side of a binary expression.

    Attributes:
        value: Literal value. ``null``, ``true`` and ``false`` map to
            ``None``, ``True`` and ``False``; other literals keep their
            source text; non-literals hold ``NO_VALUE``.
        name: Identifier name (``undefined`` included), else ``None``.
        source: Source text of the operand, for messages and debugging.
    """

    value: Any = NO_VALUE
    name: str | None = None
    source: str = ""

    @property
    def is_literal(self) -> bool:
        return self.value is not NO_VALUE


@dataclass(frozen=True)
class TestedExpression:
    """The argument under test, tagged by syntactic kind.

    Only ``BINARY`` expressions carry an operator and operands.
    """

    __test__ = False  # Tell pytest not to collect this as a test class

    kind: ExpressionKind
    operator: str | None = None
    left: Operand | None = None
    right: Operand | None = None
    source: str = ""

    @classmethod
    def binary(cls, operator: str, left: Operand, right: Operand, source: str = "") -> "TestedExpression":
        return cls(kind=ExpressionKind.BINARY, operator=operator, left=left, right=right, source=source)

    def operands(self) -> tuple[Operand, ...]:
        return tuple(op for op in (self.left, self.right) if op is not None)


@dataclass(frozen=True)
class AssertionSite:
    """An assertion entry recognised in the tree.

    Attributes:
        dialect: Which entry style was matched.
        node: The node diagnostics are reported at (the ``expect(...)``
            call, or the ``assert.<method>`` member expression).
        tested: Description of the tested argument, or ``None`` when the
            entry has no tested argument.
    """

    dialect: Dialect
    node: Any
    tested: TestedExpression | None
