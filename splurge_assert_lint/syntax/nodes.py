"""Safe access helpers for tree-sitter JavaScript nodes.

tree-sitter trees keep parentheses and comments that an ESTree parser
would drop; the helpers here hide those differences so the rules can
reason in ESTree terms (``BinaryExpression``, ``Literal`` values,
``Identifier`` names).

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import tree_sitter

from ..ir import ExpressionKind, Operand, TestedExpression

LOGICAL_OPERATORS = frozenset({"&&", "||", "??"})

_KIND_BY_NODE_TYPE = {
    "ternary_expression": ExpressionKind.CONDITIONAL,
    "unary_expression": ExpressionKind.UNARY,
    "update_expression": ExpressionKind.UPDATE,
}

_KEYWORD_VALUES = {"null": None, "true": True, "false": False}

_LITERAL_TYPES = frozenset({"number", "string", "regex", "template_string"})


def node_text(node: tree_sitter.Node | None) -> str:
    """Return the source text of ``node`` (empty for ``None``)."""
    if node is None or node.text is None:
        return ""
    return node.text.decode("utf-8", errors="replace")


def named_children(node: tree_sitter.Node) -> list[tree_sitter.Node]:
    """Return the named children of ``node`` without comments."""
    return [child for child in node.named_children if child.type != "comment"]


def safe_get(node: tree_sitter.Node | None, path: str) -> tree_sitter.Node | None:
    """Follow a dotted path of field names or child indexes.

    ``safe_get(call, "function.object")`` returns the object of a called
    member expression; ``safe_get(call, "arguments.0")`` returns the first
    argument. Integer segments index the named, non-comment children.
    Any missing step yields ``None`` instead of raising.
    """
    current = node
    for segment in path.split("."):
        if current is None:
            return None
        if segment.isdigit():
            children = named_children(current)
            index = int(segment)
            current = children[index] if index < len(children) else None
        else:
            current = current.child_by_field_name(segment)
    return current


def unwrap_parentheses(node: tree_sitter.Node | None) -> tree_sitter.Node | None:
    """Strip any number of enclosing ``parenthesized_expression`` wrappers."""
    while node is not None and node.type == "parenthesized_expression":
        inner = named_children(node)
        if not inner:
            break
        node = inner[0]
    return node


def call_arguments(call: tree_sitter.Node) -> list[tree_sitter.Node]:
    """Return the argument nodes of a ``call_expression``.

    Tagged template calls (``it`...```) have no argument list and yield
    an empty list.
    """
    args = call.child_by_field_name("arguments")
    if args is None or args.type != "arguments":
        return []
    return named_children(args)


def describe_operand(node: tree_sitter.Node | None) -> Operand:
    """Describe one operand of a binary expression."""
    node = unwrap_parentheses(node)
    if node is None:
        return Operand()
    text = node_text(node)
    if node.type in _KEYWORD_VALUES:
        return Operand(value=_KEYWORD_VALUES[node.type], source=text)
    if node.type in ("identifier", "undefined"):
        return Operand(name=text, source=text)
    if node.type in _LITERAL_TYPES:
        return Operand(value=text, source=text)
    return Operand(source=text)


def describe_expression(node: tree_sitter.Node) -> TestedExpression:
    """Map a tested-argument node to its ``TestedExpression``."""
    node = unwrap_parentheses(node)
    text = node_text(node)
    if node.type == "binary_expression":
        operator_node = node.child_by_field_name("operator")
        operator = operator_node.type if operator_node is not None else ""
        if operator in LOGICAL_OPERATORS:
            return TestedExpression(kind=ExpressionKind.LOGICAL, operator=operator, source=text)
        return TestedExpression.binary(
            operator,
            describe_operand(node.child_by_field_name("left")),
            describe_operand(node.child_by_field_name("right")),
            source=text,
        )
    kind = _KIND_BY_NODE_TYPE.get(node.type, ExpressionKind.OTHER)
    return TestedExpression(kind=kind, source=text)
