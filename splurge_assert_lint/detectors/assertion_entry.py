"""Recognition of chai assertion entry points.

Two entry styles are recognised:

- ``expect(value)...``: a call whose callee is the identifier ``expect``;
  the tested value is its first argument.
- ``assert.<method>(value, ...)``: a member expression on the identifier
  ``assert``; the tested value is the first argument of the call that
  member expression is the callee of.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import tree_sitter

from ..ir import AssertionSite, Dialect
from ..syntax.nodes import call_arguments, describe_expression, node_text

EXPECT_ENTRY = "expect"
ASSERT_ENTRY = "assert"


def _is_identifier(node: tree_sitter.Node | None, name: str) -> bool:
    return node is not None and node.type == "identifier" and node_text(node) == name


def _first_argument_site(dialect: Dialect, site_node: tree_sitter.Node, call: tree_sitter.Node | None) -> AssertionSite:
    args = call_arguments(call) if call is not None else []
    tested = describe_expression(args[0]) if args else None
    return AssertionSite(dialect=dialect, node=site_node, tested=tested)


def recognize_expect(node: tree_sitter.Node) -> AssertionSite | None:
    """Return an ``EXPECT`` site for ``expect(...)`` calls, else ``None``."""
    if node.type != "call_expression":
        return None
    if not _is_identifier(node.child_by_field_name("function"), EXPECT_ENTRY):
        return None
    return _first_argument_site(Dialect.EXPECT, node, node)


def recognize_assert(node: tree_sitter.Node) -> AssertionSite | None:
    """Return an ``ASSERT`` site for ``assert.<method>`` member expressions, else ``None``.

    A member expression that is not itself called (``const eq = assert.equal``
    or ``run(assert.ok)``) is still recognised, with no tested argument.
    """
    if node.type != "member_expression":
        return None
    if not _is_identifier(node.child_by_field_name("object"), ASSERT_ENTRY):
        return None
    parent = node.parent
    call = None
    if parent is not None and parent.type == "call_expression" and parent.child_by_field_name("function") == node:
        call = parent
    return _first_argument_site(Dialect.ASSERT, node, call)


def recognize_assertion(node: tree_sitter.Node) -> AssertionSite | None:
    """Recognise either entry style at ``node``."""
    if node.type == "call_expression":
        return recognize_expect(node)
    if node.type == "member_expression":
        return recognize_assert(node)
    return None
