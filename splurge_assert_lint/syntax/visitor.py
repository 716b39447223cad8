"""Visitor base class for tree-sitter JavaScript trees.

``JsVisitor`` mirrors the ``visit_<Type>`` / ``leave_<Type>`` convention of
``ast.NodeVisitor`` and libcst visitors, keyed by tree-sitter node type
names (``visit_call_expression``, ``leave_arrow_function``, ...).

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import tree_sitter


class JsVisitor:
    """Depth-first, source-order walker over named tree-sitter nodes.

    Subclasses define ``visit_<node_type>(node)`` and
    ``leave_<node_type>(node)`` methods. A ``visit_*`` method returning
    ``False`` prevents traversal into that node's children; its
    ``leave_*`` method is still called. The walk keeps an explicit stack
    so deeply nested sources cannot hit the recursion limit.
    """

    def walk(self, tree: tree_sitter.Tree | tree_sitter.Node) -> None:
        """Visit every named node of ``tree`` exactly once."""
        root = tree.root_node if isinstance(tree, tree_sitter.Tree) else tree
        stack: list[tuple[tree_sitter.Node, bool]] = [(root, False)]
        while stack:
            node, leaving = stack.pop()
            if leaving:
                self.on_leave(node)
                continue
            descend = self.on_visit(node)
            stack.append((node, True))
            if descend is not False:
                stack.extend((child, False) for child in reversed(node.named_children))

    def on_visit(self, node: tree_sitter.Node) -> bool | None:
        method = getattr(self, f"visit_{node.type}", None)
        if method is None:
            return None
        return method(node)

    def on_leave(self, node: tree_sitter.Node) -> None:
        method = getattr(self, f"leave_{node.type}", None)
        if method is not None:
            method(node)
