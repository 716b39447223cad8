"""JavaScript syntax-tree support built on tree-sitter.

The modules in this package parse JavaScript sources, walk the resulting
trees and give the lint rules safe, ESTree-flavoured access to nodes.
"""

from .nodes import call_arguments, describe_expression, node_text, safe_get, unwrap_parentheses
from .parser import get_parser, parse_source
from .visitor import JsVisitor

__all__ = [
    "JsVisitor",
    "call_arguments",
    "describe_expression",
    "get_parser",
    "node_text",
    "parse_source",
    "safe_get",
    "unwrap_parentheses",
]
