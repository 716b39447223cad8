"""tree-sitter based JavaScript parsing.

Copyright (c) 2025 Jim Schilling
This software is released under the MIT License.
"""

from __future__ import annotations

import logging

import tree_sitter
import tree_sitter_javascript
from tree_sitter import Language

from ..exceptions import ParseError

logger = logging.getLogger(__name__)

_PARSER: tree_sitter.Parser | None = None


def get_parser() -> tree_sitter.Parser:
    """Return the shared JavaScript parser, creating it on first use."""
    global _PARSER
    if _PARSER is None:
        ts_parser = tree_sitter.Parser()
        ts_parser.language = Language(tree_sitter_javascript.language())
        _PARSER = ts_parser
    return _PARSER


def parse_source(source: str | bytes, source_file: str = "<string>") -> tree_sitter.Tree:
    """Parse JavaScript source into a tree-sitter tree.

    tree-sitter recovers from syntax errors instead of raising, so a tree
    is always returned for text input. When the tree contains error
    nodes a warning is logged and the recovered tree is still usable.

    Args:
        source: JavaScript source text (``str`` or UTF-8 ``bytes``).
        source_file: Name used in log records and errors.

    Returns:
        The parsed ``tree_sitter.Tree``.

    Raises:
        ParseError: If ``source`` is not text.
    """
    if isinstance(source, str):
        data = source.encode("utf-8")
    elif isinstance(source, bytes):
        data = source
    else:
        raise ParseError(f"Cannot parse object of type {type(source).__name__}", source_file)

    tree = get_parser().parse(data)
    if tree.root_node.has_error:
        logger.warning("Syntax errors in %s; analysing the recovered tree", source_file)
    return tree
