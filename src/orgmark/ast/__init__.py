#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/ast/__init__.py
"""Document tree module.

The module consists of several components:

- nodes: the immutable ``Node`` and the ``NodeKind`` enumeration
- builder: helper functions for constructing trees
- serialization: JSON interchange format for trees produced by parsers
- utils: traversal helpers and the footnote collection query

Examples
--------
    >>> from orgmark.ast import builder as b
    >>> from orgmark import transcode
    >>> tree = b.document(b.section(b.paragraph("foo ", b.bold("BAR"), " baz")))
    >>> transcode(tree, profile="html")
    '<p>foo <strong>BAR</strong> baz</p>\\n'

"""

from __future__ import annotations

from orgmark.ast import builder
from orgmark.ast.nodes import Node, NodeKind
from orgmark.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from orgmark.ast.utils import collect_footnote_definitions, extract_text, is_visible, iter_nodes

__all__ = [
    "Node",
    "NodeKind",
    "builder",
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    "collect_footnote_definitions",
    "extract_text",
    "is_visible",
    "iter_nodes",
]
