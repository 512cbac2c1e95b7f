#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/ast/builder.py
"""Helper functions for constructing document trees.

Parsers and tests build trees out of nested calls to these helpers. Every
helper accepts bare strings wherever a child node is expected and turns
them into ``plain-text`` nodes.

Examples
--------
    >>> from orgmark.ast.builder import bold, document, paragraph, section
    >>> tree = document(section(paragraph("foo ", bold("BAR"), " baz")))
    >>> tree.children[0].children[0].children[1].kind
    <NodeKind.BOLD: 'bold'>

"""

from __future__ import annotations

from typing import Any, Optional, Sequence, Union

from orgmark.ast.nodes import Node, NodeKind
from orgmark.constants import FootnoteType, ListKind, TableRowType

Child = Union[Node, str]


def _as_node(child: Child) -> Node:
    if isinstance(child, Node):
        return child
    return text(child)


def _as_nodes(children: Sequence[Child]) -> tuple[Node, ...]:
    return tuple(_as_node(child) for child in children)


def _title(value: Union[Child, Sequence[Child], None]) -> Optional[tuple[Node, ...]]:
    if value is None:
        return None
    if isinstance(value, (Node, str)):
        return (_as_node(value),)
    return _as_nodes(value)


def text(value: str, **properties: Any) -> Node:
    """Create a ``plain-text`` node."""
    return Node(NodeKind.PLAIN_TEXT, properties={"value": value, **properties})


def node(kind: Union[NodeKind, str], *children: Child, **properties: Any) -> Node:
    """Create a node of any kind with the given children and properties."""
    return Node(NodeKind(kind), children=_as_nodes(children), properties=properties)


def document(*children: Child, **properties: Any) -> Node:
    """Create the root ``document`` node."""
    return node(NodeKind.DOCUMENT, *children, **properties)


def headline(
    level: int,
    title: Union[Child, Sequence[Child]],
    *children: Child,
    footnote_section: bool = False,
    **properties: Any,
) -> Node:
    """Create a ``headline`` node.

    Parameters
    ----------
    level : int
        Relative nesting level of the headline
    title : Node, str or sequence of them
        Headline title; rendered separately from the children
    *children : Node or str
        Section and sub-headlines below the headline
    footnote_section : bool, default = False
        Mark the headline as the auto-generated footnote section placeholder

    """
    return node(
        NodeKind.HEADLINE,
        *children,
        level=level,
        title=_title(title),
        footnote_section=footnote_section,
        **properties,
    )


def section(*children: Child) -> Node:
    """Create a ``section`` node."""
    return node(NodeKind.SECTION, *children)


def paragraph(*children: Child) -> Node:
    """Create a ``paragraph`` node."""
    return node(NodeKind.PARAGRAPH, *children)


def bold(*children: Child) -> Node:
    """Create a ``bold`` node."""
    return node(NodeKind.BOLD, *children)


def italic(*children: Child) -> Node:
    """Create an ``italic`` node."""
    return node(NodeKind.ITALIC, *children)


def underline(*children: Child) -> Node:
    """Create an ``underline`` node."""
    return node(NodeKind.UNDERLINE, *children)


def strike_through(*children: Child) -> Node:
    """Create a ``strike-through`` node."""
    return node(NodeKind.STRIKE_THROUGH, *children)


def code(value: str) -> Node:
    """Create an inline ``code`` node."""
    return node(NodeKind.CODE, value=value)


def verbatim(value: str) -> Node:
    """Create a ``verbatim`` node."""
    return node(NodeKind.VERBATIM, value=value)


def src_block(value: str, language: Optional[str] = None) -> Node:
    """Create a ``src-block`` node from already formatted source text."""
    return node(NodeKind.SRC_BLOCK, value=value, language=language)


def link(link_type: str, path: str, *children: Child, raw_target: Optional[str] = None) -> Node:
    """Create a ``link`` node.

    ``raw_target`` defaults to ``"link_type:path"``, the way the link was
    written in the source.
    """
    if raw_target is None:
        raw_target = f"{link_type}:{path}"
    return node(NodeKind.LINK, *children, link_type=link_type, path=path, raw_target=raw_target)


def plain_list(list_kind: ListKind, *items: Child) -> Node:
    """Create a ``plain-list`` node of the given kind."""
    return node(NodeKind.PLAIN_LIST, *items, list_kind=list_kind)


def item(*children: Child, tag: Union[Child, Sequence[Child], None] = None) -> Node:
    """Create an ``item`` node; ``tag`` is the term of a descriptive list item."""
    return node(NodeKind.ITEM, *children, tag=_title(tag))


def table(*rows: Child) -> Node:
    """Create a ``table`` node."""
    return node(NodeKind.TABLE, *rows)


def table_row(*cells: Child, row_type: TableRowType = "standard") -> Node:
    """Create a ``table-row`` node; rule rows carry no cells."""
    return node(NodeKind.TABLE_ROW, *cells, row_type=row_type)


def table_cell(*children: Child) -> Node:
    """Create a ``table-cell`` node."""
    return node(NodeKind.TABLE_CELL, *children)


def footnote_reference(label: Optional[str], *children: Child, footnote_type: FootnoteType = "standard") -> Node:
    """Create a ``footnote-reference`` node.

    Inline footnotes carry their body as children and ``footnote_type="inline"``.
    """
    return node(NodeKind.FOOTNOTE_REFERENCE, *children, label=label, footnote_type=footnote_type)


def footnote_definition(label: str, *children: Child) -> Node:
    """Create a ``footnote-definition`` node whose children form the body."""
    return node(NodeKind.FOOTNOTE_DEFINITION, *children, label=label)


def keyword(key: str, value: str) -> Node:
    """Create a ``keyword`` metadata node (``#+KEY: value``)."""
    return node(NodeKind.KEYWORD, key=key, value=value)


def line_break() -> Node:
    """Create a ``line-break`` node."""
    return node(NodeKind.LINE_BREAK)
