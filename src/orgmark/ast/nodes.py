#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/ast/nodes.py
"""Document tree nodes.

This module defines the node representation the engine consumes. A parsed
document is a tree of :class:`Node` values, each tagged with a
:class:`NodeKind` discriminant, holding an ordered tuple of children and a
read-only mapping of kind-specific properties.

Node Kinds
----------
Structural kinds:
    - document, headline, section, paragraph
    - plain-list, item, table, table-row, table-cell
    - src-block, example-block, fixed-width, quote-block, horizontal-rule
    - footnote-definition

Inline kinds:
    - plain-text, bold, italic, underline, strike-through
    - code, verbatim, superscript, subscript, entity
    - link, line-break, footnote-reference

Metadata kinds (dropped by most profiles):
    - keyword, comment, comment-block, planning, property-drawer

Nodes never hold a reference to their parent. Context that depends on an
ancestor (such as the kind of list an item belongs to) is supplied by the
engine while it walks the tree.

"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class NodeKind(str, Enum):
    """Discriminant identifying what a tree node represents."""

    DOCUMENT = "document"
    HEADLINE = "headline"
    SECTION = "section"
    PARAGRAPH = "paragraph"
    PLAIN_TEXT = "plain-text"
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKE_THROUGH = "strike-through"
    CODE = "code"
    VERBATIM = "verbatim"
    SUPERSCRIPT = "superscript"
    SUBSCRIPT = "subscript"
    ENTITY = "entity"
    LINE_BREAK = "line-break"
    LINK = "link"
    PLAIN_LIST = "plain-list"
    ITEM = "item"
    SRC_BLOCK = "src-block"
    EXAMPLE_BLOCK = "example-block"
    FIXED_WIDTH = "fixed-width"
    QUOTE_BLOCK = "quote-block"
    HORIZONTAL_RULE = "horizontal-rule"
    TABLE = "table"
    TABLE_ROW = "table-row"
    TABLE_CELL = "table-cell"
    FOOTNOTE_REFERENCE = "footnote-reference"
    FOOTNOTE_DEFINITION = "footnote-definition"
    KEYWORD = "keyword"
    COMMENT = "comment"
    COMMENT_BLOCK = "comment-block"
    PLANNING = "planning"
    PROPERTY_DRAWER = "property-drawer"

    def __str__(self) -> str:
        return self.value


def _freeze_properties(properties: Optional[Mapping[str, Any]]) -> Mapping[str, Any]:
    frozen: dict[str, Any] = {}
    for key, value in (properties or {}).items():
        # Lists of nodes are stored as tuples so the tree stays immutable
        frozen[key] = tuple(value) if isinstance(value, list) else value
    return MappingProxyType(frozen)


@dataclass(frozen=True)
class Node:
    """A single node of a parsed document tree.

    Parameters
    ----------
    kind : NodeKind
        What construct this node represents
    children : tuple of Node, default = empty tuple
        Child nodes in document order
    properties : Mapping[str, Any], default = empty mapping
        Kind-specific named properties. Values are strings, numbers,
        booleans, None, or nodes (a single Node or a tuple of nodes)

    Examples
    --------
        >>> from orgmark.ast.nodes import Node, NodeKind
        >>> text = Node(NodeKind.PLAIN_TEXT, properties={"value": "hello"})
        >>> Node(NodeKind.BOLD, children=(text,)).kind
        <NodeKind.BOLD: 'bold'>

    """

    kind: NodeKind
    children: tuple[Node, ...] = ()
    properties: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Coerce kind, children and properties into their immutable forms."""
        object.__setattr__(self, "kind", NodeKind(self.kind))
        object.__setattr__(self, "children", tuple(self.children))
        object.__setattr__(self, "properties", _freeze_properties(self.properties))

    def get(self, name: str, default: Any = None) -> Any:
        """Return a property value, or ``default`` when it is not set."""
        return self.properties.get(name, default)

    @property
    def is_leaf(self) -> bool:
        """Whether this node has no children."""
        return not self.children

    @property
    def value(self) -> str:
        """Literal ``value`` property (plain text, code, verbatim, blocks)."""
        return str(self.properties.get("value") or "")
