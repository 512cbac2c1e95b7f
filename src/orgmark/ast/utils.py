#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/ast/utils.py
"""Utility functions for working with document trees.

Functions
---------
iter_nodes : Walk a tree in document order
extract_text : Concatenate the plain text below a node
is_visible : Apply the export visibility filter to a node
collect_footnote_definitions : Gather footnote bodies keyed by label

"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Iterator, Optional, Sequence, Union

from orgmark.ast.nodes import Node, NodeKind

if TYPE_CHECKING:
    from orgmark.options import ExportOptions

logger = logging.getLogger(__name__)


def iter_nodes(root: Node, options: Optional[ExportOptions] = None) -> Iterator[Node]:
    """Yield ``root`` and every descendant in document (pre-)order.

    Parameters
    ----------
    root : Node
        Tree to walk
    options : ExportOptions, optional
        When given, invisible sub-trees are pruned the same way the engine
        prunes them

    """
    stack = [root]
    while stack:
        current = stack.pop()
        if options is not None and not is_visible(current, options):
            continue
        yield current
        stack.extend(reversed(current.children))


def extract_text(node_or_nodes: Union[Node, Sequence[Node]], joiner: str = "") -> str:
    """Extract the plain text below a node or sequence of nodes.

    Examples
    --------
        >>> from orgmark.ast.builder import bold, paragraph
        >>> extract_text(paragraph("Hello ", bold("world")))
        'Hello world'

    """
    nodes = [node_or_nodes] if isinstance(node_or_nodes, Node) else list(node_or_nodes)
    parts: list[str] = []
    for top in nodes:
        for current in iter_nodes(top):
            if current.kind is NodeKind.PLAIN_TEXT:
                parts.append(current.value)
    return joiner.join(parts)


def is_visible(node: Node, options: ExportOptions) -> bool:
    """Return False when ``visible_only`` is set and the node is flagged invisible."""
    return not (options.visible_only and node.get("invisible", False))


def collect_footnote_definitions(root: Node, options: ExportOptions) -> dict[str, tuple[Node, ...]]:
    """Collect every footnote definition in the tree, keyed by label.

    Parameters
    ----------
    root : Node
        Document tree
    options : ExportOptions
        Export options; invisible definitions are ignored when
        ``visible_only`` is set

    Returns
    -------
    dict[str, tuple of Node]
        Raw (unrendered) definition bodies. When a label is defined more than
        once, the first definition in document order wins.

    """
    definitions: dict[str, tuple[Node, ...]] = {}
    for current in iter_nodes(root, options):
        if current.kind is not NodeKind.FOOTNOTE_DEFINITION:
            continue
        label = str(current.get("label") or "")
        if label in definitions:
            logger.warning("Duplicate footnote definition for label '%s' ignored", label)
            continue
        definitions[label] = current.children
    logger.debug("Collected %d footnote definition(s)", len(definitions))
    return definitions
