#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/orgmark/ast/serialization.py
"""JSON serialization and deserialization for document trees.

External parsers hand trees to orgmark in this JSON form. Each node is an
object with a ``kind``, an optional ``children`` list and an optional
``properties`` object:

    {"schema_version": 1,
     "kind": "document",
     "children": [
        {"kind": "paragraph", "children": ["Hello ", {"kind": "bold", "children": ["world"]}]}
     ]}

A bare string in a ``children`` list is shorthand for a ``plain-text`` node.
A property value that is an object with a ``kind`` key (or a list of such
objects and strings) is deserialized into nodes, so headline titles and item
tags round-trip. The ``title`` and ``tag`` properties always hold inline
content, so a plain string or list of strings there becomes text nodes.

Examples
--------
    >>> from orgmark.ast.serialization import json_to_ast
    >>> tree = json_to_ast('{"kind": "bold", "children": ["hi"]}')
    >>> tree.children[0].value
    'hi'

"""

from __future__ import annotations

import json
import logging
from typing import Any

from orgmark.ast.nodes import Node, NodeKind
from orgmark.exceptions import TreeLoadError

logger = logging.getLogger(__name__)

SCHEMA_VERSION = 1

# Properties that always hold inline content, so plain strings are text nodes
NODE_VALUED_PROPERTIES = frozenset({"title", "tag"})


def _is_node_data(value: Any) -> bool:
    return isinstance(value, dict) and "kind" in value


def _is_node_sequence(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(v, str) or _is_node_data(v) for v in value)


def _deserialize_child(data: Any, path: str) -> Node:
    if isinstance(data, str):
        return Node(NodeKind.PLAIN_TEXT, properties={"value": data})
    if not isinstance(data, dict):
        raise TreeLoadError(f"Expected a node object or string, got {type(data).__name__}", path=path)
    return _deserialize_node(data, path)


def _deserialize_property(key: str, value: Any, path: str) -> Any:
    if key in NODE_VALUED_PROPERTIES:
        if isinstance(value, str):
            return (_deserialize_child(value, path),)
        if _is_node_sequence(value):
            return tuple(_deserialize_child(v, f"{path}[{i}]") for i, v in enumerate(value))
    if _is_node_data(value):
        return _deserialize_node(value, path)
    # Only lists that mix in at least one node object are treated as node lists
    if _is_node_sequence(value) and any(_is_node_data(v) for v in value):
        return tuple(_deserialize_child(v, f"{path}[{i}]") for i, v in enumerate(value))
    return value


def _deserialize_node(data: dict[str, Any], path: str) -> Node:
    raw_kind = data.get("kind")
    if not raw_kind:
        raise TreeLoadError("Node object must contain a 'kind' field", path=path)
    try:
        kind = NodeKind(raw_kind)
    except ValueError as e:
        raise TreeLoadError(f"Unknown node kind: {raw_kind}", path=path, original_error=e) from e

    children_data = data.get("children", [])
    if not isinstance(children_data, list):
        raise TreeLoadError("'children' must be a list", path=path)
    properties_data = data.get("properties", {})
    if not isinstance(properties_data, dict):
        raise TreeLoadError("'properties' must be an object", path=path)

    children = tuple(_deserialize_child(child, f"{path}.children[{i}]") for i, child in enumerate(children_data))
    properties = {
        key: _deserialize_property(key, value, f"{path}.properties.{key}") for key, value in properties_data.items()
    }
    return Node(kind, children=children, properties=properties)


def _serialize_value(value: Any) -> Any:
    if isinstance(value, Node):
        return ast_to_dict(value)
    if isinstance(value, tuple):
        return [_serialize_value(v) for v in value]
    return value


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a node and its descendants into plain dictionaries.

    Parameters
    ----------
    node : Node
        Node to convert

    Returns
    -------
    dict
        JSON-compatible representation

    """
    result: dict[str, Any] = {"kind": node.kind.value}
    if node.children:
        result["children"] = [ast_to_dict(child) for child in node.children]
    if node.properties:
        result["properties"] = {key: _serialize_value(value) for key, value in node.properties.items()}
    return result


def dict_to_ast(data: dict[str, Any]) -> Node:
    """Convert a dictionary representation back into a node tree.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node

    Returns
    -------
    Node
        Reconstructed tree

    Raises
    ------
    TreeLoadError
        If the data is not a valid tree

    """
    if not isinstance(data, dict):
        raise TreeLoadError(f"Tree root must be an object, got {type(data).__name__}", path="$")
    return _deserialize_node(data, "$")


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a tree to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        Root of the tree
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    """
    versioned_dict = {"schema_version": SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str) -> Node:
    """Deserialize a JSON string into a node tree.

    JSON without a ``schema_version`` field is treated as version 1.

    Raises
    ------
    TreeLoadError
        If the JSON is malformed, has an unsupported schema version, or does
        not describe a valid tree

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise TreeLoadError(f"Invalid JSON: {e}", original_error=e) from e

    if not isinstance(data, dict):
        raise TreeLoadError(f"Tree root must be an object, got {type(data).__name__}", path="$")

    schema_version = data.pop("schema_version", SCHEMA_VERSION)
    if schema_version != SCHEMA_VERSION:
        raise TreeLoadError(
            f"Unsupported schema version: {schema_version}. "
            f"This version of orgmark supports schema version {SCHEMA_VERSION} only."
        )

    tree = dict_to_ast(data)
    logger.debug("Loaded document tree with root kind '%s'", tree.kind)
    return tree


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
