#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/serialization.py
"""JSON serialization and deserialization for document tree snapshots.

A snapshot is a nested dict of nodes::

    {
        "schema_version": 1,
        "node_type": "Root",
        "children": [
            {"node_type": "Line", "attributes": {"header": 2},
             "children": [{"node_type": "Text", "value": "Title", "attributes": {}}]}
        ]
    }

Attribute scopes are not stored; they are resolved from the attribute key on
load, except on Blocks whose attributes are always container-scoped.

Examples
--------
    >>> from richtext2md.ast import Line, Root, Text
    >>> json_str = ast_to_json(Root(children=[Line(children=[Text("Hi")])]))
    >>> json_to_ast(json_str).children[0].children[0].value
    'Hi'

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Optional

from richtext2md.ast.attributes import Attribute, AttributeScope, Style
from richtext2md.ast.nodes import Block, Embed, EmbedValue, Line, Node, Root, Text
from richtext2md.constants import SERIALIZATION_SCHEMA_VERSION
from richtext2md.exceptions import Richtext2MdError, SerializationError

logger = logging.getLogger(__name__)


def _serialize_children(node: Node, node_type: str) -> dict[str, Any]:
    return {
        "node_type": node_type,
        "attributes": node.style.to_dict(),
        "children": [ast_to_dict(child) for child in node.children],
    }


def _serialize_text(node: Text) -> dict[str, Any]:
    return {"node_type": "Text", "value": node.value, "attributes": node.style.to_dict()}


def _serialize_embed(node: Embed) -> dict[str, Any]:
    return {
        "node_type": "Embed",
        "embed_type": node.value.type,
        "data": node.value.data,
        "attributes": node.style.to_dict(),
    }


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert a document tree node to a plain dictionary.

    Parameters
    ----------
    node : Node
        Node to serialize, with its whole subtree

    Returns
    -------
    dict
        JSON-compatible representation

    Raises
    ------
    SerializationError
        If the node is not a document tree variant

    """
    if isinstance(node, Text):
        return _serialize_text(node)
    if isinstance(node, Embed):
        return _serialize_embed(node)
    if isinstance(node, Line):
        return _serialize_children(node, "Line")
    if isinstance(node, Block):
        return _serialize_children(node, "Block")
    if isinstance(node, Root):
        return _serialize_children(node, "Root")
    raise SerializationError(f"Cannot serialize object of type {type(node).__name__}")


def _deserialize_children(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    children: list[Node] = []
    for child_data in data.get("children", []):
        child = _dict_to_node(child_data, strict_mode)
        if child is not None:
            children.append(child)
    return children


def _deserialize_root(data: dict[str, Any], strict_mode: bool) -> Root:
    return Root(children=_deserialize_children(data, strict_mode), style=Style(data.get("attributes")))


def _deserialize_block(data: dict[str, Any], strict_mode: bool) -> Block:
    attributes = data.get("attributes") or {}
    style = Style(Attribute(key, AttributeScope.CONTAINER, value) for key, value in attributes.items())
    return Block(children=_deserialize_children(data, strict_mode), style=style)


def _deserialize_line(data: dict[str, Any], strict_mode: bool) -> Line:
    return Line(children=_deserialize_children(data, strict_mode), style=Style(data.get("attributes")))


def _deserialize_text(data: dict[str, Any], strict_mode: bool) -> Text:
    return Text(value=data.get("value", ""), style=Style(data.get("attributes")))


def _deserialize_embed(data: dict[str, Any], strict_mode: bool) -> Embed:
    if "embed_type" not in data:
        raise SerializationError("Embed node requires an 'embed_type' field")
    return Embed(value=EmbedValue(data["embed_type"], data.get("data")), style=Style(data.get("attributes")))


_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    "Root": _deserialize_root,
    "Block": _deserialize_block,
    "Line": _deserialize_line,
    "Text": _deserialize_text,
    "Embed": _deserialize_embed,
}


def _dict_to_node(data: Any, strict_mode: bool) -> Optional[Node]:
    if not isinstance(data, dict):
        raise SerializationError(f"Node data must be a dict, got {type(data).__name__}")

    node_type = data.get("node_type")
    deserializer = _DESERIALIZATION_DISPATCH.get(node_type) if isinstance(node_type, str) else None
    if deserializer is None:
        if strict_mode:
            raise SerializationError(f"Unknown node type: {node_type!r}")
        logger.warning("Unknown node type %r, skipping", node_type)
        return None
    return deserializer(data, strict_mode)


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to a document tree node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise on unknown node types. If False, log a warning and
        drop them (useful for snapshots written by newer versions).

    Returns
    -------
    Node
        Reconstructed node with its subtree

    Raises
    ------
    SerializationError
        If the data is not a valid snapshot (wrapping structural errors raised
        while constructing nodes)

    """
    try:
        node = _dict_to_node(data, strict_mode)
    except SerializationError:
        raise
    except Richtext2MdError as e:
        raise SerializationError(f"Invalid document snapshot: {e.message}", original_error=e) from e
    if node is None:
        raise SerializationError("Snapshot root could not be deserialized")
    return node


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize a node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string, ``{"schema_version": 1, "node_type": ..., ...}``

    """
    versioned_dict = {"schema_version": SERIALIZATION_SCHEMA_VERSION, **ast_to_dict(node)}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON snapshot into a document tree.

    Parameters
    ----------
    json_str : str
        JSON produced by :func:`ast_to_json` (or an equivalent writer)
    validate_schema : bool, default True
        Reject snapshots whose ``schema_version`` is missing or unsupported
    strict_mode : bool, default True
        See :func:`dict_to_ast`

    Returns
    -------
    Node
        Reconstructed node

    Raises
    ------
    SerializationError
        If the JSON is invalid or the schema version is unsupported

    """
    try:
        data = json.loads(json_str)
    except json.JSONDecodeError as e:
        raise SerializationError(f"Invalid JSON: {e}", original_error=e) from e

    if not isinstance(data, dict):
        raise SerializationError("Snapshot JSON must be an object")

    if validate_schema:
        version = data.get("schema_version")
        if version is None:
            raise SerializationError("Snapshot is missing 'schema_version'")
        if version != SERIALIZATION_SCHEMA_VERSION:
            raise SerializationError(
                f"Unsupported schema version {version}; expected {SERIALIZATION_SCHEMA_VERSION}"
            )

    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = ["ast_to_dict", "ast_to_json", "dict_to_ast", "json_to_ast"]
