#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/__init__.py
"""Document tree module for rich-text documents.

The module consists of several components:

- attributes: formatting attributes, scopes and styles
- nodes: the Root / Block / Line / Text / Embed node hierarchy
- visitors: visitor base class with closed dispatch over the node variants
- builder: helper for assembling trees line by line
- serialization: JSON snapshots of document trees
- utils: document-order iteration and attribute tallies

Examples
--------
    >>> from richtext2md.ast import DocumentBuilder
    >>> from richtext2md.renderers.markdown import MarkdownRenderer
    >>>
    >>> builder = DocumentBuilder().add_line([DocumentBuilder.text("Title")], {"header": 2})
    >>> MarkdownRenderer().render_to_string(builder.get_document())
    '## Title\\n\\n'

"""

from __future__ import annotations

from richtext2md.ast.attributes import KNOWN_ATTRIBUTE_SCOPES, Attribute, AttributeScope, Style
from richtext2md.ast.builder import DocumentBuilder, build_document
from richtext2md.ast.nodes import NODE_TYPES, Block, Embed, EmbedValue, Line, Node, Root, Text
from richtext2md.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from richtext2md.ast.utils import (
    attributes_sorted_by_span,
    count_attribute_occurrences,
    document_root,
    first_leaf,
    iter_leaves,
    iter_lines,
    next_leaf,
    previous_leaf,
)
from richtext2md.ast.visitors import NodeVisitor

__all__ = [
    # Attributes
    "Attribute",
    "AttributeScope",
    "KNOWN_ATTRIBUTE_SCOPES",
    "Style",
    # Nodes
    "Block",
    "Embed",
    "EmbedValue",
    "Line",
    "NODE_TYPES",
    "Node",
    "Root",
    "Text",
    # Visitors
    "NodeVisitor",
    # Builder
    "DocumentBuilder",
    "build_document",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    # Utilities
    "attributes_sorted_by_span",
    "count_attribute_occurrences",
    "document_root",
    "first_leaf",
    "iter_leaves",
    "iter_lines",
    "next_leaf",
    "previous_leaf",
]
