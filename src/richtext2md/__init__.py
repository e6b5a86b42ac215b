#  Copyright (c) 2025 Tom Villani, Ph.D.
"""richtext2md - render rich-text document trees as Markdown.

A rich-text document is a tree of typed nodes (root, code blocks, lines, text
and embed leaves) whose formatting lives in per-node attribute maps. The
renderer turns such a tree into Markdown: headers, emphasis, links, lists,
fenced code, block quotes, images and horizontal rules.

Examples
--------
    >>> from richtext2md import DocumentBuilder, to_markdown
    >>> builder = DocumentBuilder().add_line(
    ...     [DocumentBuilder.text("Hello "), DocumentBuilder.text("world", bold=True)]
    ... )
    >>> to_markdown(builder.get_document())
    'Hello **world**\\n\\n'

"""

import logging

from richtext2md.api import to_markdown
from richtext2md.ast import (
    Attribute,
    AttributeScope,
    Block,
    DocumentBuilder,
    Embed,
    EmbedValue,
    Line,
    Root,
    Style,
    Text,
    ast_to_json,
    json_to_ast,
)
from richtext2md.exceptions import (
    InvalidOptionsError,
    MalformedDocumentError,
    RenderingError,
    Richtext2MdError,
    SerializationError,
    ValidationError,
)
from richtext2md.options import MarkdownRendererOptions
from richtext2md.renderers import AttributeHandler, HandlerRegistry, MarkdownRenderer, default_handler_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "Attribute",
    "AttributeHandler",
    "AttributeScope",
    "Block",
    "DocumentBuilder",
    "Embed",
    "EmbedValue",
    "HandlerRegistry",
    "InvalidOptionsError",
    "Line",
    "MalformedDocumentError",
    "MarkdownRenderer",
    "MarkdownRendererOptions",
    "RenderingError",
    "Richtext2MdError",
    "Root",
    "SerializationError",
    "Style",
    "Text",
    "ValidationError",
    "__version__",
    "ast_to_json",
    "default_handler_registry",
    "json_to_ast",
    "to_markdown",
]
