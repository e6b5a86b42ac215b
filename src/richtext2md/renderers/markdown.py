#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/renderers/markdown.py
"""Markdown rendering from rich-text document trees.

This module provides the MarkdownRenderer class which walks a document tree
depth-first and writes Markdown into a single output buffer. Markup comes from
the attribute handler tables in :mod:`richtext2md.renderers.handlers`; the
renderer decides when the handlers run, how simultaneous inline markers nest,
and how lines are separated.

Line separation
---------------
After the content of a line:

1. one newline is written unless the line carries a tight attribute
   (``list`` or ``code-block`` by default);
2. one extra newline is written when the line carries a tight attribute that
   the next line in the document (crossing blocks) does not carry;
3. one newline is always written.

Paragraphs, headers and quotes are therefore followed by a blank line, while
consecutive list items stay together and only the last one is followed by a
blank line. A Block writes one more newline after its closing markup.

"""

from __future__ import annotations

import logging
from io import StringIO
from typing import Any, Mapping, Optional

from richtext2md.ast.attributes import Attribute
from richtext2md.ast.nodes import Block, Embed, Line, Node, Root, Text
from richtext2md.ast.utils import attributes_sorted_by_span, count_attribute_occurrences
from richtext2md.ast.visitors import NodeVisitor
from richtext2md.constants import EMBED_HORIZONTAL_RULE, EMBED_IMAGE
from richtext2md.exceptions import MalformedDocumentError
from richtext2md.options.markdown import MarkdownRendererOptions
from richtext2md.renderers.base import BaseRenderer
from richtext2md.renderers.handlers import AttributeHandler, HandlerRegistry, default_handler_registry
from richtext2md.utils.escape import escape_markdown

logger = logging.getLogger(__name__)

_HandlerList = list[tuple[Attribute, AttributeHandler]]


class MarkdownRenderer(NodeVisitor, BaseRenderer):
    """Render document trees to Markdown text.

    A renderer instance holds the state of the render in progress, so one
    instance must not be shared by concurrent renders; create one renderer per
    thread (or use :func:`richtext2md.to_markdown`, which does).

    Parameters
    ----------
    options : MarkdownRendererOptions or None, default = None
        Markdown formatting options
    handlers : HandlerRegistry or None, default = None
        Attribute handler tables. Defaults to
        :func:`~richtext2md.renderers.handlers.default_handler_registry`
        built from ``options``.

    Examples
    --------
    Basic usage:

        >>> from richtext2md.ast import Line, Root, Text
        >>> doc = Root(children=[Line(children=[Text("Title")], style={"header": 2})])
        >>> MarkdownRenderer().render_to_string(doc)
        '## Title\\n\\n'

    """

    def __init__(self, options: MarkdownRendererOptions | None = None, handlers: HandlerRegistry | None = None):
        """Initialize the Markdown renderer with options and handler tables."""
        BaseRenderer._validate_options_type(options, MarkdownRendererOptions, "markdown")
        options = options or MarkdownRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: MarkdownRendererOptions = options
        self.handlers: HandlerRegistry = handlers or default_handler_registry(options)
        self._output: StringIO = StringIO()
        self._span_counts: Optional[Mapping[Attribute, int]] = None

    def render_to_string(self, document: Root) -> str:
        """Render a document tree to a markdown string.

        Parameters
        ----------
        document : Root
            The document to render

        Returns
        -------
        str
            Markdown text

        Raises
        ------
        MalformedDocumentError
            If ``document`` is not a Root or the tree contains a foreign node

        """
        if not isinstance(document, Root):
            raise MalformedDocumentError(
                f"Expected a Root document, got {type(document).__name__}", node=document
            )

        self._output = StringIO()
        self._span_counts = count_attribute_occurrences(document) if self.options.precompute_span_counts else None
        logger.debug("Rendering document with %d top-level containers", len(document.children))
        try:
            return self.visit(document)
        finally:
            # Drop per-render state so the renderer does not pin the document
            self._output = StringIO()
            self._span_counts = None

    def _applicable_handlers(self, table: Mapping[str, AttributeHandler], node: Node) -> _HandlerList:
        """Pair the node's attributes with their handlers, in table order."""
        return [(node.style[key], handler) for key, handler in table.items() if key in node.style]

    def _inline_handlers(self, node: Node) -> _HandlerList:
        """Pair the leaf's attributes with inline handlers, widest span first."""
        table = self.handlers.inline
        return [
            (attribute, table[attribute.key])
            for attribute in attributes_sorted_by_span(node, self._span_counts)
            if attribute.key in table
        ]

    def _run_before(self, handlers: _HandlerList, node: Node) -> None:
        for attribute, handler in handlers:
            if handler.before_content is not None:
                handler.before_content(attribute, node, self._output)

    def _run_after(self, handlers: _HandlerList, node: Node) -> None:
        for attribute, handler in reversed(handlers):
            if handler.after_content is not None:
                handler.after_content(attribute, node, self._output)

    def _write_line_breaks(self, node: Line) -> None:
        """Write the newlines separating ``node`` from what follows."""
        tight_keys = [key for key in self.options.tight_line_attributes if key in node.style]
        if not tight_keys:
            self._output.write("\n")
        else:
            following = node.next_line
            if following is None or any(key not in following.style for key in tight_keys):
                # Last line of a list (or code) run
                self._output.write("\n")
        self._output.write("\n")

    def visit_root(self, node: Root) -> str:
        """Render every top-level container and return the accumulated markdown."""
        for child in node.children:
            self.visit(child)
        return self._output.getvalue()

    def visit_block(self, node: Block) -> None:
        """Render a Block: container markup around its lines, then a blank line."""
        handlers = self._applicable_handlers(self.handlers.container, node)
        self._run_before(handlers, node)
        for line in node.children:
            self.visit(line)
        self._run_after(handlers, node)
        self._output.write("\n")

    def visit_line(self, node: Line) -> None:
        """Render a Line: line markup, its leaves, then line separation."""
        handlers = self._applicable_handlers(self.handlers.line, node)
        self._run_before(handlers, node)
        for leaf in node.children:
            self.visit(leaf)
        self._write_line_breaks(node)
        self._run_after(handlers, node)

    def visit_text(self, node: Text) -> None:
        """Render a Text leaf with its inline markers opened and closed in nesting order."""
        handlers = self._inline_handlers(node)
        self._run_before(handlers, node)
        self._output.write(escape_markdown(node.value) if self.options.escape_special else node.value)
        self._run_after(handlers, node)

    def visit_embed(self, node: Embed) -> None:
        """Render an Embed leaf inside its inline markers; unsupported embed types produce no content."""
        handlers = self._inline_handlers(node)
        self._run_before(handlers, node)
        self._write_embed(node)
        self._run_after(handlers, node)

    def _write_embed(self, node: Embed) -> None:
        embed_type = node.value.type
        data: Any = node.value.data
        if embed_type == EMBED_IMAGE:
            self._output.write(f"![]({'' if data is None else data})")
        elif embed_type == EMBED_HORIZONTAL_RULE:
            self._output.write(self.options.horizontal_rule)
            self._output.write("\n")
        else:
            logger.debug("Skipping unsupported embed type %r", embed_type)


__all__ = ["MarkdownRenderer"]
