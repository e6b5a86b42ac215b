#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/renderers/handlers.py
"""Attribute handler tables for the markdown renderer.

Each formatting attribute maps to an :class:`AttributeHandler`: a pair of
optional callbacks run before and after the content of the node carrying the
attribute. Handlers live in three independent tables (container, line and
inline level) grouped in a :class:`HandlerRegistry`, so supporting a new
attribute means adding a table entry rather than touching the traversal.

Inline handlers merge spans: a marker is only opened when the previous sibling
leaf does not carry the same attribute, and only closed when the next sibling
does not. A run of three bold leaves therefore gets a single ``**`` pair.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Literal, Mapping, Optional, Protocol

from richtext2md.ast.attributes import Attribute
from richtext2md.ast.nodes import Node
from richtext2md.constants import (
    ATTR_BLOCKQUOTE,
    ATTR_BOLD,
    ATTR_CODE_BLOCK,
    ATTR_HEADER,
    ATTR_INDENT,
    ATTR_INLINE_CODE,
    ATTR_ITALIC,
    ATTR_LINK,
    ATTR_LIST,
    ATTR_STRIKETHROUGH,
    LIST_ORDERED,
    MARKER_BLOCKQUOTE,
    MARKER_BOLD,
    MARKER_BULLET_ITEM,
    MARKER_INLINE_CODE,
    MARKER_ITALIC,
    MARKER_ORDERED_ITEM,
    MARKER_STRIKETHROUGH,
    MAX_HEADER_LEVEL,
    MIN_HEADER_LEVEL,
)
from richtext2md.options.markdown import MarkdownRendererOptions

logger = logging.getLogger(__name__)

HandlerLevel = Literal["container", "line", "inline"]


class TextSink(Protocol):
    """Anything text can be written to (``io.StringIO``, an open file...)."""

    def write(self, text: str, /) -> object: ...


HandlerCallback = Callable[[Attribute, Node, TextSink], None]


@dataclass(frozen=True)
class AttributeHandler:
    """Callbacks emitting markup around the content of a node.

    Parameters
    ----------
    before_content : callable, optional
        ``(attribute, node, output)`` run before the node's content
    after_content : callable, optional
        ``(attribute, node, output)`` run after the node's content

    """

    before_content: Optional[HandlerCallback] = None
    after_content: Optional[HandlerCallback] = None


def _shares_attribute(sibling: Optional[Node], attribute: Attribute, match_value: bool) -> bool:
    if sibling is None:
        return False
    if match_value:
        return sibling.style.contains(attribute.key, attribute.value)
    return sibling.style.contains(attribute.key)


def opens_span(attribute: Attribute, node: Node, match_value: bool = False) -> bool:
    """Whether ``node`` starts a span of ``attribute``.

    Parameters
    ----------
    attribute : Attribute
        Attribute carried by ``node``
    node : Node
        Leaf being rendered
    match_value : bool, default False
        Also require the previous sibling's attribute value to be equal (links)

    """
    return not _shares_attribute(node.previous, attribute, match_value)


def closes_span(attribute: Attribute, node: Node, match_value: bool = False) -> bool:
    """Whether ``node`` ends a span of ``attribute``; see :func:`opens_span`."""
    return not _shares_attribute(node.next, attribute, match_value)


def span_marker(marker: str, closing: Optional[str] = None, match_value: bool = False) -> AttributeHandler:
    """Build an inline handler wrapping spans in ``marker`` ... ``closing``.

    Parameters
    ----------
    marker : str
        Opening marker (``"**"``)
    closing : str, optional
        Closing marker; defaults to ``marker``
    match_value : bool, default False
        Split spans whose attribute values differ

    Examples
    --------
        >>> underline = span_marker("<u>", "</u>")

    """
    closing_marker = marker if closing is None else closing

    def before(attribute: Attribute, node: Node, output: TextSink) -> None:
        if opens_span(attribute, node, match_value):
            output.write(marker)

    def after(attribute: Attribute, node: Node, output: TextSink) -> None:
        if closes_span(attribute, node, match_value):
            output.write(closing_marker)

    return AttributeHandler(before_content=before, after_content=after)


def _link_before(attribute: Attribute, node: Node, output: TextSink) -> None:
    if opens_span(attribute, node, match_value=True):
        output.write("[")


def _link_after(attribute: Attribute, node: Node, output: TextSink) -> None:
    if closes_span(attribute, node, match_value=True):
        url = "" if attribute.value is None else str(attribute.value)
        output.write(f"]({url})")


def header_level(attribute: Attribute) -> int:
    """Header level of ``attribute``: 1 when missing or invalid, clamped to 1..6."""
    if attribute.value is None:
        return MIN_HEADER_LEVEL
    try:
        level = int(attribute.value)
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid header level %r, using %d", attribute.value, MIN_HEADER_LEVEL)
        return MIN_HEADER_LEVEL
    clamped = max(MIN_HEADER_LEVEL, min(MAX_HEADER_LEVEL, level))
    if clamped != level:
        logger.warning("Header level %d out of range, clamped to %d", level, clamped)
    return clamped


def _header_before(attribute: Attribute, node: Node, output: TextSink) -> None:
    output.write("#" * header_level(attribute))
    output.write(" ")


def _blockquote_before(attribute: Attribute, node: Node, output: TextSink) -> None:
    output.write(MARKER_BLOCKQUOTE)


def _indent_level(node: Node) -> int:
    value = node.attribute_value_or(ATTR_INDENT, 0)
    try:
        return max(0, int(value))
    except (TypeError, ValueError, OverflowError):
        logger.warning("Invalid indent %r, ignoring", value)
        return 0


def list_item_handler(options: MarkdownRendererOptions) -> AttributeHandler:
    """Line handler writing the indent and ``1. `` / ``- `` item marker."""

    def before(attribute: Attribute, node: Node, output: TextSink) -> None:
        ordered = attribute.value == LIST_ORDERED
        width = options.ordered_indent_width if ordered else options.bullet_indent_width
        output.write(" " * (width * _indent_level(node)))
        output.write(MARKER_ORDERED_ITEM if ordered else MARKER_BULLET_ITEM)

    return AttributeHandler(before_content=before)


def code_fence_handler(options: MarkdownRendererOptions) -> AttributeHandler:
    """Container handler writing the opening and closing fence lines."""

    def write_fence(attribute: Attribute, node: Node, output: TextSink) -> None:
        output.write(options.code_fence)
        output.write("\n")

    return AttributeHandler(before_content=write_fence, after_content=write_fence)


def _frozen(table: Optional[Mapping[str, AttributeHandler]]) -> Mapping[str, AttributeHandler]:
    return MappingProxyType(dict(table or {}))


@dataclass(frozen=True)
class HandlerRegistry:
    """The three handler tables consulted by the renderer.

    Table order is significant for container and line handlers: before-hooks
    run in table order and after-hooks in reverse. Inline handlers run in the
    nesting order computed for each leaf.

    Parameters
    ----------
    container : mapping of str to AttributeHandler
        Handlers for Block container attributes
    line : mapping of str to AttributeHandler
        Handlers for Line attributes
    inline : mapping of str to AttributeHandler
        Handlers for Text leaf attributes

    """

    container: Mapping[str, AttributeHandler] = field(default_factory=dict)
    line: Mapping[str, AttributeHandler] = field(default_factory=dict)
    inline: Mapping[str, AttributeHandler] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "container", _frozen(self.container))
        object.__setattr__(self, "line", _frozen(self.line))
        object.__setattr__(self, "inline", _frozen(self.inline))

    def table(self, level: HandlerLevel) -> Mapping[str, AttributeHandler]:
        """Return the table for ``level``.

        Raises
        ------
        ValueError
            If ``level`` is not "container", "line" or "inline"

        """
        if level == "container":
            return self.container
        if level == "line":
            return self.line
        if level == "inline":
            return self.inline
        raise ValueError(f"Unknown handler level: {level!r}")

    def with_handler(self, level: HandlerLevel, key: str, handler: AttributeHandler) -> HandlerRegistry:
        """Return a copy with ``handler`` registered for ``key`` at ``level``.

        A replaced key keeps its position; a new key is appended.
        """
        updated = dict(self.table(level))
        updated[key] = handler
        return self._replace_table(level, updated)

    def without_handler(self, level: HandlerLevel, key: str) -> HandlerRegistry:
        """Return a copy with the handler for ``key`` at ``level`` removed."""
        updated = dict(self.table(level))
        updated.pop(key, None)
        return self._replace_table(level, updated)

    def _replace_table(self, level: HandlerLevel, table: dict[str, AttributeHandler]) -> HandlerRegistry:
        tables = {"container": self.container, "line": self.line, "inline": self.inline}
        tables[level] = table
        return HandlerRegistry(**tables)


def default_handler_registry(options: Optional[MarkdownRendererOptions] = None) -> HandlerRegistry:
    """Build the standard markdown handler tables.

    - container ``code-block``: fence line before and after the grouped lines
    - line ``header``: ``#`` repeated level times and a space
    - line ``blockquote``: ``> ``
    - line ``list``: indent, then ``1. `` (ordered) or ``- ``
    - inline ``italic`` ``_``, ``bold`` ``**``, ``strike`` ``~~``, ``code`` a backtick
    - inline ``link``: ``[`` before and ``](url)`` after

    Inline markers are only written at span boundaries.
    """
    options = options or MarkdownRendererOptions()
    return HandlerRegistry(
        container={
            ATTR_CODE_BLOCK: code_fence_handler(options),
        },
        line={
            ATTR_HEADER: AttributeHandler(before_content=_header_before),
            ATTR_BLOCKQUOTE: AttributeHandler(before_content=_blockquote_before),
            ATTR_LIST: list_item_handler(options),
        },
        inline={
            ATTR_ITALIC: span_marker(MARKER_ITALIC),
            ATTR_BOLD: span_marker(MARKER_BOLD),
            ATTR_STRIKETHROUGH: span_marker(MARKER_STRIKETHROUGH),
            ATTR_INLINE_CODE: span_marker(MARKER_INLINE_CODE),
            ATTR_LINK: AttributeHandler(before_content=_link_before, after_content=_link_after),
        },
    )


__all__ = [
    "AttributeHandler",
    "HandlerCallback",
    "HandlerLevel",
    "HandlerRegistry",
    "TextSink",
    "closes_span",
    "code_fence_handler",
    "default_handler_registry",
    "header_level",
    "list_item_handler",
    "opens_span",
    "span_marker",
]
