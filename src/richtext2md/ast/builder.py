#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/builder.py
"""Builder helper for assembling document trees line by line.

:class:`DocumentBuilder` takes care of the one piece of bookkeeping the tree
requires: contiguous lines sharing a container attribute (such as
``code-block``) are grouped under a single :class:`Block`.

"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence

from richtext2md.ast.attributes import Attribute, AttributeScope, Style, StyleSource
from richtext2md.ast.nodes import Block, Embed, EmbedValue, Line, Node, Root, Text
from richtext2md.exceptions import MalformedDocumentError


def _merge_attributes(attributes: Optional[Mapping[str, Any]], extra: Mapping[str, Any]) -> dict[str, Any]:
    merged = dict(attributes or {})
    merged.update(extra)
    return merged


class DocumentBuilder:
    """Helper for building a :class:`Root` from a sequence of lines.

    Each line keeps its own style, container attributes included; the builder
    additionally wraps runs of lines with equal container attributes in a Block
    carrying just those attributes.

    Examples
    --------
    >>> builder = (
    ...     DocumentBuilder()
    ...     .add_line([DocumentBuilder.text("Title")], {"header": 1})
    ...     .add_line([DocumentBuilder.text("x = 1")], {"code-block": True})
    ...     .add_line([DocumentBuilder.text("y = 2")], {"code-block": True})
    ... )
    >>> doc = builder.get_document()
    >>> [type(child).__name__ for child in doc.children]
    ['Line', 'Block']

    """

    def __init__(self) -> None:
        """Initialize an empty builder."""
        self._groups: list[tuple[tuple[Attribute, ...], list[Line]]] = []
        self._document: Optional[Root] = None

    @staticmethod
    def text(value: str, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any) -> Text:
        """Create a Text leaf; keyword arguments become inline attributes.

        Keys that are not valid identifiers (``code-block``) go in ``attributes``.
        """
        return Text(value=value, style=Style(_merge_attributes(attributes, kwargs)))

    @staticmethod
    def embed(
        embed_type: str, data: Any = None, attributes: Optional[Mapping[str, Any]] = None, **kwargs: Any
    ) -> Embed:
        """Create an Embed leaf of ``embed_type`` carrying ``data``."""
        return Embed(value=EmbedValue(embed_type, data), style=Style(_merge_attributes(attributes, kwargs)))

    def add_line(self, leaves: Sequence[Node] = (), style: StyleSource = None) -> DocumentBuilder:
        """Append a line holding ``leaves``.

        Parameters
        ----------
        leaves : sequence of Text or Embed
            Inline content of the line
        style : Style, mapping or None
            Line attributes

        Returns
        -------
        DocumentBuilder
            This builder, for chaining

        Raises
        ------
        MalformedDocumentError
            If the document was already built

        """
        if self._document is not None:
            raise MalformedDocumentError("Cannot add lines after get_document() was called")

        line = Line(children=leaves, style=Style(style))
        container_attributes = tuple(
            attribute for attribute in line.style.values() if attribute.scope is AttributeScope.CONTAINER
        )
        if self._groups and container_attributes and self._groups[-1][0] == container_attributes:
            self._groups[-1][1].append(line)
        else:
            self._groups.append((container_attributes, [line]))
        return self

    def get_document(self) -> Root:
        """Build (once) and return the document root."""
        if self._document is None:
            containers: list[Node] = []
            for container_attributes, lines in self._groups:
                if container_attributes:
                    containers.append(Block(children=lines, style=Style(container_attributes)))
                else:
                    containers.extend(lines)
            self._document = Root(children=containers)
        return self._document


def build_document(lines: Sequence[tuple[Sequence[Node], StyleSource]]) -> Root:
    """Build a document from ``(leaves, style)`` pairs.

    Examples
    --------
    >>> doc = build_document([([Text("Hello")], None)])

    """
    builder = DocumentBuilder()
    for leaves, style in lines:
        builder.add_line(leaves, style)
    return builder.get_document()


__all__ = ["DocumentBuilder", "build_document"]
