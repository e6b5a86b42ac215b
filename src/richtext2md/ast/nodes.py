#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/nodes.py
"""Node classes for the rich-text document tree.

The tree has four levels and a closed set of five variants::

    Root
    ├── Block          (groups contiguous lines sharing a container attribute)
    │   └── Line
    │       └── Text | Embed
    └── Line
        └── Text | Embed

Every node carries a :class:`~richtext2md.ast.attributes.Style`. Parents own
their children; a child only keeps a weak reference to its parent and its
position in the parent's child tuple, so the ``previous`` / ``next`` sibling
links are derived on demand and never own anything.

Trees are immutable snapshots: child sequences are frozen into tuples at
construction and a node may only be attached to a single parent.

"""

from __future__ import annotations

import weakref
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Iterator, Optional, Sequence

from richtext2md.ast.attributes import AttributeScope, Style
from richtext2md.exceptions import MalformedDocumentError


@dataclass(frozen=True)
class EmbedValue:
    """Payload of an :class:`Embed` leaf.

    Parameters
    ----------
    type : str
        Embed type (e.g. ``"image"``, ``"divider"``)
    data : Any, default = None
        Type-specific payload, such as the image URL

    """

    type: str
    data: Any = None


class Node(ABC):
    """Base class for all document tree nodes.

    Nodes compare by identity. Use :func:`richtext2md.ast.serialization.ast_to_dict`
    to compare trees structurally.

    """

    style: Style
    _parent: Optional[weakref.ReferenceType[Node]] = None
    _index: int = 0

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass

    @property
    def parent(self) -> Optional[Node]:
        """The owning container, or None for a root or detached node."""
        return self._parent() if self._parent is not None else None

    @property
    def previous(self) -> Optional[Node]:
        """Sibling immediately before this node within the same parent."""
        parent = self.parent
        if parent is None or self._index == 0:
            return None
        return parent.children[self._index - 1]

    @property
    def next(self) -> Optional[Node]:
        """Sibling immediately after this node within the same parent."""
        parent = self.parent
        if parent is None:
            return None
        siblings = parent.children
        if self._index + 1 >= len(siblings):
            return None
        return siblings[self._index + 1]

    @property
    def is_leaf(self) -> bool:
        return False

    def contains_attribute(self, key: str, value: Any = None) -> bool:
        """Check whether this node's style carries ``key`` (and ``value`` when not None)."""
        if value is None:
            return self.style.contains(key)
        return self.style.contains(key, value)

    def attribute_value_or(self, key: str, default: Any) -> Any:
        """Return the value of attribute ``key``, or ``default`` when absent."""
        return self.style.value_or(key, default)

    def _init_style(self) -> None:
        if not isinstance(self.style, Style):
            self.style = Style(self.style)

    def _adopt(self, children: Sequence[Node], allowed: tuple[type, ...]) -> tuple[Node, ...]:
        frozen = tuple(children)
        for index, child in enumerate(frozen):
            if not isinstance(child, allowed):
                allowed_names = ", ".join(cls.__name__ for cls in allowed)
                raise MalformedDocumentError(
                    f"{type(self).__name__} cannot contain {type(child).__name__} (expected {allowed_names})",
                    node=child,
                )
            current = child.parent
            if current is not None and current is not self:
                raise MalformedDocumentError(
                    f"{type(child).__name__} node is already attached to another {type(current).__name__}",
                    node=child,
                )
            child._parent = weakref.ref(self)
            child._index = index
        return frozen


@dataclass(eq=False)
class Root(Node):
    """Root of the document tree.

    Parameters
    ----------
    children : sequence of Block or Line, default = empty
        Top-level containers in document order
    style : Style or mapping, default = empty
        Document-level attributes (unused by the markdown rules)

    """

    children: Sequence[Node] = field(default_factory=tuple)
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        self._init_style()
        self.children = self._adopt(self.children, (Block, Line))

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_root(self)


@dataclass(eq=False)
class Block(Node):
    """Container grouping contiguous lines that share a container attribute.

    Parameters
    ----------
    children : sequence of Line, default = empty
        Grouped lines
    style : Style or mapping
        Must carry at least one CONTAINER-scope attribute (e.g. ``code-block``)

    Raises
    ------
    MalformedDocumentError
        If the style has no CONTAINER-scope attribute

    """

    children: Sequence[Node] = field(default_factory=tuple)
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        self._init_style()
        if not self.style.has_scope(AttributeScope.CONTAINER):
            raise MalformedDocumentError("Block requires a container-scope attribute", node=self)
        self.children = self._adopt(self.children, (Line,))

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_block(self)


@dataclass(eq=False)
class Line(Node):
    """A single line of the document holding inline leaves.

    Parameters
    ----------
    children : sequence of Text or Embed, default = empty
        Inline leaves in reading order
    style : Style or mapping, default = empty
        Line-level attributes (header, blockquote, list, indent...)

    """

    children: Sequence[Node] = field(default_factory=tuple)
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        self._init_style()
        self.children = self._adopt(self.children, (Text, Embed))

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_line(self)

    @property
    def next_line(self) -> Optional[Line]:
        """The following line in document order, crossing block boundaries."""
        return _adjacent_line(self, forward=True)

    @property
    def previous_line(self) -> Optional[Line]:
        """The preceding line in document order, crossing block boundaries."""
        return _adjacent_line(self, forward=False)


@dataclass(eq=False)
class Text(Node):
    """Text leaf.

    Parameters
    ----------
    value : str, default = ""
        Literal text, escaped at render time
    style : Style or mapping, default = empty
        Inline attributes

    """

    value: str = ""
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        self._init_style()
        if not isinstance(self.value, str):
            raise MalformedDocumentError(f"Text value must be a string, got {type(self.value).__name__}", node=self)

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_text(self)

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    @property
    def is_leaf(self) -> bool:
        return True


@dataclass(eq=False)
class Embed(Node):
    """Embedded object leaf (image, horizontal rule...).

    Parameters
    ----------
    value : EmbedValue
        Embed type and payload
    style : Style or mapping, default = empty
        Inline attributes

    """

    value: EmbedValue = field(default_factory=lambda: EmbedValue(""))
    style: Style = field(default_factory=Style)

    def __post_init__(self) -> None:
        self._init_style()
        if not isinstance(self.value, EmbedValue):
            raise MalformedDocumentError(
                f"Embed value must be an EmbedValue, got {type(self.value).__name__}", node=self
            )

    def accept(self, visitor: Any) -> Any:
        return visitor.visit_embed(self)

    @property
    def children(self) -> tuple[Node, ...]:
        return ()

    @property
    def is_leaf(self) -> bool:
        return True


NODE_TYPES: tuple[type[Node], ...] = (Root, Block, Line, Text, Embed)


def _lines_of(node: Node, reverse: bool) -> Iterator[Line]:
    if isinstance(node, Line):
        yield node
    elif isinstance(node, Block):
        children = reversed(node.children) if reverse else iter(node.children)
        for child in children:
            if isinstance(child, Line):
                yield child


def _adjacent_line(line: Line, forward: bool) -> Optional[Line]:
    current: Optional[Node] = line
    while current is not None and not isinstance(current, Root):
        sibling = current.next if forward else current.previous
        while sibling is not None:
            candidate = next(_lines_of(sibling, reverse=not forward), None)
            if candidate is not None:
                return candidate
            # empty block, keep looking
            sibling = sibling.next if forward else sibling.previous
        current = current.parent
    return None


__all__ = [
    "Block",
    "Embed",
    "EmbedValue",
    "Line",
    "NODE_TYPES",
    "Node",
    "Root",
    "Text",
]
