#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/utils.py
"""Read helpers over the document tree.

Document-order iteration over lines and leaves, cross-line leaf navigation,
and the attribute frequency tally used to decide how simultaneous inline
markers nest.

"""

from __future__ import annotations

from collections import Counter
from typing import Iterator, Mapping, Optional

from richtext2md.ast.attributes import Attribute
from richtext2md.ast.nodes import Block, Line, Node, Root


def document_root(node: Node) -> Optional[Root]:
    """Return the Root owning ``node`` (or ``node`` itself), None when detached."""
    current: Optional[Node] = node
    while current is not None and not isinstance(current, Root):
        current = current.parent
    return current


def iter_lines(root: Root) -> Iterator[Line]:
    """Yield every Line of the document in order, descending into Blocks."""
    for child in root.children:
        if isinstance(child, Block):
            for line in child.children:
                if isinstance(line, Line):
                    yield line
        elif isinstance(child, Line):
            yield child


def iter_leaves(root: Root) -> Iterator[Node]:
    """Yield every Text and Embed leaf of the document in order."""
    for line in iter_lines(root):
        yield from line.children


def next_leaf(leaf: Node) -> Optional[Node]:
    """Leaf following ``leaf`` in document order, continuing onto later lines."""
    if leaf.next is not None:
        return leaf.next
    line = leaf.parent
    if not isinstance(line, Line):
        return None
    following = line.next_line
    while following is not None:
        if following.children:
            return following.children[0]
        following = following.next_line
    return None


def previous_leaf(leaf: Node) -> Optional[Node]:
    """Leaf preceding ``leaf`` in document order, continuing onto earlier lines."""
    if leaf.previous is not None:
        return leaf.previous
    line = leaf.parent
    if not isinstance(line, Line):
        return None
    preceding = line.previous_line
    while preceding is not None:
        if preceding.children:
            return preceding.children[-1]
        preceding = preceding.previous_line
    return None


def first_leaf(leaf: Node) -> Node:
    """Walk back from ``leaf`` to the first leaf of its document."""
    head = leaf
    while (before := previous_leaf(head)) is not None:
        head = before
    return head


def count_attribute_occurrences(root: Root) -> Counter[Attribute]:
    """Tally, over every leaf of the document, how many leaves carry each attribute.

    Attributes are counted by identity (key, scope and value), so two links with
    different URLs get separate tallies.

    Parameters
    ----------
    root : Root
        Document to scan

    Returns
    -------
    Counter
        Number of leaves carrying each distinct attribute

    """
    counts: Counter[Attribute] = Counter()
    for leaf in iter_leaves(root):
        counts.update(leaf.style.values())
    return counts


def _scan_from_head(leaf: Node) -> Counter[Attribute]:
    counts: Counter[Attribute] = Counter()
    current: Optional[Node] = first_leaf(leaf)
    while current is not None:
        counts.update(current.style.values())
        current = next_leaf(current)
    return counts


def attributes_sorted_by_span(leaf: Node, counts: Optional[Mapping[Attribute, int]] = None) -> list[Attribute]:
    """Order a leaf's attributes from the widest-spanning to the narrowest.

    The width of an attribute is the number of leaves in the whole document that
    carry it. Ties keep the leaf's style order. Opening markers in this order and
    closing them in reverse keeps multi-leaf runs consistently nested.

    Parameters
    ----------
    leaf : Node
        Text or Embed leaf whose attributes are ordered
    counts : Mapping, optional
        Precomputed tally from :func:`count_attribute_occurrences`. When omitted
        the document is scanned from its first leaf.

    Returns
    -------
    list of Attribute
        The leaf's attributes, outermost first

    """
    if counts is None:
        counts = _scan_from_head(leaf)
    return sorted(leaf.style.values(), key=lambda attribute: counts.get(attribute, 0), reverse=True)


__all__ = [
    "attributes_sorted_by_span",
    "count_attribute_occurrences",
    "document_root",
    "first_leaf",
    "iter_leaves",
    "iter_lines",
    "next_leaf",
    "previous_leaf",
]
