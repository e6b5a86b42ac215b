#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/ast/visitors.py
"""Visitor pattern implementation for document tree traversal.

The node variant set is closed (Root, Block, Line, Text, Embed), so a visitor
implements exactly one method per variant and :meth:`NodeVisitor.visit`
refuses anything else.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from richtext2md.ast.nodes import NODE_TYPES, Block, Embed, Line, Root, Text
from richtext2md.exceptions import MalformedDocumentError


class NodeVisitor(ABC):
    """Abstract base class for document tree visitors.

    Examples
    --------
    Visitor that counts leaves:

        >>> class LeafCounter(NodeVisitor):
        ...     def __init__(self):
        ...         self.count = 0
        ...     def visit_root(self, node):
        ...         for child in node.children:
        ...             self.visit(child)
        ...     visit_block = visit_line = visit_root
        ...     def visit_text(self, node):
        ...         self.count += 1
        ...     visit_embed = visit_text

    """

    def visit(self, node: Any) -> Any:
        """Dispatch ``node`` to the matching ``visit_*`` method.

        Raises
        ------
        MalformedDocumentError
            If ``node`` is not one of the five document tree variants

        """
        if type(node) not in NODE_TYPES:
            raise MalformedDocumentError(f"Node of type {type(node).__name__} cannot be visited", node=node)
        return node.accept(self)

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit the Root node."""
        pass

    @abstractmethod
    def visit_block(self, node: Block) -> Any:
        """Visit a Block container."""
        pass

    @abstractmethod
    def visit_line(self, node: Line) -> Any:
        """Visit a Line."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text leaf."""
        pass

    @abstractmethod
    def visit_embed(self, node: Embed) -> Any:
        """Visit an Embed leaf."""
        pass


__all__ = ["NodeVisitor"]
