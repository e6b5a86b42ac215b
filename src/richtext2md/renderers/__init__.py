#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting document trees to text formats."""

from richtext2md.renderers.base import BaseRenderer
from richtext2md.renderers.handlers import (
    AttributeHandler,
    HandlerRegistry,
    closes_span,
    default_handler_registry,
    opens_span,
    span_marker,
)
from richtext2md.renderers.markdown import MarkdownRenderer

__all__ = [
    "AttributeHandler",
    "BaseRenderer",
    "HandlerRegistry",
    "MarkdownRenderer",
    "closes_span",
    "default_handler_registry",
    "opens_span",
    "span_marker",
]
