#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for richtext2md renderers."""

from richtext2md.options.base import BaseRendererOptions, CloneFrozenMixin
from richtext2md.options.markdown import MarkdownRendererOptions

__all__ = ["BaseRendererOptions", "CloneFrozenMixin", "MarkdownRendererOptions"]
