#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Utility helpers for richtext2md (escaping, output writing)."""

from richtext2md.utils.escape import escape_markdown
from richtext2md.utils.io_utils import write_content

__all__ = ["escape_markdown", "write_content"]
