#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/constants.py
"""Constants and default values for richtext2md.

Attribute keys, embed types, markdown markers and rendering defaults shared
across the attribute model, the renderer and the options classes.

"""

from __future__ import annotations

import re
from typing import Final

# =============================================================================
# Attribute keys
# =============================================================================

ATTR_BOLD: Final = "bold"
ATTR_ITALIC: Final = "italic"
ATTR_STRIKETHROUGH: Final = "strike"
ATTR_INLINE_CODE: Final = "code"
ATTR_LINK: Final = "link"

ATTR_HEADER: Final = "header"
ATTR_BLOCKQUOTE: Final = "blockquote"
ATTR_LIST: Final = "list"
ATTR_INDENT: Final = "indent"

ATTR_CODE_BLOCK: Final = "code-block"

LIST_ORDERED: Final = "ordered"
LIST_BULLET: Final = "bullet"

# =============================================================================
# Embed types
# =============================================================================

EMBED_IMAGE: Final = "image"
EMBED_HORIZONTAL_RULE: Final = "divider"

# =============================================================================
# Markdown markers
# =============================================================================

MARKER_ITALIC: Final = "_"
MARKER_BOLD: Final = "**"
MARKER_STRIKETHROUGH: Final = "~~"
MARKER_INLINE_CODE: Final = "`"
MARKER_BLOCKQUOTE: Final = "> "
MARKER_ORDERED_ITEM: Final = "1. "
MARKER_BULLET_ITEM: Final = "- "

MIN_HEADER_LEVEL: Final = 1
MAX_HEADER_LEVEL: Final = 6

# Every character in this class is prefixed with a backslash inside text leaves
MARKDOWN_SPECIAL_CHARS_PATTERN: Final = re.compile(r"[\\`*_{}\[\]()#+\-.!><]")

# =============================================================================
# Rendering defaults
# =============================================================================

DEFAULT_ESCAPE_SPECIAL: Final = True
DEFAULT_CODE_FENCE: Final = "```"
# Spaced so a preceding line is never read as a setext heading
DEFAULT_HORIZONTAL_RULE: Final = "- - -"
DEFAULT_ORDERED_INDENT_WIDTH: Final = 3
DEFAULT_BULLET_INDENT_WIDTH: Final = 2
DEFAULT_TIGHT_LINE_ATTRIBUTES: Final = (ATTR_LIST, ATTR_CODE_BLOCK)
DEFAULT_PRECOMPUTE_SPAN_COUNTS: Final = True

SERIALIZATION_SCHEMA_VERSION: Final = 1
