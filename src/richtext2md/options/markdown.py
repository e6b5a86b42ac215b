#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown rendering of rich-text documents."""
# src/richtext2md/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from richtext2md.constants import (
    DEFAULT_BULLET_INDENT_WIDTH,
    DEFAULT_CODE_FENCE,
    DEFAULT_ESCAPE_SPECIAL,
    DEFAULT_HORIZONTAL_RULE,
    DEFAULT_ORDERED_INDENT_WIDTH,
    DEFAULT_PRECOMPUTE_SPAN_COUNTS,
    DEFAULT_TIGHT_LINE_ATTRIBUTES,
)
from richtext2md.options.base import BaseRendererOptions


@dataclass(frozen=True)
class MarkdownRendererOptions(BaseRendererOptions):
    r"""Markdown rendering options for converting a document tree to Markdown text.

    Parameters
    ----------
    escape_special : bool, default True
        Whether to escape special Markdown characters in text content.
        When True, characters like \*, \_, #, [, ], (, ), \\ are escaped.
    code_fence : str, default "```"
        Fence written before and after a code block container.
    horizontal_rule : str, default "- - -"
        Text written for a horizontal rule embed. Spaced by default so a
        preceding line cannot be read as a setext heading.
    ordered_indent_width : int, default 3
        Spaces per ``indent`` level in front of an ordered list item.
    bullet_indent_width : int, default 2
        Spaces per ``indent`` level in front of a bullet list item.
    tight_line_attributes : tuple of str, default ("list", "code-block")
        Line attribute keys whose consecutive lines are not separated by a
        blank line. A blank line still follows the last line of such a run.
    precompute_span_counts : bool, default True
        Compute the attribute frequency tally that orders nested inline markers
        once per render. When False, every text leaf rescans the document.
        Output is identical either way.

    """

    escape_special: bool = field(
        default=DEFAULT_ESCAPE_SPECIAL,
        metadata={
            "help": "Escape special Markdown characters (e.g. asterisks) in text content",
            "importance": "core",
        },
    )
    code_fence: str = field(
        default=DEFAULT_CODE_FENCE,
        metadata={"help": "Fence written around code block containers", "importance": "advanced"},
    )
    horizontal_rule: str = field(
        default=DEFAULT_HORIZONTAL_RULE,
        metadata={"help": "Text written for horizontal rule embeds", "importance": "advanced"},
    )
    ordered_indent_width: int = field(
        default=DEFAULT_ORDERED_INDENT_WIDTH,
        metadata={"help": "Spaces per indent level for ordered list items", "type": int, "importance": "advanced"},
    )
    bullet_indent_width: int = field(
        default=DEFAULT_BULLET_INDENT_WIDTH,
        metadata={"help": "Spaces per indent level for bullet list items", "type": int, "importance": "advanced"},
    )
    tight_line_attributes: tuple[str, ...] = field(
        default=DEFAULT_TIGHT_LINE_ATTRIBUTES,
        metadata={
            "help": "Line attribute keys whose consecutive lines are not separated by blank lines",
            "importance": "advanced",
        },
    )
    precompute_span_counts: bool = field(
        default=DEFAULT_PRECOMPUTE_SPAN_COUNTS,
        metadata={
            "help": "Tally attribute spans once per render instead of once per text leaf",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges and string options.

        Raises
        ------
        ValueError
            If any field value is outside its valid range.

        """
        super().__post_init__()

        if not self.code_fence or not self.code_fence.strip():
            raise ValueError("code_fence must be a non-empty string")
        if "\n" in self.code_fence:
            raise ValueError("code_fence must fit on a single line")
        if not self.horizontal_rule:
            raise ValueError("horizontal_rule must be a non-empty string")
        if self.ordered_indent_width < 0:
            raise ValueError(f"ordered_indent_width must be non-negative, got {self.ordered_indent_width}")
        if self.bullet_indent_width < 0:
            raise ValueError(f"bullet_indent_width must be non-negative, got {self.bullet_indent_width}")
        if isinstance(self.tight_line_attributes, str):
            raise ValueError("tight_line_attributes must be a sequence of attribute keys, not a string")
        # Lists passed by callers are normalized so the options stay hashable
        object.__setattr__(self, "tight_line_attributes", tuple(self.tight_line_attributes))
