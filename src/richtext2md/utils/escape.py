#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/richtext2md/utils/escape.py
"""Markdown text escaping.

Escaping is lexical and context-free: every markdown metacharacter in a text
leaf is prefixed with a backslash, whatever markers surround the leaf. Inside
an inline code span this over-escapes (``a-b`` becomes ``a\\-b``); the
behavior is kept stable so output stays predictable across documents.

"""

from __future__ import annotations

from richtext2md.constants import MARKDOWN_SPECIAL_CHARS_PATTERN


def escape_markdown(text: str) -> str:
    r"""Escape markdown metacharacters in leaf text.

    Each character of ``\ ` * _ { } [ ] ( ) # + - . ! > <`` is prefixed with a
    backslash. The function is not idempotent: escaping twice doubles the
    backslashes.

    Parameters
    ----------
    text : str
        Raw leaf text

    Returns
    -------
    str
        Escaped text

    Examples
    --------
        >>> escape_markdown("a*b")
        'a\\*b'
        >>> escape_markdown("1. item")
        '1\\. item'

    """
    if not text:
        return text
    return MARKDOWN_SPECIAL_CHARS_PATTERN.sub(lambda match: "\\" + match.group(0), text)


__all__ = ["escape_markdown"]
