#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_escape.py
"""Unit tests for markdown text escaping.

Tests cover:
- Every metacharacter is backslash-escaped
- Ordinary text is untouched
- Escaping is applied once per character

"""

import pytest
from hypothesis import given
from hypothesis import strategies as st

from richtext2md.utils.escape import escape_markdown

SPECIAL_CHARS = "\\`*_{}[]()#+-.!><"


@pytest.mark.unit
class TestEscapeMarkdown:
    """Tests for escape_markdown."""

    @pytest.mark.parametrize("char", list(SPECIAL_CHARS))
    def test_each_special_char(self, char):
        assert escape_markdown(char) == "\\" + char

    def test_mixed(self):
        assert escape_markdown("a*b") == "a\\*b"
        assert escape_markdown("1. item") == "1\\. item"
        assert escape_markdown("[x](y)") == "\\[x\\]\\(y\\)"

    def test_backslash_escaped(self):
        assert escape_markdown("C:\\path") == "C:\\\\path"

    def test_plain_text_untouched(self):
        assert escape_markdown("plain text, with commas; and 'quotes'") == "plain text, with commas; and 'quotes'"

    def test_empty(self):
        assert escape_markdown("") == ""

    def test_unicode_untouched(self):
        assert escape_markdown("héllo wörld") == "héllo wörld"

    def test_not_idempotent(self):
        assert escape_markdown(escape_markdown("*")) == "\\\\\\*"

    @given(st.text())
    def test_length_grows_by_special_count(self, text):
        specials = sum(1 for char in text if char in SPECIAL_CHARS)
        assert len(escape_markdown(text)) == len(text) + specials

    @given(st.text())
    def test_unescaping_restores_input(self, text):
        escaped = escape_markdown(text)
        restored = []
        chars = iter(escaped)
        for char in chars:
            if char == "\\":
                char = next(chars)
                assert char in SPECIAL_CHARS
            else:
                assert char not in SPECIAL_CHARS
            restored.append(char)
        assert "".join(restored) == text
