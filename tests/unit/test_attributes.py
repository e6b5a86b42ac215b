#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_attributes.py
"""Unit tests for Attribute, AttributeScope and Style.

Tests cover:
- Attribute identity (key, scope and value)
- Scope lookup for well-known keys
- Style construction from mappings and attributes
- Style query helpers

"""

import pytest

from richtext2md.ast import Attribute, AttributeScope, Style
from richtext2md.exceptions import ValidationError


@pytest.mark.unit
class TestAttribute:
    """Tests for the Attribute value object."""

    def test_equal_when_key_scope_and_value_match(self):
        assert Attribute("bold", AttributeScope.INLINE, True) == Attribute("bold", AttributeScope.INLINE, True)

    def test_links_with_different_urls_differ(self):
        first = Attribute("link", AttributeScope.INLINE, "https://a.example")
        second = Attribute("link", AttributeScope.INLINE, "https://b.example")
        assert first != second

    def test_scope_is_part_of_identity(self):
        assert Attribute("custom", AttributeScope.INLINE) != Attribute("custom", AttributeScope.BLOCK)

    @pytest.mark.parametrize(
        "key,scope",
        [
            ("bold", AttributeScope.INLINE),
            ("italic", AttributeScope.INLINE),
            ("strike", AttributeScope.INLINE),
            ("code", AttributeScope.INLINE),
            ("link", AttributeScope.INLINE),
            ("header", AttributeScope.BLOCK),
            ("blockquote", AttributeScope.BLOCK),
            ("list", AttributeScope.BLOCK),
            ("indent", AttributeScope.BLOCK),
            ("code-block", AttributeScope.CONTAINER),
            ("font", AttributeScope.IGNORED),
        ],
    )
    def test_from_key_resolves_scope(self, key, scope):
        assert Attribute.from_key(key, None).scope is scope

    def test_unhashable_value_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            Attribute("link", AttributeScope.INLINE, ["not", "hashable"])
        assert exc_info.value.parameter_name == "value"

    def test_empty_key_rejected(self):
        with pytest.raises(ValidationError):
            Attribute("", AttributeScope.INLINE)

    def test_invalid_scope_rejected(self):
        with pytest.raises(ValidationError):
            Attribute("bold", "inline")


@pytest.mark.unit
class TestStyle:
    """Tests for the Style mapping."""

    def test_from_plain_mapping(self):
        style = Style({"header": 2, "align": "center"})
        assert style["header"] == Attribute("header", AttributeScope.BLOCK, 2)
        assert style["align"].scope is AttributeScope.IGNORED
        assert list(style) == ["header", "align"]

    def test_from_attributes(self):
        bold = Attribute.from_key("bold", True)
        style = Style([bold])
        assert style["bold"] is bold
        assert len(style) == 1

    def test_copy_from_style(self):
        original = Style({"italic": True})
        assert Style(original) == original

    def test_empty(self):
        assert len(Style()) == 0
        assert len(Style(None)) == 0

    def test_mismatched_key_rejected(self):
        with pytest.raises(ValidationError):
            Style({"bold": Attribute.from_key("italic", True)})

    def test_non_attribute_entries_rejected(self):
        with pytest.raises(ValidationError):
            Style(["bold"])

    def test_contains_key_only(self):
        style = Style({"link": "https://a.example"})
        assert style.contains("link")
        assert not style.contains("bold")

    def test_contains_with_value(self):
        style = Style({"link": "https://a.example"})
        assert style.contains("link", "https://a.example")
        assert not style.contains("link", "https://b.example")

    def test_contains_none_value_is_compared(self):
        style = Style({"list": None})
        assert style.contains("list", None)
        assert not style.contains("list", "ordered")

    def test_value_or(self):
        style = Style({"header": None, "indent": 2})
        assert style.value_or("header", 1) == 1
        assert style.value_or("indent", 0) == 2
        assert style.value_or("list", "bullet") == "bullet"

    def test_has_scope(self):
        style = Style({"header": 1, "code-block": True})
        assert style.has_scope(AttributeScope.BLOCK)
        assert style.has_scope(AttributeScope.CONTAINER)
        assert not style.has_scope(AttributeScope.INLINE)

    def test_to_dict_round_trip(self):
        plain = {"bold": True, "link": "https://a.example"}
        assert Style(plain).to_dict() == plain

    def test_style_is_read_only(self):
        style = Style({"bold": True})
        with pytest.raises(TypeError):
            style["italic"] = Attribute.from_key("italic", True)
