#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# tests/unit/test_nodes.py
"""Unit tests for document tree node classes.

Tests cover:
- Node creation and style coercion
- Sibling links derived from the parent
- Cross-block line navigation
- Structural validation

"""

import pytest

from richtext2md.ast import Block, Embed, EmbedValue, Line, Root, Style, Text
from richtext2md.exceptions import MalformedDocumentError


@pytest.mark.unit
class TestNodeCreation:
    """Tests for constructing nodes."""

    def test_style_mapping_is_coerced(self):
        leaf = Text("x", style={"bold": True})
        assert isinstance(leaf.style, Style)
        assert leaf.contains_attribute("bold")

    def test_children_frozen_to_tuple(self):
        line = Line(children=[Text("a"), Text("b")])
        assert isinstance(line.children, tuple)
        assert [leaf.value for leaf in line.children] == ["a", "b"]

    def test_leaves_have_no_children(self):
        assert Text("a").children == ()
        assert Embed(EmbedValue("image", "u")).children == ()
        assert Text("a").is_leaf
        assert not Line().is_leaf

    def test_nodes_compare_by_identity(self):
        assert Text("a") != Text("a")

    def test_text_value_must_be_string(self):
        with pytest.raises(MalformedDocumentError):
            Text(42)

    def test_embed_value_type_checked(self):
        with pytest.raises(MalformedDocumentError):
            Embed("image")


@pytest.mark.unit
class TestStructuralValidation:
    """Tests for containment rules."""

    def test_block_requires_container_attribute(self):
        with pytest.raises(MalformedDocumentError):
            Block(children=[Line()], style={"header": 1})

    def test_block_accepts_container_attribute(self):
        block = Block(children=[Line()], style={"code-block": True})
        assert len(block.children) == 1

    def test_root_rejects_leaves(self):
        with pytest.raises(MalformedDocumentError):
            Root(children=[Text("a")])

    def test_line_rejects_lines(self):
        with pytest.raises(MalformedDocumentError):
            Line(children=[Line()])

    def test_block_rejects_blocks(self):
        inner = Block(style={"code-block": True})
        with pytest.raises(MalformedDocumentError):
            Block(children=[inner], style={"code-block": True})

    def test_node_cannot_have_two_parents(self):
        leaf = Text("shared")
        first = Line(children=[leaf])
        with pytest.raises(MalformedDocumentError):
            Line(children=[leaf])
        assert leaf.parent is first


@pytest.mark.unit
class TestSiblingLinks:
    """Tests for parent, previous and next."""

    def test_parent(self):
        leaf = Text("a")
        line = Line(children=[leaf])
        assert leaf.parent is line
        assert line.parent is None

    def test_previous_and_next(self):
        a, b, c = Text("a"), Text("b"), Text("c")
        line = Line(children=[a, b, c])
        assert a.previous is None
        assert a.next is b
        assert b.previous is a
        assert b.next is c
        assert c.next is None
        assert line.next is None

    def test_detached_node_has_no_siblings(self):
        leaf = Text("alone")
        assert leaf.previous is None
        assert leaf.next is None

    def test_equal_siblings_resolved_by_position(self):
        first, second = Text("same", style={"bold": True}), Text("same", style={"bold": True})
        line = Line(children=[first, second])
        assert first.next is second
        assert second.previous is first
        assert line.children == (first, second)

    def test_parent_reference_is_weak(self):
        leaf = Text("a")
        Line(children=[leaf])
        # The line is gone, nothing else owned it
        assert leaf.parent is None

    def test_attribute_helpers(self):
        leaf = Text("a", style={"link": "https://a.example"})
        assert leaf.contains_attribute("link")
        assert leaf.contains_attribute("link", "https://a.example")
        assert not leaf.contains_attribute("link", "https://b.example")
        assert leaf.attribute_value_or("indent", 0) == 0


@pytest.mark.unit
class TestLineNavigation:
    """Tests for next_line / previous_line across blocks."""

    def test_lines_in_root(self):
        first, second = Line(), Line()
        doc = Root(children=[first, second])
        assert first.next_line is second
        assert second.previous_line is first
        assert second.next_line is None
        assert doc.children[0] is first

    def test_into_and_out_of_block(self):
        before, inside_a, inside_b, after = Line(), Line(), Line(), Line()
        block = Block(children=[inside_a, inside_b], style={"code-block": True})
        doc = Root(children=[before, block, after])
        assert before.next_line is inside_a
        assert inside_a.next_line is inside_b
        assert inside_b.next_line is after
        assert after.previous_line is inside_b
        assert inside_a.previous_line is before
        assert len(doc.children) == 3

    def test_skips_empty_block(self):
        before, after = Line(), Line()
        doc = Root(children=[before, Block(style={"code-block": True}), after])
        assert before.next_line is after
        assert after.previous_line is before
        assert len(doc.children) == 3

    def test_between_adjacent_blocks(self):
        first, second = Line(), Line()
        doc = Root(
            children=[
                Block(children=[first], style={"code-block": True}),
                Block(children=[second], style={"code-block": "python"}),
            ]
        )
        assert first.next_line is second
        assert second.previous_line is first
        assert len(doc.children) == 2

    def test_detached_line(self):
        assert Line().next_line is None
        assert Line().previous_line is None
