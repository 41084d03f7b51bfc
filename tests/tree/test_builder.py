"""Tests for TreeBuilder.

Covers accepted input types, text/tail ordering, attribute copying,
comment handling, pass-through of ResultNode trees, and errors on
unsupported or malformed input.
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from reaxys_flatten.tree.builder import TreeBuilder
from reaxys_flatten.tree.nodes import NodeType, ResultNode

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


_DOC = '<reaction>\n  <RX><RX.ID>42</RX.ID></RX>\n  <RY.STR rn="7"/>\n</reaction>'


# ---------------------------------------------------------------------------
# Input types
# ---------------------------------------------------------------------------


class TestInputTypes:
    def test_from_str(self, builder: TreeBuilder) -> None:
        tree = builder.build(_DOC)
        assert tree.node_type == NodeType.ELEMENT
        assert tree.tag == "reaction"

    def test_from_bytes(self, builder: TreeBuilder) -> None:
        tree = builder.build(_DOC.encode("utf-8"))
        assert tree.tag == "reaction"

    def test_from_element(self, builder: TreeBuilder) -> None:
        tree = builder.build(ET.fromstring(_DOC))
        assert tree.tag == "reaction"

    def test_from_element_tree(self, builder: TreeBuilder) -> None:
        tree = builder.build(ET.ElementTree(ET.fromstring(_DOC)))
        assert tree.tag == "reaction"

    def test_result_node_passes_through(self, builder: TreeBuilder) -> None:
        node = ResultNode(node_type=NodeType.ELEMENT, tag="xf")
        assert builder.build(node) is node

    def test_unsupported_type_raises(self, builder: TreeBuilder) -> None:
        with pytest.raises(TypeError, match="Unsupported result tree type"):
            builder.build(42)  # type: ignore[arg-type]

    def test_malformed_xml_raises_parse_error(self, builder: TreeBuilder) -> None:
        with pytest.raises(ET.ParseError):
            builder.build("<reaction><RX></reaction>")


# ---------------------------------------------------------------------------
# Structure
# ---------------------------------------------------------------------------


class TestStructure:
    def test_text_and_tails_become_text_nodes_in_order(
        self, builder: TreeBuilder
    ) -> None:
        tree = builder.build(_DOC)
        kinds = [child.node_type for child in tree.children]
        assert kinds == [
            NodeType.TEXT,
            NodeType.ELEMENT,
            NodeType.TEXT,
            NodeType.ELEMENT,
            NodeType.TEXT,
        ]
        assert tree.children[0].text == "\n  "
        assert tree.children[4].text == "\n"

    def test_element_children(self, builder: TreeBuilder) -> None:
        tree = builder.build(_DOC)
        assert [c.tag for c in tree.element_children()] == ["RX", "RY.STR"]

    def test_attributes_copied(self, builder: TreeBuilder) -> None:
        tree = builder.build(_DOC)
        ry_str = tree.element_children()[1]
        assert ry_str.attributes == {"rn": "7"}
        assert ry_str.has_child_nodes() is False

    def test_text_content_round_trips(self, builder: TreeBuilder) -> None:
        element = ET.fromstring(_DOC)
        tree = builder.build(element)
        assert tree.text_content() == "".join(element.itertext())

    def test_mixed_content_order(self, builder: TreeBuilder) -> None:
        tree = builder.build("<a>one<b>two</b>three<c/>four</a>")
        assert tree.text_content() == "onetwothreefour"

    def test_comments_become_comment_nodes(self, builder: TreeBuilder) -> None:
        parser = ET.XMLParser(target=ET.TreeBuilder(insert_comments=True))
        element = ET.fromstring("<a><!-- note --><b>x</b></a>", parser=parser)
        tree = builder.build(element)
        assert tree.children[0].node_type == NodeType.COMMENT
        assert tree.text_content() == "x"
        assert [c.tag for c in tree.element_children()] == ["b"]

    def test_source_element_is_not_mutated(self, builder: TreeBuilder) -> None:
        element = ET.fromstring(_DOC)
        before = ET.tostring(element)
        builder.build(element)
        assert ET.tostring(element) == before
