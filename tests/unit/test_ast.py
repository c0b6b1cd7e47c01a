#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the AST nodes and transformation utilities."""

import pytest

from markdownpages.ast import (
    Document,
    Emphasis,
    Heading,
    Image,
    Link,
    List,
    ListItem,
    NodeCollector,
    NodeTransformer,
    Paragraph,
    PreprocessedInline,
    Text,
    extract_nodes,
    transform_nodes,
)
from markdownpages.ast.nodes import get_node_children, replace_node_children


class UppercaseTransformer(NodeTransformer):
    """Uppercase every text node."""

    def visit_text(self, node):
        return Text(content=node.content.upper())


class ImageRemover(NodeTransformer):
    """Remove every image."""

    def visit_image(self, node):
        return None


@pytest.mark.unit
class TestNodes:
    """Test node construction and child access."""

    def test_heading_level_validation(self) -> None:
        """Test heading levels outside 1-6 are rejected."""
        with pytest.raises(ValueError):
            Heading(level=7)

    def test_get_children(self) -> None:
        """Test children of block, inline and list nodes."""
        item = ListItem(children=[Paragraph(content=[Text(content="a")])])

        assert get_node_children(List(ordered=False, items=[item])) == [item]
        assert get_node_children(Link(url="x", content=[Text(content="a")])) == [Text(content="a")]
        assert get_node_children(PreprocessedInline(html="<b>x</b>")) == []

    def test_replace_children(self) -> None:
        """Test replacing children builds a new node."""
        para = Paragraph(content=[Text(content="a")])

        new_para = replace_node_children(para, [Text(content="b")])

        assert new_para is not para
        assert new_para.content == [Text(content="b")]
        assert para.content == [Text(content="a")]

    def test_list_children_must_be_items(self) -> None:
        """Test lists only accept list items."""
        with pytest.raises(ValueError, match="ListItem"):
            replace_node_children(List(ordered=False), [Text(content="a")])


@pytest.mark.unit
class TestNodeTransformer:
    """Test NodeTransformer."""

    def test_replaces_nested_nodes(self) -> None:
        """Test visit methods are applied at every depth."""
        doc = Document(
            children=[
                Heading(level=1, content=[Text(content="title")]),
                Paragraph(content=[Emphasis(content=[Text(content="em")]), Link(url="x", content=[Text(content="l")])]),
            ]
        )

        result = transform_nodes(doc, UppercaseTransformer())

        assert [node.content for node in extract_nodes(result, Text)] == ["TITLE", "EM", "L"]
        assert [node.content for node in extract_nodes(doc, Text)] == ["title", "em", "l"]

    def test_none_removes_node(self) -> None:
        """Test returning None drops the node."""
        doc = Document(children=[Paragraph(content=[Text(content="a"), Image(url="x.png"), Text(content="b")])])

        result = ImageRemover().transform(doc)

        assert result.children[0].content == [Text(content="a"), Text(content="b")]

    def test_passthrough_is_kept(self) -> None:
        """Test passthrough nodes survive a transformation unchanged."""
        node = PreprocessedInline(html="<span>x</span>")
        doc = Document(children=[Paragraph(content=[node])])

        result = UppercaseTransformer().transform(doc)

        assert result.children[0].content == [node]


@pytest.mark.unit
class TestNodeCollector:
    """Test node collection."""

    def test_extract_in_document_order(self) -> None:
        """Test nodes are collected depth first, in order."""
        doc = Document(
            children=[
                Paragraph(content=[Link(url="a", content=[Image(url="1.png")]), Image(url="2.png")]),
                List(ordered=False, items=[ListItem(children=[Paragraph(content=[Image(url="3.png")])])]),
            ]
        )

        assert [image.url for image in extract_nodes(doc, Image)] == ["1.png", "2.png", "3.png"]

    def test_predicate(self) -> None:
        """Test a custom predicate."""
        doc = Document(children=[Paragraph(content=[Link(url="a"), Link(url="b")])])
        collector = NodeCollector(predicate=lambda node: isinstance(node, Link) and node.url == "b")

        doc.accept(collector)

        assert collector.collected == [Link(url="b")]

    def test_extract_all(self) -> None:
        """Test every node is collected without a type."""
        doc = Document(children=[Paragraph(content=[Text(content="a")])])

        assert len(extract_nodes(doc)) == 3
