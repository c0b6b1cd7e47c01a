#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/ast/transforms.py
"""AST transformation and query utilities.

``NodeTransformer`` is the base of the image and link rewrite passes: it
rebuilds the tree bottom-up and lets a subclass return a replacement node
(or ``None`` to drop one) from any ``visit_*`` method. ``NodeCollector`` and
``extract_nodes`` query a tree by node type in document order.

Examples
--------
Extract all links from a document:

    >>> links = extract_nodes(doc, Link)

Replace every image with a passthrough node:

    >>> class Stub(NodeTransformer):
    ...     def visit_image(self, node):
    ...         return PreprocessedInline(html="<span></span>")
    >>> new_doc = transform_nodes(doc, Stub())

"""

from __future__ import annotations

import copy
from typing import Callable, Type

from markdownpages.ast.nodes import (
    BlockQuote,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    HTMLBlock,
    HTMLInline,
    Image,
    LineBreak,
    Link,
    List,
    ListItem,
    Node,
    Paragraph,
    PreprocessedInline,
    Strong,
    Text,
    ThematicBreak,
    get_node_children,
    replace_node_children,
)
from markdownpages.ast.visitors import NodeVisitor


class NodeTransformer(NodeVisitor):
    """Base class for transforming AST nodes.

    Subclasses override visit_* methods to return a modified node, a
    different node, or None to remove the node. The input tree is left
    untouched; a new tree is built with the transformations applied.

    Examples
    --------
    >>> class UppercaseTransformer(NodeTransformer):
    ...     def visit_text(self, node):
    ...         return Text(content=node.content.upper())
    >>>
    >>> new_doc = UppercaseTransformer().transform(doc)

    """

    def transform(self, node: Node) -> Node | None:
        """Transform an AST node.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node or None
            Transformed node or None to remove

        """
        return node.accept(self)

    def _transform_children(self, children: list[Node]) -> list[Node]:
        """Transform a list of child nodes, dropping the ones mapped to None."""
        result = []
        for child in children:
            transformed = self.transform(child)
            if transformed is not None:
                result.append(transformed)
        return result

    def _generic_transform(self, node: Node) -> Node:
        """Rebuild a node from its transformed children.

        Parameters
        ----------
        node : Node
            Node to transform

        Returns
        -------
        Node
            Copy of the node with its children transformed; leaf nodes are
            shallow-copied

        """
        children = get_node_children(node)
        if not children:
            return copy.copy(node)

        return replace_node_children(node, self._transform_children(children))

    def visit_document(self, node: Document) -> Document:
        """Transform a Document node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_heading(self, node: Heading) -> Heading:
        """Transform a Heading node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_paragraph(self, node: Paragraph) -> Paragraph:
        """Transform a Paragraph node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code_block(self, node: CodeBlock) -> CodeBlock:
        """Transform a CodeBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_block_quote(self, node: BlockQuote) -> BlockQuote:
        """Transform a BlockQuote node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list(self, node: List) -> List:
        """Transform a List node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_list_item(self, node: ListItem) -> ListItem:
        """Transform a ListItem node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_thematic_break(self, node: ThematicBreak) -> ThematicBreak:
        """Transform a ThematicBreak node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_html_block(self, node: HTMLBlock) -> HTMLBlock:
        """Transform an HTMLBlock node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_text(self, node: Text) -> Text:
        """Transform a Text node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_emphasis(self, node: Emphasis) -> Emphasis:
        """Transform an Emphasis node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_strong(self, node: Strong) -> Strong:
        """Transform a Strong node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_code(self, node: Code) -> Code:
        """Transform a Code node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_link(self, node: Link) -> Node | None:
        """Transform a Link node."""
        return self._generic_transform(node)

    def visit_image(self, node: Image) -> Node | None:
        """Transform an Image node."""
        return self._generic_transform(node)

    def visit_line_break(self, node: LineBreak) -> LineBreak:
        """Transform a LineBreak node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_html_inline(self, node: HTMLInline) -> HTMLInline:
        """Transform an HTMLInline node."""
        return self._generic_transform(node)  # type: ignore[return-value]

    def visit_preprocessed_inline(self, node: PreprocessedInline) -> PreprocessedInline:
        """Passthrough nodes are opaque: keep the same node."""
        return node


class NodeCollector(NodeVisitor):
    """Visitor that collects nodes matching a condition, in document order.

    Parameters
    ----------
    predicate : callable or None, default = None
        Function that takes a node and returns True to collect it

    """

    def __init__(self, predicate: Callable[[Node], bool] | None = None):
        """Initialize the collector with an optional predicate function."""
        self.predicate = predicate or (lambda n: True)
        self.collected: list[Node] = []

    def _generic_visit(self, node: Node) -> None:
        """Collect the node if it matches, then visit its children."""
        if self.predicate(node):
            self.collected.append(node)
        for child in get_node_children(node):
            child.accept(self)

    def visit_document(self, node: Document) -> None:
        """Collect from a Document node."""
        self._generic_visit(node)

    def visit_heading(self, node: Heading) -> None:
        """Collect from a Heading node."""
        self._generic_visit(node)

    def visit_paragraph(self, node: Paragraph) -> None:
        """Collect from a Paragraph node."""
        self._generic_visit(node)

    def visit_code_block(self, node: CodeBlock) -> None:
        """Collect from a CodeBlock node."""
        self._generic_visit(node)

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Collect from a BlockQuote node."""
        self._generic_visit(node)

    def visit_list(self, node: List) -> None:
        """Collect from a List node."""
        self._generic_visit(node)

    def visit_list_item(self, node: ListItem) -> None:
        """Collect from a ListItem node."""
        self._generic_visit(node)

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Collect from a ThematicBreak node."""
        self._generic_visit(node)

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Collect from an HTMLBlock node."""
        self._generic_visit(node)

    def visit_text(self, node: Text) -> None:
        """Collect from a Text node."""
        self._generic_visit(node)

    def visit_emphasis(self, node: Emphasis) -> None:
        """Collect from an Emphasis node."""
        self._generic_visit(node)

    def visit_strong(self, node: Strong) -> None:
        """Collect from a Strong node."""
        self._generic_visit(node)

    def visit_code(self, node: Code) -> None:
        """Collect from a Code node."""
        self._generic_visit(node)

    def visit_link(self, node: Link) -> None:
        """Collect from a Link node."""
        self._generic_visit(node)

    def visit_image(self, node: Image) -> None:
        """Collect from an Image node."""
        self._generic_visit(node)

    def visit_line_break(self, node: LineBreak) -> None:
        """Collect from a LineBreak node."""
        self._generic_visit(node)

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Collect from an HTMLInline node."""
        self._generic_visit(node)

    def visit_preprocessed_inline(self, node: PreprocessedInline) -> None:
        """Collect from a PreprocessedInline node."""
        self._generic_visit(node)


def extract_nodes(doc: Document, node_type: Type[Node] | None = None) -> list[Node]:
    """Extract all nodes of a specific type from a document.

    Parameters
    ----------
    doc : Document
        Document to extract from
    node_type : type or None, default = None
        Node type to extract (None for all nodes)

    Returns
    -------
    list of Node
        All matching nodes, in document order

    Examples
    --------
    >>> images = extract_nodes(doc, Image)

    """
    predicate = (lambda n: isinstance(n, node_type)) if node_type else (lambda n: True)
    collector = NodeCollector(predicate=predicate)
    doc.accept(collector)
    return collector.collected


def transform_nodes(doc: Document, transformer: NodeTransformer) -> Document:
    """Apply a transformation visitor to a document.

    Parameters
    ----------
    doc : Document
        Document to transform
    transformer : NodeTransformer
        Transformer to apply

    Returns
    -------
    Document
        Transformed document

    """
    return transformer.transform(doc)  # type: ignore[return-value]
