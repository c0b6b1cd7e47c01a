#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/ast/__init__.py
"""Abstract Syntax Tree (AST) module for Markdown pages.

The Markdown parser produces this tree, the image and link rewrite passes
rebuild it, and the HTML renderer walks it.

- nodes: AST node classes, including the ``PreprocessedInline`` passthrough
- visitors: Visitor pattern base class
- transforms: Tree rebuilding (``NodeTransformer``) and queries (``extract_nodes``)

Examples
--------
    >>> from markdownpages.ast import Document, Paragraph, Text
    >>> from markdownpages.renderers.html import HtmlRenderer
    >>>
    >>> doc = Document(children=[Paragraph(content=[Text(content="Hello world")])])
    >>> HtmlRenderer().render_to_string(doc)
    '<p>Hello world</p>\\n'

"""

from __future__ import annotations

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
from markdownpages.ast.transforms import NodeCollector, NodeTransformer, extract_nodes, transform_nodes
from markdownpages.ast.visitors import NodeVisitor

__all__ = [
    "BlockQuote",
    "Code",
    "CodeBlock",
    "Document",
    "Emphasis",
    "Heading",
    "HTMLBlock",
    "HTMLInline",
    "Image",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Node",
    "NodeCollector",
    "NodeTransformer",
    "NodeVisitor",
    "Paragraph",
    "PreprocessedInline",
    "Strong",
    "Text",
    "ThematicBreak",
    "extract_nodes",
    "get_node_children",
    "replace_node_children",
    "transform_nodes",
]
