#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/parsers/markdown.py
"""Markdown to AST converter.

Markdown is tokenized by mistune (CommonMark core rules, the ``url`` plugin
for bare external links and the category rule) and the token stream is
converted into the markdownpages AST. A fresh mistune instance is built for
every parse, and the category collector travels in the parse state's ``env``
for that call only.

"""

from __future__ import annotations

import html
import logging
from typing import Any

import mistune

from markdownpages.ast import (
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
    Strong,
    Text,
    ThematicBreak,
)
from markdownpages.constants import CATEGORY_ENV_KEY
from markdownpages.options.markdown import MarkdownParserOptions
from markdownpages.parsers.base import BaseParser
from markdownpages.parsers.categories import CategoryCollector, category_plugin

logger = logging.getLogger(__name__)


class MarkdownToAstConverter(BaseParser):
    r"""Convert Markdown to AST representation.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Basic parsing:

        >>> converter = MarkdownToAstConverter()
        >>> doc = converter.parse("# Hello\\n\\nThis is **bold**.")

    Collecting categories:

        >>> collector = CategoryCollector()
        >>> doc = converter.parse("Text [[Category:Foo|Bar]]", collector)
        >>> collector.categories
        {'Foo': 'Bar'}

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def _create_markdown(self) -> mistune.Markdown:
        """Build the mistune instance used for a single parse."""
        plugins: list[Any] = []
        if self.options.autolink_bare_urls:
            plugins.append("url")
        plugins.append(category_plugin(self.options.legal_title_chars))

        # Tokens are converted to AST nodes here; no mistune renderer is used
        return mistune.create_markdown(plugins=plugins, renderer=None)

    def parse(self, text: str, collector: CategoryCollector | None = None) -> Document:  # type: ignore[override]
        """Parse Markdown text into an AST Document.

        Parameters
        ----------
        text : str
            Markdown source
        collector : CategoryCollector or None, default = None
            Receives the categories declared in the text. When None the
            category constructs are still removed, but not recorded.

        Returns
        -------
        Document
            AST document node

        """
        markdown = self._create_markdown()
        state = markdown.block.state_cls()
        state.env[CATEGORY_ENV_KEY] = collector

        tokens, _state = markdown.parse(text, state)

        if isinstance(tokens, list):
            children = self._process_tokens(tokens)
        else:
            children = []

        logger.debug("Parsed %d block node(s) from %d characters of Markdown", len(children), len(text))
        return Document(children=children)

    def _process_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process a list of mistune block tokens into AST nodes."""
        nodes: list[Node] = []
        for token in tokens:
            node = self._process_token(token)
            if node is not None:
                nodes.append(node)
        return nodes

    def _process_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single mistune block token into an AST node.

        Parameters
        ----------
        token : dict
            Mistune token dictionary with 'type' and other fields

        Returns
        -------
        Node or None
            Resulting AST node, None for tokens without output

        """
        token_type = token.get("type", "")

        if token_type == "heading":
            return self._process_heading(token)
        elif token_type in ("paragraph", "block_text"):
            # block_text is the paragraph of a tight list item
            return self._process_paragraph(token)
        elif token_type == "block_code":
            return self._process_code_block(token)
        elif token_type == "block_quote":
            return BlockQuote(children=self._process_tokens(token.get("children", [])))
        elif token_type == "list":
            return self._process_list(token)
        elif token_type == "thematic_break":
            return ThematicBreak()
        elif token_type == "block_html":
            return HTMLBlock(content=token.get("raw", ""))

        # blank_line and unknown tokens
        return None

    def _process_heading(self, token: dict[str, Any]) -> Heading:
        """Process heading token."""
        attrs = token.get("attrs", {})
        level = attrs.get("level", 1) if isinstance(attrs, dict) else 1
        if not isinstance(level, int) or level < 1 or level > 6:
            level = 1

        return Heading(level=level, content=self._process_inline_tokens(token.get("children", [])))

    def _process_paragraph(self, token: dict[str, Any]) -> Paragraph | None:
        """Process paragraph token.

        Paragraphs left without visible content, for example lines holding
        only category constructs, are dropped.

        """
        content = self._process_inline_tokens(token.get("children", []))
        if all(
            isinstance(node, LineBreak) or (isinstance(node, Text) and not node.content.strip()) for node in content
        ):
            return None
        return Paragraph(content=content)

    def _process_code_block(self, token: dict[str, Any]) -> CodeBlock:
        """Process code block token.

        Only the first word of the fence info string is kept, as the
        language.

        """
        attrs = token.get("attrs", {})
        info_string = attrs.get("info") if isinstance(attrs, dict) else None
        language = None
        if info_string:
            parts = html.unescape(info_string).split(maxsplit=1)
            language = parts[0] if parts else None

        content = token.get("raw", "")
        if content and not content.endswith("\n"):
            content += "\n"

        return CodeBlock(content=content, language=language)

    def _process_list(self, token: dict[str, Any]) -> List:
        """Process list token."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}

        ordered = attrs.get("ordered", False)
        start = attrs.get("start", 1)
        tight = token.get("tight", attrs.get("tight", True))

        items = [
            ListItem(children=self._process_tokens(child.get("children", [])))
            for child in token.get("children", [])
            if isinstance(child, dict) and child.get("type") == "list_item"
        ]

        return List(ordered=ordered, items=items, start=start, tight=tight)

    def _process_inline_tokens(self, tokens: list[dict[str, Any]]) -> list[Node]:
        """Process inline tokens, merging adjacent text runs.

        Parameters
        ----------
        tokens : list of dict
            Inline token dictionaries

        Returns
        -------
        list of Node
            Inline AST nodes

        """
        nodes: list[Node] = []

        for token in tokens:
            node = self._process_inline_token(token)
            if node is None:
                continue
            if isinstance(node, Text) and nodes and isinstance(nodes[-1], Text):
                nodes[-1] = Text(content=nodes[-1].content + node.content)
            else:
                nodes.append(node)

        return nodes

    def _handle_text_token(self, token: dict[str, Any]) -> Text:
        """Handle text token."""
        return Text(content=html.unescape(token.get("raw", "")))

    def _handle_strong_token(self, token: dict[str, Any]) -> Strong:
        """Handle strong token."""
        return Strong(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_emphasis_token(self, token: dict[str, Any]) -> Emphasis:
        """Handle emphasis token."""
        return Emphasis(content=self._process_inline_tokens(token.get("children", [])))

    def _handle_codespan_token(self, token: dict[str, Any]) -> Code:
        """Handle codespan token."""
        return Code(content=html.unescape(token.get("raw", "")))

    def _handle_link_token(self, token: dict[str, Any]) -> Link:
        """Handle link token.

        mistune has already percent-encoded the destination; the title comes
        entity-escaped and is decoded here.

        """
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        title = attrs.get("title")
        children = token.get("children", [])
        if not isinstance(children, list):
            children = []
        return Link(
            url=attrs.get("url", ""),
            content=self._process_inline_tokens(children),
            title=html.unescape(title) if title else None,
        )

    def _handle_image_token(self, token: dict[str, Any]) -> Image:
        """Handle image token; the description is flattened to plain alt text."""
        attrs = token.get("attrs", {})
        if not isinstance(attrs, dict):
            attrs = {}
        title = attrs.get("title")
        return Image(
            url=attrs.get("url", ""),
            alt_text=self._flatten_text(token.get("children", [])),
            title=html.unescape(title) if title else None,
        )

    def _handle_linebreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle hard line break token."""
        return LineBreak(soft=False)

    def _handle_softbreak_token(self, token: dict[str, Any]) -> LineBreak:
        """Handle soft line break token."""
        return LineBreak(soft=True)

    def _handle_inline_html_token(self, token: dict[str, Any]) -> HTMLInline:
        """Handle inline_html token."""
        return HTMLInline(content=token.get("raw", ""))

    def _process_inline_token(self, token: dict[str, Any]) -> Node | None:
        """Process a single inline token.

        Parameters
        ----------
        token : dict
            Inline token dictionary

        Returns
        -------
        Node or None
            Inline AST node

        """
        token_type = token.get("type", "")

        handler_map: dict[str, Any] = {
            "text": self._handle_text_token,
            "strong": self._handle_strong_token,
            "emphasis": self._handle_emphasis_token,
            "codespan": self._handle_codespan_token,
            "link": self._handle_link_token,
            "image": self._handle_image_token,
            "linebreak": self._handle_linebreak_token,
            "softbreak": self._handle_softbreak_token,
            "inline_html": self._handle_inline_html_token,
        }

        handler = handler_map.get(token_type)
        if handler:
            return handler(token)
        return None

    def _flatten_text(self, tokens: list[dict[str, Any]]) -> str:
        """Return the plain text of a token subtree."""
        parts: list[str] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            token_type = token.get("type")
            if token_type in ("text", "codespan"):
                parts.append(html.unescape(token.get("raw", "")))
            elif token_type in ("linebreak", "softbreak"):
                parts.append("\n")
            elif token_type == "image":
                parts.append(self._flatten_text(token.get("children", [])))
            elif isinstance(token.get("children"), list):
                parts.append(self._flatten_text(token["children"]))
        return "".join(parts)


def markdown_to_ast(
    markdown_content: str,
    options: MarkdownParserOptions | None = None,
    collector: CategoryCollector | None = None,
) -> Document:
    r"""Convert a Markdown string to an AST.

    Parameters
    ----------
    markdown_content : str
        Markdown text to parse
    options : MarkdownParserOptions or None, default = None
        Parser configuration
    collector : CategoryCollector or None, default = None
        Receives the categories declared in the text

    Returns
    -------
    Document
        AST document node

    Examples
    --------
    >>> doc = markdown_to_ast("# Hello\\n\\nWorld")
    >>> len(doc.children)
    2

    """
    return MarkdownToAstConverter(options).parse(markdown_content, collector)
