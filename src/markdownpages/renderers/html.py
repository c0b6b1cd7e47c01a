#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/renderers/html.py
"""HTML rendering from AST.

``HtmlRenderer`` turns the (rewritten) AST into the HTML fragment that forms
a wiki page body. Output follows the CommonMark reference rendering, with the
safety policy of the wiki page: raw HTML from the source is escaped (or
stripped), link targets that can run script lose their ``href``, and links
to other hosts are marked as external. ``PreprocessedInline`` nodes carry
HTML the wiki rendered itself and are emitted verbatim.

"""

from __future__ import annotations

import logging
from urllib.parse import urlsplit

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
)
from markdownpages.ast.visitors import NodeVisitor
from markdownpages.options.html import HtmlRendererOptions
from markdownpages.renderers.base import BaseRenderer, InlineContentMixin
from markdownpages.utils.html_utils import escape_html, html_attributes
from markdownpages.utils.security import has_network_host, is_link_potentially_unsafe

logger = logging.getLogger(__name__)


class HtmlRenderer(NodeVisitor, InlineContentMixin, BaseRenderer):
    """Render AST nodes to an HTML fragment.

    Parameters
    ----------
    options : HtmlRendererOptions or None, default = None
        HTML rendering options

    Examples
    --------
    Basic usage:

        >>> from markdownpages.ast import Document, Heading, Text
        >>> doc = Document(children=[Heading(level=1, content=[Text(content="Title")])])
        >>> HtmlRenderer().render_to_string(doc)
        '<h1>Title</h1>\\n'

    """

    def __init__(self, options: HtmlRendererOptions | None = None):
        """Initialize the HTML renderer with options."""
        BaseRenderer._validate_options_type(options, HtmlRendererOptions, "html")
        options = options or HtmlRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: HtmlRendererOptions = options
        self._output: list[str] = []
        self._tight: bool = False

    def render_to_string(self, document: Document) -> str:
        """Render a document AST to an HTML string.

        Parameters
        ----------
        document : Document
            The document node to render

        Returns
        -------
        str
            HTML fragment (no wrapper element)

        """
        self._output = []
        self._tight = False
        document.accept(self)
        return "".join(self._output)

    def render_inline(self, nodes: list[Node]) -> str:
        """Render inline nodes to HTML without touching the document output.

        Used to render a link label before handing it to the wiki's link
        renderer.

        Parameters
        ----------
        nodes : list of Node
            Inline nodes

        Returns
        -------
        str
            Rendered HTML

        """
        return self._render_inline_content(nodes)

    def _cr(self) -> None:
        """Ensure the output ends at the start of a line."""
        if self._output and not self._output[-1].endswith("\n"):
            self._output.append("\n")

    def _is_external(self, url: str) -> bool:
        """Check whether a link points at a host other than the internal ones."""
        if not has_network_host(url):
            return False
        host = urlsplit(url).hostname or ""
        return host not in self.options.internal_hosts

    def _escape_raw_html(self, content: str) -> str:
        """Apply the raw HTML policy to HTML found in the Markdown source."""
        if self.options.html_input == "strip":
            return ""
        return escape_html(content)

    def visit_document(self, node: Document) -> None:
        """Render a Document node."""
        for child in node.children:
            child.accept(self)

    def visit_heading(self, node: Heading) -> None:
        """Render a Heading node."""
        self._cr()
        content = self._render_inline_content(node.content)
        self._output.append(f"<h{node.level}>{content}</h{node.level}>\n")

    def visit_paragraph(self, node: Paragraph) -> None:
        """Render a Paragraph node.

        Paragraphs of tight list items are rendered without ``<p>`` tags.

        """
        content = self._render_inline_content(node.content)
        if self._tight:
            self._output.append(content)
            return
        self._cr()
        self._output.append(f"<p>{content}</p>\n")

    def visit_code_block(self, node: CodeBlock) -> None:
        """Render a CodeBlock node."""
        self._cr()
        class_attr = f' class="language-{escape_html(node.language)}"' if node.language else ""
        self._output.append(f"<pre><code{class_attr}>{escape_html(node.content)}</code></pre>\n")

    def visit_block_quote(self, node: BlockQuote) -> None:
        """Render a BlockQuote node."""
        self._cr()
        self._output.append("<blockquote>\n")

        saved_tight = self._tight
        self._tight = False
        for child in node.children:
            child.accept(self)
        self._tight = saved_tight

        self._cr()
        self._output.append("</blockquote>\n")

    def visit_list(self, node: List) -> None:
        """Render a List node."""
        tag = "ol" if node.ordered else "ul"
        start_attr = f' start="{node.start}"' if node.ordered and node.start != 1 else ""

        self._cr()
        self._output.append(f"<{tag}{start_attr}>\n")

        saved_tight = self._tight
        self._tight = node.tight
        for item in node.items:
            item.accept(self)
        self._tight = saved_tight

        self._output.append(f"</{tag}>\n")

    def visit_list_item(self, node: ListItem) -> None:
        """Render a ListItem node."""
        self._output.append("<li>")
        for child in node.children:
            child.accept(self)
        if node.children and not (self._tight and isinstance(node.children[-1], Paragraph)):
            self._cr()
        self._output.append("</li>\n")

    def visit_thematic_break(self, node: ThematicBreak) -> None:
        """Render a ThematicBreak node."""
        self._cr()
        self._output.append("<hr />\n")

    def visit_html_block(self, node: HTMLBlock) -> None:
        """Render an HTMLBlock node as escaped text, or drop it."""
        rendered = self._escape_raw_html(node.content.rstrip("\n"))
        if rendered:
            self._cr()
            self._output.append(rendered + "\n")

    def visit_text(self, node: Text) -> None:
        """Render a Text node."""
        self._output.append(escape_html(node.content))

    def visit_emphasis(self, node: Emphasis) -> None:
        """Render an Emphasis node."""
        self._output.append(f"<em>{self._render_inline_content(node.content)}</em>")

    def visit_strong(self, node: Strong) -> None:
        """Render a Strong node."""
        self._output.append(f"<strong>{self._render_inline_content(node.content)}</strong>")

    def visit_code(self, node: Code) -> None:
        """Render a Code node."""
        self._output.append(f"<code>{escape_html(node.content)}</code>")

    def visit_link(self, node: Link) -> None:
        """Render a Link node.

        Unsafe targets are rendered without ``href`` unless
        ``allow_unsafe_links`` is set. Links to other hosts get the external
        link ``rel`` and ``class`` attributes.

        """
        content = self._render_inline_content(node.content)
        attrs: dict[str, str | None] = {}

        if self._is_external(node.url):
            attrs["rel"] = self.options.external_link_rel or None
            attrs["class"] = self.options.external_link_class or None

        if self.options.allow_unsafe_links or not is_link_potentially_unsafe(node.url):
            attrs["href"] = node.url
        else:
            logger.debug("Rendering link without href, unsafe target: %r", node.url)

        attrs["title"] = node.title
        self._output.append(f"<a{html_attributes(attrs)}>{content}</a>")

    def visit_image(self, node: Image) -> None:
        """Render an Image node; unsafe sources become an empty ``src``."""
        src = node.url
        if not self.options.allow_unsafe_links and is_link_potentially_unsafe(src):
            logger.debug("Rendering image with empty src, unsafe source: %r", src)
            src = ""

        attrs: dict[str, str | None] = {"src": src, "alt": node.alt_text, "title": node.title}
        self._output.append(f"<img{html_attributes(attrs)} />")

    def visit_line_break(self, node: LineBreak) -> None:
        """Render a LineBreak node."""
        self._output.append("\n" if node.soft else "<br />\n")

    def visit_html_inline(self, node: HTMLInline) -> None:
        """Render an HTMLInline node as escaped text, or drop it."""
        self._output.append(self._escape_raw_html(node.content))

    def visit_preprocessed_inline(self, node: PreprocessedInline) -> None:
        """Emit wiki-rendered HTML exactly as stored."""
        self._output.append(node.html)
