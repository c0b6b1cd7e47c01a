#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the HTML renderer."""

import pytest

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
    Paragraph,
    PreprocessedInline,
    Strong,
    Text,
    ThematicBreak,
)
from markdownpages.exceptions import InvalidOptionsError
from markdownpages.options import HtmlRendererOptions, MarkdownParserOptions
from markdownpages.renderers import HtmlRenderer


def render(*blocks, options=None):
    return HtmlRenderer(options).render_to_string(Document(children=list(blocks)))


def para(*inlines):
    return Paragraph(content=list(inlines))


@pytest.mark.unit
class TestBlockRendering:
    """Tests for block nodes."""

    def test_heading(self):
        """Test headings."""
        assert render(Heading(level=3, content=[Text(content="Title")])) == "<h3>Title</h3>\n"

    def test_paragraph(self):
        """Test paragraphs."""
        assert render(para(Text(content="Hello"))) == "<p>Hello</p>\n"

    def test_code_block_with_language(self):
        """Test code blocks are escaped and tagged with their language."""
        html = render(CodeBlock(content="a < b\n", language="python"))
        assert html == '<pre><code class="language-python">a &lt; b\n</code></pre>\n'

    def test_block_quote(self):
        """Test block quotes."""
        html = render(BlockQuote(children=[para(Text(content="q"))]))
        assert html == "<blockquote>\n<p>q</p>\n</blockquote>\n"

    def test_tight_list(self):
        """Test tight list items omit paragraph tags."""
        lst = List(
            ordered=False,
            items=[ListItem(children=[para(Text(content="a"))]), ListItem(children=[para(Text(content="b"))])],
            tight=True,
        )
        assert render(lst) == "<ul>\n<li>a</li>\n<li>b</li>\n</ul>\n"

    def test_loose_ordered_list(self):
        """Test loose ordered lists keep paragraph tags and the start number."""
        lst = List(ordered=True, start=2, items=[ListItem(children=[para(Text(content="a"))])], tight=False)
        assert render(lst) == '<ol start="2">\n<li>\n<p>a</p>\n</li>\n</ol>\n'

    def test_thematic_break(self):
        """Test thematic breaks."""
        assert render(ThematicBreak()) == "<hr />\n"

    def test_html_block_is_escaped(self):
        """Test raw HTML blocks are rendered as text."""
        assert render(HTMLBlock(content="<div>hi</div>\n")) == "&lt;div&gt;hi&lt;/div&gt;\n"

    def test_html_block_strip_mode(self):
        """Test raw HTML blocks can be dropped."""
        options = HtmlRendererOptions(html_input="strip")
        assert render(HTMLBlock(content="<div>hi</div>\n"), options=options) == ""


@pytest.mark.unit
class TestInlineRendering:
    """Tests for inline nodes."""

    def test_text_is_escaped(self):
        """Test text escaping."""
        assert render(para(Text(content="a < b & c"))) == "<p>a &lt; b &amp; c</p>\n"

    def test_formatting(self):
        """Test emphasis, strong and code."""
        html = render(
            para(
                Emphasis(content=[Text(content="e")]),
                Strong(content=[Text(content="s")]),
                Code(content="<c>"),
            )
        )
        assert html == "<p><em>e</em><strong>s</strong><code>&lt;c&gt;</code></p>\n"

    def test_line_breaks(self):
        """Test soft and hard line breaks."""
        html = render(para(Text(content="a"), LineBreak(soft=True), Text(content="b"), LineBreak(), Text(content="c")))
        assert html == "<p>a\nb<br />\nc</p>\n"

    def test_inline_html_is_escaped(self):
        """Test inline raw HTML is rendered as text."""
        assert render(para(HTMLInline(content="<b>"))) == "<p>&lt;b&gt;</p>\n"

    def test_relative_link(self):
        """Test links without a host are not decorated."""
        html = render(para(Link(url="Page", content=[Text(content="x")], title="T")))
        assert html == '<p><a href="Page" title="T">x</a></p>\n'

    def test_external_link(self):
        """Test links to other hosts get the external decoration."""
        html = render(para(Link(url="https://example.com/?a=1&b=2", content=[Text(content="x")])))
        assert html == (
            '<p><a rel="noopener noreferrer" class="external" href="https://example.com/?a=1&amp;b=2">x</a></p>\n'
        )

    def test_internal_host_is_not_external(self):
        """Test links to configured internal hosts are not decorated."""
        options = HtmlRendererOptions(internal_hosts=("wiki.example.org",))
        html = render(para(Link(url="https://wiki.example.org/x", content=[Text(content="x")])), options=options)
        assert html == '<p><a href="https://wiki.example.org/x">x</a></p>\n'

    def test_unsafe_link_loses_href(self):
        """Test javascript: links are rendered without href."""
        html = render(para(Link(url="javascript:alert(1)", content=[Text(content="x")])))
        assert html == "<p><a>x</a></p>\n"

    def test_unsafe_link_allowed(self):
        """Test unsafe links can be allowed explicitly."""
        options = HtmlRendererOptions(allow_unsafe_links=True)
        html = render(para(Link(url="javascript:alert(1)", content=[Text(content="x")])), options=options)
        assert html == '<p><a href="javascript:alert(1)">x</a></p>\n'

    def test_image(self):
        """Test images."""
        html = render(para(Image(url="a.png", alt_text="Alt", title="T")))
        assert html == '<p><img src="a.png" alt="Alt" title="T" /></p>\n'

    def test_unsafe_image_source(self):
        """Test unsafe image sources are emptied."""
        html = render(para(Image(url="javascript:alert(1)", alt_text="x")))
        assert html == '<p><img src="" alt="x" /></p>\n'

    def test_data_image_is_safe(self):
        """Test data: URLs of raster images are kept."""
        html = render(para(Image(url="data:image/png;base64,AAAA")))
        assert html == '<p><img src="data:image/png;base64,AAAA" alt="" /></p>\n'


@pytest.mark.unit
class TestPreprocessedInline:
    """Tests for the passthrough node."""

    def test_emitted_verbatim(self):
        """Test the payload is not escaped."""
        payload = '<a href="/wiki/A&amp;B" class="new">A&amp;B</a>'
        assert render(para(PreprocessedInline(html=payload))) == f"<p>{payload}</p>\n"

    def test_verbatim_in_any_context(self):
        """Test the payload is untouched inside other markup and raw HTML policies."""
        payload = "<span>&lt;x&gt;</span>"
        options = HtmlRendererOptions(html_input="strip")
        html = render(
            Heading(level=1, content=[Strong(content=[PreprocessedInline(html=payload)])]),
            options=options,
        )
        assert html == f"<h1><strong>{payload}</strong></h1>\n"

    def test_render_inline(self):
        """Test rendering inline nodes alone."""
        renderer = HtmlRenderer()
        html = renderer.render_inline([Text(content="a "), Emphasis(content=[Text(content="b")])])
        assert html == "a <em>b</em>"


@pytest.mark.unit
class TestRendererOptions:
    """Tests for renderer options handling."""

    def test_wrong_options_type(self):
        """Test options of another component are rejected."""
        with pytest.raises(InvalidOptionsError):
            HtmlRenderer(MarkdownParserOptions())  # type: ignore[arg-type]

    def test_invalid_html_input(self):
        """Test unknown raw HTML modes are rejected."""
        with pytest.raises(ValueError):
            HtmlRendererOptions(html_input="allow")  # type: ignore[arg-type]

    def test_renderer_is_reusable(self):
        """Test rendering twice gives the same output."""
        renderer = HtmlRenderer()
        doc = Document(children=[para(Text(content="x"))])
        assert renderer.render_to_string(doc) == renderer.render_to_string(doc)
