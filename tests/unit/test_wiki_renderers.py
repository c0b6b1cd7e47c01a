#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the internal link and file renderers."""

import pytest

from markdownpages.constants import NS_FILE
from markdownpages.options import WikiOptions
from markdownpages.wiki import FileInfo, FileRenderer, Title, TitleFactory, WikiLinkRenderer


@pytest.mark.unit
class TestWikiLinkRenderer:
    """Tests for WikiLinkRenderer.make_link."""

    def test_existing_page(self, link_renderer, title_factory):
        """Test links to existing pages are blue links."""
        html = link_renderer.make_link(title_factory.new_from_text("Exists"), "label")

        assert html == '<a href="/wiki/Exists" title="Exists">label</a>'

    def test_missing_page(self, link_renderer, title_factory):
        """Test links to missing pages are red links to the edit form."""
        html = link_renderer.make_link(title_factory.new_from_text("Missing"), "label")

        assert html == (
            '<a href="/w/index.php?title=Missing&amp;action=edit&amp;redlink=1" class="new" '
            'title="Missing (page does not exist)">label</a>'
        )

    def test_special_page(self, link_renderer, title_factory):
        """Test special pages are blue links even though no page exists."""
        html = link_renderer.make_link(title_factory.new_from_text("Special:RecentChanges"), "x")

        assert html == '<a href="/wiki/Special:RecentChanges" title="Special:RecentChanges">x</a>'

    def test_default_label(self, link_renderer, title_factory):
        """Test the title text is the default label."""
        html = link_renderer.make_link(title_factory.new_from_text("Help:Foo_&_bar"))

        assert html.endswith(">Help:Foo &amp; bar</a>")

    def test_url_encoding(self, link_renderer):
        """Test titles are URL-encoded in the href."""
        title = Title(namespace=12, dbkey="Foo_bar?", namespace_name="Help")

        assert 'href="/w/index.php?title=Help:Foo_bar%3F&amp;action=edit&amp;redlink=1"' in (
            link_renderer.make_link(title, "x")
        )

    def test_fragment(self, link_renderer, title_factory):
        """Test fragments are appended to page links."""
        html = link_renderer.make_link(title_factory.new_from_text("Exists#Some section"), "x")

        assert html == '<a href="/wiki/Exists#Some_section" title="Exists">x</a>'

    def test_fragment_only(self, link_renderer, title_factory):
        """Test in-page anchors link to the fragment alone."""
        html = link_renderer.make_link(title_factory.new_from_text("#Top"), "x")

        assert html == '<a href="#Top">x</a>'

    def test_attributes_override(self, link_renderer, title_factory):
        """Test caller attributes override the generated ones."""
        html = link_renderer.make_link(title_factory.new_from_text("Exists"), "x", {"title": 'Say "hi"'})

        assert html == '<a href="/wiki/Exists" title="Say &quot;hi&quot;">x</a>'

    def test_label_is_not_escaped(self, link_renderer, title_factory):
        """Test the label is treated as HTML."""
        html = link_renderer.make_link(title_factory.new_from_text("Exists"), "<em>x</em>")

        assert html == '<a href="/wiki/Exists" title="Exists"><em>x</em></a>'

    def test_custom_paths(self):
        """Test the URL layout is configurable."""
        options = WikiOptions(article_path="/pages/$1.html", script_path="/index.php")
        renderer = WikiLinkRenderer(options, page_exists=lambda title: True)
        title = TitleFactory(options).new_from_text("Foo")

        assert renderer.make_link(title, "x") == '<a href="/pages/Foo.html" title="Foo">x</a>'
        assert renderer.local_url(title, "action=edit") == "/index.php?title=Foo&action=edit"

    def test_article_path_must_have_placeholder(self):
        """Test an article path without $1 is rejected."""
        with pytest.raises(ValueError):
            WikiOptions(article_path="/wiki/")

    def test_all_pages_missing_by_default(self, title_factory):
        """Test a renderer without lookup renders red links."""
        html = WikiLinkRenderer().make_link(title_factory.new_from_text("Exists"), "x")

        assert 'class="new"' in html


@pytest.mark.unit
class TestFileRenderer:
    """Tests for FileRenderer.render_file."""

    def test_existing_file(self, file_renderer):
        """Test an existing file renders as an image in a description link."""
        rendered = file_renderer.render_file("Example.jpg")

        assert rendered.html == (
            '<span typeof="mw:File"><a href="/wiki/File:Example.jpg" class="mw-file-description">'
            '<img src="/images/a/a9/Example.jpg" decoding="async" width="1941" height="220" '
            'class="mw-file-element" /></a></span>'
        )
        assert rendered.metadata.images == ["Example.jpg"]
        assert rendered.metadata.categories == {}

    def test_missing_file(self, file_renderer):
        """Test a missing file renders the upload placeholder and is still recorded."""
        rendered = file_renderer.render_file("Missing.jpg")

        assert rendered.html == (
            '<span class="mw-default-size" typeof="mw:Error mw:File">'
            '<a href="/w/index.php?title=Special:Upload&amp;wpDestFile=Missing.jpg" class="new" '
            'title="File:Missing.jpg"><span class="mw-file-element mw-broken-media">File:Missing.jpg</span></a>'
            "</span>"
        )
        assert rendered.metadata.images == ["Missing.jpg"]

    def test_name_is_normalized(self, file_renderer):
        """Test file names are resolved as titles."""
        rendered = file_renderer.render_file("example.jpg")

        assert rendered.metadata.images == ["Example.jpg"]
        assert "/images/a/a9/Example.jpg" in rendered.html

    def test_broken_file_category(self, title_factory):
        """Test the tracking category for missing files."""
        options = WikiOptions(broken_file_category="Pages with broken file links")
        renderer = FileRenderer(options)

        rendered = renderer.render_file("Missing.jpg")

        assert rendered.metadata.categories == {"Pages with broken file links": ""}

    def test_invalid_name(self, file_renderer):
        """Test an invalid file name renders as escaped wikitext."""
        rendered = file_renderer.render_file("a<b>")

        assert rendered.html == "[[File:a&lt;b&gt;]]"
        assert rendered.metadata.is_empty()

    def test_file_without_dimensions(self, title_factory):
        """Test dimensions are optional."""
        renderer = FileRenderer(find_file=lambda name: FileInfo(name=name, url="/f.png"))

        assert 'width="' not in renderer.render_file("F.png").html

    def test_lookup_receives_dbkey(self):
        """Test the repository is queried with the normalized name."""
        seen = []

        def find_file(name):
            seen.append(name)
            return None

        FileRenderer(find_file=find_file).render_file("my file.png")

        assert seen == ["My_file.png"]

    def test_file_namespace(self, title_factory):
        """Test the resolved title lives in the File namespace."""
        assert title_factory.new_from_text("File:Example.jpg").namespace == NS_FILE
