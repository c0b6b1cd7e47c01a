#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the page metadata record."""

import pytest

from markdownpages.constants import NS_FILE, NS_MAIN
from markdownpages.wiki import Title, WikiMetadata


@pytest.mark.unit
class TestWikiMetadata:
    """Tests for WikiMetadata."""

    def test_empty(self):
        """Test a new record is empty."""
        metadata = WikiMetadata()

        assert metadata.is_empty()
        assert metadata.to_text() == ""

    def test_categories_keep_order_and_last_sort(self):
        """Test categories are ordered and take the latest sort key."""
        metadata = WikiMetadata()
        metadata.add_category("B", "1")
        metadata.add_category("A")
        metadata.add_category("B", "2")

        assert metadata.categories == {"B": "2", "A": ""}

    def test_links_grouped_by_namespace(self):
        """Test links are grouped by namespace without duplicates."""
        metadata = WikiMetadata()
        metadata.add_link(Title(namespace=NS_MAIN, dbkey="Foo"))
        metadata.add_link(Title(namespace=12, dbkey="Bar", namespace_name="Help"))
        metadata.add_link(Title(namespace=NS_MAIN, dbkey="Foo", fragment="x"))

        assert metadata.links == {NS_MAIN: ["Foo"], 12: ["Bar"]}

    def test_media_links_are_file_links(self):
        """Test links into the Media namespace are recorded as file links."""
        metadata = WikiMetadata()
        metadata.add_link(Title(namespace=-2, dbkey="Example.jpg", namespace_name="Media"))

        assert metadata.links == {NS_FILE: ["Example.jpg"]}

    def test_ignored_links(self):
        """Test special pages and fragment-only links are not recorded."""
        metadata = WikiMetadata()
        metadata.add_link(Title(namespace=-1, dbkey="Random", namespace_name="Special"))
        metadata.add_link(Title(namespace=NS_MAIN, dbkey="", fragment="Top"))

        assert metadata.links == {}
        assert metadata.is_empty()

    def test_external_links(self):
        """Test external links are ordered and de-duplicated."""
        metadata = WikiMetadata()
        metadata.add_external_link("https://b.example")
        metadata.add_external_link("https://a.example")
        metadata.add_external_link("https://b.example")
        metadata.add_external_link("")

        assert metadata.external_links == ["https://b.example", "https://a.example"]

    def test_merge_tracking_metadata(self):
        """Test merging another record, except its wrapper classes."""
        inner = WikiMetadata()
        inner.add_image("Example.jpg")
        inner.add_category("Pages with broken file links")
        inner.add_template(Title(namespace=10, dbkey="Info", namespace_name="Template"))
        inner.add_external_link("https://example.com")
        inner.add_wrapper_div_class("inner")

        outer = WikiMetadata()
        outer.add_image("Other.png")
        outer.merge_tracking_metadata_from(inner)

        assert outer.images == ["Other.png", "Example.jpg"]
        assert outer.categories == {"Pages with broken file links": ""}
        assert outer.templates == {10: ["Info"]}
        assert outer.external_links == ["https://example.com"]
        assert outer.wrapper_div_classes == []

    def test_wrapper_classes(self):
        """Test wrapper classes can be added and cleared."""
        metadata = WikiMetadata()
        metadata.add_wrapper_div_class("mw-parser-output")
        assert metadata.wrapper_div_classes == ["mw-parser-output"]

        metadata.clear_wrapper_div_class()
        assert metadata.wrapper_div_classes == []

    def test_dump(self):
        """Test the line dump groups records by kind."""
        metadata = WikiMetadata()
        metadata.add_external_link("https://example.com")
        metadata.add_link(Title(namespace=NS_MAIN, dbkey="Exists"))
        metadata.add_image("Example.jpg")
        metadata.add_category("Foo", "Bar")

        assert metadata.to_lines() == [
            "[category] link=14:Foo sort='Bar'",
            "[image] link=6:Example.jpg",
            "[local] link=0:Exists",
            "[external] link='https://example.com'",
        ]
