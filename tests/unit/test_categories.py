#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for category parsing and collection."""

import re
import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from markdownpages import convert_markdown
from markdownpages.options import MarkdownParserOptions
from markdownpages.parsers.categories import CategoryCollector, build_category_pattern
from markdownpages.parsers.markdown import markdown_to_ast
from markdownpages.wiki import WikiMetadata

NAME_CHARS = string.ascii_letters + string.digits
SORT_CHARS = string.ascii_letters + string.digits + " "


@pytest.mark.unit
class TestCategoryCollector:
    """Tests for CategoryCollector."""

    def test_starts_empty(self):
        """Test a new collector has no categories."""
        collector = CategoryCollector()
        assert collector.categories == {}
        assert len(collector) == 0

    def test_records_sort_key(self):
        """Test categories are recorded with their sort key."""
        collector = CategoryCollector()
        collector.on_category_parse("Foo", "Bar")
        collector.on_category_parse("Baz")

        assert collector.categories == {"Foo": "Bar", "Baz": ""}

    def test_last_sort_key_wins(self):
        """Test a repeated category takes the later sort key."""
        collector = CategoryCollector()
        collector.on_category_parse("Foo", "First")
        collector.on_category_parse("Other")
        collector.on_category_parse("Foo", "Second")

        assert collector.categories == {"Foo": "Second", "Other": ""}
        assert list(collector) == ["Foo", "Other"]

    def test_categories_is_a_copy(self):
        """Test the categories property cannot mutate the collector."""
        collector = CategoryCollector()
        collector.on_category_parse("Foo")
        collector.categories["Bar"] = ""

        assert "Bar" not in collector.categories

    def test_export_to_sink(self):
        """Test export adds every category to the sink."""
        collector = CategoryCollector()
        collector.on_category_parse("Foo", "Bar")
        collector.on_category_parse("Baz")
        metadata = WikiMetadata()

        collector.export_to(metadata)

        assert metadata.categories == {"Foo": "Bar", "Baz": ""}


@pytest.mark.unit
class TestCategoryPattern:
    """Tests for the category inline pattern."""

    def test_matches_name_only(self):
        """Test a construct without sort key."""
        m = re.match(build_category_pattern(), "[[Category:Foo bar]]")
        assert m is not None
        assert m.group("category_name") == "Foo bar"
        assert m.group("category_sort") is None

    def test_matches_name_and_sort(self):
        """Test a construct with sort key."""
        m = re.match(build_category_pattern(), "[[Category:Foo|Sort key]]")
        assert m.group("category_name") == "Foo"
        assert m.group("category_sort") == "Sort key"

    def test_sort_key_is_not_greedy(self):
        """Test the sort key stops at the first closing brackets."""
        m = re.match(build_category_pattern(), "[[Category:A|x]] and [[Category:B|y]]")
        assert m.group("category_sort") == "x"
        assert m.end() == len("[[Category:A|x]]")

    def test_rejects_illegal_characters(self):
        """Test names with characters outside the legal class do not match."""
        assert re.match(build_category_pattern(), "[[Category:Foo{bar}]]") is None

    def test_rejects_empty_name(self):
        """Test an empty name does not match."""
        assert re.match(build_category_pattern(), "[[Category:]]") is None

    def test_custom_legal_characters(self):
        """Test the legal character class is configurable."""
        pattern = build_category_pattern("A-Z")
        assert re.match(pattern, "[[Category:FOO]]") is not None
        assert re.match(pattern, "[[Category:Foo]]") is None


@pytest.mark.unit
class TestCategoryParsing:
    """Tests for category constructs in Markdown."""

    def test_construct_is_removed(self):
        """Test the construct leaves no output."""
        collector = CategoryCollector()
        doc = markdown_to_ast("[[Category:Foo|Bar]]", collector=collector)

        assert doc.children == []
        assert collector.categories == {"Foo": "Bar"}

    def test_construct_inside_text(self):
        """Test constructs in running text are removed, text around them is kept."""
        result = convert_markdown("Some [[Category:Foo]]text.")

        assert result.html == "<p>Some text.</p>\n"
        assert result.metadata.categories == {"Foo": ""}

    def test_construct_after_emphasis(self):
        """Test a construct following other inline markup is recognized."""
        result = convert_markdown("*emphasis* [[Category:Foo|Bar]]")

        assert result.html == "<p><em>emphasis</em> </p>\n"
        assert result.metadata.categories == {"Foo": "Bar"}

    def test_construct_in_code_span_is_literal(self):
        """Test a construct inside a code span is left alone."""
        result = convert_markdown("`[[Category:Foo]]`")

        assert result.html == "<p><code>[[Category:Foo]]</code></p>\n"
        assert result.metadata.categories == {}

    def test_invalid_construct_is_literal(self):
        """Test a construct with an illegal name renders as text."""
        result = convert_markdown("[[Category:Foo{bar}]]")

        assert result.html == "<p>[[Category:Foo{bar}]]</p>\n"
        assert result.metadata.categories == {}

    def test_without_collector(self):
        """Test parsing without a collector still removes the construct."""
        doc = markdown_to_ast("x[[Category:Foo]]")
        assert len(doc.children) == 1

    def test_legal_characters_from_options(self):
        """Test the parser uses the configured legal characters."""
        collector = CategoryCollector()
        options = MarkdownParserOptions(legal_title_chars="a-z")
        markdown_to_ast("[[Category:foo]] [[Category:Bar]]", options=options, collector=collector)

        assert collector.categories == {"foo": ""}

    def test_collector_is_per_parse(self):
        """Test categories never leak between conversions."""
        first = convert_markdown("[[Category:Foo]]")
        second = convert_markdown("[[Category:Bar]]")

        assert first.metadata.categories == {"Foo": ""}
        assert second.metadata.categories == {"Bar": ""}


@pytest.mark.unit
class TestCategoryProperties:
    """Property-based tests for category constructs."""

    @given(
        name=st.text(alphabet=NAME_CHARS, min_size=1, max_size=20),
        sort=st.text(alphabet=SORT_CHARS, min_size=1, max_size=20),
    )
    def test_construct_never_rendered(self, name, sort):
        """Test any valid construct is removed and recorded exactly once."""
        result = convert_markdown(f"Before [[Category:{name}|{sort}]] after")

        assert "[[" not in result.html
        assert result.html == "<p>Before  after</p>\n"
        assert result.metadata.categories == {name: sort}

    @given(
        name=st.text(alphabet=NAME_CHARS, min_size=1, max_size=20),
        first=st.text(alphabet=NAME_CHARS, min_size=1, max_size=10),
        second=st.text(alphabet=NAME_CHARS, min_size=1, max_size=10),
    )
    def test_duplicate_overwrites_sort_key(self, name, first, second):
        """Test a later duplicate category overwrites the sort key."""
        result = convert_markdown(f"[[Category:{name}|{first}]]\n\n[[Category:{name}|{second}]]")

        assert result.metadata.categories == {name: second}
