"""Pytest configuration and shared fixtures for the markdownpages test suite.

The fixtures provide a small in-memory wiki: the page ``Exists`` exists,
``Missing`` does not, and the file repository holds ``Example.jpg``.
"""

import os

import pytest

from markdownpages import (
    FileInfo,
    FileRenderer,
    MarkdownPageConverter,
    TitleFactory,
    UrlUtils,
    WikiLinkRenderer,
    WikiOptions,
)

# Configure Hypothesis for property-based testing
try:
    from hypothesis import Verbosity, settings

    settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
    settings.register_profile("dev", max_examples=25, deadline=None)

    settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))
except ImportError:
    # Hypothesis not installed, skip configuration
    pass


EXISTING_PAGES = {(0, "Exists")}

EXAMPLE_FILE = FileInfo(name="Example.jpg", url="/images/a/a9/Example.jpg", width=1941, height=220)


def page_exists(title) -> bool:
    """Page existence lookup of the test wiki."""
    return (title.namespace, title.dbkey) in EXISTING_PAGES


def find_file(name: str):
    """File repository lookup of the test wiki."""
    if name == EXAMPLE_FILE.name:
        return EXAMPLE_FILE
    return None


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "golden: Golden file tests comparing complete conversions")


@pytest.fixture
def wiki_options() -> WikiOptions:
    """Default site configuration."""
    return WikiOptions()


@pytest.fixture
def title_factory(wiki_options) -> TitleFactory:
    """Title parser of the test wiki."""
    return TitleFactory(wiki_options)


@pytest.fixture
def url_utils(wiki_options) -> UrlUtils:
    """URL utilities of the test wiki."""
    return UrlUtils(wiki_options)


@pytest.fixture
def link_renderer(wiki_options) -> WikiLinkRenderer:
    """Internal link renderer that knows which test pages exist."""
    return WikiLinkRenderer(wiki_options, page_exists=page_exists)


@pytest.fixture
def file_renderer(wiki_options, title_factory) -> FileRenderer:
    """File renderer backed by the test file repository."""
    return FileRenderer(wiki_options, find_file=find_file, title_factory=title_factory)


@pytest.fixture
def converter(wiki_options) -> MarkdownPageConverter:
    """Converter wired to the test wiki."""
    return MarkdownPageConverter.for_wiki(wiki_options, page_exists=page_exists, find_file=find_file)
