#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/pipeline.py
"""Markdown page conversion pipeline.

A conversion parses the Markdown with a fresh category collector, rewrites
images, rewrites links, renders the tree to HTML and finally exports the
collected categories. Each conversion gets its own tree, collector and
metadata sink, so a converter can be reused for any number of pages.

Examples
--------
Convert with the reference wiki services:

    >>> converter = MarkdownPageConverter.for_wiki(page_exists=lambda title: title.dbkey == "Exists")
    >>> result = converter.convert("See [the page](Exists).\\n\\n[[Category:Foo|Bar]]")
    >>> result.html
    '<p>See <a href="/wiki/Exists" title="Exists">the page</a>.</p>\\n'
    >>> result.metadata.categories
    {'Foo': 'Bar'}

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from markdownpages.exceptions import InvalidOptionsError
from markdownpages.options.conversion import ConversionOptions
from markdownpages.options.wiki import WikiOptions
from markdownpages.parsers.categories import CategoryCollector
from markdownpages.parsers.markdown import MarkdownToAstConverter
from markdownpages.renderers.html import HtmlRenderer
from markdownpages.transforms.images import ImageRewriter
from markdownpages.transforms.links import WikiLinkRewriter
from markdownpages.utils.html_utils import escape_html
from markdownpages.wiki.files import FileInfo, FileRenderer
from markdownpages.wiki.interfaces import FileResolver, InternalLinkRenderer, TitleResolver, UrlClassifier
from markdownpages.wiki.links import WikiLinkRenderer
from markdownpages.wiki.metadata import WikiMetadata
from markdownpages.wiki.titles import Title, TitleFactory
from markdownpages.wiki.urls import UrlUtils

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Output of a page conversion.

    Parameters
    ----------
    html : str or None
        Rendered page body, or None when HTML generation was disabled
    metadata : WikiMetadata
        Categories, links and file usages of the page

    """

    html: str | None
    metadata: WikiMetadata = field(default_factory=WikiMetadata)

    def wrapped_html(self) -> str | None:
        """Return the body inside the wrapper ``<div>`` recorded on the metadata."""
        if self.html is None:
            return None
        classes = self.metadata.wrapper_div_classes
        if not classes:
            return self.html
        return f'<div class="{escape_html(" ".join(classes))}">{self.html}</div>'


class MarkdownPageConverter:
    """Convert Markdown page text to wiki HTML and page metadata.

    Parameters
    ----------
    options : ConversionOptions or None, default = None
        Parser, renderer and output configuration
    file_resolver : FileResolver or None, default = None
        Renders embedded files; defaults to a ``FileRenderer`` with no files
    title_resolver : TitleResolver or None, default = None
        Parses link targets into titles; defaults to ``TitleFactory``
    url_classifier : UrlClassifier or None, default = None
        Recognizes external links; defaults to ``UrlUtils``
    link_renderer : InternalLinkRenderer or None, default = None
        Renders internal links; defaults to a ``WikiLinkRenderer`` for which
        no page exists

    Raises
    ------
    InvalidOptionsError
        If options is not a ConversionOptions instance

    """

    def __init__(
        self,
        options: ConversionOptions | None = None,
        *,
        file_resolver: FileResolver | None = None,
        title_resolver: TitleResolver | None = None,
        url_classifier: UrlClassifier | None = None,
        link_renderer: InternalLinkRenderer | None = None,
    ):
        """Initialize the converter with its options and wiki services."""
        if options is not None and not isinstance(options, ConversionOptions):
            raise InvalidOptionsError(
                component_name="converter",
                expected_type=ConversionOptions,
                received_type=type(options),
            )
        self.options = options or ConversionOptions()
        self.file_resolver = file_resolver or FileRenderer()
        self.title_resolver = title_resolver or TitleFactory()
        self.url_classifier = url_classifier or UrlUtils()
        self.link_renderer = link_renderer or WikiLinkRenderer()
        self._parser = MarkdownToAstConverter(self.options.parser)

    @classmethod
    def for_wiki(
        cls,
        wiki_options: WikiOptions | None = None,
        page_exists: Callable[[Title], bool] | None = None,
        find_file: Callable[[str], FileInfo | None] | None = None,
        options: ConversionOptions | None = None,
    ) -> MarkdownPageConverter:
        """Build a converter backed by the reference wiki services.

        Parameters
        ----------
        wiki_options : WikiOptions or None, default = None
            Site configuration shared by all services
        page_exists : callable or None, default = None
            ``page_exists(title) -> bool`` for red/blue link rendering
        find_file : callable or None, default = None
            ``find_file(name) -> FileInfo | None`` file repository lookup
        options : ConversionOptions or None, default = None
            Conversion options; by default the category grammar uses the
            wiki's legal title characters

        Returns
        -------
        MarkdownPageConverter

        """
        wiki_options = wiki_options or WikiOptions()
        title_factory = TitleFactory(wiki_options)
        return cls(
            options or ConversionOptions.for_wiki(wiki_options),
            file_resolver=FileRenderer(wiki_options, find_file=find_file, title_factory=title_factory),
            title_resolver=title_factory,
            url_classifier=UrlUtils(wiki_options),
            link_renderer=WikiLinkRenderer(wiki_options, page_exists=page_exists),
        )

    def convert(self, text: str) -> ConversionResult:
        """Convert Markdown text to a page body and its metadata.

        Parameters
        ----------
        text : str
            Markdown source of the page

        Returns
        -------
        ConversionResult
            Rendered HTML and the page metadata. With ``generate_html``
            disabled, no HTML and an empty metadata record.

        Raises
        ------
        Exception
            Errors raised by the wiki services propagate unchanged; no
            partial result is produced.

        """
        metadata = WikiMetadata()
        if not self.options.generate_html:
            logger.debug("HTML generation disabled, skipping conversion")
            return ConversionResult(html=None, metadata=metadata)

        if self.options.wrapper_class:
            metadata.add_wrapper_div_class(self.options.wrapper_class)

        collector = CategoryCollector()
        renderer = HtmlRenderer(self.options.renderer)

        doc = self._parser.parse(text, collector)

        logger.debug("Rewriting images")
        doc = ImageRewriter(self.file_resolver, metadata).transform(doc)

        logger.debug("Rewriting links")
        doc = WikiLinkRewriter(
            classifier=self.url_classifier,
            title_resolver=self.title_resolver,
            link_renderer=self.link_renderer,
            label_renderer=renderer,
            metadata=metadata,
        ).transform(doc)

        html = renderer.render_to_string(doc)  # type: ignore[arg-type]

        collector.export_to(metadata)
        logger.debug("Converted page: %r", metadata)
        return ConversionResult(html=html, metadata=metadata)


def convert_markdown(
    text: str,
    options: ConversionOptions | None = None,
    **services: object,
) -> ConversionResult:
    r"""Convert Markdown text with a one-off converter.

    Parameters
    ----------
    text : str
        Markdown source
    options : ConversionOptions or None, default = None
        Conversion options
    services : object
        ``file_resolver``, ``title_resolver``, ``url_classifier`` and
        ``link_renderer`` overrides, see ``MarkdownPageConverter``

    Returns
    -------
    ConversionResult

    Examples
    --------
    >>> convert_markdown("[[Category:Foo|Bar]]").html
    ''

    """
    return MarkdownPageConverter(options, **services).convert(text)  # type: ignore[arg-type]


__all__ = ["ConversionResult", "MarkdownPageConverter", "convert_markdown"]
