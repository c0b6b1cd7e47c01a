"""markdownpages - Markdown content for wiki pages.

markdownpages renders Markdown page text to the HTML body of a wiki page and,
in the same pass, extracts the metadata the wiki needs to index the page:
categories, internal links, external links and embedded files.

Wiki semantics are layered over a CommonMark parse (mistune):

- ``[[Category:Name|sort]]`` anywhere in inline text declares a category and
  is removed from the output
- images are resolved against the wiki's file repository; images on other
  hosts are blanked
- links are classified with the wiki's own URL and title rules; links to
  pages are rendered by the wiki (red links for missing pages), external
  links are recorded
- raw HTML in the source is escaped, and ``javascript:``-class targets are
  never emitted

The wiki itself is reached only through the services in
``markdownpages.wiki.interfaces``; reference implementations driven by
``WikiOptions`` are provided.

Examples
--------
    >>> from markdownpages import MarkdownPageConverter
    >>> converter = MarkdownPageConverter.for_wiki()
    >>> result = converter.convert("[Missing](Missing)")
    >>> result.metadata.links
    {0: ['Missing']}

See Also
--------
markdownpages.pipeline : Conversion entry points
markdownpages.wiki : Wiki services and the metadata record

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "markdownpages requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "1.0.0"

from markdownpages.exceptions import InvalidOptionsError, MarkdownPagesError, ValidationError
from markdownpages.options import (
    ConversionOptions,
    HtmlRendererOptions,
    MarkdownParserOptions,
    WikiOptions,
)
from markdownpages.parsers.categories import CategoryCollector
from markdownpages.pipeline import ConversionResult, MarkdownPageConverter, convert_markdown
from markdownpages.wiki import (
    FileInfo,
    FileRenderer,
    RenderedFile,
    Title,
    TitleFactory,
    UrlUtils,
    WikiLinkRenderer,
    WikiMetadata,
)

__all__ = [
    "__version__",
    "CategoryCollector",
    "ConversionOptions",
    "ConversionResult",
    "FileInfo",
    "FileRenderer",
    "HtmlRendererOptions",
    "InvalidOptionsError",
    "MarkdownPageConverter",
    "MarkdownPagesError",
    "MarkdownParserOptions",
    "RenderedFile",
    "Title",
    "TitleFactory",
    "UrlUtils",
    "ValidationError",
    "WikiLinkRenderer",
    "WikiMetadata",
    "WikiOptions",
    "convert_markdown",
]
