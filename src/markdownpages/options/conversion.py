#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Options for a complete Markdown-to-wiki-page conversion."""
# src/markdownpages/options/conversion.py

from __future__ import annotations

from dataclasses import dataclass, field

from markdownpages.constants import DEFAULT_GENERATE_HTML, DEFAULT_WRAPPER_CLASS
from markdownpages.options.base import CloneFrozenMixin
from markdownpages.options.html import HtmlRendererOptions
from markdownpages.options.markdown import MarkdownParserOptions
from markdownpages.options.wiki import WikiOptions


@dataclass(frozen=True)
class ConversionOptions(CloneFrozenMixin):
    """Configuration for ``MarkdownPageConverter``.

    Parameters
    ----------
    parser : MarkdownParserOptions
        Grammar configuration (category title characters, autolinking)
    renderer : HtmlRendererOptions
        HTML output configuration
    generate_html : bool, default True
        When False the conversion is skipped entirely and yields no HTML and
        an empty metadata sink
    wrapper_class : str or None, default "mw-parser-output"
        CSS class recorded on the metadata sink for the wrapper ``<div>``

    """

    parser: MarkdownParserOptions = field(default_factory=MarkdownParserOptions)
    renderer: HtmlRendererOptions = field(default_factory=HtmlRendererOptions)
    generate_html: bool = DEFAULT_GENERATE_HTML
    wrapper_class: str | None = DEFAULT_WRAPPER_CLASS

    @classmethod
    def for_wiki(cls, wiki: WikiOptions, **kwargs: object) -> ConversionOptions:
        """Build options whose category grammar uses the wiki's title characters."""
        parser = MarkdownParserOptions(legal_title_chars=wiki.legal_title_chars)
        return cls(parser=parser, **kwargs)  # type: ignore[arg-type]
