#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Option dataclasses for parsing, rendering and wiki configuration."""

from markdownpages.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from markdownpages.options.conversion import ConversionOptions
from markdownpages.options.html import HtmlRendererOptions
from markdownpages.options.markdown import MarkdownParserOptions
from markdownpages.options.wiki import WikiOptions

__all__ = [
    "BaseParserOptions",
    "BaseRendererOptions",
    "CloneFrozenMixin",
    "ConversionOptions",
    "HtmlRendererOptions",
    "MarkdownParserOptions",
    "WikiOptions",
]
