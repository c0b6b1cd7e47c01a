#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Renderers converting the markdownpages AST to output formats."""

from markdownpages.renderers.base import BaseRenderer, InlineContentMixin
from markdownpages.renderers.html import HtmlRenderer

__all__ = ["BaseRenderer", "HtmlRenderer", "InlineContentMixin"]
