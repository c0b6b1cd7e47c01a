#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers producing the markdownpages AST."""

from markdownpages.parsers.base import BaseParser
from markdownpages.parsers.categories import CategoryCollector, category_plugin
from markdownpages.parsers.markdown import MarkdownToAstConverter, markdown_to_ast

__all__ = [
    "BaseParser",
    "CategoryCollector",
    "MarkdownToAstConverter",
    "category_plugin",
    "markdown_to_ast",
]
