#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/markdownpages/options/markdown.py

from __future__ import annotations

import re
from dataclasses import dataclass, field

from markdownpages.constants import DEFAULT_AUTOLINK_BARE_URLS, DEFAULT_LEGAL_TITLE_CHARS
from markdownpages.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for Markdown-to-AST parsing.

    Parameters
    ----------
    legal_title_chars : str
        Regex character-class body (without the surrounding brackets) of the
        characters allowed in a category name of ``[[Category:Name|sort]]``.
    autolink_bare_urls : bool, default True
        Turn bare ``http(s)://`` URLs in text into links, in addition to the
        CommonMark ``<...>`` autolinks.

    """

    legal_title_chars: str = field(
        default=DEFAULT_LEGAL_TITLE_CHARS,
        metadata={"help": "Regex character class body of characters legal in titles", "importance": "advanced"},
    )
    autolink_bare_urls: bool = field(
        default=DEFAULT_AUTOLINK_BARE_URLS,
        metadata={"help": "Convert bare URLs in text into links", "importance": "core"},
    )

    def __post_init__(self) -> None:
        """Validate the legal title character class.

        Raises
        ------
        ValueError
            If the character class is empty or does not compile.

        """
        if not self.legal_title_chars:
            raise ValueError("legal_title_chars must not be empty")
        try:
            re.compile(f"[{self.legal_title_chars}]")
        except re.error as e:
            raise ValueError(f"legal_title_chars is not a valid character class: {e}") from e
