#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration of the wiki the reference collaborators emulate.

These values correspond to the host wiki's site configuration: which
characters are legal in titles, which URL protocols count as external links,
the namespace table and the URL layout used for rendered links.
"""
# src/markdownpages/options/wiki.py

from __future__ import annotations

import re
from dataclasses import dataclass, field

from markdownpages.constants import (
    DEFAULT_ARTICLE_PATH,
    DEFAULT_BROKEN_FILE_CATEGORY,
    DEFAULT_CAPITAL_LINKS,
    DEFAULT_LEGAL_TITLE_CHARS,
    DEFAULT_NAMESPACE_ALIASES,
    DEFAULT_NAMESPACES,
    DEFAULT_SCRIPT_PATH,
    DEFAULT_URL_PROTOCOLS,
)
from markdownpages.options.base import CloneFrozenMixin


@dataclass(frozen=True)
class WikiOptions(CloneFrozenMixin):
    """Site configuration shared by the reference wiki collaborators.

    Parameters
    ----------
    legal_title_chars : str
        Regex character-class body of the characters allowed in titles
    url_protocols : tuple of str
        Protocol prefixes accepted for external links, e.g. ``"https://"``,
        ``"mailto:"`` or ``"//"`` for protocol-relative URLs
    namespaces : dict
        Canonical namespace name to namespace id; the main namespace (0) is
        implicit
    namespace_aliases : dict
        Additional names resolving to a namespace id (e.g. ``Image``)
    capital_links : bool
        Upper-case the first character of every title
    article_path : str
        Path of a page view, ``$1`` is replaced by the URL-encoded title
    script_path : str
        Entry point used for edit and upload URLs
    broken_file_category : str or None
        Tracking category recorded when an embedded file does not exist

    """

    legal_title_chars: str = DEFAULT_LEGAL_TITLE_CHARS
    url_protocols: tuple[str, ...] = DEFAULT_URL_PROTOCOLS
    namespaces: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_NAMESPACES))
    namespace_aliases: dict[str, int] = field(default_factory=lambda: dict(DEFAULT_NAMESPACE_ALIASES))
    capital_links: bool = DEFAULT_CAPITAL_LINKS
    article_path: str = DEFAULT_ARTICLE_PATH
    script_path: str = DEFAULT_SCRIPT_PATH
    broken_file_category: str | None = DEFAULT_BROKEN_FILE_CATEGORY

    def __post_init__(self) -> None:
        """Validate the site configuration.

        Raises
        ------
        ValueError
            If a value cannot be used to build the collaborators.

        """
        try:
            re.compile(f"[{self.legal_title_chars}]")
        except re.error as e:
            raise ValueError(f"legal_title_chars is not a valid character class: {e}") from e
        if "$1" not in self.article_path:
            raise ValueError(f"article_path must contain '$1', got {self.article_path!r}")
        if not all(self.url_protocols):
            raise ValueError("url_protocols must not contain empty entries")

    def namespace_name(self, namespace: int) -> str:
        """Return the canonical name of a namespace id ("" for the main namespace)."""
        for name, ns_id in self.namespaces.items():
            if ns_id == namespace:
                return name
        return ""
