#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for HTML rendering.

This module defines options for rendering the markdownpages AST to the HTML
fragment that is embedded in a wiki page.
"""
# src/markdownpages/options/html.py

from __future__ import annotations

from dataclasses import dataclass, field

from markdownpages.constants import (
    DEFAULT_ALLOW_UNSAFE_LINKS,
    DEFAULT_EXTERNAL_LINK_CLASS,
    DEFAULT_EXTERNAL_LINK_REL,
    DEFAULT_HTML_INPUT,
    HTML_INPUT_MODES,
    HtmlInputMode,
)
from markdownpages.options.base import BaseRendererOptions


@dataclass(frozen=True)
class HtmlRendererOptions(BaseRendererOptions):
    """Configuration options for AST-to-HTML rendering.

    Parameters
    ----------
    html_input : {"escape", "strip"}, default "escape"
        How raw HTML found in the Markdown source is emitted:
        - "escape": rendered as literal, escaped text
        - "strip": dropped from the output
    allow_unsafe_links : bool, default False
        Emit ``href``/``src`` attributes for ``javascript:``-class targets.
        When False such links lose their ``href`` and such images get an
        empty ``src``.
    external_link_class : str, default "external"
        CSS class added to links pointing at a network host. Empty to disable.
    external_link_rel : str, default "noopener noreferrer"
        ``rel`` attribute added to external links. Empty to disable.
    internal_hosts : tuple of str, default ()
        Hosts whose links are not decorated as external.

    """

    html_input: HtmlInputMode = field(
        default=DEFAULT_HTML_INPUT,
        metadata={
            "help": "How to emit raw HTML from the source: escape or strip",
            "choices": list(HTML_INPUT_MODES),
            "importance": "security",
        },
    )
    allow_unsafe_links: bool = field(
        default=DEFAULT_ALLOW_UNSAFE_LINKS,
        metadata={"help": "Keep javascript:/vbscript:/file:/data: link targets", "importance": "security"},
    )
    external_link_class: str = field(
        default=DEFAULT_EXTERNAL_LINK_CLASS,
        metadata={"help": "CSS class for links to external hosts", "importance": "advanced"},
    )
    external_link_rel: str = field(
        default=DEFAULT_EXTERNAL_LINK_REL,
        metadata={"help": "rel attribute for links to external hosts", "importance": "advanced"},
    )
    internal_hosts: tuple[str, ...] = field(
        default=(),
        metadata={"help": "Hosts treated as internal for external link decoration", "importance": "advanced"},
    )

    def __post_init__(self) -> None:
        """Validate the raw HTML handling mode.

        Raises
        ------
        ValueError
            If ``html_input`` is not a supported mode.

        """
        if self.html_input not in HTML_INPUT_MODES:
            raise ValueError(f"html_input must be one of {HTML_INPUT_MODES}, got {self.html_input!r}")
