#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/utils/html_utils.py
"""HTML-related utility helpers."""

from __future__ import annotations

import re
from html import escape as _html_escape

_OUTER_PARAGRAPH_RE = re.compile(r"^<p>(.*?)\n?</p>\n?$", re.DOTALL)


def escape_html(text: str, *, enabled: bool = True) -> str:
    """Escape HTML special characters when enabled."""
    if not enabled:
        return text
    return _html_escape(text)


def html_attributes(attrs: dict[str, str | None]) -> str:
    """Serialize attributes in insertion order, skipping None values.

    Examples
    --------
    >>> html_attributes({"href": "/wiki/A&B", "title": None, "class": "new"})
    ' href="/wiki/A&amp;B" class="new"'

    """
    return "".join(f' {name}="{escape_html(value)}"' for name, value in attrs.items() if value is not None)


def strip_outer_paragraph(html: str) -> str:
    """Strip a single enclosing ``<p>`` element from rendered wiki output.

    Fragments holding more than one paragraph are returned unchanged.

    Examples
    --------
    >>> strip_outer_paragraph("<p><img src=\\"a.png\\" />\\n</p>")
    '<img src="a.png" />'
    >>> strip_outer_paragraph("<p>a</p><p>b</p>")
    '<p>a</p><p>b</p>'

    """
    match = _OUTER_PARAGRAPH_RE.match(html)
    if match and "</p>" not in match.group(1):
        return match.group(1)
    return html


__all__ = ["escape_html", "html_attributes", "strip_outer_paragraph"]
