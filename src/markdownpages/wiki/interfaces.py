#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/interfaces.py
"""Contracts of the wiki services used during a conversion.

The conversion pipeline never reaches into a wiki installation directly; it
is handed objects satisfying these protocols. ``markdownpages.wiki`` ships a
reference implementation of each one, and hosts can pass their own.

Every method is called synchronously. Exceptions raised by an implementation
propagate out of the conversion unchanged.

"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Optional, Protocol

if TYPE_CHECKING:
    from markdownpages.wiki.metadata import RenderedFile


class WikiTitle(Protocol):
    """A resolved wiki page title."""

    @property
    def namespace(self) -> int:
        """Namespace id."""
        ...

    @property
    def dbkey(self) -> str:
        """Title text in database form (underscores, no namespace prefix)."""
        ...

    @property
    def fragment(self) -> str:
        """Section fragment, without the ``#``."""
        ...


class CategorySink(Protocol):
    """Receiver of the categories collected during a parse."""

    def add_category(self, name: str, sort: str) -> None:
        """Record a category with its sort key."""
        ...


class MetadataSink(CategorySink, Protocol):
    """Per-conversion accumulator of page metadata."""

    def add_link(self, title: WikiTitle) -> None:
        """Record an internal link."""
        ...

    def add_external_link(self, url: str) -> None:
        """Record an external link, in canonical form."""
        ...

    def add_image(self, name: str) -> None:
        """Record the use of a file."""
        ...

    def merge_tracking_metadata_from(self, other: Any) -> None:
        """Merge the tracking metadata of a nested rendering."""
        ...


class UrlClassifier(Protocol):
    """The wiki's URL utilities."""

    def remove_dot_segments(self, url: str) -> str:
        """Resolve ``.`` and ``..`` path segments."""
        ...

    def parse(self, url: str) -> Optional[Mapping[str, Any]]:
        """Return the URL's components if it is a valid external link, else None."""
        ...


class TitleResolver(Protocol):
    """The wiki's title parser."""

    def new_from_text(self, text: str) -> Optional[WikiTitle]:
        """Resolve link text to a title, or None if it is not a valid title."""
        ...


class InternalLinkRenderer(Protocol):
    """The wiki's renderer of internal links (red/blue link styling)."""

    def make_link(
        self,
        title: WikiTitle,
        label_html: Optional[str] = None,
        attrs: Optional[Mapping[str, str]] = None,
    ) -> str:
        """Render an ``<a>`` element for a wiki title around already rendered label HTML."""
        ...


class FileResolver(Protocol):
    """The wiki's file embedding, i.e. rendering of ``[[File:name]]``."""

    def render_file(self, name: str) -> RenderedFile:
        """Render a file embed without its wrapper markup.

        Missing files must render as a placeholder rather than raise.
        """
        ...


__all__ = [
    "CategorySink",
    "FileResolver",
    "InternalLinkRenderer",
    "MetadataSink",
    "TitleResolver",
    "UrlClassifier",
    "WikiTitle",
]
