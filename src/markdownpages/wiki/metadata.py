#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/metadata.py
"""Page metadata recorded during a conversion.

``WikiMetadata`` is the metadata sink of a single conversion: the categories,
internal links, external links, file usages and templates a host wiki needs
to index the page. It mirrors the wiki's own parser output, including the
rules for which links are worth recording.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from markdownpages.constants import NS_FILE, NS_MEDIA, NS_SPECIAL
from markdownpages.wiki.interfaces import WikiTitle

logger = logging.getLogger(__name__)


class WikiMetadata:
    """Ordered record of the metadata produced by one conversion.

    All collections keep insertion order and ignore duplicates; a category
    recorded again takes the new sort key.

    Examples
    --------
    >>> metadata = WikiMetadata()
    >>> metadata.add_category("Foo", "Bar")
    >>> metadata.add_external_link("https://example.com")
    >>> print(metadata.to_text())
    [category] link=14:Foo sort='Bar'
    [external] link='https://example.com'

    """

    def __init__(self) -> None:
        """Initialize an empty metadata record."""
        self._categories: dict[str, str] = {}
        self._links: dict[int, dict[str, None]] = {}
        self._templates: dict[int, dict[str, None]] = {}
        self._external_links: dict[str, None] = {}
        self._images: dict[str, None] = {}
        self._wrapper_div_classes: dict[str, None] = {}

    # ------------------------------------------------------------------
    # Recording
    # ------------------------------------------------------------------

    def add_category(self, name: str, sort: str = "") -> None:
        """Record a category with its sort key."""
        self._categories[name] = sort

    def add_link(self, title: WikiTitle) -> None:
        """Record an internal link.

        Links into the Media pseudo-namespace are recorded as links to the
        file page. Special pages and fragment-only (same page) links are not
        recorded.

        """
        namespace = title.namespace
        if namespace == NS_MEDIA:
            namespace = NS_FILE
        elif namespace == NS_SPECIAL:
            logger.debug("Not recording link to special page %r", title.dbkey)
            return
        elif title.dbkey == "":
            return
        self._links.setdefault(namespace, {})[title.dbkey] = None

    def add_template(self, title: WikiTitle) -> None:
        """Record a transcluded page."""
        self._templates.setdefault(title.namespace, {})[title.dbkey] = None

    def add_external_link(self, url: str) -> None:
        """Record an external link; empty URLs are ignored."""
        if url:
            self._external_links[url] = None

    def add_image(self, name: str) -> None:
        """Record the use of a file, by database key."""
        self._images[name] = None

    def add_wrapper_div_class(self, css_class: str) -> None:
        """Add a CSS class for the ``<div>`` wrapping the page body."""
        self._wrapper_div_classes[css_class] = None

    def clear_wrapper_div_class(self) -> None:
        """Remove all wrapper classes (for fragments embedded in another page)."""
        self._wrapper_div_classes.clear()

    def merge_tracking_metadata_from(self, other: WikiMetadata) -> None:
        """Merge the tracking metadata of another rendering into this one.

        Categories, links, templates, images and external links are merged;
        wrapper classes are not, as they belong to the outer page.

        Parameters
        ----------
        other : WikiMetadata
            Metadata of a nested rendering, e.g. a file embed

        """
        self._categories.update(other._categories)
        for namespace, keys in other._links.items():
            self._links.setdefault(namespace, {}).update(keys)
        for namespace, keys in other._templates.items():
            self._templates.setdefault(namespace, {}).update(keys)
        self._images.update(other._images)
        self._external_links.update(other._external_links)

    # ------------------------------------------------------------------
    # Access
    # ------------------------------------------------------------------

    @property
    def categories(self) -> dict[str, str]:
        """Category name to sort key."""
        return dict(self._categories)

    @property
    def links(self) -> dict[int, list[str]]:
        """Namespace id to the database keys linked in that namespace."""
        return {namespace: list(keys) for namespace, keys in self._links.items()}

    @property
    def templates(self) -> dict[int, list[str]]:
        """Namespace id to the database keys transcluded from that namespace."""
        return {namespace: list(keys) for namespace, keys in self._templates.items()}

    @property
    def external_links(self) -> list[str]:
        """External links, in the order first recorded."""
        return list(self._external_links)

    @property
    def images(self) -> list[str]:
        """Used files, in the order first recorded."""
        return list(self._images)

    @property
    def wrapper_div_classes(self) -> list[str]:
        """CSS classes of the wrapper ``<div>``."""
        return list(self._wrapper_div_classes)

    def is_empty(self) -> bool:
        """Check whether nothing has been recorded."""
        return not (self._categories or self._links or self._templates or self._external_links or self._images)

    def to_lines(self) -> list[str]:
        """Dump the metadata as one line per record.

        Categories come first, then images, internal links and external
        links; within each group records keep their order.

        Returns
        -------
        list of str
            Lines such as ``[category] link=14:Foo sort='Bar'``,
            ``[image] link=6:Example.jpg``, ``[local] link=0:Exists`` and
            ``[external] link='https://example.com'``

        """
        lines = [f"[category] link=14:{name} sort='{sort}'" for name, sort in self._categories.items()]
        lines.extend(f"[image] link=6:{name}" for name in self._images)
        for namespace, keys in self._links.items():
            lines.extend(f"[local] link={namespace}:{dbkey}" for dbkey in keys)
        lines.extend(f"[external] link='{url}'" for url in self._external_links)
        return lines

    def to_text(self) -> str:
        """Return ``to_lines()`` joined with newlines."""
        return "\n".join(self.to_lines())

    def __repr__(self) -> str:
        return (
            f"WikiMetadata(categories={len(self._categories)}, links={sum(map(len, self._links.values()))}, "
            f"external_links={len(self._external_links)}, images={len(self._images)})"
        )


@dataclass
class RenderedFile:
    """Result of rendering a file embed.

    Parameters
    ----------
    html : str
        Rendered fragment, without wrapper markup
    metadata : WikiMetadata
        Tracking metadata of the rendering (file usage, tracking categories)

    """

    html: str
    metadata: WikiMetadata = field(default_factory=WikiMetadata)


__all__ = ["RenderedFile", "WikiMetadata"]
