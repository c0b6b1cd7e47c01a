#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/links.py
"""Rendering of internal wiki links.

Links to existing pages are "blue" links to the article path; links to
missing pages are "red" links to the edit form, marked with ``class="new"``.
Whether a page exists is answered by a callable supplied by the host;
special pages are always blue links.

"""

from __future__ import annotations

import logging
from typing import Callable, Mapping
from urllib.parse import quote

from markdownpages.constants import NS_SPECIAL
from markdownpages.options.wiki import WikiOptions
from markdownpages.utils.html_utils import escape_html, html_attributes
from markdownpages.wiki.titles import Title

logger = logging.getLogger(__name__)

# Characters the wiki leaves unencoded in page URLs
URL_SAFE_CHARS = ";@$!*(),/~:"


def _never_exists(title: Title) -> bool:
    return False


class WikiLinkRenderer:
    """Render ``<a>`` elements for wiki titles.

    Parameters
    ----------
    options : WikiOptions or None, default = None
        Site configuration (URL layout)
    page_exists : callable or None, default = None
        ``page_exists(title) -> bool``; when None every page is treated as
        missing

    Examples
    --------
    >>> from markdownpages.wiki.titles import TitleFactory
    >>> renderer = WikiLinkRenderer(page_exists=lambda title: title.dbkey == "Exists")
    >>> renderer.make_link(TitleFactory().new_from_text("Exists"))
    '<a href="/wiki/Exists" title="Exists">Exists</a>'

    """

    def __init__(
        self,
        options: WikiOptions | None = None,
        page_exists: Callable[[Title], bool] | None = None,
    ):
        """Initialize the renderer."""
        self.options = options or WikiOptions()
        self.page_exists = page_exists or _never_exists

    def local_url(self, title: Title, query: str = "") -> str:
        """Return the URL of a page, optionally with a query string.

        Parameters
        ----------
        title : Title
            Page title
        query : str, default ""
            Query string without the leading ``?``; a query addresses the
            script path instead of the article path

        Returns
        -------
        str
            Site-relative URL

        """
        encoded = quote(title.prefixed_dbkey, safe=URL_SAFE_CHARS)
        if query:
            return f"{self.options.script_path}?title={encoded}&{query}"
        return self.options.article_path.replace("$1", encoded)

    def make_link(
        self,
        title: Title,
        label_html: str | None = None,
        attrs: Mapping[str, str] | None = None,
    ) -> str:
        """Render a link to a title.

        Parameters
        ----------
        title : Title
            Link target
        label_html : str or None, default = None
            Already rendered label HTML; defaults to the escaped title text
        attrs : mapping or None, default = None
            Extra attributes; they override the generated ``class`` and
            ``title`` attributes

        Returns
        -------
        str
            The ``<a>`` element

        """
        if label_html is None:
            label_html = escape_html(str(title))

        link_attrs: dict[str, str | None] = {}
        if title.is_fragment_only():
            link_attrs["href"] = "#" + quote(title.fragment.replace(" ", "_"), safe=URL_SAFE_CHARS)
        elif title.namespace == NS_SPECIAL or self.page_exists(title):
            link_attrs["href"] = self._with_fragment(self.local_url(title), title)
            link_attrs["title"] = title.prefixed_text
        else:
            logger.debug("Rendering red link to missing page %r", title.prefixed_dbkey)
            link_attrs["href"] = self.local_url(title, "action=edit&redlink=1")
            link_attrs["class"] = "new"
            link_attrs["title"] = f"{title.prefixed_text} (page does not exist)"

        if attrs:
            link_attrs.update(attrs)

        return f"<a{html_attributes(link_attrs)}>{label_html}</a>"

    @staticmethod
    def _with_fragment(url: str, title: Title) -> str:
        if not title.fragment:
            return url
        return url + "#" + quote(title.fragment.replace(" ", "_"), safe=URL_SAFE_CHARS)


__all__ = ["WikiLinkRenderer"]
