#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/files.py
"""Rendering of embedded files.

``FileRenderer`` renders what the wiki produces for ``[[File:name]]``: a
file-description link around the image for files that exist, and a
broken-media placeholder pointing to the upload form for files that do not.
The file repository itself is a lookup callable supplied by the host.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable
from urllib.parse import quote

from markdownpages.constants import NS_FILE, NS_SPECIAL
from markdownpages.options.wiki import WikiOptions
from markdownpages.utils.html_utils import escape_html, html_attributes, strip_outer_paragraph
from markdownpages.wiki.links import URL_SAFE_CHARS, WikiLinkRenderer
from markdownpages.wiki.metadata import RenderedFile, WikiMetadata
from markdownpages.wiki.titles import Title, TitleFactory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FileInfo:
    """A file known to the file repository.

    Parameters
    ----------
    name : str
        File name in database form, e.g. ``Example.jpg``
    url : str
        URL of the file contents
    width : int or None, default = None
    height : int or None, default = None

    """

    name: str
    url: str
    width: int | None = None
    height: int | None = None


def _no_files(name: str) -> FileInfo | None:
    return None


class FileRenderer:
    """Render file embeds the way the wiki renders ``[[File:name]]``.

    Parameters
    ----------
    options : WikiOptions or None, default = None
        Site configuration
    find_file : callable or None, default = None
        ``find_file(name) -> FileInfo | None``, called with the file's
        database key; when None no file exists
    title_factory : TitleFactory or None, default = None
        Title parser used to validate file names

    Examples
    --------
    >>> renderer = FileRenderer()
    >>> rendered = renderer.render_file("Missing.jpg")
    >>> rendered.metadata.images
    ['Missing.jpg']

    """

    def __init__(
        self,
        options: WikiOptions | None = None,
        find_file: Callable[[str], FileInfo | None] | None = None,
        title_factory: TitleFactory | None = None,
    ):
        """Initialize the renderer."""
        self.options = options or WikiOptions()
        self.find_file = find_file or _no_files
        self.title_factory = title_factory or TitleFactory(self.options)
        self._links = WikiLinkRenderer(self.options)

    def render_file(self, name: str) -> RenderedFile:
        """Render a file embed.

        Parameters
        ----------
        name : str
            File name, without the ``File:`` prefix

        Returns
        -------
        RenderedFile
            The fragment, stripped of its enclosing paragraph, and the
            tracking metadata of the rendering

        """
        metadata = WikiMetadata()
        title = self.title_factory.new_from_text(f"File:{name}")

        if title is None or title.namespace != NS_FILE or not title.dbkey:
            logger.debug("Invalid file name %r, rendering as text", name)
            body = escape_html(f"[[File:{name}]]")
        else:
            metadata.add_image(title.dbkey)
            info = self.find_file(title.dbkey)
            if info is None:
                body = self._render_missing(title)
                if self.options.broken_file_category:
                    metadata.add_category(self.options.broken_file_category, "")
            else:
                body = self._render_existing(title, info)

        return RenderedFile(html=strip_outer_paragraph(f"<p>{body}\n</p>"), metadata=metadata)

    def _render_existing(self, title: Title, info: FileInfo) -> str:
        img_attrs: dict[str, str | None] = {
            "src": info.url,
            "decoding": "async",
            "width": str(info.width) if info.width is not None else None,
            "height": str(info.height) if info.height is not None else None,
            "class": "mw-file-element",
        }
        link_attrs = {"href": self._links.local_url(title), "class": "mw-file-description"}
        return (
            '<span typeof="mw:File">'
            f"<a{html_attributes(link_attrs)}><img{html_attributes(img_attrs)} /></a>"
            "</span>"
        )

    def _render_missing(self, title: Title) -> str:
        logger.debug("File %r does not exist, rendering upload link", title.dbkey)
        upload = Title(namespace=NS_SPECIAL, dbkey="Upload", namespace_name=self.options.namespace_name(NS_SPECIAL))
        link_attrs = {
            "href": self._links.local_url(upload, "wpDestFile=" + quote(title.dbkey, safe=URL_SAFE_CHARS)),
            "class": "new",
            "title": title.prefixed_text,
        }
        label = escape_html(title.prefixed_text)
        return (
            '<span class="mw-default-size" typeof="mw:Error mw:File">'
            f'<a{html_attributes(link_attrs)}><span class="mw-file-element mw-broken-media">{label}</span></a>'
            "</span>"
        )


__all__ = ["FileInfo", "FileRenderer"]
