#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/transforms/images.py
"""Image rewrite pass.

Images on a wiki page may only show files from the wiki's own file
repository. Every image whose source has a network host is neutralized to an
empty source; every other image source is taken as a file name and replaced
by the wiki's rendering of that file.

"""

from __future__ import annotations

import logging

from markdownpages.ast.nodes import Image, Node, PreprocessedInline
from markdownpages.ast.transforms import NodeTransformer
from markdownpages.utils.security import has_network_host
from markdownpages.wiki.interfaces import FileResolver, MetadataSink

logger = logging.getLogger(__name__)


class ImageRewriter(NodeTransformer):
    """Resolve images against the wiki's file repository.

    Parameters
    ----------
    file_resolver : FileResolver
        Renders the embed of a local file
    metadata : MetadataSink
        Receives the tracking metadata of every file rendering

    Examples
    --------
    >>> rewriter = ImageRewriter(FileRenderer(), WikiMetadata())
    >>> new_doc = rewriter.transform(doc)

    """

    def __init__(self, file_resolver: FileResolver, metadata: MetadataSink):
        """Initialize with the file resolver and the conversion's metadata sink."""
        self.file_resolver = file_resolver
        self.metadata = metadata

    def visit_image(self, node: Image) -> Node:
        """Neutralize an external image or replace a local one by its file embed.

        Parameters
        ----------
        node : Image
            Image node to rewrite

        Returns
        -------
        Node
            The image with an empty source if it pointed at a network host,
            otherwise a ``PreprocessedInline`` holding the rendered file

        """
        if has_network_host(node.url):
            logger.debug("Blanking external image source %r", node.url)
            return Image(url="", alt_text=node.alt_text, title=node.title, metadata=node.metadata.copy())

        rendered = self.file_resolver.render_file(node.url)
        self.metadata.merge_tracking_metadata_from(rendered.metadata)
        return PreprocessedInline(html=rendered.html, metadata=node.metadata.copy())


__all__ = ["ImageRewriter"]
