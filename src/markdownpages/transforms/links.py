#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/transforms/links.py
"""Link rewrite pass.

Markdown links are classified the way the wiki classifies links in its own
markup. External links (a scheme from the wiki's protocol list) are recorded
and left to the HTML renderer. Links without a host are wiki page titles:
they are recorded and re-rendered by the wiki's internal link renderer, which
knows about red links and the site's URL layout. Anything else is left alone
and recorded nowhere. Unsafe schemes such as ``javascript:`` are only dropped
when they do not name a namespace, so ``file:Example.jpg`` stays a page link.

"""

from __future__ import annotations

import logging
from enum import Enum

from markdownpages.ast.nodes import Link, Node, PreprocessedInline
from markdownpages.constants import NS_MAIN
from markdownpages.ast.transforms import NodeTransformer
from markdownpages.renderers.html import HtmlRenderer
from markdownpages.utils.security import has_network_host, is_link_potentially_unsafe
from markdownpages.wiki.interfaces import InternalLinkRenderer, MetadataSink, TitleResolver, UrlClassifier

logger = logging.getLogger(__name__)


class LinkClassification(Enum):
    """How the wiki treats a (canonical) link target."""

    EXTERNAL = "external"
    """Scheme is in the wiki's protocol list."""

    INTERNAL = "internal"
    """No recognized scheme and no host: a candidate page title."""

    UNRECOGNIZED_EXTERNAL = "unrecognized_external"
    """Has a host, but its scheme is not in the protocol list."""


def classify_url(url: str, classifier: UrlClassifier) -> LinkClassification:
    """Classify a canonical URL.

    A host always wins over title resolution: a URL is only a page title
    candidate when it has no discoverable host.

    Parameters
    ----------
    url : str
        URL with dot segments already removed
    classifier : UrlClassifier
        The wiki's URL utilities

    Returns
    -------
    LinkClassification

    Examples
    --------
    >>> utils = UrlUtils()
    >>> classify_url("https://example.com", utils)
    <LinkClassification.EXTERNAL: 'external'>
    >>> classify_url("foo://example.com", utils)
    <LinkClassification.UNRECOGNIZED_EXTERNAL: 'unrecognized_external'>
    >>> classify_url("Main_Page", utils)
    <LinkClassification.INTERNAL: 'internal'>

    """
    if classifier.parse(url) is not None:
        return LinkClassification.EXTERNAL
    if has_network_host(url):
        return LinkClassification.UNRECOGNIZED_EXTERNAL
    return LinkClassification.INTERNAL


class WikiLinkRewriter(NodeTransformer):
    """Classify links, record them, and re-render internal ones.

    Parameters
    ----------
    classifier : UrlClassifier
        The wiki's URL utilities (dot segment removal, external link parsing)
    title_resolver : TitleResolver
        The wiki's title parser
    link_renderer : InternalLinkRenderer
        Renders ``<a>`` elements for wiki titles
    label_renderer : HtmlRenderer
        Renders link labels before they are handed to ``link_renderer``
    metadata : MetadataSink
        Receives internal and external links

    """

    def __init__(
        self,
        classifier: UrlClassifier,
        title_resolver: TitleResolver,
        link_renderer: InternalLinkRenderer,
        label_renderer: HtmlRenderer,
        metadata: MetadataSink,
    ):
        """Initialize with the wiki services and the conversion's metadata sink."""
        self.classifier = classifier
        self.title_resolver = title_resolver
        self.link_renderer = link_renderer
        self.label_renderer = label_renderer
        self.metadata = metadata

    def visit_link(self, node: Link) -> Node:
        """Rewrite or record a link.

        Parameters
        ----------
        node : Link
            Link node, whose label has not been visited yet

        Returns
        -------
        Node
            ``PreprocessedInline`` with the wiki's markup for internal links,
            otherwise the link itself (with its label transformed)

        """
        if not node.url:
            return self._generic_transform(node)

        url = self.classifier.remove_dot_segments(node.url)
        classification = classify_url(url, self.classifier)

        if classification is LinkClassification.EXTERNAL:
            if is_link_potentially_unsafe(node.url):
                logger.debug("Not recording unsafe external link %r", node.url)
            else:
                self.metadata.add_external_link(url)
            return self._generic_transform(node)

        if classification is LinkClassification.UNRECOGNIZED_EXTERNAL:
            logger.debug("Skipping link with unrecognized protocol %r", url)
            return self._generic_transform(node)

        title = self.title_resolver.new_from_text(url)
        if title is None:
            logger.debug("Skipping link to invalid title %r", url)
            return self._generic_transform(node)

        # A scheme that names a namespace (File:, Special:) is a page link
        if is_link_potentially_unsafe(node.url) and title.namespace == NS_MAIN:
            logger.debug("Skipping unsafe link %r", node.url)
            return self._generic_transform(node)

        self.metadata.add_link(title)
        label_html = self.label_renderer.render_inline(node.content)
        attrs = {"title": node.title} if node.title else None
        html = self.link_renderer.make_link(title, label_html, attrs)
        return PreprocessedInline(html=html, metadata=node.metadata.copy())


__all__ = ["LinkClassification", "WikiLinkRewriter", "classify_url"]
