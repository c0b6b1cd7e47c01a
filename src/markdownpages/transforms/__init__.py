#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/transforms/__init__.py
"""Rewrite passes bridging Markdown to wiki semantics.

Both passes are ``NodeTransformer`` subclasses run by the conversion
pipeline, images first:

- ImageRewriter: resolves image sources against the wiki's files
- WikiLinkRewriter: records external links, re-renders internal ones

"""

from markdownpages.transforms.images import ImageRewriter
from markdownpages.transforms.links import LinkClassification, WikiLinkRewriter, classify_url

__all__ = ["ImageRewriter", "LinkClassification", "WikiLinkRewriter", "classify_url"]
