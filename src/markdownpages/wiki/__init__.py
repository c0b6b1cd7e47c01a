#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/__init__.py
"""Wiki services used by the conversion pipeline.

The protocols in ``interfaces`` describe what the pipeline needs from a host
wiki. The other modules are reference implementations configured by
``WikiOptions``: title parsing, URL classification, internal link rendering
and file embedding, plus ``WikiMetadata``, the per-conversion metadata sink.
"""

from markdownpages.wiki.files import FileInfo, FileRenderer
from markdownpages.wiki.interfaces import (
    CategorySink,
    FileResolver,
    InternalLinkRenderer,
    MetadataSink,
    TitleResolver,
    UrlClassifier,
    WikiTitle,
)
from markdownpages.wiki.links import WikiLinkRenderer
from markdownpages.wiki.metadata import RenderedFile, WikiMetadata
from markdownpages.wiki.titles import Title, TitleFactory
from markdownpages.wiki.urls import UrlBits, UrlUtils

__all__ = [
    "CategorySink",
    "FileInfo",
    "FileRenderer",
    "FileResolver",
    "InternalLinkRenderer",
    "MetadataSink",
    "RenderedFile",
    "Title",
    "TitleFactory",
    "TitleResolver",
    "UrlBits",
    "UrlClassifier",
    "UrlUtils",
    "WikiLinkRenderer",
    "WikiMetadata",
    "WikiTitle",
]
