#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/urls.py
"""URL utilities following the wiki's rules for external links.

A URL is an external link to the wiki only if it starts with one of the
configured protocols (``https://``, ``mailto:``, protocol-relative ``//``,
...). Dot segments are resolved over the whole URL string before
classification, so ``https://host/a/./../b`` and ``https://host/b`` are the
same link.

"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from urllib.parse import urlsplit

from markdownpages.options.wiki import WikiOptions

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UrlBits:
    """Components of a URL accepted as an external link.

    Parameters
    ----------
    scheme : str
        Lower-cased scheme, "" for protocol-relative URLs
    delimiter : str
        ``"://"``, ``":"`` or ``"//"`` (protocol-relative)
    host : str
        Host; for ``scheme:`` protocols such as ``mailto:`` this is the
        whole scheme-specific part
    port : int or None
    user : str or None
    password : str or None
    path : str
    query : str
    fragment : str

    """

    scheme: str
    delimiter: str
    host: str
    port: int | None = None
    user: str | None = None
    password: str | None = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    def get(self, key: str, default: object = None) -> object:
        """Mapping-style access to a component."""
        return getattr(self, key, default)

    def __getitem__(self, key: str) -> object:
        try:
            return getattr(self, key)
        except AttributeError:
            raise KeyError(key) from None


class UrlUtils:
    """Classify and normalize URLs against the allowed protocol list.

    Parameters
    ----------
    options : WikiOptions or None, default = None
        Site configuration; only ``url_protocols`` is used

    Examples
    --------
    >>> utils = UrlUtils()
    >>> utils.remove_dot_segments("https://example.com/foo/./../bar")
    'https://example.com/bar'
    >>> utils.parse("example.com") is None
    True
    >>> utils.parse("mailto:user@example.com").host
    'user@example.com'

    """

    def __init__(self, options: WikiOptions | None = None):
        """Initialize with the configured protocol list."""
        self.options = options or WikiOptions()
        self.protocols: tuple[str, ...] = tuple(p.lower() for p in self.options.url_protocols)

    def remove_dot_segments(self, url: str) -> str:
        """Remove ``.`` and ``..`` segments from a URL path.

        RFC 3986 section 5.2.4, applied to the whole string as the wiki does,
        so the scheme and host are carried through unchanged.

        Parameters
        ----------
        url : str
            URL or relative path

        Returns
        -------
        str
            URL with dot segments resolved

        """
        path = url
        output = ""
        offset = 0
        length = len(path)

        while offset < length:
            trim_output = False
            if path.startswith("./", offset):
                # A: drop a leading "./" or "../"
                offset += 2
            elif path.startswith("../", offset):
                offset += 3
            elif offset + 2 == length and path.startswith("/.", offset):
                # B: a trailing "/." becomes "/"
                offset += 1
                path = path[:offset] + "/" + path[offset + 1 :]
            elif path.startswith("/./", offset):
                offset += 2
            elif offset + 3 == length and path.startswith("/..", offset):
                # C: a trailing "/.." becomes "/" and drops the last output segment
                offset += 2
                path = path[:offset] + "/" + path[offset + 1 :]
                trim_output = True
            elif path.startswith("/../", offset):
                offset += 3
                trim_output = True
            elif offset + 1 == length and path.startswith(".", offset):
                # D: a lone "." or ".."
                offset += 1
            elif offset + 2 == length and path.startswith("..", offset):
                offset += 2
            else:
                # E: move the first segment, with its leading "/", to the output
                slash = path.find("/", offset + 1 if path[offset] == "/" else offset)
                if slash == -1:
                    output += path[offset:]
                    offset = length
                else:
                    output += path[offset:slash]
                    offset = slash

            if trim_output:
                slash = output.rfind("/")
                output = "" if slash == -1 else output[:slash]

        return output

    def parse(self, url: str) -> UrlBits | None:
        """Parse a URL if it is a valid external link.

        Parameters
        ----------
        url : str
            URL to parse

        Returns
        -------
        UrlBits or None
            Components of the URL, or None if it has no scheme, an
            unrecognized scheme or cannot be parsed

        """
        was_relative = url.startswith("//")
        if was_relative:
            url = "http:" + url

        try:
            split = urlsplit(url)
            port = split.port
        except ValueError:
            logger.debug("Unparseable URL: %r", url)
            return None

        if not split.scheme:
            return None

        scheme = split.scheme.lower()
        host = split.hostname or ""
        path = split.path

        if scheme + "://" in self.protocols:
            delimiter = "://"
        elif scheme + ":" in self.protocols:
            delimiter = ":"
            # Everything after "scheme:" is the address, e.g. mailto:user@host
            if path:
                host = path
                path = ""
        else:
            return None

        if was_relative:
            scheme = ""
            delimiter = "//"

        return UrlBits(
            scheme=scheme,
            delimiter=delimiter,
            host=host,
            port=port,
            user=split.username,
            password=split.password,
            path=path,
            query=split.query,
            fragment=split.fragment,
        )

    def is_external(self, url: str) -> bool:
        """Check whether a URL is a valid external link."""
        return self.parse(url) is not None


__all__ = ["UrlBits", "UrlUtils"]
