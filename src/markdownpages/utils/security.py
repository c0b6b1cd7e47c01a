#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/utils/security.py
"""URL safety and classification helpers.

The same unsafe-link policy is used by the HTML renderer (to decide whether a
link keeps its ``href``) and by the link rewrite pass (to decide whether a
link is recorded), so the two can never disagree about a URL.
"""

from __future__ import annotations

from urllib.parse import urlsplit

from markdownpages.constants import SAFE_DATA_PROTOCOLS, UNSAFE_LINK_PROTOCOLS


def is_link_potentially_unsafe(url: str) -> bool:
    """Check whether a link target uses a scheme that can run script.

    Parameters
    ----------
    url : str
        Link or image target as written in the source

    Returns
    -------
    bool
        True for ``javascript:``, ``vbscript:``, ``file:`` and ``data:``
        targets, except ``data:`` URLs of common raster image types

    Examples
    --------
    >>> is_link_potentially_unsafe("javascript:alert(1)")
    True
    >>> is_link_potentially_unsafe("data:image/png;base64,AAAA")
    False
    >>> is_link_potentially_unsafe("https://example.com")
    False

    """
    lowered = url.lower()
    return lowered.startswith(UNSAFE_LINK_PROTOCOLS) and not lowered.startswith(SAFE_DATA_PROTOCOLS)


def has_network_host(url: str) -> bool:
    """Check whether a URL carries a network host component.

    Absolute (``https://host/...``), protocol-relative (``//host``) and
    foreign-scheme (``foo://host``) URLs have one; bare names such as
    ``Example.jpg``, ``host.tld`` or ``mailto:user@host`` do not.

    Parameters
    ----------
    url : str
        URL to inspect

    Returns
    -------
    bool
        True if a non-empty host can be parsed out of the URL

    """
    try:
        return bool(urlsplit(url).hostname)
    except ValueError:
        # Unparseable authority, e.g. an unbalanced IPv6 bracket
        return False


__all__ = ["has_network_host", "is_link_potentially_unsafe"]
