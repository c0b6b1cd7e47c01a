#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/wiki/titles.py
"""Wiki page titles.

``TitleFactory`` resolves link targets to ``Title`` objects using the wiki's
title rules: namespace prefixes, underscore/space equivalence, first-letter
capitalization and the set of characters and shapes that are not allowed in
a title.

"""

from __future__ import annotations

import html
import logging
import re
from dataclasses import dataclass
from urllib.parse import unquote

from markdownpages.constants import MAX_TITLE_BYTES, NS_MAIN, NS_SPECIAL
from markdownpages.options.wiki import WikiOptions

logger = logging.getLogger(__name__)

# Whitespace the wiki folds into a single underscore
_WHITESPACE_RE = re.compile(r"[ _\u00a0\u1680\u180e\u2000-\u200a\u2028\u2029\u202f\u205f\u3000]+")
_PREFIX_RE = re.compile(r"^(.+?)_*:_*(.*)$", re.DOTALL)


@dataclass(frozen=True)
class Title:
    """A resolved wiki title.

    Parameters
    ----------
    namespace : int
        Namespace id
    dbkey : str
        Title in database form: underscores for spaces, no namespace prefix
    fragment : str, default ""
        Section fragment, without the ``#``
    namespace_name : str, default ""
        Canonical namespace name ("" for the main namespace)

    """

    namespace: int
    dbkey: str
    fragment: str = ""
    namespace_name: str = ""

    @property
    def text(self) -> str:
        """Title text with spaces, without the namespace."""
        return self.dbkey.replace("_", " ")

    @property
    def prefixed_dbkey(self) -> str:
        """Database key with the namespace prefix, e.g. ``File:Example.jpg``."""
        if self.namespace_name:
            return f"{self.namespace_name.replace(' ', '_')}:{self.dbkey}"
        return self.dbkey

    @property
    def prefixed_text(self) -> str:
        """Display form with the namespace prefix, e.g. ``Help talk:Foo bar``."""
        return self.prefixed_dbkey.replace("_", " ")

    def is_fragment_only(self) -> bool:
        """Check whether this is a link to a section of the current page."""
        return self.dbkey == "" and self.fragment != ""

    def __str__(self) -> str:
        if self.fragment:
            return f"{self.prefixed_text}#{self.fragment}"
        return self.prefixed_text


class TitleFactory:
    """Resolve text to ``Title`` objects following the wiki's title rules.

    Parameters
    ----------
    options : WikiOptions or None, default = None
        Site configuration (legal characters, namespaces, capitalization)

    Examples
    --------
    >>> factory = TitleFactory()
    >>> factory.new_from_text("help:foo_bar#Usage")
    Title(namespace=12, dbkey='Foo_bar', fragment='Usage', namespace_name='Help')
    >>> factory.new_from_text("a[b]") is None
    True

    """

    def __init__(self, options: WikiOptions | None = None):
        """Initialize the factory and compile the title rules."""
        self.options = options or WikiOptions()
        legal = self.options.legal_title_chars
        self._illegal_re = re.compile(
            r"[^" + legal + r"]|%[0-9A-Fa-f]{2}|&[A-Za-z0-9\u0080-\U0010ffff]+;|&#[0-9]+;|&#x[0-9A-Fa-f]+;"
        )
        self._namespaces: dict[str, int] = {}
        for name, namespace in list(self.options.namespaces.items()) + list(self.options.namespace_aliases.items()):
            self._namespaces[name.replace("_", " ").lower()] = namespace

    def namespace_index(self, name: str) -> int | None:
        """Return the namespace id for a (case-insensitive) name or alias."""
        return self._namespaces.get(name.replace("_", " ").lower())

    def new_from_text(self, text: str, default_namespace: int = NS_MAIN) -> Title | None:
        """Resolve text to a title.

        Percent-encoding and HTML character references are decoded first, as
        link targets arrive URL-encoded from the Markdown parser.

        Parameters
        ----------
        text : str
            Link target or title text
        default_namespace : int, default NS_MAIN
            Namespace used when the text has no namespace prefix

        Returns
        -------
        Title or None
            The title, or None if the text is not a valid title

        """
        decoded = html.unescape(unquote(text))
        title = self._split_title(decoded, default_namespace)
        if title is None:
            logger.debug("Not a valid title: %r", text)
        return title

    def _split_title(self, text: str, namespace: int) -> Title | None:
        """Split normalized title text into namespace, database key and fragment."""
        dbkey = _WHITESPACE_RE.sub("_", text).strip("_")
        if "\ufffd" in dbkey:
            return None

        if dbkey.startswith(":"):
            namespace = NS_MAIN
            dbkey = dbkey[1:].strip("_")
        if not dbkey:
            return None

        match = _PREFIX_RE.match(dbkey)
        if match:
            prefixed_namespace = self.namespace_index(match.group(1))
            if prefixed_namespace is not None:
                namespace = prefixed_namespace
                dbkey = match.group(2)

        fragment = ""
        if "#" in dbkey:
            dbkey, _, fragment = dbkey.partition("#")
            fragment = fragment.replace("_", " ")
            dbkey = dbkey.rstrip("_")

        if self._illegal_re.search(dbkey):
            return None
        if self._is_relative_path(dbkey):
            return None
        if "~~~" in dbkey:
            return None
        max_bytes = MAX_TITLE_BYTES if namespace != NS_SPECIAL else 2 * MAX_TITLE_BYTES
        if len(dbkey.encode("utf-8")) > max_bytes:
            return None

        if self.options.capital_links and dbkey:
            dbkey = dbkey[0].upper() + dbkey[1:]

        if not dbkey and namespace != NS_MAIN:
            return None
        if not dbkey and not fragment:
            return None
        if dbkey.startswith(":"):
            return None

        return Title(
            namespace=namespace,
            dbkey=dbkey,
            fragment=fragment,
            namespace_name=self.options.namespace_name(namespace),
        )

    @staticmethod
    def _is_relative_path(dbkey: str) -> bool:
        """Check for ``.``/``..`` path components, which make pages unreachable by URL."""
        if "." not in dbkey:
            return False
        return (
            dbkey in (".", "..")
            or dbkey.startswith(("./", "../"))
            or "/./" in dbkey
            or "/../" in dbkey
            or dbkey.endswith(("/.", "/.."))
        )


__all__ = ["Title", "TitleFactory"]
