#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/parsers/categories.py
"""Category support for Markdown pages.

Pages declare their categories with the wiki's own syntax,
``[[Category:Name]]`` or ``[[Category:Name|sort key]]``, anywhere in inline
text. The construct is recognized by a mistune inline rule, removed from the
output, and recorded on a ``CategoryCollector`` that is bound to a single
parse call.

"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Callable, Iterator

from markdownpages.constants import CATEGORY_ENV_KEY, CATEGORY_RULE_BEFORE, DEFAULT_LEGAL_TITLE_CHARS

if TYPE_CHECKING:
    from markdownpages.wiki.interfaces import CategorySink

logger = logging.getLogger(__name__)

CATEGORY_RULE_NAME = "wiki_category"


class CategoryCollector:
    """Ordered record of the categories seen during one parse.

    A category seen twice keeps its first position and takes the sort key of
    the last occurrence.

    Examples
    --------
    >>> collector = CategoryCollector()
    >>> collector.on_category_parse("Foo", "Bar")
    >>> collector.on_category_parse("Foo", "Baz")
    >>> collector.categories
    {'Foo': 'Baz'}

    """

    def __init__(self) -> None:
        """Initialize an empty collector."""
        self._categories: dict[str, str] = {}

    def on_category_parse(self, category: str, sort: str = "") -> None:
        """Record a category construct matched by the inline rule."""
        self._categories[category] = sort

    @property
    def categories(self) -> dict[str, str]:
        """Return a copy of the category name to sort key mapping."""
        return dict(self._categories)

    def export_to(self, sink: CategorySink) -> None:
        """Add every recorded category to a metadata sink.

        Parameters
        ----------
        sink : CategorySink
            Object with an ``add_category(name, sort)`` method, normally a
            ``WikiMetadata``

        """
        for category, sort in self._categories.items():
            sink.add_category(category, sort)

    def __len__(self) -> int:
        return len(self._categories)

    def __iter__(self) -> Iterator[str]:
        return iter(self._categories)


def build_category_pattern(legal_title_chars: str = DEFAULT_LEGAL_TITLE_CHARS) -> str:
    r"""Build the inline pattern matching a category construct.

    Parameters
    ----------
    legal_title_chars : str
        Regex character-class body of the characters allowed in titles

    Returns
    -------
    str
        Pattern with the named groups ``category_name`` and ``category_sort``

    Examples
    --------
    >>> m = re.match(build_category_pattern("A-Za-z"), "[[Category:Foo|Bar]]")
    >>> m.group("category_name"), m.group("category_sort")
    ('Foo', 'Bar')

    """
    return (
        r"\[\[Category:(?P<category_name>[" + legal_title_chars + r"]+)"
        r"(?:\|(?P<category_sort>.+?))?\]\]"
    )


def parse_category(inline: Any, m: re.Match[str], state: Any) -> int:
    """Consume a matched category construct and record it.

    Mistune inline rule callback. No token is appended, so the construct
    leaves no trace in the parsed tree.

    Returns
    -------
    int
        Position just after the construct

    """
    category = m.group("category_name")
    sort = m.group("category_sort") or ""
    collector = state.env.get(CATEGORY_ENV_KEY)
    if collector is None:
        logger.debug("Dropping category %r: no collector bound to this parse", category)
    else:
        collector.on_category_parse(category, sort)
    return m.end()


def category_plugin(legal_title_chars: str = DEFAULT_LEGAL_TITLE_CHARS) -> Callable[[Any], None]:
    """Create the mistune plugin registering the category rule.

    The rule is inserted ahead of mistune's ``link`` rule so that, at a
    ``[`` position, the whole ``[[Category:...]]`` construct is tried before
    the link bracket grammar.

    Parameters
    ----------
    legal_title_chars : str
        Regex character-class body of the characters allowed in category names

    Returns
    -------
    callable
        Plugin accepted by ``mistune.create_markdown(plugins=[...])``

    """
    pattern = build_category_pattern(legal_title_chars)

    def plugin(md: Any) -> None:
        md.inline.register(CATEGORY_RULE_NAME, pattern, parse_category, before=CATEGORY_RULE_BEFORE)

    return plugin


__all__ = [
    "CATEGORY_RULE_NAME",
    "CategoryCollector",
    "build_category_pattern",
    "category_plugin",
    "parse_category",
]
