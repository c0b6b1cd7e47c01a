#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/markdownpages/constants.py
"""Constants and default values for markdownpages.

Most defaults mirror the configuration of a stock wiki installation so that
the reference collaborators classify titles and URLs the same way the wiki's
own parser does.
"""

from __future__ import annotations

from typing import Literal

# =========================================================================
# Wiki configuration defaults
# =========================================================================

# Character class (regex class body, without brackets) of the characters the
# wiki allows in page titles. The wiki's byte-oriented class ``\x80-\xFF``
# covers every UTF-8 lead/continuation byte; on ``str`` that is every
# non-ASCII code point.
DEFAULT_LEGAL_TITLE_CHARS = r" %!\"$&'()*,\-./0-9:;=?@A-Z\\^_`a-z~\u0080-\U0010ffff+"

# Protocols accepted for external links, in the wiki's default order.
DEFAULT_URL_PROTOCOLS: tuple[str, ...] = (
    "bitcoin:",
    "ftp://",
    "ftps://",
    "geo:",
    "git://",
    "gopher://",
    "http://",
    "https://",
    "irc://",
    "ircs://",
    "magnet:",
    "mailto:",
    "matrix:",
    "mms://",
    "news:",
    "nntp://",
    "redis://",
    "sftp://",
    "sip:",
    "sips:",
    "sms:",
    "ssh://",
    "svn://",
    "tel:",
    "telnet://",
    "urn:",
    "worldwind://",
    "xmpp:",
    "//",
)

NS_MEDIA = -2
NS_SPECIAL = -1
NS_MAIN = 0
NS_FILE = 6
NS_CATEGORY = 14

# Canonical namespace names (spaces, not underscores) to namespace ids.
DEFAULT_NAMESPACES: dict[str, int] = {
    "Media": NS_MEDIA,
    "Special": NS_SPECIAL,
    "Talk": 1,
    "User": 2,
    "User talk": 3,
    "Project": 4,
    "Project talk": 5,
    "File": NS_FILE,
    "File talk": 7,
    "MediaWiki": 8,
    "MediaWiki talk": 9,
    "Template": 10,
    "Template talk": 11,
    "Help": 12,
    "Help talk": 13,
    "Category": NS_CATEGORY,
    "Category talk": 15,
}

DEFAULT_NAMESPACE_ALIASES: dict[str, int] = {
    "Image": NS_FILE,
    "Image talk": 7,
}

DEFAULT_CAPITAL_LINKS = True
DEFAULT_ARTICLE_PATH = "/wiki/$1"
DEFAULT_SCRIPT_PATH = "/w/index.php"
DEFAULT_WRAPPER_CLASS = "mw-parser-output"
DEFAULT_BROKEN_FILE_CATEGORY: str | None = None

# Maximum length of a title's database key, in UTF-8 bytes.
MAX_TITLE_BYTES = 255

# =========================================================================
# Markdown parsing and HTML rendering defaults
# =========================================================================

HtmlInputMode = Literal["escape", "strip"]
HTML_INPUT_MODES: tuple[str, ...] = ("escape", "strip")

DEFAULT_HTML_INPUT: HtmlInputMode = "escape"
DEFAULT_ALLOW_UNSAFE_LINKS = False
DEFAULT_AUTOLINK_BARE_URLS = True
DEFAULT_EXTERNAL_LINK_CLASS = "external"
DEFAULT_EXTERNAL_LINK_REL = "noopener noreferrer"
DEFAULT_GENERATE_HTML = True

# Priority of the category rule among mistune's inline rules: it is inserted
# ahead of this rule so that ``[[Category:...]]`` is matched as a unit before
# the bracket grammar sees the opening ``[``.
CATEGORY_RULE_BEFORE = "link"

# Key under which the per-parse category collector is bound in mistune's env.
CATEGORY_ENV_KEY = "markdownpages_categories"

# =========================================================================
# Link safety
# =========================================================================

# Targets the link renderer refuses to emit, matched case-insensitively at the
# start of the URL; data: URLs are allowed only for these raster image types.
UNSAFE_LINK_PROTOCOLS: tuple[str, ...] = ("javascript:", "vbscript:", "file:", "data:")
SAFE_DATA_PROTOCOLS: tuple[str, ...] = (
    "data:image/png",
    "data:image/gif",
    "data:image/jpeg",
    "data:image/webp",
)
