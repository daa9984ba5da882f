"""Text transforms: URL slugs and HTML → Markdown.

Both operations delegate the heavy lifting to third-party engines and only
adapt their configuration and output:

* ``slugify``     – python-slugify, after symbol spelling and the ``remove``
                    rule (applied with ``regex`` under a timeout).
* ``to_markdown`` – markdownify with ATX headings.

Exports
-------
DEFAULT_SLUG_RULE
    ``{"lowercase": True, "remove": r"[^\\w\\-]+"}``. Drops everything that is
    not a word character or a hyphen, so spaces vanish too::

        slugify("A String")                                   → "astring"
        slugify("A String", {"remove": None})                 → "a-string"
        slugify("Salt & Pepper", {"remove": None}, "e")       → "salt-e-pepper"

slugify
    Text → slug.  Raises ``InvalidInput`` for non-strings.

to_markdown
    HTML → Markdown, lowercased with the first character capitalised.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Mapping, Optional

import regex
from markdownify import ATX, MarkdownConverter
from slugify import slugify as _slugify

from .exceptions import InvalidInput

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Slugs
# ─────────────────────────────────────────────────────────────────────────────

DEFAULT_SEPARATOR = "-"

DEFAULT_SLUG_RULE: Mapping[str, Any] = {
    "lowercase": True,
    "remove": r"[^\w\-]+",
}

# Spelled out before the remove rule runs, so "&" survives as "and".
SLUG_SYMBOLS: Mapping[str, str] = {
    "&": "and",
    "$": "dollar",
    "%": "percent",
    "<": "less",
    ">": "greater",
    "|": "or",
    "¢": "cent",
    "£": "pound",
    "¤": "currency",
    "¥": "yen",
    "€": "euro",
}

# Seconds allowed for a caller-supplied remove pattern.
REMOVE_TIMEOUT = 2.0

# Characters python-slugify may replace. Underscores are word characters and
# survive, like everything else the remove rule keeps.
SLUG_DISALLOWED = r"[^-a-zA-Z0-9_]+"
SLUG_DISALLOWED_UNICODE = r"[^-\w]+"

_SYMBOL_TABLE = str.maketrans(dict(SLUG_SYMBOLS))


def _remove_pattern(remove: Any) -> Any:
    if isinstance(remove, re.Pattern):
        return remove.pattern
    return remove


def slugify(
        text: str,
        override_rule: Optional[Mapping[str, Any]] = None,
        and_operator: Optional[str] = None,
) -> str:
    """Transliterate *text* into a slug.

    Args:
        text:          Source text.
        override_rule: Shallow-merged over ``DEFAULT_SLUG_RULE``.  Recognised
                       keys are ``lowercase`` (or ``lower``), ``remove`` (a
                       pattern of characters to delete, ``None`` to keep
                       them) and ``replacement`` (the separator).  Other keys
                       go straight to python-slugify (``max_length``,
                       ``word_boundary``, ``stopwords``, ...).
        and_operator:  Replaces every literal ``-and-`` in the slug, e.g.
                       ``"e"`` turns ``salt-and-pepper`` into ``salt-e-pepper``.
                       Other separators are left alone (``salt_and_pepper``).

    Raises:
        InvalidInput: *text* is not a string.
    """
    if not isinstance(text, str):
        raise InvalidInput(text)

    try:
        rule = dict(DEFAULT_SLUG_RULE)
        if override_rule:
            rule.update(override_rule)

        lowercase = rule.pop("lowercase", True)
        lower = rule.pop("lower", None)
        if lower is not None:
            lowercase = lower
        remove = rule.pop("remove", None)
        separator = rule.pop("replacement", None)
        if separator is None:
            separator = DEFAULT_SEPARATOR

        source = text.translate(_SYMBOL_TABLE)
        if remove is not None:
            source = regex.sub(_remove_pattern(remove), "", source, timeout=REMOVE_TIMEOUT)

        if "regex_pattern" not in rule:
            rule["regex_pattern"] = (
                SLUG_DISALLOWED_UNICODE if rule.get("allow_unicode") else SLUG_DISALLOWED
            )

        slug = _slugify(source, separator=separator, lowercase=bool(lowercase), **rule)

        if and_operator:
            slug = slug.replace("-and-", f"-{and_operator}-")
        return slug
    except Exception as e:
        logger.error("slugify(%r) failed: %s", text, e)
        raise


# ─────────────────────────────────────────────────────────────────────────────
# Markdown
# ─────────────────────────────────────────────────────────────────────────────

MARKDOWN_OPTIONS: Mapping[str, Any] = {"heading_style": ATX}

# keep_strong=True: these stay as literal HTML ...
KEEP_STRONG_TAGS = ("strong", "a")
# ... and these are dropped, keeping their text as a separate block.
STRIPPED_TAGS = ("h1", "h2", "h3", "p")


class KeepTagsConverter(MarkdownConverter):
    """``MarkdownConverter`` that emits selected inline tags as raw HTML.

    Block tags listed in *unwrap* lose their markup but still end with a blank
    line, so neighbouring blocks never run together.
    """

    def __init__(self, keep=(), unwrap=(), **options):
        super().__init__(**options)
        self.keep = frozenset(keep)
        self.unwrap = frozenset(unwrap)

    @staticmethod
    def _block(text):
        return f"{text.strip()}\n\n"

    def convert_strong(self, el, text, *args, **kwargs):
        if "strong" in self.keep:
            return str(el)
        return super().convert_strong(el, text, *args, **kwargs)

    def convert_a(self, el, text, *args, **kwargs):
        if "a" in self.keep:
            return str(el)
        return super().convert_a(el, text, *args, **kwargs)

    def convert_p(self, el, text, *args, **kwargs):
        if "p" in self.unwrap:
            return self._block(text)
        return super().convert_p(el, text, *args, **kwargs)

    # markdownify >= 1.0 routes <hN> through _convert_hn, older releases
    # through convert_hn.
    def _convert_hn(self, n, el, text, *args, **kwargs):
        if f"h{n}" in self.unwrap:
            return self._block(text)
        return super()._convert_hn(n, el, text, *args, **kwargs)

    def convert_hn(self, n, el, text, *args, **kwargs):
        if f"h{n}" in self.unwrap:
            return self._block(text)
        return super().convert_hn(n, el, text, *args, **kwargs)


def _capitalize_first(text: str) -> str:
    return text[:1].upper() + text[1:]


def to_markdown(html: Any, keep_strong: bool = False) -> Any:
    """Convert *html* to Markdown.

    Non-string input is returned unchanged.  With *keep_strong*, ``<strong>``
    and ``<a>`` survive as literal HTML and ``<h1>``–``<h3>``/``<p>`` tags are
    dropped.  The output is lowercased and then its first character is
    upper-cased::

        to_markdown("<h1>Hello World</h1>")                → "# hello world"
        to_markdown("<p>Go <strong>NOW</strong></p>", True) → "Go <strong>now</strong>"
    """
    if not isinstance(html, str):
        return html

    try:
        options = dict(MARKDOWN_OPTIONS)
        keep = unwrap = ()
        if keep_strong:
            keep = KEEP_STRONG_TAGS
            unwrap = STRIPPED_TAGS

        markdown = KeepTagsConverter(keep=keep, unwrap=unwrap, **options).convert(html)
        markdown = markdown.lstrip("\t\r\n").rstrip().lower()
        return _capitalize_first(markdown)
    except Exception as e:
        logger.error("to_markdown failed: %s", e)
        raise
