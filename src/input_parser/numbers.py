"""Loose numeric parsing for values that arrive as free text.

Exports
-------
number_literal
    Whole-string number literal → ``float`` (``None`` when it is not one).
    Blank text counts as ``0``; ``0x``/``0o``/``0b`` literals are accepted.

is_numeric_like
    ``True`` when ``number_literal`` accepts the text.

parse_int
    Leading base-10 integer prefix, ``None`` when there is none.

parse_float
    Best-effort float extraction that never raises.  Tolerates thousands
    separators, decimal commas and stray symbols::

        parse_float("1.2")         → 1.2
        parse_float("€ 1.234,56")  → 1234.56
        parse_float("$1,234.-")    → 1234.0
        parse_float("")            → 0.0
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any, Optional

logger = logging.getLogger(__name__)

# ─────────────────────────────────────────────────────────────────────────────
# Literal grammar
# ─────────────────────────────────────────────────────────────────────────────

_DECIMAL = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")
_RADIX_LITERAL = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
_INT_PREFIX = re.compile(r"[+-]?[0-9]+")
_NON_DIGIT = re.compile(r"[^0-9]")


def _to_float(number: int) -> float:
    try:
        return float(number)
    except OverflowError:
        return math.inf if number > 0 else -math.inf


def number_literal(text: str) -> Optional[float]:
    """Return *text* read as a single number literal, or ``None``.

    Surrounding whitespace is ignored and blank text reads as ``0.0``.
    Python-only spellings (``nan``, ``inf``, ``1_000``) are rejected.
    """
    stripped = text.strip()
    if not stripped:
        return 0.0
    if _RADIX_LITERAL.fullmatch(stripped):
        return _to_float(int(stripped, 0))
    if _DECIMAL.fullmatch(stripped):
        return float(stripped)
    return None


def is_numeric_like(text: str) -> bool:
    return number_literal(text) is not None


# ─────────────────────────────────────────────────────────────────────────────
# Integers
# ─────────────────────────────────────────────────────────────────────────────


def parse_int(param: Any) -> Optional[int]:
    """Parse the leading base-10 integer of ``str(param)``.

    ``"12abc"`` → 12, ``" -3.7"`` → -3, ``3.9`` → 3, ``"abc"`` → ``None``.
    Never raises.
    """
    try:
        match = _INT_PREFIX.match(str(param).lstrip())
    except Exception:
        logger.debug("parse_int could not read %r", param, exc_info=True)
        return None
    return int(match.group(0)) if match else None


# ─────────────────────────────────────────────────────────────────────────────
# Floats
# ─────────────────────────────────────────────────────────────────────────────


def _tolerant_float(text: str) -> float:
    """Every non-digit is a decimal-point candidate; the last group wins."""
    text = text.strip()
    if text[-1:] in (".", ","):
        text += "0"

    fragments = _NON_DIGIT.sub(".", text).split(".")
    if fragments[-1] == "":
        fragments[-1] = "0"
    fragments = [fragment for fragment in fragments if fragment != ""]

    decimal = fragments.pop() if len(fragments) > 1 else "0"
    value = number_literal("".join(fragments) + "." + decimal)
    return value if value is not None else 0.0


def parse_float(value: Any = "") -> float:
    """Extract a float from *value*, falling back to ``0.0``.

    Strings go through three stages, first hit wins:

    1. a leading decimal prefix (``"12.5kg"`` → 12.5), unless the whole text
       is a number literal, which takes precedence (``"0x1A"`` → 26.0 rather
       than the ``0`` prefix);
    2. the whole text as a number literal (``"  "`` → 0.0);
    3. tolerant extraction: every non-digit becomes a ``.``, empty groups
       are dropped, the last group is the fraction and the rest are joined
       into the integer part.

    Numbers are returned as ``float``; any other type yields ``0.0``.
    """
    if isinstance(value, (bool, int)):
        return _to_float(int(value))
    if isinstance(value, float):
        return value
    if not isinstance(value, str):
        return 0.0

    prefix = _DECIMAL.match(value.lstrip())
    whole = number_literal(value)
    if whole is not None:
        return whole
    if prefix:
        return float(prefix.group(0))

    return _tolerant_float(value)
