"""Type-tag converters and the ``parse`` dispatcher.

Each ``*_parser`` factory returns a one-argument converter that pushes an
untyped value toward its target type.  Converters never raise: input they do
not understand is handed back unchanged (``object`` hands back ``None``).

Exports
-------
BUILTIN_CONVERTERS
    Read-only mapping of type tag → converter.
    Tags: boolean, string, number, object, float.

load_parser
    Fresh, caller-owned ``dict`` copy of ``BUILTIN_CONVERTERS``.

parse
    ``parse(type_tag, value)``: look up the converter and apply it::

        parse("boolean", " true ")   → True
        parse("number", "3.14")      → 3.14
        parse("object", '{"a": 1}')  → {"a": 1}
        parse("float", "$1,234.-")   → 1234.0
        parse("string", {"a": 1})    → '{"a":1}'
"""

from __future__ import annotations

import json
import logging
import math
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping

from .exceptions import InvalidTypeTag, UnsupportedType
from .numbers import is_numeric_like, parse_float

logger = logging.getLogger(__name__)

Converter = Callable[[Any], Any]

TRUE_STRINGS = ("true", "1")
FALSE_STRINGS = ("false", "0")

# Values treated as JSON objects/arrays by the string and object converters.
OBJECT_TYPES = (Mapping, list, tuple)

# ─────────────────────────────────────────────────────────────────────────────
# Helpers
# ─────────────────────────────────────────────────────────────────────────────


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _format_number(value: Any) -> str:
    """Render a number the way a JSON front-end prints it (``1.0`` → ``"1"``)."""
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def _loads(text: str) -> Any:
    """Strict JSON decode; ``None`` when *text* is malformed."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        logger.debug("Could not decode %r as JSON: %s", text, e)
        return None


def _to_json(value: Any) -> str:
    if isinstance(value, Mapping) and not isinstance(value, dict):
        value = dict(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


# ─────────────────────────────────────────────────────────────────────────────
# Converter factories
# ─────────────────────────────────────────────────────────────────────────────


def boolean_parser() -> Converter:
    """``"true"``/``"1"``/``1`` → ``True``, ``"false"``/``"0"``/``0`` → ``False``."""

    def convert(value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return value

        if _is_number(value):
            if value == 1:
                return True
            if value == 0:
                return False
            return value

        if isinstance(value, str):
            text = value.strip()
            if text in TRUE_STRINGS:
                return True
            if text in FALSE_STRINGS:
                return False

        return value

    return convert


def string_parser() -> Converter:
    """Strings are trimmed, numbers stringified, dicts and lists JSON-encoded."""

    def convert(value: Any) -> Any:
        if value is None:
            return value
        if isinstance(value, str):
            return value.strip()
        if _is_number(value):
            return _format_number(value)
        if isinstance(value, OBJECT_TYPES):
            return _to_json(value)
        return value

    return convert


def number_parser() -> Converter:
    """Numeric-looking strings are decoded as JSON numbers.

    A string that looks numeric but is not a JSON number (``"0x1A"``,
    ``".5"``, ``"Infinity"``) becomes ``None``.
    """

    def convert(value: Any) -> Any:
        if value is None or _is_number(value):
            return value
        if isinstance(value, str) and value.strip() != "" and is_numeric_like(value):
            return _loads(value)
        return value

    return convert


def object_parser() -> Converter:
    """Non-numeric strings are decoded as JSON; anything unparseable is ``None``."""

    def convert(value: Any) -> Any:
        if value is None or isinstance(value, OBJECT_TYPES):
            return value
        if isinstance(value, str) and value.strip() != "" and not is_numeric_like(value):
            return _loads(value)
        return None

    return convert


def float_parser() -> Converter:
    """Falsy values read as ``0``; everything else goes through ``parse_float``."""

    def convert(value: Any) -> float:
        if not value or (isinstance(value, float) and math.isnan(value)):
            value = "0"
        return parse_float(value)

    return convert


# ─────────────────────────────────────────────────────────────────────────────
# Dispatch
# ─────────────────────────────────────────────────────────────────────────────

BUILTIN_CONVERTERS: Mapping[str, Converter] = MappingProxyType({
    "boolean": boolean_parser(),
    "string": string_parser(),
    "number": number_parser(),
    "object": object_parser(),
    "float": float_parser(),
})


def load_parser() -> Dict[str, Converter]:
    """Return a new ``{type_tag: converter}`` dict.

    The copy belongs to the caller; changing it does not affect ``parse``.
    """
    return dict(BUILTIN_CONVERTERS)


def parse(type_tag: str, value: Any) -> Any:
    """Convert *value* with the converter registered for *type_tag*.

    Raises:
        InvalidTypeTag: *type_tag* is not a string.
        UnsupportedType: no converter exists for *type_tag*.
    """
    try:
        if not isinstance(type_tag, str):
            raise InvalidTypeTag(type_tag)

        converter = BUILTIN_CONVERTERS.get(type_tag)
        if converter is None:
            raise UnsupportedType(type_tag, BUILTIN_CONVERTERS.keys())

        return converter(value)
    except Exception as e:
        logger.error("parse(%r) failed: %s", type_tag, e)
        raise
