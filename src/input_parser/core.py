"""``Parser``: every helper of the package behind one namespace.

The class carries no state; each attribute is the module-level function
re-exposed as a ``staticmethod`` so callers can write
``Parser.parse("float", raw)`` without importing individual helpers.
"""

from __future__ import annotations

from . import converters, numbers, predicates, text


class Parser:
    """Static namespace for the parsing and text-transform helpers."""

    # Predicates
    is_empty_param = staticmethod(predicates.is_empty_param)
    is_not_empty = staticmethod(predicates.is_not_empty)

    # Scalars
    parse_int = staticmethod(numbers.parse_int)
    parse_float = staticmethod(numbers.parse_float)

    # Dispatch
    parse = staticmethod(converters.parse)
    load_parser = staticmethod(converters.load_parser)
    boolean_parser = staticmethod(converters.boolean_parser)
    string_parser = staticmethod(converters.string_parser)
    number_parser = staticmethod(converters.number_parser)
    object_parser = staticmethod(converters.object_parser)
    float_parser = staticmethod(converters.float_parser)

    # Text
    slugify = staticmethod(text.slugify)
    to_markdown = staticmethod(text.to_markdown)
