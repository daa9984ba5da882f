"""input_parser: permissive coercion of untyped input values.

Public API::

    from input_parser import Parser, parse, parse_float, slugify

    parse("boolean", "true")       # True
    parse_float("€ 1.234,56")      # 1234.56
    slugify("A String")            # "astring"
"""

from .converters import (
    BUILTIN_CONVERTERS,
    boolean_parser,
    float_parser,
    load_parser,
    number_parser,
    object_parser,
    parse,
    string_parser,
)
from .core import Parser
from .exceptions import InvalidInput, InvalidTypeTag, ParserError, UnsupportedType
from .numbers import is_numeric_like, number_literal, parse_float, parse_int
from .predicates import is_empty_param, is_not_empty
from .text import DEFAULT_SLUG_RULE, slugify, to_markdown

__all__ = [
    # facade
    "Parser",
    # predicates
    "is_empty_param",
    "is_not_empty",
    # scalars
    "parse_int",
    "parse_float",
    "number_literal",
    "is_numeric_like",
    # dispatch
    "BUILTIN_CONVERTERS",
    "parse",
    "load_parser",
    "boolean_parser",
    "string_parser",
    "number_parser",
    "object_parser",
    "float_parser",
    # text
    "DEFAULT_SLUG_RULE",
    "slugify",
    "to_markdown",
    # errors
    "ParserError",
    "InvalidTypeTag",
    "UnsupportedType",
    "InvalidInput",
]
