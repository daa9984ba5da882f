"""Errors raised by the public parsing and text-transform helpers.

Only the dispatcher (``parse``) and ``slugify`` raise these.  Converter
functions never raise for unexpected input shapes; they hand the value back
unchanged (or ``None``) instead.

``InvalidTypeTag`` and ``InvalidInput`` also derive from ``TypeError`` and
``UnsupportedType`` from ``ValueError``, so callers that already catch the
builtin errors keep working.
"""

from __future__ import annotations

from typing import Any


class ParserError(Exception):
    """Base class for every error raised by ``input_parser``."""
    pass


class InvalidTypeTag(ParserError, TypeError):
    """``parse`` was called with a type tag that is not a string."""

    def __init__(self, type_tag: Any) -> None:
        self.type_tag = type_tag
        super().__init__(
            f"Type tag must be a string, got {type(type_tag).__name__}: {type_tag!r}"
        )


class UnsupportedType(ParserError, ValueError):
    """``parse`` was called with a type tag that has no converter.

    Attributes:
        type_tag: The offending tag.
    """

    def __init__(self, type_tag: str, available=()) -> None:
        self.type_tag = type_tag
        message = f"Parse function not yet implemented for the type: {type_tag!r}"
        if available:
            message += f". Available types: {sorted(available)}"
        super().__init__(message)


class InvalidInput(ParserError, TypeError):
    """A text transform received something other than a string."""

    def __init__(self, value: Any, operation: str = "slugify") -> None:
        self.value = value
        super().__init__(
            f"{operation} can not be generated from {value!r}: "
            f"expected str, got {type(value).__name__}"
        )
