"""Presence checks for raw request parameters.

Both helpers only ever treat strings as "present".  Anything else, including
non-zero numbers, counts as empty.
"""

from __future__ import annotations

from typing import Any, Union

# Placeholder values that front-ends send for "nothing selected".
EMPTY_MARKERS = ("-1", "undefined")


def is_empty_param(param: Any) -> bool:
    """``True`` when *param* is falsy, not a ``str``, or an empty marker.

    ::

        is_empty_param("")           # True
        is_empty_param("-1")         # True
        is_empty_param(" undefined") # True
        is_empty_param(1)            # True  (not a string)
        is_empty_param("1")          # False
    """
    return (
        not param
        or not isinstance(param, str)
        or param.strip() in EMPTY_MARKERS
    )


def is_not_empty(param: Any) -> Union[bool, Any]:
    """``True`` for a non-blank string.

    A falsy *param* is returned as-is rather than ``False`` (``""`` gives
    ``""``, ``None`` gives ``None``), so compare with ``is True`` when the
    distinction matters.
    """
    if not param:
        return param
    return isinstance(param, str) and param.strip() != ""
