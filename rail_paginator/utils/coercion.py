"""
Type coercion utilities for Rail Paginator.

Page numbers and page sizes usually arrive as query-string values, so they
are coerced instead of validated.
"""

from typing import Any, Optional


def coerce_int(value: Any, default: Optional[int] = 0) -> Optional[int]:
    """
    Coerce a value to an integer.

    Examples:
        >>> coerce_int("42")
        42
        >>> coerce_int(None, default=10)
        10
        >>> coerce_int("invalid", default=0)
        0
    """
    if value is None or isinstance(value, bool):
        return default
    try:
        return int(value)
    except (ValueError, TypeError):
        return default


def coerce_page_number(value: Any) -> int:
    """
    Coerce a requested page number; anything below 1 or unparsable is page 1.

    Examples:
        >>> coerce_page_number("3")
        3
        >>> coerce_page_number("-2")
        1
        >>> coerce_page_number("abc")
        1
    """
    number = coerce_int(value, default=1)
    return number if number >= 1 else 1


def coerce_bool(value: Any, default: bool = False) -> bool:
    """
    Coerce a value to a boolean.

    Examples:
        >>> coerce_bool("true")
        True
        >>> coerce_bool(None, default=False)
        False
    """
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() in ("true", "1", "yes", "on")
    return bool(value)
