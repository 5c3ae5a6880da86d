"""Runtime values for Viet.

Viet has three kinds of runtime value, represented directly by Python
objects: numbers are ``float``, text is ``str`` and booleans are ``bool``.
``None`` stands for an absent value. This module holds the helpers the
interpreter uses to classify, compare, test and display those values.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Union

Value = Union[float, str, bool]

TRUE_KEYWORD = 'đúng'
FALSE_KEYWORD = 'sai'

EXACT_INTEGER_LIMIT = 1e16


def is_number(value: Any) -> bool:
    # bool is a subclass of int, so test the exact type
    return type(value) is float


def type_name(value: Optional[Value]) -> str:
    """Return the Viet kind name of a runtime value."""
    if value is None:
        return 'absent'
    if isinstance(value, bool):
        return 'boolean'
    if isinstance(value, float):
        return 'number'
    if isinstance(value, str):
        return 'text'
    return type(value).__name__


def format_number(value: float) -> str:
    if math.isnan(value):
        return 'NaN'
    if math.isinf(value):
        return 'Infinity' if value > 0 else '-Infinity'
    # Whole numbers print without a fraction only while every digit is exact
    if value.is_integer() and abs(value) < EXACT_INTEGER_LIMIT:
        return str(int(value))
    return repr(value)


def to_display(value: Optional[Value]) -> str:
    """Convert a Viet value to the text `in` prints for it.

    Booleans use the language's own keywords rather than Python's
    ``True``/``False``; whole numbers print without a fractional part.
    """
    if isinstance(value, bool):
        return TRUE_KEYWORD if value else FALSE_KEYWORD
    if isinstance(value, float):
        return format_number(value)
    if isinstance(value, str):
        return value
    if value is None:
        return 'absent'
    return str(value)


def is_truthy(value: Optional[Value]) -> bool:
    # Only absent and false are falsy; 0 and "" are true
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def values_equal(a: Optional[Value], b: Optional[Value]) -> bool:
    """Strict equality: values of different kinds are never equal."""
    if type_name(a) != type_name(b):
        return False
    return a == b
