"""Runtime value helpers for Tox.

Tox values map directly onto Python objects: `None` is nil, `bool` is a
boolean, `float` is a number, `str` is a string and callables are
`ToxCallable` instances. This module holds the rules that give those
objects their Tox meaning: truthiness, equality, text form and type names.
"""

from __future__ import annotations

import math
from typing import Any

from .callables import NativeFunction, ToxCallable, UserFunction


def is_number(value: Any) -> bool:
    # bool is a subclass of int; it is not a Tox number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_truthy(value: Any) -> bool:
    """nil and false are falsy; every other value, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: Any, b: Any) -> bool:
    """Plain value equality.

    nil equals only nil. Booleans never equal numbers, and callables are
    equal only to themselves.
    """
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if isinstance(a, bool) != isinstance(b, bool):
        return False
    if isinstance(a, ToxCallable) or isinstance(b, ToxCallable):
        return a is b
    return a == b


def divide(a: float, b: float) -> float:
    """IEEE-754 division: dividing by zero gives an infinity or NaN."""
    try:
        return a / b
    except ZeroDivisionError:
        if a == 0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)


def to_string(value: Any) -> str:
    """Return the text form `log` prints for a value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if is_number(value):
        if math.isfinite(value) and float(value).is_integer() and abs(value) < 1e21:
            return str(int(value))
        return repr(float(value))
    return str(value)


def type_name(value: Any) -> str:
    """Return the Tox type name of a runtime value."""
    if value is None:
        return 'nil'
    if isinstance(value, bool):
        return 'boolean'
    if is_number(value):
        return 'number'
    if isinstance(value, str):
        return 'string'
    if isinstance(value, UserFunction):
        return 'function'
    if isinstance(value, NativeFunction):
        return 'native function'
    return type(value).__name__
