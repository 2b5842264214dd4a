"""
Classification predicates.

Each predicate answers one question about a value and never raises for
ordinary inputs. classify() and matches() are both built on top of them.
"""

from __future__ import annotations

import math
import numbers
from collections import UserString
from collections.abc import Mapping
from typing import Any

from valuetypes.core.sentinels import UNDEFINED

__all__ = [
    "is_alien",
    "is_array",
    "is_boolean",
    "is_builtin",
    "is_function",
    "is_null",
    "is_numeric",
    "is_number",
    "is_object",
    "is_pure_object",
    "is_string",
    "is_undefined",
]

_PURE_OBJECT_TYPES = (dict, object)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_function(value: Any) -> bool:
    """Return ``True`` for anything callable, classes included."""
    return callable(value)


def is_string(value: Any) -> bool:
    return isinstance(value, (str, UserString))


def is_number(value: Any) -> bool:
    """Return ``True`` for numbers, including NaN and infinities, but not bools."""
    return isinstance(value, numbers.Number) and not isinstance(value, bool)


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_null(value: Any) -> bool:
    return value is None


def _declares_slots(cls: type) -> bool:
    return any("__slots__" in vars(klass) for klass in cls.__mro__ if klass is not object)


def is_alien(value: Any) -> bool:
    """
    Return ``True`` for instances of natively implemented types from outside ``builtins``.

    These are objects handed to Python code by compiled extension modules
    (``array.array``, ``collections.deque``, the C ``datetime`` types, ...):
    they are not part of the built-in value vocabulary, yet they were not
    constructed from a Python-level class either. Python classes always give
    their instances a ``__dict__`` unless they declare ``__slots__``, so an
    instance with neither comes from native code.

    The answer depends on how the running interpreter implements a type; on an
    interpreter without native extension types this category is always empty.
    """
    if (
        is_array(value)
        or is_function(value)
        or is_string(value)
        or is_number(value)
        or is_boolean(value)
        or value is None
        or isinstance(value, Mapping)
    ):
        return False
    cls = type(value)
    if cls.__module__ == "builtins":
        return False
    return not hasattr(value, "__dict__") and not _declares_slots(cls)


def is_object(value: Any) -> bool:
    """
    Return ``True`` for composite values.

    Arrays and callables are composites too; None, UNDEFINED and the scalar
    kinds (string, number, boolean) are not.
    """
    if value is None or value is UNDEFINED:
        return False
    return not (is_string(value) or is_number(value) or is_boolean(value))


def is_numeric(value: Any) -> bool:
    """
    Return ``True`` for values that commonly represent numbers.

    Examples:
        >>> is_numeric(3)
        True
        >>> is_numeric("3")
        True
        >>> is_numeric(Decimal("3"))
        True
        >>> is_numeric(float("inf"))
        False
        >>> is_numeric("foo")
        False
        >>> is_numeric("  ")
        False
        >>> is_numeric(True)
        False

    Strings follow the grammar of ``float()``: "1_000" and "1e3" count,
    hexadecimal literals such as "0x10" do not. A value whose ``__float__``
    fails for any reason is not numeric.
    """
    if value is None or value is UNDEFINED or is_boolean(value) or is_array(value):
        return False
    if is_string(value) and not str(value).strip():
        return False
    try:
        coerced = float(value)
    except Exception:
        return False
    return math.isfinite(coerced)


def is_builtin(value: Any) -> bool:
    """
    Return ``True`` for any literal, and for instances of the built-in value
    kinds (array, function, string, number, boolean) or of an exception type.
    None and UNDEFINED count as built-in as well.
    """
    return (
        is_array(value)
        or is_function(value)
        or is_string(value)
        or is_number(value)
        or is_boolean(value)
        or value is None
        or value is UNDEFINED
        or isinstance(value, BaseException)
    )


def is_pure_object(value: Any) -> bool:
    """
    Return ``True`` for composite values built directly from ``dict`` or ``object``.

    Examples:
        >>> is_pure_object({"a": 1, "b": 2})
        True
        >>> is_pure_object(object())
        True
        >>> is_pure_object(datetime.now())
        False
        >>> is_pure_object([11, 2, 3])
        False
        >>> is_pure_object(OrderedDict())
        False
    """
    return value is not None and is_object(value) and type(value) in _PURE_OBJECT_TYPES
