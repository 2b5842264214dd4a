import array
import math
from collections import OrderedDict, UserString, deque
from datetime import date
from decimal import Decimal
from fractions import Fraction

from valuetypes.core.sentinels import UNDEFINED
from valuetypes.predicates import (
    is_alien,
    is_array,
    is_boolean,
    is_builtin,
    is_function,
    is_number,
    is_numeric,
    is_object,
    is_pure_object,
    is_string,
    is_undefined,
)


class Point:
    def __init__(self, x, y):
        self.x = x
        self.y = y


class SlottedPoint:
    __slots__ = ("x", "y")


def test_numeric_accepts_numbers_and_numeric_strings():
    assert is_numeric(3)
    assert is_numeric(3.5)
    assert is_numeric("3")
    assert is_numeric(" 3 ")
    assert is_numeric("1e3")
    assert is_numeric(UserString("3"))
    assert is_numeric(Decimal("3"))
    assert is_numeric(Fraction(1, 3))


def test_numeric_rejects_non_finite_blank_and_boolean_values():
    assert not is_numeric("")
    assert not is_numeric("   ")
    assert not is_numeric(True)
    assert not is_numeric(False)
    assert not is_numeric(float("inf"))
    assert not is_numeric(math.nan)
    assert not is_numeric(Decimal("NaN"))
    assert not is_numeric("foo")
    assert not is_numeric(None)
    assert not is_numeric(UNDEFINED)
    assert not is_numeric([3])
    assert not is_numeric(10 ** 400)
    assert not is_numeric(1j)


def test_number_excludes_bool_but_keeps_nan():
    assert is_number(0)
    assert is_number(float("nan"))
    assert is_number(Decimal("1.5"))
    assert not is_number(True)
    assert not is_number("1")


def test_base_predicates():
    assert is_array([1, 2]) and is_array((1, 2))
    assert not is_array("12")
    assert is_function(len) and is_function(lambda: None) and is_function(Point)
    assert not is_function(Point(1, 2))
    assert is_string("a") and is_string(UserString("a"))
    assert not is_string(b"a")
    assert is_boolean(False)
    assert not is_boolean(0)
    assert is_undefined(UNDEFINED)
    assert not is_undefined(None)


def test_object_covers_composites_only():
    assert is_object({})
    assert is_object([1])
    assert is_object(len)
    assert is_object(Point(1, 2))
    assert not is_object(None)
    assert not is_object(UNDEFINED)
    assert not is_object("s")
    assert not is_object(1)
    assert not is_object(True)


def test_builtin_covers_literals_exceptions_and_absent_values():
    assert is_builtin([1])
    assert is_builtin(print)
    assert is_builtin("s")
    assert is_builtin(2)
    assert is_builtin(False)
    assert is_builtin(None)
    assert is_builtin(UNDEFINED)
    assert is_builtin(ValueError("boom"))
    assert not is_builtin({"a": 1})
    assert not is_builtin(Point(1, 2))


def test_pure_object_requires_exact_base_type():
    assert is_pure_object({"a": 1, "b": 2})
    assert is_pure_object(object())
    assert not is_pure_object(OrderedDict())
    assert not is_pure_object(date(2024, 1, 1))
    assert not is_pure_object([11, 2, 3])
    assert not is_pure_object(Point(1, 2))
    assert not is_pure_object(None)


def test_alien_detects_natively_implemented_instances():
    assert is_alien(array.array("i", [1, 2]))
    assert is_alien(deque([1]))


def test_alien_excludes_python_classes_and_builtin_vocabulary():
    assert not is_alien(Point(1, 2))
    assert not is_alien(SlottedPoint())
    assert not is_alien(object())
    assert not is_alien({"a": 1})
    assert not is_alien(OrderedDict())
    assert not is_alien([1])
    assert not is_alien("s")
    assert not is_alien(None)
    assert not is_alien(UNDEFINED)
    assert not is_alien(b"bytes")


class FailingFloat:
    def __float__(self):
        raise RuntimeError("no float for you")


def test_numeric_absorbs_any_coercion_failure():
    assert is_numeric(FailingFloat()) is False


def test_numeric_strings_follow_float_grammar():
    assert is_numeric("1_000")
    assert is_numeric("-2.5e-3")
    assert not is_numeric("0x10")
