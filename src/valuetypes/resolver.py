"""
Category resolution.

classify() maps every value to exactly one category name and never raises.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from valuetypes.categories import Category
from valuetypes.core.deprecation import deprecated
from valuetypes.core.logger import get_logger
from valuetypes.predicates import (
    is_alien,
    is_array,
    is_boolean,
    is_function,
    is_number,
    is_object,
    is_string,
    is_undefined,
)
from valuetypes.registry import CategoryRegistry, resolve_registry

logger = get_logger(__name__)

# Checked before any custom category.
_LEADING_CHECKS: Tuple[Tuple[Category, Callable[[Any], bool]], ...] = (
    (Category.ARRAY, is_array),
    (Category.FUNCTION, is_function),
    (Category.STRING, is_string),
    (Category.NUMBER, is_number),
    (Category.BOOLEAN, is_boolean),
    (Category.ALIEN, is_alien),
)

# Checked after every custom category.
_TRAILING_CHECKS: Tuple[Tuple[Category, Callable[[Any], bool]], ...] = (
    (Category.UNDEFINED, is_undefined),
    (Category.OBJECT, is_object),
)


@dataclass(frozen=True)
class Resolution:
    category: str
    error: Optional[BaseException] = None


def _resolve(value: Any, registry: CategoryRegistry) -> Resolution:
    try:
        for category, check in _LEADING_CHECKS:
            if check(value):
                return Resolution(category.value)
        for registration in registry.snapshot():
            if registration.predicate(value):
                return Resolution(registration.name)
        for category, check in _TRAILING_CHECKS:
            if check(value):
                return Resolution(category.value)
    except Exception as exc:
        return Resolution(Category.UNKNOWN.value, exc)
    return Resolution(Category.UNKNOWN.value)


def classify(value: Any, registry: Optional[CategoryRegistry] = None) -> str:
    """
    Return the category name of ``value``.

    Fixed categories are tested first (array, function, string, number,
    boolean, alien), then the custom categories of ``registry`` in
    registration order, then undefined and object. Anything left over, or any
    failure while testing, yields "unknown".

    Examples:
        >>> classify(42)
        'number'
        >>> classify("42")
        'string'
        >>> classify([1, 2])
        'array'
        >>> classify(UNDEFINED)
        'undefined'
    """
    resolution = _resolve(value, resolve_registry(registry))
    if resolution.error is not None:
        logger.debug(
            "Classification of %s value fell back to %r: %s: %s",
            type(value).__name__,
            resolution.category,
            type(resolution.error).__name__,
            resolution.error,
        )
    return resolution.category


def what_am_i(value: Any, registry: Optional[CategoryRegistry] = None) -> str:
    """Deprecated alias of classify()."""
    deprecated("what_am_i()", "use classify() instead", "0.5")
    return classify(value, registry)
