from __future__ import annotations

from enum import Enum
from typing import FrozenSet


class Category(str, Enum):
    """Fixed category names returned by classify()."""

    ARRAY = "array"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    ALIEN = "alien"
    UNDEFINED = "undefined"
    OBJECT = "object"
    UNKNOWN = "unknown"

    def __str__(self) -> str:
        return self.value


FIXED_CATEGORY_NAMES: FrozenSet[str] = frozenset(c.value for c in Category)


def is_fixed_category(name: str) -> bool:
    return name in FIXED_CATEGORY_NAMES
