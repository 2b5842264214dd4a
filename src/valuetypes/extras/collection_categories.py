from __future__ import annotations

from typing import Any

from valuetypes.registry import register_category


@register_category("bytes")
def is_binary(value: Any) -> bool:
    return isinstance(value, (bytes, bytearray, memoryview))


@register_category("set")
def is_set(value: Any) -> bool:
    return isinstance(value, (set, frozenset))
