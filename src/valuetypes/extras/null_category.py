from __future__ import annotations

from typing import Any

from valuetypes.registry import register_category


@register_category("null")
def is_null_value(value: Any) -> bool:
    return value is None
