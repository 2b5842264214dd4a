"""
Dotted path lookup against a root namespace.

    resolve_path("os.path.sep")          # -> "/" once os is imported
    path_exists("json.decoder.JSONDecodeError")

Lookups never import anything and never raise for missing segments.
"""

from __future__ import annotations

import builtins
import sys
from collections.abc import Mapping
from typing import Any, Optional

from valuetypes.core.sentinels import UNDEFINED


class GlobalNamespace:
    """Process namespace: imported modules first, then builtins."""

    def get(self, name: str, default: Any = UNDEFINED) -> Any:
        module = sys.modules.get(name)
        if module is not None:
            return module
        return vars(builtins).get(name, default)

    def __repr__(self) -> str:
        return "<GlobalNamespace>"


GLOBAL_NAMESPACE = GlobalNamespace()


def _lookup(obj: Any, segment: str) -> Any:
    try:
        if isinstance(obj, (Mapping, GlobalNamespace)):
            return obj.get(segment, UNDEFINED)
        return getattr(obj, segment, UNDEFINED)
    except Exception:
        # Failing properties and __getattr__ hooks count as missing.
        return UNDEFINED


def _truthy(obj: Any) -> bool:
    try:
        return bool(obj)
    except Exception:
        # Objects with ambiguous truth (e.g. arrays) still exist.
        return True


def _walk(path: str, root: Any) -> tuple[Any, bool]:
    """Return the last value reached and whether every segment was visited."""
    parts = path.split(".")
    obj = root
    for index, segment in enumerate(parts):
        obj = _lookup(obj, segment)
        if not _truthy(obj) and index < len(parts) - 1:
            return obj, False
    return obj, True


def resolve_path(path: str, root: Optional[Any] = None) -> Any:
    """
    Return the object named by a dot-separated ``path``, or None.

    None is returned when an intermediate segment is missing or falsy, when
    the last segment is missing, or when the path leads back to ``root``.
    """
    root = GLOBAL_NAMESPACE if root is None else root
    obj, complete = _walk(path, root)
    if not complete or obj is UNDEFINED or obj is root:
        return None
    return obj


def path_exists(path: str, root: Optional[Any] = None) -> bool:
    """Return ``True`` if ``path`` resolves to a truthy value other than ``root``."""
    root = GLOBAL_NAMESPACE if root is None else root
    obj, _ = _walk(path, root)
    return _truthy(obj) and obj is not root
