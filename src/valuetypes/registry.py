from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional, Tuple

from valuetypes.categories import is_fixed_category
from valuetypes.core.exceptions import CategoryRegistryError
from valuetypes.core.logger import get_logger

logger = get_logger(__name__)

CategoryPredicate = Callable[[Any], bool]


@dataclass(frozen=True)
class CategoryRegistration:
    name: str
    predicate: CategoryPredicate


class CategoryRegistry:
    """
    Ordered mapping of custom category names to predicates.

    classify() consults registrations in insertion order after the fixed
    categories. Registering an existing name replaces its predicate but keeps
    its position. Writes are serialized by a lock; readers work on an
    immutable snapshot so a registration made mid-classification cannot
    change the order being walked.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._registry: Dict[str, CategoryPredicate] = {}
        self._snapshot: Tuple[CategoryRegistration, ...] = ()

    def _refresh_snapshot(self) -> None:
        self._snapshot = tuple(
            CategoryRegistration(name=name, predicate=predicate)
            for name, predicate in self._registry.items()
        )

    def register(self, name: str, predicate: CategoryPredicate) -> None:
        if not isinstance(name, str) or not name:
            raise CategoryRegistryError(f"Category name must be a non-empty string, got {name!r}")
        if not callable(predicate):
            raise CategoryRegistryError(f"Predicate for category {name!r} must be callable: {predicate!r}")
        if is_fixed_category(name):
            logger.warning(
                "Custom category %r shadows a fixed category name; fixed categories are checked first",
                name,
            )
        with self._lock:
            replaced = name in self._registry
            self._registry[name] = predicate
            self._refresh_snapshot()
        logger.debug("%s custom category %r", "Replaced" if replaced else "Registered", name)

    def unregister(self, name: str) -> None:
        with self._lock:
            try:
                del self._registry[name]
            except KeyError as exc:
                raise CategoryRegistryError(f"No custom category registered for name={name!r}") from exc
            self._refresh_snapshot()
        logger.debug("Unregistered custom category %r", name)

    def get(self, name: str) -> CategoryPredicate:
        try:
            return self._registry[name]
        except KeyError as exc:
            raise CategoryRegistryError(f"No custom category registered for name={name!r}") from exc

    def try_get(self, name: str) -> Optional[CategoryPredicate]:
        return self._registry.get(name)

    def snapshot(self) -> Tuple[CategoryRegistration, ...]:
        return self._snapshot

    def names(self) -> Tuple[str, ...]:
        return tuple(reg.name for reg in self._snapshot)

    def clear(self) -> None:
        with self._lock:
            self._registry.clear()
            self._refresh_snapshot()

    def __contains__(self, name: object) -> bool:
        return name in self._registry

    def __len__(self) -> int:
        return len(self._snapshot)


# Process-wide registry used when callers do not pass one explicitly.
default_registry = CategoryRegistry()


def resolve_registry(registry: Optional[CategoryRegistry]) -> CategoryRegistry:
    return default_registry if registry is None else registry


def register_category(
    name: str,
    predicate: Optional[CategoryPredicate] = None,
    *,
    registry: Optional[CategoryRegistry] = None,
) -> Any:
    """
    Register a custom category, directly or as a decorator.

        register_category("null", lambda v: v is None)

        @register_category("point")
        def _is_point(value):
            return isinstance(value, Point)
    """
    if predicate is not None:
        resolve_registry(registry).register(name, predicate)
        return predicate

    def decorator(func: CategoryPredicate) -> CategoryPredicate:
        resolve_registry(registry).register(name, func)
        return func

    return decorator
