from __future__ import annotations

import importlib
import sys
from typing import Iterable


BUILTIN_CATEGORY_MODULES: tuple[str, ...] = (
    "valuetypes.extras.null_category",
    "valuetypes.extras.collection_categories",
)


_LOADED = False


def load_builtin_categories(*, reload: bool = False, modules: Iterable[str] = BUILTIN_CATEGORY_MODULES) -> None:
    """Import the bundled category modules so their decorators register them.

    The categories land in the process-wide default registry, after anything
    already registered there. Call with reload=True after clearing the
    registry (typically in tests) to run the decorators again.
    """

    global _LOADED

    if _LOADED and not reload:
        return

    for module_name in modules:
        if reload:
            sys.modules.pop(module_name, None)
        importlib.import_module(module_name)

    _LOADED = True
