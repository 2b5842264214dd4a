"""
Example: Classifying values and checking them against type descriptors.

This shows the two halves of the library:
- classify(): a category name for any value (never raises)
- matches(): a yes/no answer against a descriptor (raises only for bad descriptors)
"""

from datetime import datetime

from valuetypes import (
    UNDEFINED,
    CategoryRegistry,
    InvalidDescriptorError,
    classify,
    load_builtin_categories,
    matches,
    path_exists,
    resolve_path,
)


class Money:
    def __init__(self, amount, currency):
        self.amount = amount
        self.currency = currency


# =============================================================================
# Example 1: Built-in categories
# =============================================================================
for value in (42, "42", [1, 2], print, True, {"a": 1}, UNDEFINED, None):
    print(f"{value!r:>30} -> {classify(value)}")


# =============================================================================
# Example 2: Custom categories on an explicit registry
# =============================================================================
registry = CategoryRegistry()
registry.register("money", lambda v: isinstance(v, Money))

print(classify(Money(10, "EUR"), registry))              # money
print(matches(Money(10, "EUR"), "money", registry=registry))  # True

# Bundled extras ("null", "bytes", "set") go into the default registry
load_builtin_categories()
print(classify(None))                                   # null


# =============================================================================
# Example 3: Descriptors
# =============================================================================
print(matches(12345, ["string", "number"]))             # True
print(matches(None, datetime, {"optional": True}))      # True
print(matches("3", "numeric"))                          # True

try:
    matches(1, 12345)
except InvalidDescriptorError as e:
    print(f"Rejected descriptor: {e}")


# =============================================================================
# Example 4: Dotted paths
# =============================================================================
settings = {"service": {"retries": 3, "debug": False}}
print(resolve_path("service.retries", settings))        # 3
print(path_exists("service.debug", settings))           # False (falsy value)
print(path_exists("datetime.datetime"))                 # True, module is loaded
