"""valuetypes.

Runtime type classification for Python values.

classify() names the category of any value, matches() checks a value against
a type descriptor, and resolve_path()/path_exists() look up dotted names.
Custom categories can be added with register_category().
"""

from valuetypes.bootstrap import load_builtin_categories
from valuetypes.categories import Category
from valuetypes.resolver import classify, what_am_i
from valuetypes.core.deprecation import (
    DeprecationHandler,
    DeprecationPolicy,
    set_deprecation_handler,
)
from valuetypes.core.exceptions import (
    CategoryRegistryError,
    ConfigurationError,
    InvalidDescriptorError,
    ValueTypesDeprecationError,
    ValueTypesException,
)
from valuetypes.core.sentinels import UNDEFINED
from valuetypes.matching import is_of_type, matches
from valuetypes.models.descriptors import (
    CustomTag,
    FixedTag,
    LegacyOptional,
    OneOf,
    TypeRef,
    TypeTag,
    parse_descriptor,
)
from valuetypes.models.match_options import MatchOptions
from valuetypes.namespace import GLOBAL_NAMESPACE, path_exists, resolve_path
from valuetypes.predicates import (
    is_alien,
    is_array,
    is_boolean,
    is_builtin,
    is_function,
    is_null,
    is_number,
    is_numeric,
    is_object,
    is_pure_object,
    is_string,
    is_undefined,
)
from valuetypes.registry import CategoryRegistry, default_registry, register_category

__version__ = "0.1.0"

__all__ = [
    "UNDEFINED",
    "Category",
    "CategoryRegistry",
    "CategoryRegistryError",
    "ConfigurationError",
    "CustomTag",
    "DeprecationHandler",
    "DeprecationPolicy",
    "FixedTag",
    "GLOBAL_NAMESPACE",
    "InvalidDescriptorError",
    "LegacyOptional",
    "MatchOptions",
    "OneOf",
    "TypeRef",
    "TypeTag",
    "ValueTypesDeprecationError",
    "ValueTypesException",
    "classify",
    "default_registry",
    "is_alien",
    "is_array",
    "is_boolean",
    "is_builtin",
    "is_function",
    "is_null",
    "is_number",
    "is_numeric",
    "is_object",
    "is_of_type",
    "is_pure_object",
    "is_string",
    "is_undefined",
    "load_builtin_categories",
    "matches",
    "parse_descriptor",
    "path_exists",
    "register_category",
    "resolve_path",
    "set_deprecation_handler",
    "what_am_i",
]
