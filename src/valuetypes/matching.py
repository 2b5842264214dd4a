"""
Type-descriptor matching.

matches() answers "does this value conform to this descriptor". A malformed
descriptor is a caller bug and raises InvalidDescriptorError; nothing else
escapes.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Optional

from valuetypes.core.deprecation import deprecated
from valuetypes.core.exceptions import InvalidDescriptorError
from valuetypes.core.logger import get_logger
from valuetypes.models.descriptors import (
    CustomTag,
    Descriptor,
    FixedTag,
    LegacyOptional,
    OneOf,
    TypeRef,
    TypeTag,
    parse_descriptor,
)
from valuetypes.models.match_options import MatchOptionsLike, coerce_match_options
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
from valuetypes.registry import CategoryRegistry, resolve_registry

logger = get_logger(__name__)

_TAG_CHECKS: Dict[TypeTag, Callable[[Any], bool]] = {
    TypeTag.ARRAY: is_array,
    TypeTag.FUNCTION: is_function,
    TypeTag.STRING: is_string,
    TypeTag.NUMBER: is_number,
    TypeTag.NUMERIC: is_numeric,
    TypeTag.BOOLEAN: is_boolean,
    TypeTag.OBJECT: is_object,
    TypeTag.PURE_OBJECT: is_pure_object,
    TypeTag.BUILTIN: is_builtin,
    TypeTag.ALIEN: is_alien,
    TypeTag.UNDEFINED: is_undefined,
    TypeTag.NULL: is_null,
}


def _is_absent(value: Any) -> bool:
    return is_null(value) or is_undefined(value)


def _match_legacy_optional(value: Any) -> bool:
    deprecated(
        'matches(value, [type, "optional"])',
        "use matches(value, type, {'optional': True}) instead",
        "0.5",
    )
    return _is_absent(value)


def _match_custom(value: Any, descriptor: CustomTag, registry: CategoryRegistry) -> bool:
    predicate = registry.try_get(descriptor.name)
    if predicate is None:
        raise InvalidDescriptorError(descriptor.name, "custom category is not registered")
    try:
        return bool(predicate(value))
    except Exception as exc:
        logger.debug("Custom category %r failed on %s value: %s", descriptor.name, type(value).__name__, exc)
        return False


def _match_type_ref(value: Any, descriptor: TypeRef) -> bool:
    try:
        return isinstance(value, descriptor.type_)
    except TypeError as exc:
        raise InvalidDescriptorError(descriptor.type_, str(exc)) from exc
    except Exception as exc:
        logger.debug("isinstance check against %r failed: %s", descriptor.type_, exc)
        return False


def _match(value: Any, descriptor: Descriptor, registry: CategoryRegistry) -> bool:
    if isinstance(descriptor, OneOf):
        return any(
            _match(value, parse_descriptor(alternative, registry), registry)
            for alternative in descriptor.alternatives
        )
    if isinstance(descriptor, FixedTag):
        return _TAG_CHECKS[descriptor.tag](value)
    if isinstance(descriptor, CustomTag):
        return _match_custom(value, descriptor, registry)
    if isinstance(descriptor, TypeRef):
        return _match_type_ref(value, descriptor)
    if isinstance(descriptor, LegacyOptional):
        return _match_legacy_optional(value)
    raise InvalidDescriptorError(descriptor)


def matches(
    value: Any,
    descriptor: Any,
    options: MatchOptionsLike = None,
    *,
    registry: Optional[CategoryRegistry] = None,
) -> bool:
    """
    Return ``True`` if ``value`` conforms to ``descriptor``.

    The descriptor can be a type name (case-insensitive), a class, None, a
    registered custom category name, or a list of any of these meaning
    "any of". With ``optional`` set, None and UNDEFINED always match.

    A few classes stand for a built-in kind instead of an isinstance()
    check: ``list`` means any array, so ``matches((1, 2), list)`` is True;
    ``str``, ``bool``, ``numbers.Number``, ``object`` and
    ``types.FunctionType`` likewise mean string, boolean, number, object and
    function. Pass ``tuple`` or any other class for a plain isinstance() test.

    Examples:
        >>> matches("foo", str)
        True
        >>> matches(12345, "number")
        True
        >>> matches(datetime.now(), datetime)
        True
        >>> matches(None, "null")
        True
        >>> matches("foo", [int, "string", bool])
        True
        >>> matches(None, datetime, {"optional": True})
        True

    Raises:
        InvalidDescriptorError: If the descriptor, or an alternative reached
            while evaluating a list, is not a recognised form
        pydantic.ValidationError: If ``options`` contains unknown keys
    """
    opts = coerce_match_options(options)
    if opts.optional and _is_absent(value):
        return True
    reg = resolve_registry(registry)
    return _match(value, parse_descriptor(descriptor, reg), reg)


# Name kept for callers of the older API.
is_of_type = matches
