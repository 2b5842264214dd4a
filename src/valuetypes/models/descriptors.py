"""
Type descriptors accepted by matches().

Callers may pass raw descriptors (a tag string, a class, None, or a list of
alternatives); parse_descriptor() turns them into one of the tagged forms
below so the matcher can dispatch on the form instead of on the raw value.
"""

from __future__ import annotations

import numbers
import types
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Union

from valuetypes.core.exceptions import InvalidDescriptorError
from valuetypes.registry import CategoryRegistry, resolve_registry


class TypeTag(str, Enum):
    ARRAY = "array"
    FUNCTION = "function"
    STRING = "string"
    NUMBER = "number"
    NUMERIC = "numeric"
    BOOLEAN = "boolean"
    OBJECT = "object"
    PURE_OBJECT = "pureobject"
    BUILTIN = "builtin"
    ALIEN = "alien"
    UNDEFINED = "undefined"
    NULL = "null"


LEGACY_OPTIONAL_TAG = "optional"

# Classes standing for a built-in tag rather than an isinstance() check.
_CLASS_TAGS: Dict[Any, TypeTag] = {
    list: TypeTag.ARRAY,
    types.FunctionType: TypeTag.FUNCTION,
    str: TypeTag.STRING,
    numbers.Number: TypeTag.NUMBER,
    bool: TypeTag.BOOLEAN,
    object: TypeTag.OBJECT,
}

_TAGS_BY_NAME: Dict[str, TypeTag] = {tag.value: tag for tag in TypeTag}

_UNION_TYPES: Tuple[type, ...] = tuple(
    t for t in (getattr(types, "UnionType", None),) if t is not None
)


@dataclass(frozen=True)
class FixedTag:
    tag: TypeTag


@dataclass(frozen=True)
class CustomTag:
    name: str


@dataclass(frozen=True)
class TypeRef:
    type_: Any


@dataclass(frozen=True)
class OneOf:
    # Raw or parsed descriptors; each is parsed only when reached so an
    # invalid entry after a matching one is never inspected.
    alternatives: Tuple[Any, ...]


@dataclass(frozen=True)
class LegacyOptional:
    """The bare "optional" tag. Superseded by MatchOptions(optional=True)."""


Descriptor = Union[FixedTag, CustomTag, TypeRef, OneOf, LegacyOptional]
DESCRIPTOR_FORMS: Tuple[type, ...] = (FixedTag, CustomTag, TypeRef, OneOf, LegacyOptional)


def _parse_tag_name(raw: str, registry: CategoryRegistry) -> Descriptor:
    name = raw.lower()
    tag = _TAGS_BY_NAME.get(name)
    if tag is not None:
        return FixedTag(tag)
    if name == LEGACY_OPTIONAL_TAG:
        return LegacyOptional()
    if raw in registry:
        return CustomTag(raw)
    if name in registry:
        return CustomTag(name)
    raise InvalidDescriptorError(raw, "unknown type name")


def parse_descriptor(raw: Any, registry: Optional[CategoryRegistry] = None) -> Descriptor:
    """
    Convert a raw descriptor into its tagged form.

    Raises:
        InvalidDescriptorError: If ``raw`` is none of the accepted forms
    """
    if isinstance(raw, DESCRIPTOR_FORMS):
        return raw
    if raw is None:
        return FixedTag(TypeTag.NULL)
    if isinstance(raw, (list, tuple)):
        return OneOf(tuple(raw))
    if isinstance(raw, str):
        return _parse_tag_name(raw, resolve_registry(registry))
    if isinstance(raw, type):
        tag = _CLASS_TAGS.get(raw)
        return FixedTag(tag) if tag is not None else TypeRef(raw)
    if _UNION_TYPES and isinstance(raw, _UNION_TYPES):
        return TypeRef(raw)
    raise InvalidDescriptorError(raw)
