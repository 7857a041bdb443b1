"""Property descriptors: the declarative configuration of a synthesised property.

A field's class-level value describes how the field behaves::

    class Greeting(SynthesizedObject):
        message = PROPERTY_PUBLIC | {DEFAULT_VALUE: "Hello world.", TYPE: "string"}
        token = PROPERTY_WRITEONLY | {SETTER: "assignToken"}
"""

from __future__ import annotations

import re
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError as PydanticValidationError, field_validator

from propsynth.errors import ConfigurationError

__all__ = [
    "READABLE",
    "WRITABLE",
    "DEFAULT_VALUE",
    "GETTER",
    "SETTER",
    "TYPE",
    "PROPERTY_PUBLIC",
    "PROPERTY_READONLY",
    "PROPERTY_WRITEONLY",
    "PROPERTY_INTERNAL",
    "METHOD_NAME_PATTERN",
    "PropertyDescriptor",
    "prop",
    "coerce_descriptor",
    "is_unconfigured",
]

READABLE = "readable"
WRITABLE = "writable"
DEFAULT_VALUE = "default"
GETTER = "getter"
SETTER = "setter"
TYPE = "type"

# Synthesises both a getter and a setter.
PROPERTY_PUBLIC: dict[str, Any] = {WRITABLE: True, READABLE: True}
# Synthesises only a getter.
PROPERTY_READONLY: dict[str, Any] = {WRITABLE: False, READABLE: True}
# Synthesises only a setter.
PROPERTY_WRITEONLY: dict[str, Any] = {WRITABLE: True, READABLE: False}
# Synthesises nothing.
PROPERTY_INTERNAL: dict[str, Any] = {WRITABLE: False, READABLE: False}

METHOD_NAME_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class PropertyDescriptor(BaseModel):
    """Validated configuration for one property.

    Attributes:
        readable: Whether a getter is synthesised.
        writable: Whether a setter is synthesised.
        default: Initial value of the field; None means no value.
        getter: Custom getter name, overriding the derived one.
        setter: Custom setter name, overriding the derived one.
        type: Declared type enforced by the setter (see ``propsynth.types``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, arbitrary_types_allowed=True)

    readable: bool = True
    writable: bool = True
    default: Any = None
    getter: str | None = None
    setter: str | None = None
    type: Any = None

    @field_validator("getter", "setter", mode="before")
    @classmethod
    def _check_method_name(cls, value: Any) -> Any:
        if value is None:
            return value
        if not isinstance(value, str) or not METHOD_NAME_PATTERN.fullmatch(value):
            raise ValueError(f"{value!r} is not a valid method name")
        return value


def prop(
    *,
    readable: bool = True,
    writable: bool = True,
    default: Any = None,
    getter: str | None = None,
    setter: str | None = None,
    type: Any = None,
) -> PropertyDescriptor:
    """Build a PropertyDescriptor in code instead of a dict literal."""
    return PropertyDescriptor(
        readable=readable,
        writable=writable,
        default=default,
        getter=getter,
        setter=setter,
        type=type,
    )


def is_unconfigured(raw: Any) -> bool:
    """Whether ``raw`` is an absent or empty declaration."""
    return raw is None or (isinstance(raw, Mapping) and len(raw) == 0)


def coerce_descriptor(raw: Any, *, field: str, class_name: str) -> PropertyDescriptor:
    """Merge a raw declaration over PROPERTY_PUBLIC and validate it.

    Explicit keys in ``raw`` win over the preset.

    Raises:
        ConfigurationError: If ``raw`` is not a mapping, carries unknown keys,
            or holds invalid values such as a malformed method name.
    """
    if isinstance(raw, PropertyDescriptor):
        return raw
    if not isinstance(raw, Mapping):
        raise ConfigurationError(
            f"{class_name}.{field} has an invalid property definition. All declared fields "
            f"must be mappings which describe the property (e.g. PROPERTY_PUBLIC), got {type(raw).__name__}.",
            class_name=class_name,
            field=field,
        )

    merged = {**PROPERTY_PUBLIC, **raw}
    try:
        return PropertyDescriptor.model_validate(merged)
    except PydanticValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(loc) for loc in err.get('loc', ())) or '<root>'}: {err.get('msg', '')}"
            for err in e.errors()
        )
        raise ConfigurationError(
            f"{class_name}.{field} has an invalid property definition: {problems}",
            class_name=class_name,
            field=field,
            cause=e,
        ) from e
