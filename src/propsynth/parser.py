"""Configuration parser: turns a class's declared fields into a PropertyMap."""

from __future__ import annotations

import inspect
import logging
from typing import Any, ClassVar, Iterator, get_origin

from propsynth.config import Config, NamingStyle, UnconfiguredPolicy
from propsynth.descriptor import coerce_descriptor, is_unconfigured
from propsynth.errors import ConfigurationError
from propsynth.property_map import FieldSpec, PropertyMap
from propsynth.types import resolve_type

logger = logging.getLogger(__name__)

__all__ = ["declared_fields", "parse_class", "default_accessor_name", "ucfirst"]

UNCONFIGURED = "unconfigured"


def ucfirst(name: str) -> str:
    """Upper-case the first character only; the rest is left untouched."""
    return name[:1].upper() + name[1:]


def default_accessor_name(kind: str, field: str, naming: NamingStyle = NamingStyle.CAMEL) -> str:
    """Derive the default accessor name for ``kind`` ("get" or "set")."""
    if naming == NamingStyle.SNAKE:
        return f"{kind}_{field}"
    return kind + ucfirst(field)


def _is_classvar(annotation: Any) -> bool:
    if isinstance(annotation, str):
        return annotation.startswith(("ClassVar", "typing.ClassVar"))
    return annotation is ClassVar or get_origin(annotation) is ClassVar


def _is_field_value(value: Any) -> bool:
    if inspect.isroutine(value) or inspect.isclass(value):
        return False
    # property, classmethod, staticmethod, cached_property and friends.
    return not hasattr(type(value), "__get__")


def declared_fields(cls: type, base: type) -> Iterator[tuple[str, Any]]:
    """Yield ``(name, raw_descriptor)`` for every field declared below ``base``.

    Classes are walked base-first, so a redefinition in a subclass replaces
    the value but keeps the original declaration position. Redefining an
    inherited field as a method, descriptor or ClassVar removes it. Names
    defined on ``base`` itself are never fields.
    """
    excluded = set(vars(base))
    found: dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        if klass is base or not issubclass(klass, base):
            continue
        annotations = inspect.get_annotations(klass)
        for name, value in vars(klass).items():
            if name.startswith("__") and name.endswith("__"):
                continue
            if name in excluded:
                continue
            if not _is_field_value(value) or _is_classvar(annotations.get(name)):
                found.pop(name, None)
                continue
            found[name] = value
    yield from found.items()


def _parse_field(
    pmap: PropertyMap,
    name: str,
    raw: Any,
    options: Config,
) -> None:
    class_name = pmap.class_name
    if is_unconfigured(raw):
        message = (
            f"{class_name}.{name} is not configured. No getters and setters have been "
            f"synthesised for this property, you should use PROPERTY_INTERNAL instead."
        )
        if options.unconfigured == UnconfiguredPolicy.ERROR:
            raise ConfigurationError(message, class_name=class_name, field=name)
        if options.unconfigured == UnconfiguredPolicy.WARN:
            pmap.add_diagnostic(UNCONFIGURED, name, message)
        return

    descriptor = coerce_descriptor(raw, field=name, class_name=class_name)

    setter = None
    if descriptor.writable:
        setter = descriptor.setter or default_accessor_name("set", name, options.naming)
    getter = None
    if descriptor.readable:
        getter = descriptor.getter or default_accessor_name("get", name, options.naming)

    try:
        type_spec = resolve_type(descriptor.type)
    except ConfigurationError as e:
        raise ConfigurationError(
            f"{class_name}.{name} declares an invalid type: {e.message}",
            class_name=class_name,
            field=name,
            cause=e,
        ) from e

    pmap.add_field(
        FieldSpec(
            name=name,
            readable=descriptor.readable,
            writable=descriptor.writable,
            getter=getter,
            setter=setter,
            type=type_spec,
            default=descriptor.default,
        )
    )


def parse_class(cls: type, base: type, options: Config | None = None) -> PropertyMap:
    """Build the frozen PropertyMap for ``cls``.

    Raises:
        ConfigurationError: On the first malformed declaration. No partial
            map is returned.
    """
    options = options or Config()
    pmap = PropertyMap(class_name=cls.__name__)
    for name, raw in declared_fields(cls, base):
        _parse_field(pmap, name, raw, options)

    logger.debug(
        "Built property map for %s: %d fields, %d getters, %d setters",
        pmap.class_name,
        len(pmap.fields),
        len(pmap.getters),
        len(pmap.setters),
    )
    return pmap.freeze()
