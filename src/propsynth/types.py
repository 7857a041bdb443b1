"""Type descriptors for typed properties.

A property may declare the type its setter accepts. The declaration can be a
type-name string (``"string"``, ``"int"``, ``"decimal.Decimal"``), a class,
a tuple of classes, or a typing form such as ``int | None`` or
``list[str]``. Each is resolved once, when the class's property map is
built, into a :class:`TypeSpec` carrying a display name and a predicate.
"""

from __future__ import annotations

import builtins
import importlib
import inspect
from dataclasses import dataclass
from typing import Any, Callable, get_origin

from pydantic import ConfigDict, PydanticUserError, TypeAdapter, ValidationError as PydanticValidationError

from propsynth.errors import ConfigurationError

__all__ = ["TypeSpec", "resolve_type", "UNTYPED"]

UNTYPED = "mixed"

_ALIASES: dict[str, type | tuple[type, ...]] = {
    "string": str,
    "str": str,
    "int": int,
    "integer": int,
    "float": float,
    "double": float,
    "bool": bool,
    "boolean": bool,
    "array": (list, tuple, dict),
    "list": list,
    "tuple": tuple,
    "dict": dict,
    "mapping": dict,
    "set": set,
    "bytes": bytes,
}

_PREDICATES: dict[str, Callable[[Any], bool]] = {
    "callable": callable,
    "object": lambda value: value is not None,
}


@dataclass(frozen=True)
class TypeSpec:
    """A resolved type declaration.

    Attributes:
        name: Name shown in error messages and introspection.
        check: Predicate returning True when a value conforms.
    """

    name: str
    check: Callable[[Any], bool]

    def accepts(self, value: Any) -> bool:
        return self.check(value)


def _isinstance_check(classes: type | tuple[type, ...]) -> Callable[[Any], bool]:
    return lambda value: isinstance(value, classes)


def _adapter_check(annotation: Any) -> Callable[[Any], bool]:
    adapter: TypeAdapter[Any] = TypeAdapter(annotation, config=ConfigDict(arbitrary_types_allowed=True))

    def check(value: Any) -> bool:
        try:
            adapter.validate_python(value, strict=True)
        except PydanticValidationError:
            return False
        return True

    return check


def _import_dotted(path: str) -> Any:
    """Import ``package.module.Name``, trying the longest module path first."""
    parts = path.split(".")
    for i in range(len(parts) - 1, 0, -1):
        module_path = ".".join(parts[:i])
        try:
            obj: Any = importlib.import_module(module_path)
        except ImportError:
            continue
        try:
            for part in parts[i:]:
                obj = getattr(obj, part)
        except AttributeError:
            continue
        return obj
    return None


def _class_name(cls: type) -> str:
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def _resolve_name(name: str) -> TypeSpec | None:
    key = name.strip()
    lowered = key.lower()
    if lowered in ("mixed", "any"):
        return None
    if lowered in _ALIASES:
        return TypeSpec(name=key, check=_isinstance_check(_ALIASES[lowered]))
    if lowered in _PREDICATES:
        return TypeSpec(name=key, check=_PREDICATES[lowered])

    target = getattr(builtins, key, None) if "." not in key else _import_dotted(key)
    if inspect.isclass(target):
        return TypeSpec(name=key, check=_isinstance_check(target))
    raise ConfigurationError(f"Unknown type '{name}'")


def resolve_type(declared: Any) -> TypeSpec | None:
    """Resolve a declared property type into a TypeSpec.

    Returns None for an untyped declaration (``None``, ``"mixed"``, ``"any"``
    or ``typing.Any``).

    Raises:
        ConfigurationError: If the declaration cannot be resolved.
    """
    if declared is None or declared is Any:
        return None
    if isinstance(declared, TypeSpec):
        return declared
    if isinstance(declared, str):
        if not declared.strip():
            raise ConfigurationError("Type name must not be empty")
        return _resolve_name(declared)
    if inspect.isclass(declared) and get_origin(declared) is None:
        return TypeSpec(name=_class_name(declared), check=_isinstance_check(declared))
    if isinstance(declared, tuple):
        if not declared or not all(inspect.isclass(item) for item in declared):
            raise ConfigurationError(f"Type tuple must contain only classes, got {declared!r}")
        name = " | ".join(_class_name(item) for item in declared)
        return TypeSpec(name=name, check=_isinstance_check(declared))

    # Typing forms: unions, parametrised generics, Literal, Annotated...
    if get_origin(declared) is None:
        raise ConfigurationError(f"Unsupported type declaration {declared!r}")
    try:
        check = _adapter_check(declared)
    except (PydanticUserError, TypeError) as e:
        raise ConfigurationError(f"Unsupported type declaration {declared!r}", cause=e) from e
    return TypeSpec(name=str(declared).replace("typing.", ""), check=check)
