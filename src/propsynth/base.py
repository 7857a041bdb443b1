"""SynthesizedObject: base class that synthesises accessors from declarations."""

from __future__ import annotations

import copy
import inspect
import logging
import threading
import warnings
from typing import Any, Callable

from propsynth.config import Config
from propsynth.debug import PropertyInfo, describe_property
from propsynth.errors import ConfigurationWarning, InvalidArgumentError, UndefinedMethodError
from propsynth.parser import declared_fields, parse_class
from propsynth.property_map import FieldSpec, PropertyMap

logger = logging.getLogger(__name__)

__all__ = ["SynthesizedObject"]


class SynthesizedObject:
    """An object whose getters and setters are synthesised from field declarations.

    Every class attribute a subclass declares is read as a property
    descriptor (see ``propsynth.descriptor``)::

        class User(SynthesizedObject):
            name = PROPERTY_PUBLIC | {TYPE: "string", DEFAULT_VALUE: "anonymous"}
            id = PROPERTY_READONLY

        user = User().setName("ada")
        user.getName()  # "ada"

    Class keywords tune how declarations are read and are inherited by
    subclasses::

        class Row(SynthesizedObject, naming="snake", unconfigured="error"):
            ...

    Constructor arguments are forwarded to :meth:`initialize`, which runs
    after every field has received its default.

    Fields without a default are stored as None, except PROPERTY_INTERNAL
    fields, which are left out of the instance dict. Reading one directly
    as ``obj.field`` before it is assigned returns the class-level
    declaration.
    """

    __propsynth_config__: Config = Config()
    __propsynth_map__: PropertyMap | None = None
    __propsynth_lock__ = threading.Lock()

    def __init_subclass__(cls, **options: Any) -> None:
        super().__init_subclass__()
        parent: Config = cls.__propsynth_config__
        cls.__propsynth_config__ = parent.merge(options) if options else parent
        cls.__propsynth_map__ = None

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        pmap = type(self)._load_map()
        for spec in pmap.fields.values():
            self._apply_default(spec)
        self.initialize(*args, **kwargs)

    def initialize(self, *args: Any, **kwargs: Any) -> SynthesizedObject:
        """Subclass setup hook, called once after accessor synthesis."""
        return self

    # === Property map ===

    @classmethod
    def property_map(cls) -> PropertyMap:
        """Return the class's PropertyMap, building it on first use.

        Raises:
            ConfigurationError: If any declaration of the class is malformed.
        """
        return cls._load_map()

    @classmethod
    def _load_map(cls) -> PropertyMap:
        # Called only from property_map() and __init__, so warnings point at their caller.
        pmap = cls.__dict__.get("__propsynth_map__")
        if pmap is not None:
            return pmap
        with SynthesizedObject.__propsynth_lock__:
            pmap = cls.__dict__.get("__propsynth_map__")
            if pmap is None:
                pmap = parse_class(cls, SynthesizedObject, cls.__propsynth_config__)
                _report_diagnostics(pmap)
                cls.__propsynth_map__ = pmap
        return pmap

    @classmethod
    def options(cls) -> Config:
        return cls.__propsynth_config__

    def _apply_default(self, spec: FieldSpec) -> None:
        if spec.default is None:
            if spec.readable or spec.writable:
                self.__dict__[spec.name] = None
            return
        default = copy.deepcopy(spec.default)
        if spec.setter is not None:
            self._write(spec, default)
        else:
            self.__dict__[spec.name] = default

    # === Dispatch ===

    def _write(self, spec: FieldSpec, value: Any) -> None:
        if spec.type is not None and not spec.type.accepts(value):
            raise InvalidArgumentError(
                f"Invalid value for {self.class_name()}.{spec.name}: expected {spec.type.name}, "
                f"got {type(value).__name__}",
                field=spec.name,
                method=spec.setter,
                expected_type=spec.type.name,
            )
        self.__dict__[spec.name] = value

    def _make_setter(self, method: str, spec: FieldSpec) -> Callable[..., SynthesizedObject]:
        def setter(*args: Any) -> SynthesizedObject:
            if not args:
                caller = inspect.stack(0)[1]
                raise InvalidArgumentError(
                    f"Missing argument 1 for {self.class_name()}.{method}(), called in "
                    f"{caller.filename} on line {caller.lineno}",
                    field=spec.name,
                    method=method,
                )
            self._write(spec, args[0])
            return self

        setter.__name__ = setter.__qualname__ = method
        setter.__doc__ = f"Set {spec.name} and return the object."
        return setter

    def _make_getter(self, method: str, spec: FieldSpec) -> Callable[[], Any]:
        def getter() -> Any:
            return self.__dict__.get(spec.name)

        getter.__name__ = getter.__qualname__ = method
        getter.__doc__ = f"Return the current value of {spec.name}."
        return getter

    def __getattr__(self, name: str) -> Any:
        # Only reached when normal lookup fails; real attributes always win.
        if name.startswith("__") and name.endswith("__"):
            raise AttributeError(name)
        pmap = type(self).property_map()
        found = pmap.resolve(name)
        if found is None:
            raise UndefinedMethodError(self.class_name(), name)
        kind, field_name = found
        spec = pmap.fields[field_name]
        if kind == "setter":
            return self._make_setter(name, spec)
        return self._make_getter(name, spec)

    def invoke(self, name: str, *args: Any) -> Any:
        """Call a method by name, real or synthesised.

        Raises:
            UndefinedMethodError: If ``name`` matches nothing.
        """
        return getattr(self, name)(*args)

    def responds_to(self, name: str) -> bool:
        """Whether ``name`` is a real method or a synthesised accessor."""
        return self.has_method(name) or name in type(self).property_map()

    # === Reflection helpers ===

    @classmethod
    def has_method(cls, method: str) -> bool:
        """Whether the class defines a real method called ``method``."""
        return inspect.isroutine(getattr(cls, method, None))

    @classmethod
    def class_name(cls) -> str:
        return cls.__name__

    @classmethod
    def parent_class(cls) -> type | None:
        bases = [base for base in cls.__bases__ if base is not object]
        return bases[0] if bases else None

    def object_vars(self) -> dict[str, Any]:
        return dict(self.__dict__)

    @classmethod
    def class_vars(cls) -> dict[str, Any]:
        """Declared fields and their raw descriptors."""
        return dict(declared_fields(cls, SynthesizedObject))

    # === Introspection ===

    def debug_info(self) -> dict[str, PropertyInfo]:
        """Describe every configured property and its current value."""
        pmap = type(self).property_map()
        return {
            name: describe_property(name, self.__dict__.get(name), pmap)
            for name in pmap.fields
        }

    def __repr__(self) -> str:
        values = ", ".join(f"{name}={info.value!r}" for name, info in self.debug_info().items())
        return f"{self.class_name()}({values})"


def _report_diagnostics(pmap: PropertyMap) -> None:
    for diagnostic in pmap.diagnostics:
        logger.warning(diagnostic.message)
        warnings.warn(diagnostic.message, ConfigurationWarning, stacklevel=4)
