"""PropertyMap: the accessor lookup table built for a SynthesizedObject class."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from propsynth.errors import ConfigurationError
from propsynth.types import TypeSpec

__all__ = ["FieldSpec", "Diagnostic", "PropertyMap"]


@dataclass(frozen=True)
class FieldSpec:
    """Resolved configuration of one declared field."""

    name: str
    readable: bool
    writable: bool
    getter: str | None = None
    setter: str | None = None
    type: TypeSpec | None = None
    default: Any = None


@dataclass(frozen=True)
class Diagnostic:
    """A non-fatal problem found while parsing a class's declarations."""

    kind: str
    field: str
    message: str


@dataclass
class PropertyMap:
    """Accessor tables for one class.

    ``getters`` and ``setters`` map a method name to the field it reads or
    writes. The map is frozen once built and may be shared by every instance
    of the class.
    """

    class_name: str
    fields: dict[str, FieldSpec] = field(default_factory=dict)
    getters: dict[str, str] = field(default_factory=dict)
    setters: dict[str, str] = field(default_factory=dict)
    diagnostics: list[Diagnostic] = field(default_factory=list)
    _frozen: bool = field(default=False, repr=False, compare=False)

    def _check_writable(self) -> None:
        if self._frozen:
            raise RuntimeError(f"PropertyMap for {self.class_name} is frozen")

    def _check_unique(self, method: str, field_name: str) -> None:
        owner = self.getters.get(method) or self.setters.get(method)
        if owner is not None:
            raise ConfigurationError(
                f"{self.class_name}.{field_name} cannot use accessor name '{method}': "
                f"it is already synthesised for {self.class_name}.{owner}",
                class_name=self.class_name,
                field=field_name,
            )

    def add_field(self, spec: FieldSpec) -> None:
        """Register a field and its accessors.

        Raises:
            ConfigurationError: If an accessor name is already registered.
        """
        self._check_writable()
        if spec.setter is not None:
            self._check_unique(spec.setter, spec.name)
        if spec.getter is not None:
            self._check_unique(spec.getter, spec.name)
        if spec.getter is not None and spec.getter == spec.setter:
            raise ConfigurationError(
                f"{self.class_name}.{spec.name} uses '{spec.getter}' as both getter and setter",
                class_name=self.class_name,
                field=spec.name,
            )

        self.fields[spec.name] = spec
        if spec.setter is not None:
            self.setters[spec.setter] = spec.name
        if spec.getter is not None:
            self.getters[spec.getter] = spec.name

    def add_diagnostic(self, kind: str, field_name: str, message: str) -> None:
        self._check_writable()
        self.diagnostics.append(Diagnostic(kind=kind, field=field_name, message=message))

    def freeze(self) -> PropertyMap:
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def types(self) -> dict[str, str]:
        """Declared type names keyed by field."""
        return {name: spec.type.name for name, spec in self.fields.items() if spec.type is not None}

    def getter_for(self, field_name: str) -> str | None:
        spec = self.fields.get(field_name)
        return spec.getter if spec is not None else None

    def setter_for(self, field_name: str) -> str | None:
        spec = self.fields.get(field_name)
        return spec.setter if spec is not None else None

    def resolve(self, method: str) -> tuple[str, str] | None:
        """Look up a method name.

        Returns:
            ``("setter", field)`` or ``("getter", field)``, or None on a miss.
            Setters are consulted first.
        """
        if method in self.setters:
            return "setter", self.setters[method]
        if method in self.getters:
            return "getter", self.getters[method]
        return None

    def __contains__(self, method: object) -> bool:
        return method in self.setters or method in self.getters
