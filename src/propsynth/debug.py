"""Introspection records for synthesised properties."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from propsynth.property_map import PropertyMap
from propsynth.types import UNTYPED

__all__ = ["PropertyInfo", "describe_property"]


@dataclass(frozen=True)
class PropertyInfo:
    """Read-only description of one property.

    Attributes:
        name: Field name.
        type: Declared type name, or "mixed" when untyped.
        getter: Synthesised getter name, None when the field is not readable.
        setter: Synthesised setter name, None when the field is not writable.
        value: Current value of the field.
    """

    name: str
    type: str
    getter: str | None
    setter: str | None
    value: Any

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "type": self.type,
            "getter": self.getter,
            "setter": self.setter,
            "value": self.value,
        }


def describe_property(name: str, value: Any, property_map: PropertyMap) -> PropertyInfo:
    """Build the PropertyInfo for ``name`` from a class's PropertyMap."""
    return PropertyInfo(
        name=name,
        type=property_map.types.get(name, UNTYPED),
        getter=property_map.getter_for(name),
        setter=property_map.setter_for(name),
        value=value,
    )
