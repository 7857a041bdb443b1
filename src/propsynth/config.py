"""Per-class options for synthesised objects."""

from __future__ import annotations

from enum import Enum
from typing import Any

from propsynth.errors import ConfigurationError

__all__ = ["Config", "NamingStyle", "UnconfiguredPolicy", "DEFAULT_OPTIONS"]


class NamingStyle(str, Enum):
    """Controls how default accessor names are derived from a field name."""

    CAMEL = "camel"
    SNAKE = "snake"


class UnconfiguredPolicy(str, Enum):
    """Controls what happens to fields declared without a descriptor."""

    WARN = "warn"
    ERROR = "error"
    IGNORE = "ignore"


DEFAULT_OPTIONS: dict[str, Any] = {
    "naming": NamingStyle.CAMEL,
    "unconfigured": UnconfiguredPolicy.WARN,
}

_OPTION_TYPES: dict[str, type[Enum]] = {
    "naming": NamingStyle,
    "unconfigured": UnconfiguredPolicy,
}


class Config:
    """Validated per-class options.

    Instances are built from class keywords and merged down the class
    hierarchy, so a subclass inherits its parent's options unless it
    overrides them.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = dict(DEFAULT_OPTIONS)
        for key, value in (data or {}).items():
            self._data[key] = self._coerce(key, value)

    @staticmethod
    def _coerce(key: str, value: Any) -> Any:
        enum_type = _OPTION_TYPES.get(key)
        if enum_type is None:
            raise ConfigurationError(f"Unknown option '{key}'. Known options: {', '.join(sorted(_OPTION_TYPES))}")
        try:
            return enum_type(value)
        except ValueError as e:
            allowed = ", ".join(member.value for member in enum_type)
            raise ConfigurationError(f"Invalid value {value!r} for option '{key}'. Expected one of: {allowed}") from e

    def merge(self, overrides: dict[str, Any]) -> Config:
        """Return a new Config with ``overrides`` applied over these options."""
        return Config({**self._data, **overrides})

    @property
    def naming(self) -> NamingStyle:
        return self._data["naming"]

    @property
    def unconfigured(self) -> UnconfiguredPolicy:
        return self._data["unconfigured"]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Config):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        options = ", ".join(f"{key}={value.value!r}" for key, value in self._data.items())
        return f"Config({options})"
