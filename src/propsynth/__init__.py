"""propsynth - Declarative getter/setter synthesis for Python objects."""

from __future__ import annotations

# Core
from propsynth.base import SynthesizedObject
from propsynth.property_map import Diagnostic, FieldSpec, PropertyMap

# Descriptors
from propsynth.descriptor import (
    DEFAULT_VALUE,
    GETTER,
    METHOD_NAME_PATTERN,
    PROPERTY_INTERNAL,
    PROPERTY_PUBLIC,
    PROPERTY_READONLY,
    PROPERTY_WRITEONLY,
    READABLE,
    SETTER,
    TYPE,
    WRITABLE,
    PropertyDescriptor,
    prop,
)

# Types
from propsynth.types import TypeSpec, resolve_type

# Config
from propsynth.config import Config, NamingStyle, UnconfiguredPolicy

# Errors
from propsynth.errors import (
    ConfigurationError,
    ConfigurationWarning,
    ErrorCodes,
    InvalidArgumentError,
    PropertyError,
    UndefinedMethodError,
)

# Introspection
from propsynth.debug import PropertyInfo, describe_property

__version__ = "0.1.0"

__all__ = [
    # Core
    "SynthesizedObject",
    "PropertyMap",
    "FieldSpec",
    "Diagnostic",
    # Descriptors
    "PropertyDescriptor",
    "prop",
    "PROPERTY_PUBLIC",
    "PROPERTY_READONLY",
    "PROPERTY_WRITEONLY",
    "PROPERTY_INTERNAL",
    "READABLE",
    "WRITABLE",
    "DEFAULT_VALUE",
    "GETTER",
    "SETTER",
    "TYPE",
    "METHOD_NAME_PATTERN",
    # Types
    "TypeSpec",
    "resolve_type",
    # Config
    "Config",
    "NamingStyle",
    "UnconfiguredPolicy",
    # Errors
    "ErrorCodes",
    "PropertyError",
    "ConfigurationError",
    "ConfigurationWarning",
    "InvalidArgumentError",
    "UndefinedMethodError",
    # Introspection
    "PropertyInfo",
    "describe_property",
]
