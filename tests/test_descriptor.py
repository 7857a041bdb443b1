"""Tests for property descriptors and presets."""

from __future__ import annotations

from typing import Any

import pytest

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
    coerce_descriptor,
    is_unconfigured,
    prop,
)
from propsynth.errors import ConfigurationError


def _coerce(raw: Any) -> PropertyDescriptor:
    return coerce_descriptor(raw, field="value", class_name="Holder")


class TestPresets:
    @pytest.mark.parametrize(
        ("preset", "readable", "writable"),
        [
            (PROPERTY_PUBLIC, True, True),
            (PROPERTY_READONLY, True, False),
            (PROPERTY_WRITEONLY, False, True),
            (PROPERTY_INTERNAL, False, False),
        ],
    )
    def test_flags(self, preset: dict[str, Any], readable: bool, writable: bool) -> None:
        descriptor = _coerce(preset)
        assert descriptor.readable is readable
        assert descriptor.writable is writable

    def test_presets_combine_with_keys(self) -> None:
        descriptor = _coerce(PROPERTY_READONLY | {DEFAULT_VALUE: 5, TYPE: "int"})
        assert descriptor.default == 5
        assert descriptor.type == "int"
        assert descriptor.writable is False

    def test_combining_does_not_mutate_preset(self) -> None:
        _ = PROPERTY_PUBLIC | {DEFAULT_VALUE: 1}
        assert PROPERTY_PUBLIC == {WRITABLE: True, READABLE: True}


class TestCoerceDescriptor:
    def test_missing_flags_fall_back_to_public(self) -> None:
        descriptor = _coerce({DEFAULT_VALUE: "x"})
        assert descriptor.readable is True
        assert descriptor.writable is True

    def test_explicit_keys_win(self) -> None:
        descriptor = _coerce({WRITABLE: False})
        assert descriptor.readable is True
        assert descriptor.writable is False

    def test_defaults(self) -> None:
        descriptor = _coerce(PROPERTY_PUBLIC)
        assert descriptor.default is None
        assert descriptor.getter is None
        assert descriptor.setter is None
        assert descriptor.type is None

    def test_none_accessor_names_mean_derived(self) -> None:
        descriptor = _coerce({GETTER: None, SETTER: None})
        assert descriptor.getter is None
        assert descriptor.setter is None

    def test_descriptor_instance_passes_through(self) -> None:
        descriptor = prop(readable=False)
        assert _coerce(descriptor) is descriptor

    @pytest.mark.parametrize("raw", ["public", 5, ["readable"], True])
    def test_non_mapping_rejected(self, raw: Any) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _coerce(raw)
        assert exc_info.value.field == "value"
        assert exc_info.value.class_name == "Holder"
        assert "Holder.value has an invalid property definition" in str(exc_info.value)

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ConfigurationError, match="writeable"):
            _coerce({"writeable": True})

    @pytest.mark.parametrize("name", ["123bad", "", "has space", "dash-ed", 42])
    def test_invalid_setter_names(self, name: Any) -> None:
        with pytest.raises(ConfigurationError, match="setter"):
            _coerce({SETTER: name})

    @pytest.mark.parametrize("name", ["fetch", "_private", "get2", "value_of"])
    def test_valid_getter_names(self, name: str) -> None:
        assert _coerce({GETTER: name}).getter == name

    def test_error_keeps_cause(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            _coerce({GETTER: "1x"})
        assert exc_info.value.cause is not None


class TestIsUnconfigured:
    @pytest.mark.parametrize("raw", [None, {}])
    def test_unconfigured(self, raw: Any) -> None:
        assert is_unconfigured(raw)

    @pytest.mark.parametrize("raw", [PROPERTY_INTERNAL, {DEFAULT_VALUE: None}, prop(), "x", 0])
    def test_configured_or_malformed(self, raw: Any) -> None:
        assert not is_unconfigured(raw)


class TestProp:
    def test_builds_descriptor(self) -> None:
        descriptor = prop(type=str, default="a", setter="assign")
        assert isinstance(descriptor, PropertyDescriptor)
        assert descriptor.type is str
        assert descriptor.default == "a"
        assert descriptor.setter == "assign"

    def test_validates_names(self) -> None:
        with pytest.raises(ValueError):
            prop(getter="not valid")

    def test_descriptor_is_frozen(self) -> None:
        descriptor = prop()
        with pytest.raises(ValueError):
            descriptor.readable = False


class TestMethodNamePattern:
    def test_full_match_required(self) -> None:
        assert METHOD_NAME_PATTERN.fullmatch("setValue")
        assert not METHOD_NAME_PATTERN.fullmatch("set Value")
        assert not METHOD_NAME_PATTERN.fullmatch("9lives")
        assert not METHOD_NAME_PATTERN.fullmatch("setValue\n")

    def test_trailing_newline_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            coerce_descriptor({SETTER: "assign\n"}, field="value", class_name="Row")
