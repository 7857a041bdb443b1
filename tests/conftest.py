"""Shared fixture classes for the propsynth test suite."""

from __future__ import annotations

from typing import Any

import pytest

from propsynth import (
    DEFAULT_VALUE,
    GETTER,
    PROPERTY_INTERNAL,
    PROPERTY_PUBLIC,
    PROPERTY_READONLY,
    PROPERTY_WRITEONLY,
    SETTER,
    TYPE,
    SynthesizedObject,
)


# === Fixture classes ===


class Greeting(SynthesizedObject):
    """Typed public property with a default."""

    message = PROPERTY_PUBLIC | {TYPE: "string", DEFAULT_VALUE: "hi"}


class Account(SynthesizedObject):
    """One field per preset."""

    owner = PROPERTY_PUBLIC
    number = PROPERTY_READONLY | {DEFAULT_VALUE: "ACC-1"}
    pin = PROPERTY_WRITEONLY
    ledger = PROPERTY_INTERNAL | {DEFAULT_VALUE: []}
    audit = PROPERTY_INTERNAL


class Counter(SynthesizedObject):
    """Custom accessor names."""

    value = PROPERTY_PUBLIC | {SETTER: "assignValue", GETTER: "currentValue", DEFAULT_VALUE: 0, TYPE: int}
    tags = PROPERTY_PUBLIC | {DEFAULT_VALUE: ["default"]}


class Person(SynthesizedObject):
    """Uses the initialize hook."""

    first_name = PROPERTY_PUBLIC | {TYPE: "string"}
    age = PROPERTY_PUBLIC | {TYPE: int | None}

    def initialize(self, *args: Any, **kwargs: Any) -> Person:
        if args:
            self.setFirst_name(args[0])
        if "age" in kwargs:
            self.setAge(kwargs["age"])
        return self


class Employee(Person):
    """Inherits Person's fields and adds its own."""

    title = PROPERTY_READONLY | {DEFAULT_VALUE: "engineer"}


# === Fixtures ===


@pytest.fixture
def greeting() -> Greeting:
    return Greeting()


@pytest.fixture
def account() -> Account:
    return Account()


@pytest.fixture
def counter() -> Counter:
    return Counter()


# === Fixture class handles ===


@pytest.fixture
def greeting_cls() -> type[Greeting]:
    return Greeting


@pytest.fixture
def account_cls() -> type[Account]:
    return Account


@pytest.fixture
def counter_cls() -> type[Counter]:
    return Counter


@pytest.fixture
def person_cls() -> type[Person]:
    return Person


@pytest.fixture
def employee_cls() -> type[Employee]:
    return Employee
