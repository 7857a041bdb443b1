"""Example value object: a user profile with typed and read-only fields."""

from propsynth import (
    DEFAULT_VALUE,
    PROPERTY_INTERNAL,
    PROPERTY_PUBLIC,
    PROPERTY_READONLY,
    PROPERTY_WRITEONLY,
    SETTER,
    TYPE,
    SynthesizedObject,
)


class UserProfile(SynthesizedObject):
    """A user profile.

    Demonstrates each preset:
    - username: public, typed, with a default
    - uid: read-only, assigned once in initialize()
    - password: write-only with a custom setter name
    - history: internal storage, no accessors
    """

    username = PROPERTY_PUBLIC | {TYPE: "string", DEFAULT_VALUE: "guest"}
    email = PROPERTY_PUBLIC | {TYPE: str | None}
    uid = PROPERTY_READONLY | {TYPE: "int"}
    password = PROPERTY_WRITEONLY | {SETTER: "assignPassword"}
    history = PROPERTY_INTERNAL | {DEFAULT_VALUE: []}

    def initialize(self, uid=None, **fields):
        self.uid = uid
        self.history.append("created")
        for name, value in fields.items():
            self.invoke("set" + name[:1].upper() + name[1:], value)
        return self

    def describe(self):
        return f"{self.getUsername()} <{self.getEmail() or 'no email'}>"

    def events(self):
        return list(self.history)
