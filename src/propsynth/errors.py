"""Error hierarchy for propsynth."""

from __future__ import annotations

from typing import Any

__all__ = [
    "PropertyError",
    "ConfigurationError",
    "InvalidArgumentError",
    "UndefinedMethodError",
    "ConfigurationWarning",
    "ErrorCodes",
]


class PropertyError(Exception):
    """Base error for all propsynth errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class ConfigurationError(PropertyError):
    """Raised when a property declaration or class option is invalid."""

    def __init__(
        self,
        message: str,
        *,
        class_name: str | None = None,
        field: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="CONFIG_INVALID",
            message=message,
            details={"class_name": class_name, "field": field},
            **kwargs,
        )

    @property
    def class_name(self) -> str | None:
        """The class whose declaration is invalid."""
        return self.details["class_name"]

    @property
    def field(self) -> str | None:
        """The offending field, if the error concerns a single field."""
        return self.details["field"]


class InvalidArgumentError(PropertyError, ValueError):
    """Raised when a synthesised setter receives a missing or mistyped value."""

    def __init__(
        self,
        message: str,
        *,
        field: str | None = None,
        method: str | None = None,
        expected_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(
            code="INVALID_ARGUMENT",
            message=message,
            details={"field": field, "method": method, "expected_type": expected_type},
            **kwargs,
        )

    @property
    def field(self) -> str | None:
        """The field the setter writes to."""
        return self.details["field"]

    @property
    def expected_type(self) -> str | None:
        """Display name of the declared type, when the failure is a type mismatch."""
        return self.details["expected_type"]


class UndefinedMethodError(PropertyError, AttributeError):
    """Raised when a name matches neither a real attribute nor a synthesised accessor."""

    def __init__(self, class_name: str, method: str, **kwargs: Any) -> None:
        super().__init__(
            code="UNDEFINED_METHOD",
            message=f"Call to undefined method {class_name}.{method}()",
            details={"class_name": class_name, "method": method},
            **kwargs,
        )
        # AttributeError.name lets tracebacks suggest close matches.
        self.name = method

    @property
    def class_name(self) -> str:
        """The class the lookup was performed on."""
        return self.details["class_name"]

    @property
    def method(self) -> str:
        """The name that could not be resolved."""
        return self.details["method"]


class ConfigurationWarning(UserWarning):
    """Emitted when a field is declared without a usable descriptor."""


class ErrorCodes:
    """All propsynth error codes as constants.

    Example:
        if error.code == ErrorCodes.UNDEFINED_METHOD:
            handle_missing_accessor()
    """

    CONFIG_INVALID = "CONFIG_INVALID"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    UNDEFINED_METHOD = "UNDEFINED_METHOD"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
