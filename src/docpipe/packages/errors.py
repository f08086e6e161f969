"""Exceptions raised while assembling document pipeline packages."""

from __future__ import annotations

__all__ = [
    "ConfigurationError",
    "InvalidArgumentTypeError",
    "MissingNameError",
    "describe_type",
]

_UNSET = object()


class ConfigurationError(ValueError):
    """Raised when a package is declared with an invalid structure."""


class MissingNameError(ConfigurationError):
    """Raised when a package, service or processor has no resolvable name."""


class InvalidArgumentTypeError(ConfigurationError, TypeError):
    """Raised when a registration receives a value of the wrong kind."""

    def __init__(
        self,
        message: str,
        *,
        expected: str | None = None,
        actual: object = _UNSET,
    ) -> None:
        self.expected = expected
        if actual is _UNSET:
            self.actual_type = None
        else:
            self.actual_type = describe_type(actual)
            message = f"{message}, got '{self.actual_type}'"
        super().__init__(message)


def describe_type(value: object) -> str:
    """Return the runtime type name used in error messages."""

    if value is None:
        return "None"
    return type(value).__name__
