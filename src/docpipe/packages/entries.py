"""Tagged module entries consumed by the external injector."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable

from .errors import InvalidArgumentTypeError

__all__ = ["EntryKind", "RegistrationEntry", "coerce_kind"]


class EntryKind(str, Enum):
    """How the injector realises a registered entry."""

    FACTORY = "factory"
    VALUE = "value"
    TYPE = "type"


def coerce_kind(kind: Any) -> EntryKind:
    """Return ``kind`` as an :class:`EntryKind`, accepting its string value."""

    if isinstance(kind, EntryKind):
        return kind
    try:
        return EntryKind(kind)
    except (TypeError, ValueError) as exc:
        raise InvalidArgumentTypeError(
            "entry kind must be one of 'factory', 'value' or 'type'",
            expected="EntryKind",
            actual=kind,
        ) from exc


@dataclass(frozen=True, slots=True)
class RegistrationEntry:
    """Single ``name -> (kind, value)`` registration in a package module map.

    ``FACTORY`` entries are invoked with their injected dependencies,
    ``VALUE`` entries are used as-is and ``TYPE`` entries are instantiated.
    """

    kind: EntryKind
    value: Any

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", coerce_kind(self.kind))

    @classmethod
    def factory(cls, fn: Callable[..., Any]) -> "RegistrationEntry":
        return cls(EntryKind.FACTORY, fn)

    @classmethod
    def of_value(cls, obj: Any) -> "RegistrationEntry":
        return cls(EntryKind.VALUE, obj)

    @classmethod
    def of_type(cls, service_type: Callable[..., Any]) -> "RegistrationEntry":
        return cls(EntryKind.TYPE, service_type)

    def as_tuple(self) -> tuple[str, Any]:
        """Return the ``(kind, value)`` pair shape used by injector modules."""

        return (self.kind.value, self.value)
