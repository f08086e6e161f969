"""Helpers resolving the names under which package entries are registered."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .errors import MissingNameError

__all__ = ["declared_name", "resolve_name"]

_ANONYMOUS_NAMES = frozenset({"<lambda>"})


def _non_empty(value: Any) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def declared_name(value: Any) -> str | None:
    """Return the identifier ``value`` declares for itself, if any.

    Mappings declare their name through a ``"name"`` key, callables through
    ``__name__`` and other objects through a ``name`` attribute.  Lambdas
    are treated as anonymous.
    """

    if value is None:
        return None
    if isinstance(value, Mapping):
        return _non_empty(value.get("name"))
    if callable(value):
        name = _non_empty(getattr(value, "__name__", None))
        if name is not None and name not in _ANONYMOUS_NAMES:
            return name
    return _non_empty(getattr(value, "name", None))


def resolve_name(explicit: Any, value: Any, *, kind: str) -> str:
    """Resolve the registration name for ``value``.

    ``explicit`` wins when it is a string; otherwise the declared name of
    ``value`` is used.
    """

    if isinstance(explicit, str):
        name = _non_empty(explicit)
    else:
        name = declared_name(value)
    if name is None:
        raise MissingNameError(f"{kind} must have a name")
    return name
