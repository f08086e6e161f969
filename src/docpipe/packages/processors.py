"""Contract describing the processor definitions stored in a package.

Packages only record processors; ordering and execution belong to the
pipeline orchestrator, which reads the metadata described here.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol, runtime_checkable

from .errors import InvalidArgumentTypeError

__all__ = ["ProcessorDefinition", "processor_metadata"]


@runtime_checkable
class ProcessorDefinition(Protocol):
    """Shape of a processor as seen by the orchestrator.

    ``run_after`` and ``run_before`` name the processors this one must be
    ordered against.  ``validate`` maps processor attribute names to the
    rules the orchestrator checks before running ``process``.
    """

    name: str
    run_after: Sequence[str]
    run_before: Sequence[str]
    validate: Mapping[str, Any]

    def process(self, docs: Any) -> Any:
        ...


def _read(definition: Any, key: str) -> Any:
    if isinstance(definition, Mapping):
        return definition.get(key)
    return getattr(definition, key, None)


def _names(definition: Any, key: str) -> tuple[str, ...]:
    raw = _read(definition, key)
    if raw is None:
        return ()
    if isinstance(raw, str) or not isinstance(raw, Sequence):
        raise InvalidArgumentTypeError(
            f"processor '{key}' must be a sequence of names",
            expected="sequence",
            actual=raw,
        )
    for entry in raw:
        if not isinstance(entry, str):
            raise InvalidArgumentTypeError(
                f"processor '{key}' entries must be strings",
                expected="str",
                actual=entry,
            )
    return tuple(raw)


def processor_metadata(definition: Any) -> dict[str, Any]:
    """Return the ordering and validation metadata declared by ``definition``.

    Works on objects and on plain mappings.  Missing entries default to empty
    values.
    """

    rules = _read(definition, "validate")
    if rules is None:
        rules = {}
    elif not isinstance(rules, Mapping):
        raise InvalidArgumentTypeError(
            "processor 'validate' must be a mapping",
            expected="mapping",
            actual=rules,
        )

    return {
        "run_after": _names(definition, "run_after"),
        "run_before": _names(definition, "run_before"),
        "validate": dict(rules),
    }
