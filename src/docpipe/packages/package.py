"""Declarative packages of processors, services, config blocks and handlers."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any, Callable, Dict, List, Union

from .config import PackageSettings, default_settings
from .entries import EntryKind, RegistrationEntry, coerce_kind
from .errors import InvalidArgumentTypeError, MissingNameError
from .naming import declared_name, resolve_name


logger = logging.getLogger(__name__)

PackageRef = Union["Package", str]

__all__ = ["Package", "PackageRef", "create", "is_package"]


def _is_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _field(value: Any, key: str) -> Any:
    if isinstance(value, Mapping):
        return value.get(key)
    return getattr(value, key, None)


def is_package(value: Any) -> bool:
    """Return whether ``value`` is shaped like a package.

    Only the fields the pipeline relies on are checked: a string ``name``,
    a sequence of ``dependencies`` and a ``module`` that is a mapping or a
    callable.  They are read as attributes, or as keys of a mapping, so
    neither instances of :class:`Package` nor objects are required.
    """

    name = _field(value, "name")
    dependencies = _field(value, "dependencies")
    module = _field(value, "module")
    return (
        isinstance(name, str)
        and _is_sequence(dependencies)
        and (isinstance(module, Mapping) or callable(module))
    )


class Package:
    """A named bundle of pipeline processors, services and config blocks.

    Parameters
    ----------
    name:
        Unique name of the package.
    dependencies:
        Packages, or names of packages, this package depends upon.  They are
        resolved by the injector, not here.
    settings:
        Optional :class:`PackageSettings`; the defaults are used when omitted.

    Every registration method returns the package so calls can be chained::

        Package("core").factory(log).processor(read_files).config(setup)
    """

    def __init__(
        self,
        name: str,
        dependencies: Sequence[PackageRef] | None = None,
        *,
        settings: PackageSettings | None = None,
    ) -> None:
        if not isinstance(name, str) or not name:
            raise MissingNameError("missing package name")
        if dependencies is None:
            dependencies = []
        elif not _is_sequence(dependencies):
            raise InvalidArgumentTypeError(
                "dependencies must be a sequence",
                expected="sequence",
                actual=dependencies,
            )

        self.name = name
        self.dependencies: List[PackageRef] = list(dependencies)
        self.settings = settings if settings is not None else default_settings()
        self.module: Dict[str, RegistrationEntry] = {}
        self.processors: List[str] = []
        self.config_fns: List[Callable[..., Any]] = []
        self.handlers: Dict[str, List[str]] = {}

    def __repr__(self) -> str:
        return f"Package(name={self.name!r}, dependencies={self.named_dependencies!r})"

    @property
    def named_dependencies(self) -> List[str]:
        """Names of the dependencies, in declaration order."""

        names: List[str] = []
        for dependency in self.dependencies:
            if isinstance(dependency, str):
                names.append(dependency)
            else:
                name = _field(dependency, "name")
                names.append(name if isinstance(name, str) else repr(dependency))
        return names

    # ------------------------------------------------------------------
    # Registration
    # ------------------------------------------------------------------
    def processor(self, processor_def_or_name: Any, processor_def: Any = None) -> "Package":
        """Add a processor defined by a factory function or a definition object.

        A callable is registered as a factory the injector invokes to build
        the processor; any other object is used as the processor itself.
        Without an explicit name the callable's ``__name__`` or the object's
        ``name`` is used.
        """

        name, processor_def = self._split(processor_def_or_name, processor_def)
        if processor_def is None:
            raise InvalidArgumentTypeError(
                "processor definition must be an object or a callable",
                expected="object or callable",
                actual=processor_def,
            )
        name = resolve_name(name, processor_def, kind="processor")

        if callable(processor_def):
            entry = RegistrationEntry.factory(processor_def)
        else:
            entry = RegistrationEntry.of_value(processor_def)
        self._register(name, entry)

        if self.settings.dedupe_processors and name in self.processors:
            logger.debug("Processor '%s' already listed in package '%s'", name, self.name)
        else:
            self.processors.append(name)
        return self

    def factory(self, factory_or_name: Any, service_factory: Any = None) -> "Package":
        """Add a service created by calling ``service_factory``."""

        name, service_factory = self._split(factory_or_name, service_factory)
        if not callable(service_factory):
            raise InvalidArgumentTypeError(
                "service factory must be callable",
                expected="callable",
                actual=service_factory,
            )
        name = resolve_name(name, service_factory, kind="service factory")
        self._register(name, RegistrationEntry.factory(service_factory))
        return self

    def type(self, type_or_name: Any, service_type: Any = None) -> "Package":
        """Add a service created by instantiating ``service_type``."""

        name, service_type = self._split(type_or_name, service_type)
        if not callable(service_type):
            raise InvalidArgumentTypeError(
                "service type must be a constructor",
                expected="callable",
                actual=service_type,
            )
        name = resolve_name(name, service_type, kind="service type")
        self._register(name, RegistrationEntry.of_type(service_type))
        return self

    def config(self, config_fn: Any) -> "Package":
        """Add a config block run before any processor."""

        if not callable(config_fn):
            raise InvalidArgumentTypeError(
                "config block must be callable",
                expected="callable",
                actual=config_fn,
            )
        self.config_fns.append(config_fn)
        logger.debug("Added config block to package '%s'", self.name)
        return self

    def event_handler(self, event_name: Any, handler_factory: Any) -> "Package":
        """Register ``handler_factory`` as a factory producing a handler for ``event_name``.

        Anonymous factories are named ``{package}_{event}_{index}`` where
        ``index`` counts the handlers already registered for the event.
        """

        if not isinstance(event_name, str) or not event_name:
            raise InvalidArgumentTypeError(
                "event name must be a non-empty string",
                expected="str",
                actual=event_name,
            )
        if not callable(handler_factory):
            raise InvalidArgumentTypeError(
                "handler factory must be callable",
                expected="callable",
                actual=handler_factory,
            )

        existing = self.handlers.get(event_name, [])
        handler_name = declared_name(handler_factory) or (
            f"{self.name}_{event_name}_{len(existing)}"
        )
        self.factory(handler_name, handler_factory)
        self.handlers.setdefault(event_name, []).append(handler_name)
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------
    def describe(self) -> Dict[str, Any]:
        """Return a JSON-serialisable summary of the package registrations."""

        return {
            "name": self.name,
            "dependencies": self.named_dependencies,
            "services": {name: entry.kind.value for name, entry in self.module.items()},
            "processors": list(self.processors),
            "config_fns": len(self.config_fns),
            "handlers": {event: list(names) for event, names in self.handlers.items()},
        }

    def entries(self, kind: EntryKind | str | None = None) -> Dict[str, RegistrationEntry]:
        """Return module entries, optionally restricted to ``kind``."""

        if kind is None:
            return dict(self.module)
        wanted = coerce_kind(kind)
        return {name: entry for name, entry in self.module.items() if entry.kind is wanted}

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _split(name_or_value: Any, value: Any) -> tuple[str | None, Any]:
        if isinstance(name_or_value, str):
            return name_or_value, value
        if value is not None:
            raise InvalidArgumentTypeError(
                "name must be a string when a definition is also given",
                expected="str",
                actual=name_or_value,
            )
        return None, name_or_value

    def _register(self, name: str, entry: RegistrationEntry) -> None:
        previous = self.module.get(name)
        self.module[name] = entry
        if previous is None:
            logger.debug(
                "Registered %s '%s' in package '%s'", entry.kind.value, name, self.name
            )
            return

        level = logging.WARNING if self.settings.warn_on_overwrite else logging.DEBUG
        logger.log(
            level,
            "Replaced %s '%s' with %s in package '%s'",
            previous.kind.value,
            name,
            entry.kind.value,
            self.name,
        )


def create(
    name: str,
    dependencies: Sequence[PackageRef] | None = None,
    *,
    settings: PackageSettings | None = None,
) -> Package:
    """Create a :class:`Package`; equivalent to calling the constructor."""

    return Package(name, dependencies, settings=settings)
