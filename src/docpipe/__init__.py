"""Top-level package for docpipe.

A package bundles the processors, services, config blocks and event
handlers of a document-generation pipeline together with the packages it
depends on.  The injector and orchestrator that consume packages live
outside this distribution.
"""

from ._version import __version__
from .packages import (
    ConfigurationError,
    EntryKind,
    InvalidArgumentTypeError,
    MissingNameError,
    Package,
    PackageSettings,
    RegistrationEntry,
    create,
    is_package,
)

__all__ = [
    "ConfigurationError",
    "EntryKind",
    "InvalidArgumentTypeError",
    "MissingNameError",
    "Package",
    "PackageSettings",
    "RegistrationEntry",
    "__version__",
    "create",
    "is_package",
]
