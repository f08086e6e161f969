"""Package composition for document pipelines."""

from docpipe.packages.config import PackageSettings, PackageSettingsError, default_settings
from docpipe.packages.entries import EntryKind, RegistrationEntry
from docpipe.packages.errors import (
    ConfigurationError,
    InvalidArgumentTypeError,
    MissingNameError,
)
from docpipe.packages.naming import declared_name
from docpipe.packages.package import Package, PackageRef, create, is_package
from docpipe.packages.processors import ProcessorDefinition, processor_metadata

__all__ = [
    "ConfigurationError",
    "EntryKind",
    "InvalidArgumentTypeError",
    "MissingNameError",
    "Package",
    "PackageRef",
    "PackageSettings",
    "PackageSettingsError",
    "ProcessorDefinition",
    "RegistrationEntry",
    "create",
    "declared_name",
    "default_settings",
    "is_package",
    "processor_metadata",
]
