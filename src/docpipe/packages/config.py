"""Settings controlling how packages record their registrations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any

from docpipe.configuration import load_project_packages_config


logger = logging.getLogger(__name__)

__all__ = [
    "PackageSettings",
    "PackageSettingsError",
    "default_settings",
]


class PackageSettingsError(RuntimeError):
    """Raised when the package settings are invalid."""


@dataclass(frozen=True, slots=True)
class PackageSettings:
    """Behavioural switches shared by every :class:`~docpipe.packages.Package`."""

    dedupe_processors: bool = False
    """Record each processor name once, even when it is registered again."""

    warn_on_overwrite: bool = False
    """Log replaced module entries at ``WARNING`` instead of ``DEBUG``."""

    @classmethod
    def from_mapping(
        cls,
        data: Mapping[str, Any],
        *,
        source: str | Path | None = None,
    ) -> "PackageSettings":
        """Build settings from ``data`` as parsed from ``[tool.docpipe.packages]``.

        Parameters
        ----------
        data:
            Mapping of setting names to values.
        source:
            Optional description of where ``data`` came from, used in error
            messages.
        """

        origin = f"'{source}'" if source is not None else "in-memory mapping"
        if not isinstance(data, Mapping):
            raise PackageSettingsError(f"Package settings in {origin} must be a table")

        known = {item.name for item in fields(cls)}
        unknown = sorted(str(key) for key in data if key not in known)
        if unknown:
            raise PackageSettingsError(
                f"Unknown package settings in {origin}: {', '.join(unknown)}"
            )

        values: dict[str, bool] = {}
        for key, value in data.items():
            if not isinstance(value, bool):
                raise PackageSettingsError(
                    f"Package setting '{key}' in {origin} must be a boolean"
                )
            values[key] = value

        settings = cls(**values)
        logger.debug("Loaded package settings from %s: %s", origin, settings)
        return settings

    @classmethod
    def from_project(cls, pyproject_path: Path | None = None) -> "PackageSettings":
        """Build settings from ``pyproject.toml`` falling back to the defaults."""

        if pyproject_path is None:
            pyproject_path = Path.cwd()

        loaded = load_project_packages_config(pyproject_path)
        if loaded is None:
            logger.debug("No '[tool.docpipe.packages]' table found under '%s'", pyproject_path)
            return cls()

        mapping, source_path = loaded
        return cls.from_mapping(mapping, source=source_path)


_DEFAULT_SETTINGS = PackageSettings()


def default_settings() -> PackageSettings:
    """Return the settings used when a package is created without any."""

    return _DEFAULT_SETTINGS
