"""Helpers to load the ``[tool.docpipe]`` table of ``pyproject.toml``."""

from __future__ import annotations

import copy
from collections.abc import Mapping
from pathlib import Path
from typing import Any

try:  # Python 3.11+
    import tomllib  # type: ignore[attr-defined]
except ModuleNotFoundError:  # pragma: no cover - Python < 3.11 fallback
    import tomli as tomllib  # type: ignore


_PROJECT_FILENAME = "pyproject.toml"
_TOOL_TABLE = "docpipe"


def _pyproject_path(candidate: Path) -> Path | None:
    """Map a project directory or ``pyproject.toml`` path to the file itself."""

    candidate = candidate.expanduser()
    if candidate.name != _PROJECT_FILENAME:
        if candidate.suffix:
            return None
        candidate = candidate / _PROJECT_FILENAME
    return candidate.resolve(strict=False)


def load_project_config(path: Path) -> tuple[dict[str, Any], Path] | None:
    """Return the ``[tool.docpipe]`` table and the file it was read from."""

    pyproject_path = _pyproject_path(Path(path))
    if pyproject_path is None or not pyproject_path.is_file():
        return None

    with pyproject_path.open("rb") as handle:
        payload = tomllib.load(handle)

    tool_section = payload.get("tool")
    if not isinstance(tool_section, Mapping):
        return None
    section = tool_section.get(_TOOL_TABLE)
    if not isinstance(section, Mapping):
        return None
    return copy.deepcopy(dict(section)), pyproject_path


def load_project_packages_config(
    path: Path,
) -> tuple[dict[str, Any], Path] | None:
    """Expose the ``[tool.docpipe.packages]`` block from ``pyproject.toml``."""

    loaded = load_project_config(path)
    if loaded is None:
        return None

    config, source_path = loaded
    packages_table = config.get("packages")
    if not isinstance(packages_table, Mapping):
        return None
    return dict(packages_table), source_path


__all__ = [
    "load_project_config",
    "load_project_packages_config",
]
