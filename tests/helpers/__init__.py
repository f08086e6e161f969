"""Shared builders for package tests."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from textwrap import dedent
from typing import Any, Callable, Dict, List


def write_pyproject(directory: Path, contents: str) -> Path:
    """Persist a ``pyproject.toml`` under ``directory`` and return its path."""

    payload = dedent(contents).lstrip()
    target = directory / "pyproject.toml"
    target.write_text(payload, encoding="utf8")
    return target


def read_files(log: Any) -> Dict[str, Any]:
    return {"name": "read_files", "log": log}


def render_docs() -> Dict[str, Any]:
    return {"name": "render_docs"}


def my_handler() -> Callable[..., None]:
    def handle(*args: Any) -> None:
        return None

    return handle


class TemplateEngine:
    def __init__(self, template_folders: List[str] | None = None) -> None:
        self.template_folders = template_folders or []


@dataclass
class ProcessorObject:
    """Plain processor definition with ordering metadata."""

    name: str
    run_after: List[str] = field(default_factory=list)
    run_before: List[str] = field(default_factory=list)
    validate: Dict[str, Any] = field(default_factory=dict)

    def process(self, docs: Any) -> Any:
        return docs


@dataclass
class PackageLike:
    """Package-shaped object that is not a :class:`docpipe.Package`."""

    name: Any = "external"
    dependencies: Any = field(default_factory=list)
    module: Any = field(default_factory=dict)


__all__ = [
    "PackageLike",
    "ProcessorObject",
    "TemplateEngine",
    "my_handler",
    "read_files",
    "render_docs",
    "write_pyproject",
]
