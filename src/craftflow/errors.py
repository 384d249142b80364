"""Exception types raised by the craftflow scaffolders."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(RuntimeError):
    """Base class for failures the command line reports without a traceback."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class ModuleExistsError(ScaffoldError):
    """Raised when the target module folder is already present."""

    def __init__(self, name: str, path: Path) -> None:
        super().__init__(f'Module "{name}" already exists at {path}.')
        self.name = name
        self.path = path


class ProjectExistsError(ScaffoldError):
    """Raised when the source root of a project is already present."""

    def __init__(self, path: Path) -> None:
        super().__init__(f'Project already initialized. "{path.name}" folder already exists.')
        self.path = path


class ManifestError(ScaffoldError):
    """Raised when ``package.json`` does not hold a JSON object."""


class DependencyInstallError(ScaffoldError):
    """Raised when the package installer exits with a non-zero status."""

    def __init__(self, command: tuple[str, ...], returncode: int) -> None:
        super().__init__(f"'{' '.join(command)}' failed with exit status {returncode}")
        self.command = command
        self.returncode = returncode


__all__ = [
    "DependencyInstallError",
    "ManifestError",
    "ModuleExistsError",
    "ProjectExistsError",
    "ScaffoldError",
]
