"""Initialisation of a new backend project."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_PROJECT_LAYOUT, ProjectLayout
from .errors import DependencyInstallError, ProjectExistsError
from .installer import InstallResult, InstallRunner, run_install
from .manifest import update_manifest
from .template import TemplateStore

__all__ = ["ProjectInitializer", "init_project"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ProjectInitializer:
    """Lay out folders, starter files, environment files and dependencies."""

    store: TemplateStore
    layout: ProjectLayout
    runner: InstallRunner

    def __init__(
        self,
        store: TemplateStore | None = None,
        layout: ProjectLayout = DEFAULT_PROJECT_LAYOUT,
        runner: InstallRunner | None = None,
    ) -> None:
        self.store = store or TemplateStore()
        self.layout = layout
        self.runner = runner or run_install

    def create(self, project_dir: str | Path, *, install: bool = True) -> Path:
        """Initialise ``project_dir`` and return its source root.

        Each step runs only if the previous one succeeded; nothing written so
        far is removed on failure.
        """

        project_path = Path(project_dir)
        source_root = project_path / self.layout.source_root
        if source_root.exists():
            raise ProjectExistsError(source_root)

        self.create_folders(source_root)
        self.copy_initial_files(source_root)
        self.create_env_files(project_path)
        self.update_manifest(project_path)
        if install:
            self.install_dependencies(project_path)
        else:
            LOGGER.info("Skipped dependency installation.")
        return source_root

    def create_folders(self, source_root: Path) -> None:
        for folder in self.layout.folders:
            folder_path = source_root / folder
            folder_path.mkdir(parents=True, exist_ok=True)
            LOGGER.info("Created folder: %s", folder_path)

    def copy_initial_files(self, source_root: Path) -> None:
        for template in self.layout.template_files():
            destination = source_root / template
            content = self.store.load(template)
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_text(content, encoding="utf-8")
            LOGGER.info("Created file: %s", destination)

    def env_content(self) -> str:
        return "\n".join(f"{key}={value}" for key, value in self.layout.env.items())

    def create_env_files(self, project_path: Path) -> None:
        content = self.env_content()
        for file_name in self.layout.env_files:
            env_path = project_path / file_name
            env_path.write_text(content, encoding="utf-8")
            LOGGER.info("Created file: %s", env_path)

    def update_manifest(self, project_path: Path) -> None:
        update_manifest(project_path / self.layout.manifest, self.layout.manifest_additions.sections())
        LOGGER.info("Updated %s with required scripts and dependencies.", self.layout.manifest)

    def install_dependencies(self, project_path: Path) -> InstallResult:
        result = self.runner(self.layout.install_command, project_path)
        if not result.ok:
            raise DependencyInstallError(result.command, result.returncode)
        LOGGER.info("Installed dependencies.")
        return result


def init_project(
    project_dir: str | Path | None = None,
    *,
    layout: ProjectLayout = DEFAULT_PROJECT_LAYOUT,
    store: TemplateStore | None = None,
    runner: InstallRunner | None = None,
    install: bool = True,
) -> Path:
    """Initialise a project in ``project_dir`` (the working directory by default)."""

    target = Path.cwd() if project_dir is None else Path(project_dir)
    return ProjectInitializer(store, layout, runner).create(target, install=install)
