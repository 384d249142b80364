"""Scaffolding for Express/TypeScript backend projects.

The package creates the initial ``src/`` layout of a project, merges the
scripts and dependencies it needs into ``package.json`` and generates feature
modules (controllers, dtos, models, routes, services and validations) from
boilerplate templates. Everything is usable programmatically and through the
``craftflow`` command.
"""

from __future__ import annotations

from .config import DEFAULT_MODULE_LAYOUT, DEFAULT_PROJECT_LAYOUT, ManifestAdditions, ModuleLayout, ProjectLayout
from .errors import (
    DependencyInstallError,
    ManifestError,
    ModuleExistsError,
    ProjectExistsError,
    ScaffoldError,
)
from .generator import ModuleGenerator, generate_module
from .naming import ModuleNames, camel_case, pascal_case
from .project import ProjectInitializer, init_project
from .template import TemplateStore

__all__ = [
    "DEFAULT_MODULE_LAYOUT",
    "DEFAULT_PROJECT_LAYOUT",
    "DependencyInstallError",
    "ManifestAdditions",
    "ManifestError",
    "ModuleExistsError",
    "ModuleGenerator",
    "ModuleLayout",
    "ModuleNames",
    "ProjectExistsError",
    "ProjectInitializer",
    "ProjectLayout",
    "ScaffoldError",
    "TemplateStore",
    "camel_case",
    "generate_module",
    "init_project",
    "pascal_case",
]

__version__ = "0.1.0"
