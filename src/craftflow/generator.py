"""Generation of module folder sets from the boilerplate templates."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from .config import DEFAULT_MODULE_LAYOUT, ModuleLayout
from .errors import ModuleExistsError
from .naming import ModuleNames
from .template import TemplateStore

__all__ = ["ModuleGenerator", "generate_module"]

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ModuleGenerator:
    """Create the controllers/dtos/models/routes/services/validations set for a module."""

    store: TemplateStore
    layout: ModuleLayout

    def __init__(
        self,
        store: TemplateStore | None = None,
        layout: ModuleLayout = DEFAULT_MODULE_LAYOUT,
    ) -> None:
        self.store = store or TemplateStore()
        self.layout = layout

    def module_path(self, name: str, project_dir: str | Path) -> Path:
        return Path(project_dir).joinpath(*self.layout.root, name)

    def create(self, name: str, project_dir: str | Path) -> Path:
        """Write the module ``name`` inside ``project_dir`` and return its folder.

        Nothing is written when the module folder already exists. Folders
        written before a failure are left in place.
        """

        module_path = self.module_path(name, project_dir)
        if module_path.exists():
            raise ModuleExistsError(name, module_path)

        names = ModuleNames.from_name(name)
        for folder, template in self.layout.folders.items():
            folder_path = module_path / folder
            folder_path.mkdir(parents=True, exist_ok=True)
            LOGGER.info("Created folder: %s", folder_path)

            content = self.store.render(template, names)
            index_path = folder_path / self.layout.index_file
            index_path.write_text(content, encoding="utf-8")
            LOGGER.info("Created file: %s", index_path)

        relative = "/".join((*self.layout.root, name))
        LOGGER.info('Module "%s" created successfully in %s', name, relative)
        return module_path


def generate_module(
    name: str,
    project_dir: str | Path | None = None,
    *,
    layout: ModuleLayout = DEFAULT_MODULE_LAYOUT,
    store: TemplateStore | None = None,
) -> Path:
    """Generate module ``name`` under ``project_dir`` (the working directory by default)."""

    target = Path.cwd() if project_dir is None else Path(project_dir)
    return ModuleGenerator(store, layout).create(name, target)
