from __future__ import annotations

from pathlib import Path

import pytest

from craftflow.config import DEFAULT_MODULE_LAYOUT, ModuleLayout
from craftflow.errors import ModuleExistsError
from craftflow.generator import ModuleGenerator, generate_module
from craftflow.naming import ModuleNames
from craftflow.template import TemplateStore


@pytest.fixture()
def generator() -> ModuleGenerator:
    return ModuleGenerator(TemplateStore())


def test_generator_creates_six_folders_with_one_file_each(tmp_path: Path, generator: ModuleGenerator):
    module_path = generator.create("task", tmp_path)

    assert module_path == tmp_path / "src" / "packages" / "task"
    assert sorted(p.name for p in module_path.iterdir()) == sorted(DEFAULT_MODULE_LAYOUT.folders)
    for folder in DEFAULT_MODULE_LAYOUT.folders:
        assert [p.name for p in (module_path / folder).iterdir()] == ["index.ts"]


def test_generated_files_substitute_module_names(tmp_path: Path, generator: ModuleGenerator):
    module_path = generator.create("order-item", tmp_path)
    names = ModuleNames.from_name("order-item")
    store = TemplateStore()

    for folder, template in DEFAULT_MODULE_LAYOUT.folders.items():
        expected = store.load(template).replace("Base", names.class_name).replace("base", names.variable_name)
        assert (module_path / folder / "index.ts").read_text(encoding="utf-8") == expected

    model = (module_path / "models" / "index.ts").read_text(encoding="utf-8")
    assert "export const OrderItem = model<IOrderItem>('OrderItem', orderItemSchema);" in model
    assert "Base" not in model and "base" not in model


def test_existing_module_is_left_untouched(tmp_path: Path, generator: ModuleGenerator):
    existing = tmp_path / "src" / "packages" / "task"
    existing.mkdir(parents=True)

    with pytest.raises(ModuleExistsError) as excinfo:
        generator.create("task", tmp_path)

    assert excinfo.value.path == existing
    assert list(existing.iterdir()) == []


def test_failure_part_way_keeps_earlier_folders(tmp_path: Path):
    templates = tmp_path / "templates"
    templates.mkdir()
    (templates / "first.ts").write_text("Base", encoding="utf-8")
    layout = ModuleLayout(folders={"controllers": "first.ts", "dtos": "missing.ts"})
    project = tmp_path / "project"

    with pytest.raises(FileNotFoundError):
        generate_module("task", project, layout=layout, store=TemplateStore(templates))

    assert (project / "src" / "packages" / "task" / "controllers" / "index.ts").read_text(encoding="utf-8") == "Task"
    assert (project / "src" / "packages" / "task" / "dtos").is_dir()


def test_generate_module_defaults_to_working_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    generate_module("task")
    assert (tmp_path / "src" / "packages" / "task" / "routes" / "index.ts").exists()


def test_generator_logs_progress(tmp_path: Path, generator: ModuleGenerator, caplog: pytest.LogCaptureFixture):
    caplog.set_level("INFO", logger="craftflow")
    generator.create("task", tmp_path)
    messages = [record.getMessage() for record in caplog.records]
    assert sum(message.startswith("Created folder: ") for message in messages) == 6
    assert messages[-1] == 'Module "task" created successfully in src/packages/task'
