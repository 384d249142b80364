from __future__ import annotations

import json
from pathlib import Path

import pytest

from craftflow.errors import ManifestError
from craftflow.manifest import load_manifest, merge_manifest, update_manifest


def test_merge_overwrites_colliding_keys_and_keeps_the_rest():
    manifest = {
        "name": "demo",
        "scripts": {"test": "jest", "dev": "node index.js"},
        "dependencies": {"lodash": "^4.17.21"},
    }
    additions = {
        "scripts": {"dev": "ts-node-dev src/server.ts"},
        "dependencies": {"express": "^4.19.2"},
        "devDependencies": {"typescript": "^5.4.5"},
    }

    merged = merge_manifest(manifest, additions)

    assert merged["name"] == "demo"
    assert merged["scripts"] == {"test": "jest", "dev": "ts-node-dev src/server.ts"}
    assert merged["dependencies"] == {"lodash": "^4.17.21", "express": "^4.19.2"}
    assert merged["devDependencies"] == {"typescript": "^5.4.5"}
    assert manifest["scripts"]["dev"] == "node index.js"


def test_merge_treats_null_section_as_empty():
    merged = merge_manifest({"scripts": None}, {"scripts": {"build": "tsc"}})
    assert merged["scripts"] == {"build": "tsc"}


def test_merge_rejects_non_object_section():
    with pytest.raises(ManifestError):
        merge_manifest({"scripts": ["build"]}, {"scripts": {"build": "tsc"}})


def test_update_preserves_unrelated_keys(tmp_path: Path):
    path = tmp_path / "package.json"
    original = {
        "name": "demo",
        "version": "1.0.0",
        "keywords": ["api", "ünïcode"],
        "engines": {"node": ">=20"},
    }
    path.write_text(json.dumps(original), encoding="utf-8")

    update_manifest(path, {"scripts": {"build": "tsc"}})

    rewritten = json.loads(path.read_text(encoding="utf-8"))
    for key, value in original.items():
        assert rewritten[key] == value
    assert list(rewritten)[:4] == list(original)
    assert '"ünïcode"' in path.read_text(encoding="utf-8")
    assert path.read_text(encoding="utf-8").startswith('{\n  "name": "demo"')


def test_load_requires_an_object(tmp_path: Path):
    path = tmp_path / "package.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ManifestError):
        load_manifest(path)


def test_load_propagates_invalid_json(tmp_path: Path):
    path = tmp_path / "package.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(json.JSONDecodeError):
        load_manifest(path)


def test_load_propagates_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_manifest(tmp_path / "package.json")
