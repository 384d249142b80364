"""Reading, merging and rewriting the project ``package.json``."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from .errors import ManifestError

__all__ = ["load_manifest", "merge_manifest", "update_manifest", "write_manifest"]


def load_manifest(path: Path) -> dict[str, Any]:
    """Parse ``path`` as a JSON object.

    Missing files and malformed JSON propagate as :class:`FileNotFoundError`
    and :class:`json.JSONDecodeError`.
    """

    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ManifestError(f"{path} must contain a JSON object, found {type(data).__name__}")
    return data


def merge_manifest(
    manifest: Mapping[str, Any], additions: Mapping[str, Mapping[str, str]]
) -> dict[str, Any]:
    """Return a copy of ``manifest`` with every section of ``additions`` merged in.

    Each section is merged one level deep: keys from ``additions`` replace keys
    of the same name, everything else keeps its value and position.
    """

    merged = dict(manifest)
    for section, entries in additions.items():
        current = merged.get(section) or {}
        if not isinstance(current, Mapping):
            raise ManifestError(f"'{section}' must be a JSON object, found {type(current).__name__}")
        merged[section] = {**current, **entries}
    return merged


def write_manifest(path: Path, manifest: Mapping[str, Any]) -> None:
    path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")


def update_manifest(path: Path, additions: Mapping[str, Mapping[str, str]]) -> dict[str, Any]:
    """Merge ``additions`` into the manifest stored at ``path`` and rewrite it."""

    merged = merge_manifest(load_manifest(path), additions)
    write_manifest(path, merged)
    return merged
