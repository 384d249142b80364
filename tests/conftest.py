from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.installer_fake import RecordingRunner  # noqa: E402


@pytest.fixture()
def runner() -> RecordingRunner:
    return RecordingRunner()


@pytest.fixture()
def project_dir(tmp_path: Path) -> Path:
    """A directory holding the ``package.json`` written by ``npm init -y``."""

    manifest = {
        "name": "demo-api",
        "version": "1.0.0",
        "main": "index.js",
        "scripts": {"test": 'echo "Error: no test specified" && exit 1'},
        "license": "ISC",
    }
    (tmp_path / "package.json").write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return tmp_path
