from __future__ import annotations

import json
import zipfile
from pathlib import Path

import pytest


@pytest.fixture
def data_tree(tmp_path: Path) -> Path:
    """A small upload root with nested directories and one non-JSON file."""
    root = tmp_path / "pack"
    (root / "loot_tables" / "chests").mkdir(parents=True)
    (root / "recipes").mkdir()
    (root / "pack.json").write_text(json.dumps({"format": 1}))
    (root / "loot_tables" / "chests" / "village.json").write_text(json.dumps({"rolls": 2, "pool": ["a"]}))
    (root / "loot_tables" / "chests" / "temple.json").write_text(json.dumps({"rolls": 3.5}))
    (root / "recipes" / "bread.json").write_text(json.dumps({"result": "bread"}))
    (root / "recipes" / "notes.txt").write_text("not json")
    return root


@pytest.fixture
def upload_cache(tmp_path: Path, data_tree: Path) -> Path:
    """Upload directory laid out the way Gradio stores files: <cache>/<hash>/<basename>."""
    cache = tmp_path / "gradio"
    archive_dir = cache / "3f1a"
    archive_dir.mkdir(parents=True)
    archive = archive_dir / "pack.zip"
    with zipfile.ZipFile(archive, "w") as zf:
        for path in sorted(data_tree.rglob("*")):
            if path.is_file():
                zf.write(path, path.relative_to(data_tree.parent).as_posix())
    return cache
